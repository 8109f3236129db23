"""
Admin update user use case.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from etherstake.application.use_cases.update_user_profile import (
    ensure_wallet_available,
)
from etherstake.domain.entities.user import User, UserRole
from etherstake.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from etherstake.domain.repositories.i_user_repository import IUserRepository
from etherstake.domain.value_objects.wallet_address import WalletAddress
from etherstake.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


@dataclass
class AdminUpdateUserCommand:
    """Command for an admin editing any account."""

    user_id: UUID
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[UserRole] = None
    wallet_address: Optional[str] = None


class AdminUpdateUser:
    """
    Admin edit of name, email, role and wallet.

    Email and wallet uniqueness are re-checked against other users.
    """

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def execute(self, command: AdminUpdateUserCommand) -> User:
        """
        Apply admin changes.

        Raises:
            EntityNotFoundError: If user not found
            DuplicateEntityError: If email or wallet belongs to another user
            ValidationError: If a field is malformed
        """
        user = await self.user_repository.get_by_id(command.user_id)

        if not user:
            raise EntityNotFoundError("User", str(command.user_id))

        if command.email is not None:
            holder = await self.user_repository.get_by_email(command.email)
            if holder and holder.id != user.id:
                raise DuplicateEntityError("User", f"email {command.email.lower()}")
            user.change_email(command.email)

        if command.wallet_address is not None:
            WalletAddress(command.wallet_address)
            await ensure_wallet_available(
                self.user_repository, command.wallet_address, user.id
            )

        user.update_profile(name=command.name, wallet_address=command.wallet_address)

        if command.role is not None and command.role != user.role:
            logger.info(
                "User role changed",
                extra={"user_id": str(user.id), "role": UserRole(command.role).value},
            )
            user.change_role(command.role)

        return await self.user_repository.update(user)
