"""
Change password use case.
"""

from dataclasses import dataclass
from uuid import UUID

from etherstake.domain.entities.user import validate_password
from etherstake.domain.exceptions import (
    EntityNotFoundError,
    InvalidCredentialsError,
)
from etherstake.domain.repositories.i_user_repository import IUserRepository
from etherstake.domain.services.i_password_hasher import IPasswordHasher
from etherstake.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ChangePasswordCommand:
    """Command to change own password."""

    user_id: UUID
    current_password: str
    new_password: str


class ChangePassword:
    """
    Replace a user's password after checking the current one.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def execute(self, command: ChangePasswordCommand) -> None:
        """
        Change password.

        Raises:
            EntityNotFoundError: If user not found
            InvalidCredentialsError: If current password is wrong
            ValidationError: If new password is too short
        """
        user = await self.user_repository.get_by_id(command.user_id)

        if not user:
            raise EntityNotFoundError("User", str(command.user_id))

        if not self.password_hasher.verify(
            command.current_password, user.password_hash
        ):
            raise InvalidCredentialsError("Current password is incorrect")

        validate_password(command.new_password)

        user.set_password_hash(self.password_hasher.hash(command.new_password))
        await self.user_repository.update(user)

        logger.info("Password changed", extra={"user_id": str(user.id)})
