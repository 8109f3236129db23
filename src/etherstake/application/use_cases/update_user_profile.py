"""
Update user profile use case.

Handles self-service profile updates.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from etherstake.domain.entities.user import User
from etherstake.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from etherstake.domain.repositories.i_user_repository import IUserRepository
from etherstake.domain.value_objects.wallet_address import WalletAddress


@dataclass
class UpdateUserProfileCommand:
    """Command to update user profile."""

    user_id: UUID
    name: Optional[str] = None
    wallet_address: Optional[str] = None


class UpdateUserProfile:
    """
    Use case for updating user profile.

    Updates user's name and wallet address. Email and role are
    changed only through the admin path.
    """

    def __init__(self, user_repository: IUserRepository):
        """
        Initialize use case.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def execute(self, command: UpdateUserProfileCommand) -> User:
        """
        Update user profile.

        Args:
            command: Command with updated fields

        Returns:
            Updated user entity

        Raises:
            EntityNotFoundError: If user not found
            ValidationError: If name is blank or wallet malformed
            DuplicateEntityError: If wallet belongs to another user
        """
        user = await self.user_repository.get_by_id(command.user_id)

        if not user:
            raise EntityNotFoundError("User", str(command.user_id))

        if command.wallet_address is not None:
            WalletAddress(command.wallet_address)
            await ensure_wallet_available(
                self.user_repository, command.wallet_address, user.id
            )

        user.update_profile(
            name=command.name,
            wallet_address=command.wallet_address,
        )

        return await self.user_repository.update(user)


async def ensure_wallet_available(
    user_repository: IUserRepository,
    wallet_address: str,
    owner_id: UUID,
) -> None:
    """Raise DuplicateEntityError if another user holds wallet_address."""
    holder = await user_repository.get_by_wallet(wallet_address)
    if holder and holder.id != owner_id:
        raise DuplicateEntityError("User", f"wallet address {wallet_address}")
