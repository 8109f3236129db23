"""
User repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from etherstake.domain.entities.user import User
from etherstake.domain.value_objects.pagination import Page, PageRequest


class IUserRepository(ABC):
    """Interface for user persistence operations."""

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create new user.

        Args:
            user: User entity to create

        Returns:
            Created user entity

        Raises:
            DuplicateEntityError: If email or wallet is already registered
        """

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User unique identifier

        Returns:
            User entity if found, None otherwise
        """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email (case-insensitive).

        Args:
            email: Email address

        Returns:
            User entity if found, None otherwise
        """

    @abstractmethod
    async def get_by_wallet(self, wallet_address: str) -> Optional[User]:
        """
        Get user by wallet address.

        Args:
            wallet_address: Wallet address

        Returns:
            User entity if found, None otherwise
        """

    @abstractmethod
    async def list(self, page_request: PageRequest) -> Page[User]:
        """
        List users, newest first.

        Args:
            page_request: Page number and size

        Returns:
            Page of user entities
        """

    @abstractmethod
    async def count(self) -> int:
        """Count all users."""

    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Update existing user.

        Args:
            user: User entity with updated data

        Returns:
            Updated user entity

        Raises:
            EntityNotFoundError: If user doesn't exist
            DuplicateEntityError: If new email or wallet is taken
        """

    @abstractmethod
    async def delete(self, user_id: UUID) -> bool:
        """
        Delete user by ID. The user's stakes are removed with it.

        Args:
            user_id: User unique identifier

        Returns:
            True if deleted, False if not found
        """
