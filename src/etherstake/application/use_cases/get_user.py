"""
Get user use case.
"""

from uuid import UUID

from etherstake.domain.entities.user import User
from etherstake.domain.exceptions import EntityNotFoundError
from etherstake.domain.repositories.i_user_repository import IUserRepository


class GetUser:
    """Fetch one user by ID (own profile or admin lookup)."""

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: UUID) -> User:
        """
        Raises:
            EntityNotFoundError: If user doesn't exist
        """
        user = await self.user_repository.get_by_id(user_id)

        if not user:
            raise EntityNotFoundError("User", str(user_id))

        return user
