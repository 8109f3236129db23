"""
List users use case (admin).
"""

from etherstake.domain.entities.user import User
from etherstake.domain.repositories.i_user_repository import IUserRepository
from etherstake.domain.value_objects.pagination import Page, PageRequest


class ListUsers:
    """Paginated list of all users, newest first."""

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def execute(self, page_request: PageRequest) -> Page[User]:
        return await self.user_repository.list(page_request)
