"""
List user stakes use case.
"""

from uuid import UUID

from etherstake.domain.entities.stake import Stake
from etherstake.domain.repositories.i_stake_repository import IStakeRepository
from etherstake.domain.value_objects.pagination import Page, PageRequest


class ListUserStakes:
    """Paginated stakes of one user, newest first."""

    def __init__(self, stake_repository: IStakeRepository):
        self.stake_repository = stake_repository

    async def execute(self, user_id: UUID, page_request: PageRequest) -> Page[Stake]:
        return await self.stake_repository.list(page_request, user_id=user_id)
