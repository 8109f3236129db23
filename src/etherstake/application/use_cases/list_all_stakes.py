"""
List all stakes use case (admin).
"""

from typing import Optional
from uuid import UUID

from etherstake.domain.entities.stake import Stake, StakeStatus
from etherstake.domain.repositories.i_stake_repository import IStakeRepository
from etherstake.domain.value_objects.pagination import Page, PageRequest


class ListAllStakes:
    """Paginated stakes across all users, filterable by status and owner."""

    def __init__(self, stake_repository: IStakeRepository):
        self.stake_repository = stake_repository

    async def execute(
        self,
        page_request: PageRequest,
        status: Optional[StakeStatus] = None,
        user_id: Optional[UUID] = None,
    ) -> Page[Stake]:
        return await self.stake_repository.list(
            page_request,
            user_id=user_id,
            status=status,
        )
