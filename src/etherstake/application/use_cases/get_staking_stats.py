"""
Get staking stats use case (admin).
"""

from etherstake.application.dto.staking_dto import StakingStats
from etherstake.domain.repositories.i_stake_repository import IStakeRepository


class GetStakingStats:
    """Platform totals computed with SQL aggregates."""

    def __init__(self, stake_repository: IStakeRepository):
        self.stake_repository = stake_repository

    async def execute(self) -> StakingStats:
        counts = await self.stake_repository.count_by_status()

        return StakingStats(
            total_active_staked_amount=(
                await self.stake_repository.total_active_staked_amount()
            ),
            total_rewards_paid=await self.stake_repository.total_rewards_paid(),
            stakes_by_status={status.value: n for status, n in counts.items()},
        )
