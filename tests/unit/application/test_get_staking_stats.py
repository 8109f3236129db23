"""
Unit tests for GetStakingStats use case.
"""

from decimal import Decimal
from unittest.mock import AsyncMock

from etherstake.application.use_cases.get_staking_stats import GetStakingStats
from etherstake.domain.entities.stake import StakeStatus


class TestGetStakingStats:
    """Unit tests for GetStakingStats use case."""

    async def test_stats_from_repository_aggregates(self):
        stake_repo = AsyncMock()
        stake_repo.count_by_status.return_value = {
            StakeStatus.ACTIVE: 2,
            StakeStatus.COMPLETED: 1,
            StakeStatus.CANCELLED: 0,
        }
        stake_repo.total_active_staked_amount.return_value = Decimal("1500")
        stake_repo.total_rewards_paid.return_value = Decimal("10")

        stats = await GetStakingStats(stake_repo).execute()

        assert stats.total_active_staked_amount == Decimal("1500")
        assert stats.total_rewards_paid == Decimal("10")
        assert stats.stakes_by_status == {
            "active": 2,
            "completed": 1,
            "cancelled": 0,
        }
        assert stats.total_stakes == 3
        assert stats.to_dict()["total_rewards_paid"] == "10"
