"""
Staking aggregate DTOs.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict


@dataclass
class StakingStats:
    """Platform-wide staking totals."""

    total_active_staked_amount: Decimal
    total_rewards_paid: Decimal
    stakes_by_status: Dict[str, int] = field(default_factory=dict)

    @property
    def total_stakes(self) -> int:
        return sum(self.stakes_by_status.values())

    def to_dict(self) -> dict:
        return {
            "total_active_staked_amount": str(self.total_active_staked_amount),
            "total_rewards_paid": str(self.total_rewards_paid),
            "stakes_by_status": dict(self.stakes_by_status),
            "total_stakes": self.total_stakes,
        }
