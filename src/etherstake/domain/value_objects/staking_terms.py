"""
StakingTerms value object - reward and penalty arithmetic.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

MONEY_QUANTUM = Decimal("0.000001")
DAYS_PER_YEAR = Decimal("365")
SECONDS_PER_DAY = 86400


def quantize_money(value: Decimal) -> Decimal:
    """Round a money value to the stored precision (6 decimal places)."""
    return Decimal(value).quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class StakingTerms:
    """
    Value object holding the rates applied to every stake.

    Business rules:
    - Reward rate is a nominal annual rate, prorated linearly by term
    - Penalty rate applies to the unexpired share of the term on cancel
    - Rates never change for a stake once it is created
    """

    reward_rate: Decimal = Decimal("0.01")
    penalty_rate: Decimal = Decimal("0.05")

    def __post_init__(self):
        """Validate rates on creation."""
        if Decimal(self.reward_rate) <= 0:
            raise ValueError("Reward rate must be positive")

        if Decimal(self.penalty_rate) < 0:
            raise ValueError("Penalty rate cannot be negative")

    def estimated_rewards(self, amount: Decimal, duration_days: int) -> Decimal:
        """
        Calculate rewards earned by holding a stake for its full term.

        Args:
            amount: Staked amount
            duration_days: Stake term in days

        Returns:
            amount * duration_days * reward_rate / 365, quantized
        """
        rewards = (
            Decimal(amount)
            * Decimal(duration_days)
            * Decimal(self.reward_rate)
            / DAYS_PER_YEAR
        )
        return quantize_money(rewards)

    def early_cancellation_penalty(
        self,
        amount: Decimal,
        remaining_days: int,
        duration_days: int,
    ) -> Decimal:
        """
        Calculate penalty for cancelling with days still left on the term.

        Args:
            amount: Staked amount
            remaining_days: Whole days left until end date
            duration_days: Stake term in days

        Returns:
            amount * remaining_days * penalty_rate / duration_days, quantized
        """
        if remaining_days <= 0 or duration_days <= 0:
            return quantize_money(Decimal("0"))

        penalty = (
            Decimal(amount)
            * Decimal(remaining_days)
            * Decimal(self.penalty_rate)
            / Decimal(duration_days)
        )
        return quantize_money(penalty)

    @staticmethod
    def remaining_days(end_date: datetime, now: datetime) -> int:
        """Whole days left until end_date, rounded up; 0 once elapsed."""
        if now >= end_date:
            return 0

        seconds = (end_date - now).total_seconds()
        return math.ceil(seconds / SECONDS_PER_DAY)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "reward_rate": str(self.reward_rate),
            "penalty_rate": str(self.penalty_rate),
        }
