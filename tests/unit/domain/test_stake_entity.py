"""
Unit tests for Stake entity.

Tests derived fields and lifecycle transitions.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from etherstake.domain.entities.stake import (
    MAX_DURATION_DAYS,
    Stake,
    StakeStatus,
)
from etherstake.domain.exceptions import (
    InvalidStakeStateError,
    StakeAlreadyFinalizedError,
    StakeTermNotElapsedError,
    ValidationError,
)
from etherstake.domain.value_objects.staking_terms import StakingTerms
from helpers import make_wallet

START = datetime(2026, 1, 1, 9, 0)


class TestStake:
    """Unit tests for Stake entity."""

    # ================================================================
    # Helper Methods
    # ================================================================

    def _open_stake(
        self,
        amount: str = "1000",
        duration_days: int = 100,
        now: datetime = START,
    ) -> Stake:
        return Stake.open(
            user_id=uuid4(),
            wallet_address=make_wallet(),
            amount=Decimal(amount),
            duration_days=duration_days,
            terms=StakingTerms(),
            now=now,
        )

    # ================================================================
    # Creation
    # ================================================================

    def test_open_derives_end_date_and_rewards(self):
        stake = self._open_stake(amount="1000", duration_days=365)

        assert stake.status == StakeStatus.ACTIVE
        assert stake.start_date == START
        assert stake.end_date == START + timedelta(days=365)
        assert stake.apy == Decimal("0.01")
        assert stake.estimated_rewards == Decimal("10")
        assert stake.actual_rewards == Decimal("0")
        assert stake.penalties == Decimal("0")
        assert stake.version == 1

    @pytest.mark.parametrize("amount", ["0", "-5"])
    def test_rejects_non_positive_amount(self, amount):
        with pytest.raises(ValidationError) as exc_info:
            self._open_stake(amount=amount)

        assert exc_info.value.field == "amount"

    @pytest.mark.parametrize("duration_days", [0, -1])
    def test_rejects_short_duration(self, duration_days):
        with pytest.raises(ValidationError) as exc_info:
            self._open_stake(duration_days=duration_days)

        assert exc_info.value.field == "duration_days"

    def test_rejects_term_beyond_maximum(self):
        with pytest.raises(ValidationError) as exc_info:
            self._open_stake(duration_days=MAX_DURATION_DAYS + 1)

        assert exc_info.value.field == "duration_days"

    def test_accepts_maximum_term(self):
        stake = self._open_stake(duration_days=MAX_DURATION_DAYS)

        assert stake.end_date == START + timedelta(days=MAX_DURATION_DAYS)

    @pytest.mark.parametrize("amount", ["1000000000000", "5000000000000"])
    def test_rejects_amount_at_or_above_maximum(self, amount):
        with pytest.raises(ValidationError) as exc_info:
            self._open_stake(amount=amount)

        assert exc_info.value.field == "amount"

    def test_rejects_bad_wallet(self):
        with pytest.raises(ValidationError):
            Stake.open(
                user_id=uuid4(),
                wallet_address="not-a-wallet",
                amount=Decimal("1"),
                duration_days=1,
                terms=StakingTerms(),
                now=START,
            )

    def test_amount_is_quantized(self):
        stake = self._open_stake(amount="1.23456789")

        assert stake.amount == Decimal("1.234568")

    # ================================================================
    # Cancel
    # ================================================================

    def test_cancel_midway_charges_penalty(self):
        stake = self._open_stake(amount="1000", duration_days=100)
        now = START + timedelta(days=50)

        stake.cancel(now=now, terms=StakingTerms())

        assert stake.status == StakeStatus.CANCELLED
        assert stake.penalties == Decimal("25")
        assert stake.actual_rewards == Decimal("0")
        assert stake.cancelled_at == now

    def test_cancel_after_end_date_is_free(self):
        stake = self._open_stake(duration_days=10)

        stake.cancel(now=START + timedelta(days=11), terms=StakingTerms())

        assert stake.status == StakeStatus.CANCELLED
        assert stake.penalties == Decimal("0")

    def test_cannot_cancel_twice(self):
        stake = self._open_stake()
        stake.cancel(now=START, terms=StakingTerms())

        with pytest.raises(StakeAlreadyFinalizedError):
            stake.cancel(now=START, terms=StakingTerms())

    # ================================================================
    # Complete
    # ================================================================

    def test_complete_after_end_date_pays_rewards(self):
        stake = self._open_stake(amount="1000", duration_days=365)
        now = START + timedelta(days=365)

        stake.complete(now=now)

        assert stake.status == StakeStatus.COMPLETED
        assert stake.actual_rewards == stake.estimated_rewards
        assert stake.completed_at == now

    def test_complete_before_end_date_fails(self):
        stake = self._open_stake(duration_days=30)

        with pytest.raises(StakeTermNotElapsedError):
            stake.complete(now=START + timedelta(days=29, hours=23))

        assert stake.status == StakeStatus.ACTIVE

    def test_cannot_complete_cancelled_stake(self):
        stake = self._open_stake(duration_days=1)
        stake.cancel(now=START, terms=StakingTerms())

        with pytest.raises(InvalidStakeStateError):
            stake.complete(now=START + timedelta(days=2))

    # ================================================================
    # Admin Override
    # ================================================================

    def test_override_can_reactivate_terminal_stake(self):
        stake = self._open_stake(duration_days=1)
        stake.cancel(now=START, terms=StakingTerms())
        later = START + timedelta(hours=1)

        stake.apply_override(
            now=later, status=StakeStatus.ACTIVE, transaction_hash="0xabc"
        )

        assert stake.status == StakeStatus.ACTIVE
        assert stake.transaction_hash == "0xabc"
        assert stake.cancelled_at == START
        assert stake.updated_at == later
