"""
Stake entity - Domain model for time-locked stakes.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from etherstake.domain.exceptions.base import ValidationError
from etherstake.domain.exceptions.staking import (
    StakeAlreadyFinalizedError,
    StakeTermNotElapsedError,
)
from etherstake.domain.value_objects.staking_terms import (
    StakingTerms,
    quantize_money,
)
from etherstake.domain.value_objects.wallet_address import WalletAddress


class StakeStatus(str, Enum):
    """Stake lifecycle states."""

    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


TERMINAL_STATUSES = frozenset({StakeStatus.COMPLETED, StakeStatus.CANCELLED})

# Upper bounds keep end_date representable and money inside DECIMAL(18, 6)
MAX_STAKE_AMOUNT = Decimal("1000000000000")
MAX_DURATION_DAYS = 3650


@dataclass
class Stake:
    """
    Stake entity representing value locked by a user for a fixed term.

    Business rules:
    - 0 < amount < MAX_STAKE_AMOUNT, 1 <= duration_days <= MAX_DURATION_DAYS
    - end_date == start_date + duration_days
    - estimated_rewards == amount * duration_days * apy / 365
    - Status transitions: active -> completed/cancelled, never back
    - version increments on every persisted update
    """

    id: UUID = field(default_factory=uuid4)
    user_id: UUID = field(default_factory=uuid4)
    wallet_address: str = field(default="")
    amount: Decimal = field(default=Decimal("0"))
    duration_days: int = field(default=0)
    start_date: datetime = field(default_factory=datetime.now)
    end_date: Optional[datetime] = field(default=None)
    apy: Decimal = field(default=Decimal("0.01"))
    estimated_rewards: Optional[Decimal] = field(default=None)
    actual_rewards: Decimal = field(default=Decimal("0"))
    penalties: Decimal = field(default=Decimal("0"))
    status: StakeStatus = field(default=StakeStatus.ACTIVE)
    transaction_hash: Optional[str] = field(default=None)
    cancelled_at: Optional[datetime] = field(default=None)
    completed_at: Optional[datetime] = field(default=None)
    version: int = field(default=1)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate stake data after initialization."""
        try:
            self.amount = quantize_money(Decimal(str(self.amount)))
        except (InvalidOperation, ValueError):
            raise ValidationError("amount", "must be a number") from None

        if self.amount <= 0:
            raise ValidationError("amount", "must be greater than 0")

        if self.amount >= MAX_STAKE_AMOUNT:
            raise ValidationError("amount", f"must be less than {MAX_STAKE_AMOUNT}")

        if (
            isinstance(self.duration_days, bool)
            or not isinstance(self.duration_days, int)
            or self.duration_days < 1
        ):
            raise ValidationError("duration_days", "must be at least 1 day")

        if self.duration_days > MAX_DURATION_DAYS:
            raise ValidationError(
                "duration_days", f"must be at most {MAX_DURATION_DAYS} days"
            )

        WalletAddress(self.wallet_address)

        self.status = StakeStatus(self.status)
        self.actual_rewards = quantize_money(self.actual_rewards)
        self.penalties = quantize_money(self.penalties)

        if self.end_date is None or self.estimated_rewards is None:
            self.recalculate()
        else:
            self.estimated_rewards = quantize_money(self.estimated_rewards)

    @classmethod
    def open(
        cls,
        user_id: UUID,
        wallet_address: str,
        amount: Decimal,
        duration_days: int,
        terms: StakingTerms,
        now: datetime,
        transaction_hash: Optional[str] = None,
    ) -> "Stake":
        """Create a new active stake starting at now under the given terms."""
        return cls(
            user_id=user_id,
            wallet_address=wallet_address,
            amount=amount,
            duration_days=duration_days,
            start_date=now,
            apy=Decimal(terms.reward_rate),
            status=StakeStatus.ACTIVE,
            transaction_hash=transaction_hash,
            created_at=now,
            updated_at=now,
        )

    def recalculate(self) -> None:
        """Derive end_date and estimated_rewards from amount, term and apy."""
        self.end_date = self.start_date + timedelta(days=self.duration_days)
        self.estimated_rewards = StakingTerms(
            reward_rate=Decimal(self.apy)
        ).estimated_rewards(self.amount, self.duration_days)

    def is_active(self) -> bool:
        return self.status == StakeStatus.ACTIVE

    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def cancel(self, now: datetime, terms: StakingTerms) -> None:
        """
        Cancel an active stake, charging a penalty for the unexpired term.

        Args:
            now: Cancellation time
            terms: Terms supplying the penalty rate

        Raises:
            StakeAlreadyFinalizedError: If stake is not active
        """
        if self.is_terminal():
            raise StakeAlreadyFinalizedError(self.status.value)

        remaining = terms.remaining_days(self.end_date, now)
        self.penalties = terms.early_cancellation_penalty(
            self.amount, remaining, self.duration_days
        )
        self.actual_rewards = quantize_money(Decimal("0"))
        self.status = StakeStatus.CANCELLED
        self.cancelled_at = now
        self.updated_at = now

    def complete(self, now: datetime) -> None:
        """
        Complete a stake whose term has elapsed, paying full rewards.

        Raises:
            StakeAlreadyFinalizedError: If stake is not active
            StakeTermNotElapsedError: If now is before end_date
        """
        if self.is_terminal():
            raise StakeAlreadyFinalizedError(self.status.value)

        if now < self.end_date:
            raise StakeTermNotElapsedError()

        self.actual_rewards = self.estimated_rewards
        self.status = StakeStatus.COMPLETED
        self.completed_at = now
        self.updated_at = now

    def apply_override(
        self,
        now: datetime,
        status: Optional[StakeStatus] = None,
        transaction_hash: Optional[str] = None,
    ) -> None:
        """
        Administrative override of status and/or transaction hash.

        Lifecycle rules are not enforced here; timestamps of earlier
        transitions and reward/penalty figures are left untouched.
        """
        if status is not None:
            self.status = StakeStatus(status)
        if transaction_hash is not None:
            self.transaction_hash = transaction_hash
        self.updated_at = now

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "id": str(self.id),
            "user_id": str(self.user_id),
            "wallet_address": self.wallet_address,
            "amount": str(self.amount),
            "duration_days": self.duration_days,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "apy": str(self.apy),
            "estimated_rewards": str(self.estimated_rewards),
            "actual_rewards": str(self.actual_rewards),
            "penalties": str(self.penalties),
            "status": self.status.value,
            "transaction_hash": self.transaction_hash,
            "cancelled_at": (
                self.cancelled_at.isoformat() if self.cancelled_at else None
            ),
            "completed_at": (
                self.completed_at.isoformat() if self.completed_at else None
            ),
            "version": self.version,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
