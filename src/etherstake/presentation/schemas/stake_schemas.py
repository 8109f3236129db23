"""
Staking API schemas.
"""

from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from etherstake.domain.entities.stake import (
    MAX_DURATION_DAYS,
    MAX_STAKE_AMOUNT,
    Stake,
    StakeStatus,
)
from etherstake.presentation.schemas.common_schemas import PaginationMeta


class CreateStakeRequest(BaseModel):
    """Request to open a stake."""

    amount: Decimal = Field(
        ..., lt=MAX_STAKE_AMOUNT, description="Amount to stake (> 0)"
    )
    duration_days: int = Field(
        ..., le=MAX_DURATION_DAYS, description="Lock term in days (>= 1)"
    )
    wallet_address: str = Field(
        ...,
        description="Wallet registered on the account",
    )
    transaction_hash: Optional[str] = Field(default=None, max_length=66)


class UpdateStakeStatusRequest(BaseModel):
    """Administrative status override."""

    status: Optional[StakeStatus] = None
    transaction_hash: Optional[str] = Field(default=None, max_length=66)


class StakeResponse(BaseModel):
    """Stake response."""

    id: str
    user_id: str
    wallet_address: str
    amount: Decimal
    duration_days: int
    start_date: datetime
    end_date: datetime
    apy: Decimal
    estimated_rewards: Decimal
    actual_rewards: Decimal
    penalties: Decimal
    status: StakeStatus
    transaction_hash: Optional[str] = None
    cancelled_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    version: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, stake: Stake) -> "StakeResponse":
        return cls(
            id=str(stake.id),
            user_id=str(stake.user_id),
            wallet_address=stake.wallet_address,
            amount=stake.amount,
            duration_days=stake.duration_days,
            start_date=stake.start_date,
            end_date=stake.end_date,
            apy=stake.apy,
            estimated_rewards=stake.estimated_rewards,
            actual_rewards=stake.actual_rewards,
            penalties=stake.penalties,
            status=stake.status,
            transaction_hash=stake.transaction_hash,
            cancelled_at=stake.cancelled_at,
            completed_at=stake.completed_at,
            version=stake.version,
            created_at=stake.created_at,
            updated_at=stake.updated_at,
        )


class StakeListResponse(BaseModel):
    """Paginated stakes."""

    results: int
    pagination: PaginationMeta
    stakes: List[StakeResponse]


class StakingStatsResponse(BaseModel):
    """Platform-wide staking totals."""

    total_active_staked_amount: Decimal
    total_rewards_paid: Decimal
    stakes_by_status: Dict[str, int]
    total_stakes: int
