"""
Stake repository implementation using SQLAlchemy.
"""

from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from etherstake.domain.entities.stake import Stake, StakeStatus
from etherstake.domain.exceptions import (
    ConcurrentModificationError,
    EntityNotFoundError,
)
from etherstake.domain.repositories.i_stake_repository import IStakeRepository
from etherstake.domain.value_objects.pagination import Page, PageRequest
from etherstake.domain.value_objects.staking_terms import quantize_money
from etherstake.infrastructure.persistence.models import StakeModel


class StakeRepository(IStakeRepository):
    """
    SQLAlchemy implementation of stake repository.

    Updates are guarded by the version column: a stale entity is rejected
    before flushing, and a row changed by another transaction makes the
    versioned UPDATE match nothing.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, stake: Stake) -> Stake:
        """
        Create new stake in database.

        Args:
            stake: Stake entity to persist

        Returns:
            Created stake entity (version 1)
        """
        model = StakeModel(
            id=stake.id,
            user_id=stake.user_id,
            wallet_address=stake.wallet_address,
            amount=stake.amount,
            duration_days=stake.duration_days,
            start_date=stake.start_date,
            end_date=stake.end_date,
            apy=stake.apy,
            estimated_rewards=stake.estimated_rewards,
            actual_rewards=stake.actual_rewards,
            penalties=stake.penalties,
            status=stake.status.value,
            transaction_hash=stake.transaction_hash,
            cancelled_at=stake.cancelled_at,
            completed_at=stake.completed_at,
            created_at=stake.created_at,
            updated_at=stake.updated_at,
        )

        self.session.add(model)
        await self.session.flush()

        return self._to_entity(model)

    async def get_by_id(self, stake_id: UUID) -> Optional[Stake]:
        """
        Get stake by ID.

        Args:
            stake_id: Stake unique identifier

        Returns:
            Stake entity if found, None otherwise
        """
        stmt = select(StakeModel).where(StakeModel.id == stake_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        return self._to_entity(model) if model else None

    async def list(
        self,
        page_request: PageRequest,
        user_id: Optional[UUID] = None,
        status: Optional[StakeStatus] = None,
    ) -> Page[Stake]:
        """
        List stakes, newest first, optionally filtered.

        Args:
            page_request: Page number and size
            user_id: Only stakes owned by this user
            status: Only stakes in this status

        Returns:
            Page of stake entities
        """
        stmt = (
            select(StakeModel)
            .where(*self._filters(user_id, status))
            .order_by(StakeModel.created_at.desc(), StakeModel.id.desc())
            .offset(page_request.offset)
            .limit(page_request.limit)
        )
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return Page(
            items=[self._to_entity(model) for model in models],
            total=await self.count(user_id=user_id, status=status),
            page=page_request.page,
            limit=page_request.limit,
        )

    async def count(
        self,
        user_id: Optional[UUID] = None,
        status: Optional[StakeStatus] = None,
    ) -> int:
        """Count stakes matching the filters."""
        stmt = (
            select(func.count())
            .select_from(StakeModel)
            .where(*self._filters(user_id, status))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def update(self, stake: Stake) -> Stake:
        """
        Update existing stake.

        Args:
            stake: Stake entity with updated data

        Returns:
            Updated stake entity with incremented version

        Raises:
            EntityNotFoundError: If stake doesn't exist
            ConcurrentModificationError: If the stake changed since it was read
        """
        stmt = select(StakeModel).where(StakeModel.id == stake.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise EntityNotFoundError("Stake", str(stake.id))

        if model.version != stake.version:
            raise ConcurrentModificationError("Stake", str(stake.id))

        # Update fields
        model.wallet_address = stake.wallet_address
        model.amount = stake.amount
        model.duration_days = stake.duration_days
        model.start_date = stake.start_date
        model.end_date = stake.end_date
        model.apy = stake.apy
        model.estimated_rewards = stake.estimated_rewards
        model.actual_rewards = stake.actual_rewards
        model.penalties = stake.penalties
        model.status = stake.status.value
        model.transaction_hash = stake.transaction_hash
        model.cancelled_at = stake.cancelled_at
        model.completed_at = stake.completed_at
        model.updated_at = stake.updated_at

        try:
            await self.session.flush()
        except StaleDataError as e:
            raise ConcurrentModificationError("Stake", str(stake.id)) from e

        return self._to_entity(model)

    async def delete(self, stake_id: UUID) -> bool:
        """
        Delete stake by ID.

        Args:
            stake_id: Stake unique identifier

        Returns:
            True if deleted, False if not found
        """
        stmt = select(StakeModel).where(StakeModel.id == stake_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self.session.delete(model)
        await self.session.flush()

        return True

    async def total_active_staked_amount(self) -> Decimal:
        """Sum of amount over active stakes."""
        return await self._sum(StakeModel.amount, StakeStatus.ACTIVE)

    async def total_rewards_paid(self) -> Decimal:
        """Sum of actual_rewards over completed stakes."""
        return await self._sum(StakeModel.actual_rewards, StakeStatus.COMPLETED)

    async def count_by_status(self) -> Dict[StakeStatus, int]:
        """Number of stakes in each status."""
        stmt = select(StakeModel.status, func.count()).group_by(StakeModel.status)
        result = await self.session.execute(stmt)

        counts = {status: 0 for status in StakeStatus}
        for status, count in result.all():
            counts[StakeStatus(status)] = count
        return counts

    async def _sum(self, column, status: StakeStatus) -> Decimal:
        stmt = select(func.coalesce(func.sum(column), 0)).where(
            StakeModel.status == status.value
        )
        result = await self.session.execute(stmt)
        return quantize_money(Decimal(str(result.scalar_one())))

    @staticmethod
    def _filters(
        user_id: Optional[UUID],
        status: Optional[StakeStatus],
    ) -> List:
        criteria = []
        if user_id is not None:
            criteria.append(StakeModel.user_id == user_id)
        if status is not None:
            criteria.append(StakeModel.status == StakeStatus(status).value)
        return criteria

    def _to_entity(self, model: StakeModel) -> Stake:
        """
        Convert StakeModel to Stake entity.

        Args:
            model: SQLAlchemy model

        Returns:
            Stake domain entity
        """
        return Stake(
            id=model.id,
            user_id=model.user_id,
            wallet_address=model.wallet_address,
            amount=model.amount,
            duration_days=model.duration_days,
            start_date=model.start_date,
            end_date=model.end_date,
            apy=model.apy,
            estimated_rewards=model.estimated_rewards,
            actual_rewards=model.actual_rewards,
            penalties=model.penalties,
            status=StakeStatus(model.status),
            transaction_hash=model.transaction_hash,
            cancelled_at=model.cancelled_at,
            completed_at=model.completed_at,
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
