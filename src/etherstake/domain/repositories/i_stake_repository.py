"""
Stake repository interface.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, Optional
from uuid import UUID

from etherstake.domain.entities.stake import Stake, StakeStatus
from etherstake.domain.value_objects.pagination import Page, PageRequest


class IStakeRepository(ABC):
    """Interface for stake persistence operations."""

    @abstractmethod
    async def create(self, stake: Stake) -> Stake:
        """
        Create new stake.

        Args:
            stake: Stake entity to create

        Returns:
            Created stake entity
        """

    @abstractmethod
    async def get_by_id(self, stake_id: UUID) -> Optional[Stake]:
        """
        Get stake by ID.

        Args:
            stake_id: Stake unique identifier

        Returns:
            Stake entity if found, None otherwise
        """

    @abstractmethod
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

    @abstractmethod
    async def count(
        self,
        user_id: Optional[UUID] = None,
        status: Optional[StakeStatus] = None,
    ) -> int:
        """Count stakes matching the filters."""

    @abstractmethod
    async def update(self, stake: Stake) -> Stake:
        """
        Update existing stake.

        The stored version must equal stake.version; the returned entity
        carries the incremented version.

        Args:
            stake: Stake entity with updated data

        Returns:
            Updated stake entity

        Raises:
            EntityNotFoundError: If stake doesn't exist
            ConcurrentModificationError: If the stake changed since it was read
        """

    @abstractmethod
    async def delete(self, stake_id: UUID) -> bool:
        """
        Delete stake by ID.

        Args:
            stake_id: Stake unique identifier

        Returns:
            True if deleted, False if not found
        """

    @abstractmethod
    async def total_active_staked_amount(self) -> Decimal:
        """Sum of amount over active stakes."""

    @abstractmethod
    async def total_rewards_paid(self) -> Decimal:
        """Sum of actual_rewards over completed stakes."""

    @abstractmethod
    async def count_by_status(self) -> Dict[StakeStatus, int]:
        """Number of stakes in each status (zero for absent statuses)."""
