"""
Cancel stake use case.

Ends an active stake early, charging a penalty for the unexpired term.
"""

from datetime import datetime
from typing import Callable
from uuid import UUID

from etherstake.domain.entities.stake import Stake
from etherstake.domain.exceptions import EntityNotFoundError, StakeAccessDeniedError
from etherstake.domain.repositories.i_stake_repository import IStakeRepository
from etherstake.domain.value_objects.staking_terms import StakingTerms
from etherstake.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class CancelStake:
    """
    Use case for cancelling a stake.

    Business rules:
    - Only the owner may cancel; admins get no bypass
    - Only active stakes can be cancelled
    - penalty = amount * remaining_days * penalty_rate / duration_days
    - Rewards are forfeited
    """

    def __init__(
        self,
        stake_repository: IStakeRepository,
        terms: StakingTerms,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize use case.

        Args:
            stake_repository: Stake repository
            terms: Penalty rate source
            clock: Source of current time
        """
        self.stake_repository = stake_repository
        self.terms = terms
        self.clock = clock

    async def execute(self, stake_id: UUID, caller_id: UUID) -> Stake:
        """
        Cancel stake.

        Args:
            stake_id: Stake to cancel
            caller_id: Authenticated user ID

        Returns:
            Cancelled stake

        Raises:
            EntityNotFoundError: If stake doesn't exist
            StakeAccessDeniedError: If caller doesn't own the stake
            InvalidStakeStateError: If stake is already completed or cancelled
            ConcurrentModificationError: If stake changed concurrently
        """
        stake = await self.stake_repository.get_by_id(stake_id)

        if not stake:
            raise EntityNotFoundError("Stake", str(stake_id))

        if stake.user_id != caller_id:
            raise StakeAccessDeniedError("cancel")

        stake.cancel(now=self.clock(), terms=self.terms)
        updated = await self.stake_repository.update(stake)

        logger.info(
            "Stake cancelled",
            extra={"stake_id": str(updated.id), "penalties": str(updated.penalties)},
        )

        return updated
