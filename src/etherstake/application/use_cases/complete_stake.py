"""
Complete stake use case.

Closes a stake whose term has elapsed and pays its rewards.
"""

from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from etherstake.domain.entities.stake import Stake
from etherstake.domain.exceptions import EntityNotFoundError, StakeAccessDeniedError
from etherstake.domain.repositories.i_stake_repository import IStakeRepository
from etherstake.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class CompleteStake:
    """
    Use case for completing a stake.

    Business rules:
    - Only active stakes can be completed
    - Completion is allowed once now >= end_date
    - actual_rewards = estimated_rewards
    - When a caller is given, it must be the owner or an admin
    """

    def __init__(
        self,
        stake_repository: IStakeRepository,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.stake_repository = stake_repository
        self.clock = clock

    async def execute(
        self,
        stake_id: UUID,
        caller_id: Optional[UUID] = None,
        is_admin: bool = False,
    ) -> Stake:
        """
        Complete stake.

        Args:
            stake_id: Stake to complete
            caller_id: Requesting user (None for system calls)
            is_admin: Caller holds the admin role

        Returns:
            Completed stake

        Raises:
            EntityNotFoundError: If stake doesn't exist
            StakeAccessDeniedError: If caller is neither owner nor admin
            InvalidStakeStateError: If stake is terminal
            StakeTermNotElapsedError: If end date not reached
        """
        stake = await self.stake_repository.get_by_id(stake_id)

        if not stake:
            raise EntityNotFoundError("Stake", str(stake_id))

        if caller_id is not None and not is_admin and stake.user_id != caller_id:
            raise StakeAccessDeniedError("complete")

        stake.complete(now=self.clock())
        updated = await self.stake_repository.update(stake)

        logger.info(
            "Stake completed",
            extra={
                "stake_id": str(updated.id),
                "actual_rewards": str(updated.actual_rewards),
            },
        )

        return updated
