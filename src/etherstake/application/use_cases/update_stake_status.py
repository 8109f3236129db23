"""
Update stake status use case (admin override).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from etherstake.domain.entities.stake import Stake, StakeStatus
from etherstake.domain.exceptions import EntityNotFoundError
from etherstake.domain.repositories.i_stake_repository import IStakeRepository
from etherstake.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


@dataclass
class UpdateStakeStatusCommand:
    """Command for an administrative status override."""

    stake_id: UUID
    status: Optional[StakeStatus] = None
    transaction_hash: Optional[str] = None


class UpdateStakeStatus:
    """
    Administrative escape hatch for correcting stake records.

    Lifecycle rules are not re-checked: a terminal stake may be moved
    back to active. Transition timestamps, rewards and penalties are
    left as they are.
    """

    def __init__(
        self,
        stake_repository: IStakeRepository,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.stake_repository = stake_repository
        self.clock = clock

    async def execute(self, command: UpdateStakeStatusCommand) -> Stake:
        """
        Raises:
            EntityNotFoundError: If stake doesn't exist
            ConcurrentModificationError: If stake changed concurrently
        """
        stake = await self.stake_repository.get_by_id(command.stake_id)

        if not stake:
            raise EntityNotFoundError("Stake", str(command.stake_id))

        previous = stake.status
        stake.apply_override(
            now=self.clock(),
            status=command.status,
            transaction_hash=command.transaction_hash,
        )
        updated = await self.stake_repository.update(stake)

        logger.warning(
            "Stake status overridden",
            extra={
                "stake_id": str(updated.id),
                "from_status": previous.value,
                "to_status": updated.status.value,
            },
        )

        return updated
