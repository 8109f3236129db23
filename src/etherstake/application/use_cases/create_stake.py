"""
Create stake use case.

Opens a new time-locked stake for a user.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional
from uuid import UUID

from etherstake.domain.entities.stake import Stake
from etherstake.domain.exceptions import EntityNotFoundError, ValidationError
from etherstake.domain.repositories.i_stake_repository import IStakeRepository
from etherstake.domain.repositories.i_user_repository import IUserRepository
from etherstake.domain.value_objects.staking_terms import StakingTerms
from etherstake.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


@dataclass
class CreateStakeCommand:
    """Command to open a stake."""

    owner_id: UUID
    amount: Decimal
    duration_days: int
    wallet_address: str
    transaction_hash: Optional[str] = None


class CreateStake:
    """
    Use case for opening a stake.

    Flow:
    1. Build the stake (validates amount, term and wallet format)
    2. Check the owner exists and the wallet is the owner's
    3. Persist the stake
    4. Append the stake to the owner's stake list
    """

    def __init__(
        self,
        stake_repository: IStakeRepository,
        user_repository: IUserRepository,
        terms: StakingTerms,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize use case.

        Args:
            stake_repository: Stake repository
            user_repository: User repository for owner lookup
            terms: Reward and penalty rates
            clock: Source of current time
        """
        self.stake_repository = stake_repository
        self.user_repository = user_repository
        self.terms = terms
        self.clock = clock

    async def execute(self, command: CreateStakeCommand) -> Stake:
        """
        Open a stake.

        Args:
            command: Stake details

        Returns:
            Persisted stake

        Raises:
            ValidationError: Bad amount, term or wallet, or wallet not owner's
            EntityNotFoundError: Owner doesn't exist
        """
        stake = Stake.open(
            user_id=command.owner_id,
            wallet_address=command.wallet_address,
            amount=command.amount,
            duration_days=command.duration_days,
            terms=self.terms,
            now=self.clock(),
            transaction_hash=command.transaction_hash,
        )

        owner = await self.user_repository.get_by_id(command.owner_id)
        if not owner:
            raise EntityNotFoundError("User", str(command.owner_id))

        if not owner.owns_wallet(command.wallet_address):
            raise ValidationError(
                "wallet_address",
                "does not match the wallet registered on your account",
            )

        created = await self.stake_repository.create(stake)

        owner.add_stake(created.id)
        await self.user_repository.update(owner)

        logger.info(
            "Stake created",
            extra={
                "stake_id": str(created.id),
                "user_id": str(owner.id),
                "amount": str(created.amount),
                "duration_days": created.duration_days,
            },
        )

        return created
