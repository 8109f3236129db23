"""
Get stake use case.
"""

from uuid import UUID

from etherstake.domain.entities.stake import Stake
from etherstake.domain.entities.user import User
from etherstake.domain.exceptions import EntityNotFoundError, StakeAccessDeniedError
from etherstake.domain.repositories.i_stake_repository import IStakeRepository


class GetStake:
    """Fetch one stake; only its owner or an admin may see it."""

    def __init__(self, stake_repository: IStakeRepository):
        self.stake_repository = stake_repository

    async def execute(self, stake_id: UUID, caller: User) -> Stake:
        """
        Args:
            stake_id: Stake unique identifier
            caller: Authenticated user

        Returns:
            Stake entity

        Raises:
            EntityNotFoundError: If stake doesn't exist
            StakeAccessDeniedError: If caller is neither owner nor admin
        """
        stake = await self.stake_repository.get_by_id(stake_id)

        if not stake:
            raise EntityNotFoundError("Stake", str(stake_id))

        if stake.user_id != caller.id and not caller.is_admin():
            raise StakeAccessDeniedError("view")

        return stake
