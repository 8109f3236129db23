"""
Delete user use case (admin).
"""

from uuid import UUID

from etherstake.domain.exceptions import EntityNotFoundError
from etherstake.domain.repositories.i_user_repository import IUserRepository
from etherstake.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class DeleteUser:
    """
    Delete a user account.

    The user's stakes go with it; this is the only path that removes
    stake records.
    """

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: UUID) -> None:
        """
        Raises:
            EntityNotFoundError: If user doesn't exist
        """
        deleted = await self.user_repository.delete(user_id)

        if not deleted:
            raise EntityNotFoundError("User", str(user_id))

        logger.info("User deleted", extra={"user_id": str(user_id)})
