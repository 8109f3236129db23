"""Repository implementations."""

from etherstake.infrastructure.persistence.repositories.stake_repository import (
    StakeRepository,
)
from etherstake.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "StakeRepository",
    "UserRepository",
]
