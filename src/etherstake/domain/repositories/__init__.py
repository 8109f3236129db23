"""
Domain repository interfaces.
"""

from etherstake.domain.repositories.i_stake_repository import IStakeRepository
from etherstake.domain.repositories.i_user_repository import IUserRepository

__all__ = [
    "IStakeRepository",
    "IUserRepository",
]
