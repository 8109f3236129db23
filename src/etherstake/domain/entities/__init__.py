"""
Domain entities.
"""

from etherstake.domain.entities.stake import Stake, StakeStatus
from etherstake.domain.entities.user import User, UserRole

__all__ = [
    "Stake",
    "StakeStatus",
    "User",
    "UserRole",
]
