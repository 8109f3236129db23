"""
Infrastructure persistence package.
"""

from etherstake.infrastructure.persistence.database import Database
from etherstake.infrastructure.persistence.models import (
    Base,
    StakeModel,
    UserModel,
)

__all__ = [
    "Database",
    "Base",
    "UserModel",
    "StakeModel",
]
