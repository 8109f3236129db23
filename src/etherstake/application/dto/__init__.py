"""
Data Transfer Objects for application layer.
"""

from etherstake.application.dto.auth_dto import AuthResult
from etherstake.application.dto.staking_dto import StakingStats

__all__ = [
    "AuthResult",
    "StakingStats",
]
