"""
Domain exceptions package.
"""

# Auth exceptions
from etherstake.domain.exceptions.auth import (
    AuthenticationError,
    AuthorizationError,
    ExpiredTokenError,
    InsufficientRoleError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
)

# Base exceptions
from etherstake.domain.exceptions.base import (
    ConcurrentModificationError,
    DuplicateEntityError,
    EntityNotFoundError,
    EtherStakeException,
    ValidationError,
)

# Staking exceptions
from etherstake.domain.exceptions.staking import (
    InvalidStakeStateError,
    StakeAccessDeniedError,
    StakeAlreadyFinalizedError,
    StakeTermNotElapsedError,
)

__all__ = [
    # Base
    "EtherStakeException",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "ValidationError",
    "ConcurrentModificationError",
    # Auth
    "AuthenticationError",
    "InvalidCredentialsError",
    "MissingTokenError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "AuthorizationError",
    "InsufficientRoleError",
    # Staking
    "StakeAccessDeniedError",
    "InvalidStakeStateError",
    "StakeAlreadyFinalizedError",
    "StakeTermNotElapsedError",
]
