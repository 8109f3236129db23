"""
Domain service interfaces.
"""

from etherstake.domain.services.i_password_hasher import IPasswordHasher
from etherstake.domain.services.i_token_service import (
    ITokenService,
    TokenClaims,
)

__all__ = [
    "IPasswordHasher",
    "ITokenService",
    "TokenClaims",
]
