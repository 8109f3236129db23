"""
Authentication infrastructure: tokens and password hashing.
"""

from etherstake.infrastructure.auth.jwt_handler import JWTHandler
from etherstake.infrastructure.auth.password_hasher import BcryptPasswordHasher

__all__ = [
    "BcryptPasswordHasher",
    "JWTHandler",
]
