"""
Authentication result DTO.
"""

from dataclasses import dataclass

from etherstake.domain.entities.user import User


@dataclass
class AuthResult:
    """User plus freshly issued access token."""

    user: User
    token: str
