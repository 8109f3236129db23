"""
Token service interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from etherstake.domain.entities.user import User, UserRole


@dataclass(frozen=True)
class TokenClaims:
    """Verified contents of an access token."""

    user_id: UUID
    role: UserRole
    issued_at: datetime
    expires_at: datetime


class ITokenService(ABC):
    """Interface for issuing and verifying access tokens."""

    @abstractmethod
    def issue(self, user: User) -> str:
        """
        Issue an access token for user.

        Args:
            user: Authenticated user

        Returns:
            Encoded token string
        """

    @abstractmethod
    def verify(self, token: str) -> TokenClaims:
        """
        Verify token and return its claims.

        Args:
            token: Encoded token string

        Returns:
            TokenClaims

        Raises:
            InvalidTokenError: If token is malformed or signature is bad
            ExpiredTokenError: If token has expired
        """
