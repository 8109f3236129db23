"""
JWT token handler for authentication.

Provides token creation and validation.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

from jose import JWTError, jwt

from etherstake.domain.entities.user import User, UserRole
from etherstake.domain.exceptions.auth import ExpiredTokenError, InvalidTokenError
from etherstake.domain.services.i_token_service import ITokenService, TokenClaims

TOKEN_TYPE = "access"


class JWTHandler(ITokenService):
    """
    HS256 JWT implementation of the token service.

    Claims: sub (user ID), role, iat, exp, type=access.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expiration_hours: int = 24,
    ):
        """
        Initialize handler.

        Args:
            secret_key: Signing secret
            algorithm: JWT signing algorithm
            expiration_hours: Token lifetime
        """
        if not secret_key:
            raise ValueError("JWT secret key is required")

        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expiration_hours = expiration_hours

    def issue(self, user: User) -> str:
        """
        Create JWT access token for authenticated user.

        Args:
            user: Authenticated user

        Returns:
            Encoded JWT token string
        """
        now = datetime.now(timezone.utc)
        expire = now + timedelta(hours=self.expiration_hours)

        payload = {
            "sub": str(user.id),  # Subject (standard JWT claim)
            "role": user.role.value,
            "iat": now,  # Issued at
            "exp": expire,  # Expiration time
            "type": TOKEN_TYPE,
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and validate JWT access token.

        Args:
            token: JWT token string

        Returns:
            TokenClaims

        Raises:
            ExpiredTokenError: If token has expired
            InvalidTokenError: If token is invalid or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except JWTError:
            raise InvalidTokenError()

        if payload.get("type") != TOKEN_TYPE:
            raise InvalidTokenError()

        try:
            return TokenClaims(
                user_id=UUID(payload["sub"]),
                role=UserRole(payload["role"]),
                issued_at=datetime.fromtimestamp(payload["iat"], timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], timezone.utc),
            )
        except (KeyError, TypeError, ValueError):
            raise InvalidTokenError()
