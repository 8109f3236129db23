"""
Unit tests for JWTHandler.
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from etherstake.domain.entities.user import User, UserRole
from etherstake.domain.exceptions import ExpiredTokenError, InvalidTokenError
from etherstake.infrastructure.auth.jwt_handler import JWTHandler

SECRET = "unit-test-secret"


class TestJWTHandler:
    """Unit tests for JWTHandler."""

    def _user(self, role: UserRole = UserRole.USER) -> User:
        return User(
            name="Alice", email="alice@example.com", password_hash="h", role=role
        )

    def test_issue_and_verify(self):
        handler = JWTHandler(secret_key=SECRET, expiration_hours=2)
        user = self._user(UserRole.ADMIN)

        claims = handler.verify(handler.issue(user))

        assert claims.user_id == user.id
        assert claims.role == UserRole.ADMIN
        lifetime = claims.expires_at - claims.issued_at
        assert lifetime == timedelta(hours=2)

    def test_token_payload(self):
        handler = JWTHandler(secret_key=SECRET)
        user = self._user()

        payload = jwt.decode(handler.issue(user), SECRET, algorithms=["HS256"])

        assert payload["sub"] == str(user.id)
        assert payload["role"] == "user"
        assert payload["type"] == "access"

    def test_expired_token(self):
        handler = JWTHandler(secret_key=SECRET)
        past = datetime.now(timezone.utc) - timedelta(hours=1)
        token = jwt.encode(
            {
                "sub": str(self._user().id),
                "role": "user",
                "iat": past - timedelta(hours=1),
                "exp": past,
                "type": "access",
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(ExpiredTokenError):
            handler.verify(token)

    def test_wrong_secret(self):
        token = JWTHandler(secret_key="other-secret").issue(self._user())

        with pytest.raises(InvalidTokenError):
            JWTHandler(secret_key=SECRET).verify(token)

    def test_garbage_token(self):
        with pytest.raises(InvalidTokenError):
            JWTHandler(secret_key=SECRET).verify("not.a.jwt")

    def test_wrong_token_type(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {
                "sub": str(self._user().id),
                "role": "user",
                "iat": now,
                "exp": now + timedelta(hours=1),
                "type": "refresh",
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            JWTHandler(secret_key=SECRET).verify(token)

    def test_malformed_subject(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {
                "sub": "not-a-uuid",
                "role": "user",
                "iat": now,
                "exp": now + timedelta(hours=1),
                "type": "access",
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            JWTHandler(secret_key=SECRET).verify(token)

    def test_requires_secret(self):
        with pytest.raises(ValueError):
            JWTHandler(secret_key="")
