"""
Unit tests for User entity.
"""

from uuid import uuid4

import pytest

from etherstake.domain.entities.user import User, UserRole, validate_password
from etherstake.domain.exceptions import ValidationError
from helpers import make_wallet


class TestUser:
    """Unit tests for User entity."""

    # ================================================================
    # Helper Methods
    # ================================================================

    def _create_user(self, **overrides) -> User:
        data = {
            "name": "Alice",
            "email": "alice@example.com",
            "password_hash": "$2b$10$hash",
        }
        data.update(overrides)
        return User(**data)

    # ================================================================
    # Test Methods
    # ================================================================

    def test_defaults(self):
        user = self._create_user()

        assert user.role == UserRole.USER
        assert user.is_admin() is False
        assert user.is_email_verified is False
        assert user.wallet_address is None
        assert user.stake_ids == []

    def test_email_is_normalized(self):
        user = self._create_user(email="  Alice@Example.COM ")

        assert user.email == "alice@example.com"

    def test_name_is_trimmed_and_required(self):
        assert self._create_user(name="  Bob  ").name == "Bob"

        with pytest.raises(ValidationError) as exc_info:
            self._create_user(name="   ")

        assert exc_info.value.field == "name"

    def test_rejects_invalid_email(self):
        with pytest.raises(ValidationError) as exc_info:
            self._create_user(email="not-an-email")

        assert exc_info.value.field == "email"

    def test_requires_password_hash(self):
        with pytest.raises(ValidationError):
            self._create_user(password_hash="")

    def test_rejects_invalid_wallet(self):
        with pytest.raises(ValidationError) as exc_info:
            self._create_user(wallet_address="0x1234")

        assert exc_info.value.field == "wallet_address"

    def test_owns_wallet_ignores_case(self):
        wallet = "0xABCDEF0000000000000000000000000000000001"
        user = self._create_user(wallet_address=wallet)

        assert user.owns_wallet(wallet.lower()) is True
        assert user.owns_wallet(make_wallet()) is False

    def test_owns_wallet_without_registered_wallet(self):
        assert self._create_user().owns_wallet(make_wallet()) is False

    def test_add_stake_appends_once(self):
        user = self._create_user()
        stake_id = uuid4()

        user.add_stake(stake_id)
        user.add_stake(stake_id)

        assert user.stake_ids == [stake_id]

    def test_update_profile(self):
        user = self._create_user()
        wallet = make_wallet()

        user.update_profile(name="Alice Cooper", wallet_address=wallet)

        assert user.name == "Alice Cooper"
        assert user.wallet_address == wallet

    def test_update_profile_rejects_blank_name(self):
        user = self._create_user()

        with pytest.raises(ValidationError):
            user.update_profile(name="  ")

        assert user.name == "Alice"

    def test_change_role(self):
        user = self._create_user()

        user.change_role(UserRole.ADMIN)

        assert user.is_admin() is True

    def test_to_dict_omits_password_hash(self):
        data = self._create_user().to_dict()

        assert "password_hash" not in data
        assert data["role"] == "user"


class TestValidatePassword:
    """Unit tests for password policy."""

    def test_accepts_eight_characters(self):
        validate_password("12345678")

    def test_rejects_short_password(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_password("1234567")

        assert exc_info.value.field == "password"
