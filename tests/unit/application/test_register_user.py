"""
Unit tests for RegisterUser use case.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from etherstake.application.use_cases.register_user import (
    RegisterUser,
    RegisterUserCommand,
)
from etherstake.domain.entities.user import User, UserRole
from etherstake.domain.exceptions import DuplicateEntityError, ValidationError
from helpers import make_wallet


class TestRegisterUser:
    """Unit tests for RegisterUser use case."""

    # ================================================================
    # Helper Methods
    # ================================================================

    def _create_use_case(self, user_repo: AsyncMock) -> RegisterUser:
        hasher = MagicMock()
        hasher.hash.return_value = "hashed-password"
        token_service = MagicMock()
        token_service.issue.return_value = "jwt-token"
        return RegisterUser(
            user_repository=user_repo,
            password_hasher=hasher,
            token_service=token_service,
        )

    def _create_repo(self) -> AsyncMock:
        user_repo = AsyncMock()
        user_repo.get_by_email.return_value = None
        user_repo.get_by_wallet.return_value = None
        user_repo.create.side_effect = lambda user: user
        return user_repo

    # ================================================================
    # Test Methods
    # ================================================================

    async def test_register_success(self):
        user_repo = self._create_repo()
        use_case = self._create_use_case(user_repo)
        wallet = make_wallet()

        result = await use_case.execute(
            RegisterUserCommand(
                name="Alice",
                email="Alice@Example.com",
                password="long-enough",
                wallet_address=wallet,
            )
        )

        assert result.token == "jwt-token"
        assert result.user.email == "alice@example.com"
        assert result.user.role == UserRole.USER
        assert result.user.password_hash == "hashed-password"
        assert result.user.wallet_address == wallet
        user_repo.create.assert_awaited_once()

    async def test_register_without_wallet(self):
        user_repo = self._create_repo()
        use_case = self._create_use_case(user_repo)

        result = await use_case.execute(
            RegisterUserCommand(
                name="Bob", email="bob@example.com", password="long-enough"
            )
        )

        assert result.user.wallet_address is None
        user_repo.get_by_wallet.assert_not_awaited()

    async def test_duplicate_email_rejected(self):
        user_repo = self._create_repo()
        user_repo.get_by_email.return_value = User(
            name="Existing", email="alice@example.com", password_hash="x"
        )
        use_case = self._create_use_case(user_repo)

        with pytest.raises(DuplicateEntityError):
            await use_case.execute(
                RegisterUserCommand(
                    name="Alice", email="alice@example.com", password="long-enough"
                )
            )

        user_repo.create.assert_not_awaited()

    async def test_duplicate_wallet_rejected(self):
        wallet = make_wallet()
        user_repo = self._create_repo()
        user_repo.get_by_wallet.return_value = User(
            name="Existing",
            email="other@example.com",
            password_hash="x",
            wallet_address=wallet,
        )
        use_case = self._create_use_case(user_repo)

        with pytest.raises(DuplicateEntityError):
            await use_case.execute(
                RegisterUserCommand(
                    name="Alice",
                    email="alice@example.com",
                    password="long-enough",
                    wallet_address=wallet,
                )
            )

    async def test_short_password_rejected(self):
        user_repo = self._create_repo()
        use_case = self._create_use_case(user_repo)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                RegisterUserCommand(
                    name="Alice", email="alice@example.com", password="short"
                )
            )

        assert exc_info.value.field == "password"
        user_repo.get_by_email.assert_not_awaited()

    async def test_invalid_wallet_rejected(self):
        user_repo = self._create_repo()
        use_case = self._create_use_case(user_repo)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                RegisterUserCommand(
                    name="Alice",
                    email="alice@example.com",
                    password="long-enough",
                    wallet_address="0xnope",
                )
            )

        assert exc_info.value.field == "wallet_address"
