"""
Unit tests for settings loading.
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from etherstake.config.settings import (
    Settings,
    get_settings,
    load_config,
    override_settings,
    reset_settings,
)


@pytest.fixture
def required_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("JWT_SECRET_KEY", "from-env")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("BCRYPT_ROUNDS", raising=False)
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.delenv("REDIS_ENABLED", raising=False)


class TestLoadConfig:
    """Unit tests for load_config."""

    def test_test_profile_from_yaml(self, required_env):
        settings = load_config(env="test")

        assert settings.ENV == "test"
        assert settings.BCRYPT_ROUNDS == 10
        assert settings.REDIS_ENABLED is False
        assert settings.JWT_SECRET_KEY == "from-env"
        assert settings.STAKING_REWARD_RATE == Decimal("0.01")

    def test_environment_beats_yaml(self, required_env, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "error")

        settings = load_config(env="test")

        assert settings.LOG_LEVEL == "ERROR"


class TestSettings:
    """Unit tests for Settings validation."""

    def _settings(self, **overrides) -> Settings:
        data = {"DATABASE_URL": "sqlite+aiosqlite:///x.db", "JWT_SECRET_KEY": "k"}
        data.update(overrides)
        return Settings(**data)

    def test_rejects_unknown_env(self):
        with pytest.raises(ValidationError):
            self._settings(ENV="staging")

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            self._settings(LOG_LEVEL="LOUD")

    def test_bcrypt_rounds_floor(self):
        with pytest.raises(ValidationError):
            self._settings(BCRYPT_ROUNDS=4)

    def test_rejects_asymmetric_jwt_algorithm(self):
        with pytest.raises(ValidationError):
            self._settings(JWT_ALGORITHM="RS256")

    def test_rejects_empty_jwt_secret(self):
        with pytest.raises(ValidationError):
            self._settings(JWT_SECRET_KEY="")

    def test_is_development(self):
        assert self._settings(ENV="development").is_development is True
        assert self._settings(ENV="production").is_development is False
        assert self._settings(ENV="production", DEBUG=True).is_development is True

    def test_override_and_reset(self):
        custom = self._settings(APP_NAME="Custom")
        override_settings(custom)

        try:
            assert get_settings() is custom
        finally:
            reset_settings()
