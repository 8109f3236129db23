"""
Application settings with environment-based configuration.

Values are resolved in this order, first match wins:

    environment variables (system or .env.<env>)
    config/<env>.yaml
    config/default.yaml
    field defaults below
"""

import os
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Repository root: src/etherstake/config/settings.py -> ../../../..
PROJECT_ROOT = Path(__file__).resolve().parents[3]
CONFIG_DIR = PROJECT_ROOT / "config"

# env name -> (dotenv file, yaml profile)
ENV_PROFILES: Dict[str, Tuple[str, str]] = {
    "production": (".env.production", "production.yaml"),
    "development": (".env.development", "development.yaml"),
    "test": (".env.test", "test.yaml"),
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_JWT_ALGORITHMS = ("HS256", "HS384", "HS512")


class Settings(BaseSettings):
    """
    EtherStake service settings.

    DATABASE_URL and JWT_SECRET_KEY have no default and must be supplied
    through the environment; YAML profiles only carry non-secret tuning.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )

    # Service
    APP_NAME: str = "EtherStake"
    APP_VERSION: str = "0.1.0"
    ENV: str = Field(default="development")
    DEBUG: bool = False

    # HTTP
    API_HOST: str = "0.0.0.0"
    API_PORT: int = Field(default=5000, ge=1024, le=65535)
    API_RELOAD: bool = False
    CORS_ORIGINS: List[str] = Field(default=["http://localhost:3000"])

    # Persistence
    DATABASE_URL: str = Field(..., description="SQLAlchemy async URL")
    DATABASE_ECHO: bool = False

    # Tokens and passwords
    JWT_SECRET_KEY: str = Field(..., min_length=1)
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_HOURS: int = Field(default=24, ge=1)
    BCRYPT_ROUNDS: int = Field(default=12, ge=10, le=15)

    # Staking economics
    STAKING_REWARD_RATE: Decimal = Field(
        default=Decimal("0.01"),
        gt=0,
        description="Nominal annual reward rate (0.01 = 1% APY)",
    )
    STAKING_PENALTY_RATE: Decimal = Field(
        default=Decimal("0.05"),
        ge=0,
        description="Penalty rate applied to the unexpired term on cancel",
    )

    # Redis (cache and rate-limit counters)
    REDIS_ENABLED: bool = False
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = Field(default=6379, ge=1024, le=65535)
    REDIS_DB: int = Field(default=0, ge=0, le=15)
    REDIS_PASSWORD: Optional[str] = None

    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_REQUESTS_PER_MINUTE: int = Field(default=60, ge=1)
    RATE_LIMIT_BURST_SIZE: int = Field(default=10, ge=0)

    # Observability
    LOG_LEVEL: str = "INFO"
    METRICS_ENABLED: bool = True

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {_LOG_LEVELS}, got {v!r}")
        return level

    @field_validator("ENV")
    @classmethod
    def validate_env(cls, v: str) -> str:
        env = v.lower()
        if env not in ENV_PROFILES:
            raise ValueError(f"ENV must be one of {tuple(ENV_PROFILES)}, got {v!r}")
        return env

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        """Only symmetric HMAC algorithms fit a single shared secret."""
        if v not in _JWT_ALGORITHMS:
            raise ValueError(f"JWT_ALGORITHM must be one of {_JWT_ALGORITHMS}")
        return v

    @property
    def is_development(self) -> bool:
        """True when diagnostic detail may be exposed to API callers."""
        return self.DEBUG or self.ENV == "development"


def _read_yaml(path: Path) -> Dict[str, Any]:
    """Return the mapping stored in a YAML file, or {} if absent or empty."""
    if not path.exists():
        return {}

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path.name} must contain a mapping at top level")
    return data


def load_config(
    config_file: Optional[str] = None,
    env_file: Optional[str] = None,
    env: Optional[str] = None,
) -> Settings:
    """
    Build Settings from the profile for an environment.

    Args:
        config_file: YAML file under config/ (defaults to the env profile)
        env_file: dotenv file under the project root (defaults to the
            env profile)
        env: Environment name; falls back to $ENV, then "production"

    Returns:
        Settings instance

    Raises:
        ValidationError: If a required value is missing or invalid
    """
    environment = (env or os.getenv("ENV") or "production").lower()
    profile_env_file, profile_config_file = ENV_PROFILES.get(
        environment, ENV_PROFILES["production"]
    )

    dotenv_path = PROJECT_ROOT / (env_file or profile_env_file)
    if dotenv_path.exists():
        load_dotenv(dotenv_path, override=True)

    values = _read_yaml(CONFIG_DIR / "default.yaml")
    values.update(_read_yaml(CONFIG_DIR / (config_file or profile_config_file)))

    # Init kwargs outrank the environment in pydantic-settings, so drop
    # YAML keys the environment already provides.
    values = {key: value for key, value in values.items() if key not in os.environ}

    return Settings(**values)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Process-wide settings, loaded on first use."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: Settings) -> None:
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    global _settings
    _settings = None
