"""API routes."""

from etherstake.presentation.api.routes import auth, health, staking, users

__all__ = [
    "auth",
    "health",
    "staking",
    "users",
]
