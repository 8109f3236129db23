"""
Dependency Injection module for EtherStake.

Provides container and dependency functions for FastAPI routes.
"""

from etherstake.di.container import DIContainer
from etherstake.di.dependencies import get_container, get_db_session

__all__ = [
    "DIContainer",
    "get_container",
    "get_db_session",
]
