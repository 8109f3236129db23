"""
Monitoring and observability infrastructure.
"""

from etherstake.infrastructure.monitoring import metrics
from etherstake.infrastructure.monitoring.logger import (
    get_logger,
    get_request_id,
    set_request_id,
    set_user_id,
    setup_logging,
)

__all__ = [
    "metrics",
    "get_logger",
    "get_request_id",
    "set_request_id",
    "set_user_id",
    "setup_logging",
]
