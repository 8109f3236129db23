"""
API middleware and request-level dependencies.
"""

from etherstake.presentation.api.middleware.auth import (
    get_current_user,
    require_admin,
)
from etherstake.presentation.api.middleware.error_handler import (
    etherstake_exception_handler,
    unhandled_exception_handler,
)
from etherstake.presentation.api.middleware.metrics_middleware import (
    MetricsMiddleware,
)
from etherstake.presentation.api.middleware.rate_limit_middleware import (
    RateLimitMiddleware,
)
from etherstake.presentation.api.middleware.request_id_middleware import (
    RequestIDMiddleware,
)

__all__ = [
    "MetricsMiddleware",
    "RateLimitMiddleware",
    "RequestIDMiddleware",
    "etherstake_exception_handler",
    "get_current_user",
    "require_admin",
    "unhandled_exception_handler",
]
