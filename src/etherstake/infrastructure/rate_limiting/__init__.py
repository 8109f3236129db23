"""
Rate limiting infrastructure.
"""

from etherstake.infrastructure.rate_limiting.rate_limiter import (
    RateLimitDecision,
    RateLimiter,
)

__all__ = ["RateLimitDecision", "RateLimiter"]
