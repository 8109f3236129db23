"""
Sliding-window rate limiter backed by the shared cache.

Every accepted request is stored as a member of a sorted set scored by
its unix time, so all API instances see the same window.
"""

import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional
from uuid import uuid4

from etherstake.infrastructure.cache.i_cache_client import ICacheClient

WINDOW_SECONDS = 60


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of one limiter check."""

    allowed: bool
    limit: int
    remaining: int
    reset: int
    retry_after: Optional[int] = None

    def headers(self) -> Dict[str, str]:
        """X-RateLimit-* headers, plus Retry-After when rejected."""
        values = {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(self.remaining),
            "X-RateLimit-Reset": str(self.reset),
        }
        if self.retry_after is not None:
            values["Retry-After"] = str(self.retry_after)
        return values


class RateLimiter:
    """
    Per-client, per-endpoint request budget.

    A client gets requests_per_minute + burst_size requests inside any
    rolling 60 second window. Rejected requests do not consume budget.
    """

    def __init__(
        self,
        cache_client: ICacheClient,
        default_requests_per_minute: int = 60,
        default_burst_size: int = 10,
        clock: Callable[[], float] = time.time,
    ):
        """
        Args:
            cache_client: Shared cache holding the windows
            default_requests_per_minute: Budget when the caller gives none
            default_burst_size: Extra requests allowed on top of the budget
            clock: Source of current unix time
        """
        self.cache = cache_client
        self.default_rpm = default_requests_per_minute
        self.default_burst = default_burst_size
        self.clock = clock

    @staticmethod
    def window_key(identifier: str, endpoint: str) -> str:
        return f"ratelimit:{identifier}:{endpoint}"

    async def check_rate_limit(
        self,
        identifier: str,
        endpoint: str,
        requests_per_minute: Optional[int] = None,
        burst_size: Optional[int] = None,
    ) -> RateLimitDecision:
        """
        Decide whether a request fits the window, recording it if so.

        Args:
            identifier: "user:<id>" or "ip:<address>"
            endpoint: Normalized endpoint path
            requests_per_minute: Override of the default budget
            burst_size: Override of the default burst (0 disables burst)

        Returns:
            RateLimitDecision for this request
        """
        rpm = requests_per_minute or self.default_rpm
        burst = self.default_burst if burst_size is None else burst_size
        limit = rpm + burst

        key = self.window_key(identifier, endpoint)
        now = self.clock()
        reset = int(now + WINDOW_SECONDS)

        used = await self.cache.count_since(key, now - WINDOW_SECONDS)

        if used >= limit:
            return RateLimitDecision(
                allowed=False,
                limit=limit,
                remaining=0,
                reset=reset,
                retry_after=WINDOW_SECONDS,
            )

        await self.cache.add_scored(
            key,
            member=f"{now}:{uuid4().hex[:8]}",
            score=now,
            expire_seconds=WINDOW_SECONDS * 2,
        )
        return RateLimitDecision(
            allowed=True,
            limit=limit,
            remaining=limit - used - 1,
            reset=reset,
        )

