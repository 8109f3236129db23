"""
Unit tests for RateLimiter.

Tests sliding window rate limiting algorithm.
"""

from unittest.mock import AsyncMock

from etherstake.infrastructure.rate_limiting.rate_limiter import (
    WINDOW_SECONDS,
    RateLimitDecision,
    RateLimiter,
)

NOW = 1_750_000_000.0


class TestRateLimiter:
    """Unit tests for RateLimiter."""

    # ================================================================
    # Helper Methods
    # ================================================================

    def _create_mock_cache(self, current_count: int) -> AsyncMock:
        """Create mock cache client reporting current_count requests."""
        mock_cache = AsyncMock()
        mock_cache.count_since.return_value = current_count
        return mock_cache

    def _create_rate_limiter(
        self, cache: AsyncMock, rpm: int = 60, burst: int = 10
    ) -> RateLimiter:
        return RateLimiter(
            cache_client=cache,
            default_requests_per_minute=rpm,
            default_burst_size=burst,
            clock=lambda: NOW,
        )

    # ================================================================
    # Test Methods
    # ================================================================

    async def test_allows_first_request(self):
        mock_cache = self._create_mock_cache(0)
        rate_limiter = self._create_rate_limiter(mock_cache)

        decision = await rate_limiter.check_rate_limit("user:1", "/api/staking")

        assert decision.allowed is True
        assert decision.limit == 70
        assert decision.remaining == 69
        assert decision.reset == int(NOW + WINDOW_SECONDS)
        assert decision.retry_after is None
        mock_cache.count_since.assert_awaited_once_with(
            "ratelimit:user:1:/api/staking", NOW - WINDOW_SECONDS
        )
        mock_cache.add_scored.assert_awaited_once()
        assert mock_cache.add_scored.await_args.kwargs["score"] == NOW

    async def test_last_slot_in_burst(self):
        rate_limiter = self._create_rate_limiter(self._create_mock_cache(69))

        decision = await rate_limiter.check_rate_limit("user:1", "/api/staking")

        assert decision.allowed is True
        assert decision.remaining == 0

    async def test_blocks_over_limit(self):
        mock_cache = self._create_mock_cache(70)
        rate_limiter = self._create_rate_limiter(mock_cache)

        decision = await rate_limiter.check_rate_limit("ip:10.0.0.1", "/")

        assert decision.allowed is False
        assert decision.remaining == 0
        assert decision.retry_after == WINDOW_SECONDS
        mock_cache.add_scored.assert_not_awaited()

    async def test_custom_limits(self):
        rate_limiter = self._create_rate_limiter(self._create_mock_cache(5))

        decision = await rate_limiter.check_rate_limit(
            "user:1", "/api/auth/login", requests_per_minute=5, burst_size=0
        )

        assert decision.allowed is False
        assert decision.limit == 5


class TestRateLimitDecision:
    """Unit tests for RateLimitDecision headers."""

    def test_allowed_headers(self):
        decision = RateLimitDecision(allowed=True, limit=70, remaining=3, reset=100)

        assert decision.headers() == {
            "X-RateLimit-Limit": "70",
            "X-RateLimit-Remaining": "3",
            "X-RateLimit-Reset": "100",
        }

    def test_rejected_headers_include_retry_after(self):
        decision = RateLimitDecision(
            allowed=False, limit=70, remaining=0, reset=100, retry_after=60
        )

        assert decision.headers()["Retry-After"] == "60"
