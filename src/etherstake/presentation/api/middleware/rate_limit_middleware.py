"""
Rate limiting middleware.

Authenticated callers are limited per user ID, anonymous ones per client
IP. Credential endpoints get a fixed, tighter budget per caller.
"""

from typing import Dict, Optional, Tuple

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from etherstake.domain.exceptions import AuthenticationError
from etherstake.domain.services.i_token_service import ITokenService
from etherstake.infrastructure.monitoring import metrics
from etherstake.infrastructure.rate_limiting.rate_limiter import RateLimiter

EXEMPT_ENDPOINTS = frozenset(
    {"/", "/health", "/metrics", "/docs", "/redoc", "/openapi.json"}
)

# endpoint -> (requests per minute, burst)
ENDPOINT_LIMITS: Dict[str, Tuple[int, int]] = {
    "/api/auth/login": (10, 0),
    "/api/auth/register": (10, 0),
}


def normalize_endpoint(path: str) -> str:
    """Collapse UUID and numeric path segments so /api/staking/<id> shares one window."""
    segments = []
    for segment in path.rstrip("/").split("/"):
        is_uuid = len(segment) == 36 and segment.count("-") == 4
        segments.append(":id" if is_uuid or segment.isdigit() else segment)
    return "/".join(segments) or "/"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject over-budget requests with 429 and tag the rest with X-RateLimit-* headers."""

    def __init__(
        self,
        app,
        rate_limiter: RateLimiter,
        token_service: ITokenService,
    ):
        super().__init__(app)
        self.rate_limiter = rate_limiter
        self.token_service = token_service

    async def dispatch(self, request: Request, call_next):
        if request.url.path in EXEMPT_ENDPOINTS:
            return await call_next(request)

        identifier = self._identify(request)
        endpoint = normalize_endpoint(request.url.path)
        rpm, burst = ENDPOINT_LIMITS.get(endpoint, (None, None))

        decision = await self.rate_limiter.check_rate_limit(
            identifier=identifier,
            endpoint=endpoint,
            requests_per_minute=rpm,
            burst_size=burst,
        )

        if not decision.allowed:
            metrics.rate_limit_rejections_total.labels(
                identifier_type=identifier.split(":", 1)[0]
            ).inc()
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={
                    "error": "RATE_LIMIT_EXCEEDED",
                    "message": "Too many requests. Please try again later.",
                    "retry_after": decision.retry_after,
                },
                headers=decision.headers(),
            )

        response = await call_next(request)
        response.headers.update(decision.headers())
        return response

    def _identify(self, request: Request) -> str:
        user_id = self._bearer_user_id(request)
        if user_id:
            return f"user:{user_id}"

        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return f"ip:{forwarded_for.split(',')[0].strip()}"
        return f"ip:{request.client.host if request.client else 'unknown'}"

    def _bearer_user_id(self, request: Request) -> Optional[str]:
        scheme, _, token = request.headers.get("Authorization", "").partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            return None
        try:
            return str(self.token_service.verify(token.strip()).user_id)
        except AuthenticationError:
            # Invalid tokens are rejected later by the auth dependency
            return None
