"""
Prometheus instrumentation for HTTP traffic.
"""

import time
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from etherstake.infrastructure.monitoring import metrics

# Not worth a time series of their own
_UNTRACKED_PATHS = frozenset({"/metrics"})


def _endpoint_label(request: Request) -> str:
    """Route template (e.g. /api/staking/{stake_id}) rather than raw path."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


def _status_class(status_code: int) -> Optional[str]:
    if status_code >= 500:
        return "server_error"
    if status_code >= 400:
        return "client_error"
    return None


class MetricsMiddleware(BaseHTTPMiddleware):
    """
    Count requests, time them and classify failures.

    Labels use the matched route template so per-stake URLs collapse
    into one series. An exception escaping the app is counted under its
    class name and re-raised.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in _UNTRACKED_PATHS:
            return await call_next(request)

        method = request.method
        started = time.perf_counter()
        metrics.http_requests_in_progress.labels(method=method).inc()

        try:
            response = await call_next(request)
        except Exception as e:
            self._observe(request, started, status="500", error_type=type(e).__name__)
            raise
        finally:
            metrics.http_requests_in_progress.labels(method=method).dec()

        self._observe(
            request,
            started,
            status=str(response.status_code),
            error_type=_status_class(response.status_code),
        )
        return response

    @staticmethod
    def _observe(
        request: Request,
        started: float,
        status: str,
        error_type: Optional[str],
    ) -> None:
        method = request.method
        endpoint = _endpoint_label(request)

        metrics.http_request_duration_seconds.labels(
            method=method, endpoint=endpoint
        ).observe(time.perf_counter() - started)
        metrics.http_requests_total.labels(
            method=method, endpoint=endpoint, status=status
        ).inc()

        if error_type:
            metrics.http_errors_total.labels(
                method=method, endpoint=endpoint, error_type=error_type
            ).inc()
