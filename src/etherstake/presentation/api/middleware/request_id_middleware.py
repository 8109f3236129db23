"""
Request correlation and access logging.
"""

import re
import time
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from etherstake.infrastructure.monitoring.logger import get_logger, set_request_id

logger = get_logger("etherstake.access")

REQUEST_ID_HEADER = "X-Request-ID"

# Caller-supplied IDs end up in log lines; accept only plain tokens
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")


def _incoming_request_id(request: Request) -> Optional[str]:
    value = request.headers.get(REQUEST_ID_HEADER)
    if value and _VALID_REQUEST_ID.match(value):
        return value
    return None


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Bind a request ID to the logging context and echo it back.

    A well-formed incoming X-Request-ID is reused; anything else is
    replaced by a fresh UUID. One access line is logged per request.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = set_request_id(_incoming_request_id(request))
        started = time.perf_counter()

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "%s %s -> %d",
            request.method,
            request.url.path,
            response.status_code,
            extra={
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return response
