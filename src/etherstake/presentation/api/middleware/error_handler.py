"""
Global error handling.
"""

import traceback

from fastapi import Request, status
from fastapi.responses import JSONResponse

from etherstake.domain.exceptions import EtherStakeException, ValidationError
from etherstake.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

STATUS_CODE_MAP = {
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "ENTITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DUPLICATE_ENTITY": status.HTTP_409_CONFLICT,
    "AUTHENTICATION_ERROR": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "INVALID_STATE": status.HTTP_400_BAD_REQUEST,
    "CONCURRENT_MODIFICATION": status.HTTP_409_CONFLICT,
}


async def etherstake_exception_handler(
    request: Request, exc: EtherStakeException
) -> JSONResponse:
    """
    Handle EtherStake domain exceptions.

    Converts domain exceptions to appropriate HTTP responses.
    """
    status_code = STATUS_CODE_MAP.get(
        exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )

    content = {
        "error": exc.code,
        "message": exc.message,
    }
    if isinstance(exc, ValidationError):
        content["field"] = exc.field

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    logger.warning(
        f"{exc.code}: {exc.message}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": status_code,
        },
    )

    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle anything that is not a domain exception as a 500.

    Stack traces are only returned in development.
    """
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
        exc_info=(type(exc), exc, exc.__traceback__),
    )

    content = {
        "error": "INTERNAL_ERROR",
        "message": "Internal server error",
    }

    container = getattr(request.app.state, "container", None)
    if container is not None and container.settings.is_development:
        content["trace"] = traceback.format_exception(
            type(exc), exc, exc.__traceback__
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
    )
