"""
Logging configuration with per-request context.

Every record carries the current request ID and, once the caller is
authenticated, the user ID. Production emits one JSON object per line;
other environments use a plain pipe-separated format.
"""

import json
import logging
import sys
from contextvars import ContextVar
from typing import Any, Optional
from uuid import uuid4

request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
user_id_ctx: ContextVar[Optional[str]] = ContextVar("user_id", default=None)

# Attributes every LogRecord carries; anything else came in via extra=
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "taskName", "request_id", "user_id"}

PLAIN_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(request_id)s | %(message)s"
)

# Third-party loggers that are too chatty at INFO
_QUIET_LOGGERS = {
    "asyncio": logging.WARNING,
    "passlib": logging.ERROR,
    "httpx": logging.WARNING,
    "sqlalchemy.engine.Engine": logging.WARNING,
}


class RequestContextFilter(logging.Filter):
    """Stamp request_id and user_id from the current context onto records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx.get() or "-"
        record.user_id = user_id_ctx.get()
        return True


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Fields passed with extra= (stake_id, amount, ...) are copied to the
    top level next to the fixed schema.
    """

    def __init__(self, service: str, env: str):
        super().__init__(datefmt="%Y-%m-%dT%H:%M:%S")
        self.service = service
        self.env = env

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "service": self.service,
            "env": self.env,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }

        user_id = getattr(record, "user_id", None)
        if user_id:
            log_data["user_id"] = user_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value

        log_data["source"] = f"{record.module}:{record.lineno}"

        return json.dumps(log_data, default=str)


def setup_logging(
    level: str = "INFO",
    json_logs: bool = True,
    service: str = "etherstake",
    env: str = "production",
) -> None:
    """
    Configure the root logger for the process.

    Replaces any handlers already installed, so calling it again (one app
    per test) does not duplicate output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_logs: Use JSON format (True) or plain text (False)
        service: Service name stamped on JSON records
        env: Environment name stamped on JSON records
    """
    log_level = getattr(logging, level.upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.addFilter(RequestContextFilter())

    if json_logs:
        handler.setFormatter(JSONFormatter(service=service, env=env))
    else:
        handler.setFormatter(
            logging.Formatter(PLAIN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(max(quiet_level, log_level))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def set_request_id(request_id: Optional[str] = None) -> str:
    """
    Bind a request ID to the current context.

    Args:
        request_id: Incoming X-Request-ID (a UUID is generated if None)

    Returns:
        Request ID that was set
    """
    if not request_id:
        request_id = str(uuid4())
    request_id_ctx.set(request_id)
    user_id_ctx.set(None)
    return request_id


def get_request_id() -> Optional[str]:
    return request_id_ctx.get()


def set_user_id(user_id: Optional[str]) -> None:
    """Bind the authenticated user to the current context."""
    user_id_ctx.set(str(user_id) if user_id else None)
