"""
Unit tests for logging context and JSON formatting.
"""

import json
import logging

from etherstake.infrastructure.monitoring.logger import (
    JSONFormatter,
    RequestContextFilter,
    get_request_id,
    set_request_id,
    set_user_id,
)


def _record(msg: str = "Stake created", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "etherstake.test", logging.INFO, __file__, 42, msg, (), None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestRequestContext:
    """Unit tests for request/user context binding."""

    def test_set_request_id_generates_when_missing(self):
        generated = set_request_id(None)

        assert generated
        assert get_request_id() == generated

    def test_set_request_id_keeps_incoming(self):
        assert set_request_id("req-1") == "req-1"

    def test_filter_stamps_context(self):
        set_request_id("req-2")
        set_user_id("user-9")
        record = _record()

        RequestContextFilter().filter(record)

        assert record.request_id == "req-2"
        assert record.user_id == "user-9"

    def test_new_request_clears_user(self):
        set_user_id("user-9")
        set_request_id("req-3")
        record = _record()

        RequestContextFilter().filter(record)

        assert record.user_id is None


class TestJSONFormatter:
    """Unit tests for JSONFormatter."""

    def test_schema_and_extra_fields(self):
        set_request_id("req-4")
        set_user_id("user-1")
        record = _record(stake_id="abc", amount="1000.000000")
        RequestContextFilter().filter(record)

        data = json.loads(JSONFormatter(service="etherstake", env="test").format(record))

        assert data["message"] == "Stake created"
        assert data["level"] == "INFO"
        assert data["service"] == "etherstake"
        assert data["env"] == "test"
        assert data["request_id"] == "req-4"
        assert data["user_id"] == "user-1"
        assert data["stake_id"] == "abc"
        assert data["amount"] == "1000.000000"
        assert data["source"].endswith(":42")
