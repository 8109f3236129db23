"""
Unit tests for exception-to-response mapping.
"""

import json
from unittest.mock import MagicMock

from etherstake.domain.exceptions import (
    ConcurrentModificationError,
    DuplicateEntityError,
    EntityNotFoundError,
    EtherStakeException,
    InsufficientRoleError,
    InvalidCredentialsError,
    StakeTermNotElapsedError,
    ValidationError,
)
from etherstake.presentation.api.middleware.error_handler import (
    etherstake_exception_handler,
    unhandled_exception_handler,
)


def _request(is_development: bool = False) -> MagicMock:
    request = MagicMock()
    request.url.path = "/api/staking"
    request.method = "POST"
    request.app.state.container.settings.is_development = is_development
    return request


def _body(response) -> dict:
    return json.loads(response.body)


class TestEtherStakeExceptionHandler:
    """Unit tests for domain exception handler."""

    async def test_validation_error(self):
        response = await etherstake_exception_handler(
            _request(), ValidationError("amount", "must be greater than 0")
        )

        assert response.status_code == 422
        body = _body(response)
        assert body["error"] == "VALIDATION_ERROR"
        assert body["field"] == "amount"
        assert "amount" in body["message"]

    async def test_not_found(self):
        response = await etherstake_exception_handler(
            _request(), EntityNotFoundError("Stake", "abc")
        )

        assert response.status_code == 404
        assert _body(response)["error"] == "ENTITY_NOT_FOUND"

    async def test_conflicts(self):
        duplicate = await etherstake_exception_handler(
            _request(), DuplicateEntityError("User", "email a@example.com")
        )
        concurrent = await etherstake_exception_handler(
            _request(), ConcurrentModificationError("Stake", "abc")
        )

        assert duplicate.status_code == 409
        assert concurrent.status_code == 409
        assert _body(concurrent)["error"] == "CONCURRENT_MODIFICATION"

    async def test_authentication_sets_bearer_challenge(self):
        response = await etherstake_exception_handler(
            _request(), InvalidCredentialsError()
        )

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    async def test_forbidden(self):
        response = await etherstake_exception_handler(
            _request(), InsufficientRoleError("admin")
        )

        assert response.status_code == 403
        assert _body(response)["error"] == "FORBIDDEN"

    async def test_invalid_state(self):
        response = await etherstake_exception_handler(
            _request(), StakeTermNotElapsedError()
        )

        assert response.status_code == 400
        assert _body(response)["message"] == "Stake term not yet elapsed"

    async def test_unknown_code_is_server_error(self):
        response = await etherstake_exception_handler(
            _request(), EtherStakeException("odd", code="SOMETHING_ELSE")
        )

        assert response.status_code == 500


class TestUnhandledExceptionHandler:
    """Unit tests for the catch-all handler."""

    async def test_hides_trace_outside_development(self):
        response = await unhandled_exception_handler(
            _request(is_development=False), RuntimeError("boom")
        )

        body = _body(response)
        assert response.status_code == 500
        assert body["error"] == "INTERNAL_ERROR"
        assert "trace" not in body

    async def test_includes_trace_in_development(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError as exc:
            response = await unhandled_exception_handler(
                _request(is_development=True), exc
            )

        body = _body(response)
        assert response.status_code == 500
        assert any("RuntimeError: boom" in line for line in body["trace"])
