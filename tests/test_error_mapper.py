from __future__ import annotations

import pytest

from livestock_console.error_mapper import map_error
from livestock_console.exceptions import (
    EndpointNotFoundError,
    ForbiddenError,
    HttpError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
)
from livestock_console.ui_errors import to_user_facing_error


@pytest.mark.parametrize(
    ("status", "error_type", "snippet"),
    [
        (401, UnauthorizedError, "Unauthorized"),
        (403, ForbiddenError, "Forbidden"),
        (404, EndpointNotFoundError, "Endpoint not found"),
        (500, ServerError, "Server error"),
    ],
)
def test_known_statuses_map_to_fixed_messages(status: int, error_type: type, snippet: str) -> None:
    err = map_error(status, {"message": "backend text"}, "trace")
    assert isinstance(err, error_type)
    assert isinstance(err, HttpError)
    assert snippet in err.message
    assert err.status_code == status
    assert err.trace_id == "trace"


def test_other_statuses_carry_the_code() -> None:
    err = map_error(418, None, None)
    assert type(err) is HttpError
    assert err.message == "HTTP error! status: 418"
    assert err.code == "HTTP_ERROR"


def test_server_validation_details_are_flattened() -> None:
    err = map_error(422, {"data": {"name": ["name is required"], "status": ["must be 0 or 1"]}}, None)
    assert err.server_message == "Validation error: name is required, must be 0 or 1"
    facing = to_user_facing_error(err)
    assert facing.message == "HTTP error! status: 422"
    assert facing.details == err.server_message


def test_payload_trace_id_wins() -> None:
    err = map_error(500, {"message": "oops", "trace_id": "from-body"}, "from-header")
    assert err.trace_id == "from-body"
    assert "trace_id=from-body" in str(err)
    assert str(err).startswith("[500] SERVER_ERROR")


def test_endpoint_missing_is_not_a_record_lookup_failure() -> None:
    err = map_error(404, {}, None)
    assert not isinstance(err, NotFoundError)
