from __future__ import annotations

from typing import Mapping

from .exceptions import (
    EndpointNotFoundError,
    ForbiddenError,
    HttpError,
    ServerError,
    UnauthorizedError,
)

_STATUS_MESSAGES: dict[int, tuple[type[HttpError], str, str]] = {
    401: (UnauthorizedError, "UNAUTHORIZED", "Unauthorized - token invalid or expired"),
    403: (ForbiddenError, "FORBIDDEN", "Forbidden - no access to this endpoint"),
    404: (EndpointNotFoundError, "ENDPOINT_NOT_FOUND", "Endpoint not found"),
    500: (ServerError, "SERVER_ERROR", "Server error - please try again later"),
}


def server_message(payload: Mapping[str, object] | None) -> str | None:
    """Extract the backend's own explanation from an error body, if any."""
    if not payload:
        return None
    data = payload.get("data")
    if isinstance(data, Mapping) and data:
        flattened: list[str] = []
        for value in data.values():
            if isinstance(value, (list, tuple)):
                flattened.extend(str(item) for item in value)
            else:
                flattened.append(str(value))
        return f"Validation error: {', '.join(flattened)}"
    message = payload.get("message") or payload.get("error")
    if message:
        return str(message)
    if isinstance(data, str) and data:
        return data
    return None


def map_error(status_code: int, payload: Mapping[str, object] | None, trace_id: str | None) -> HttpError:
    payload = payload or {}
    mapped, code, message = _STATUS_MESSAGES.get(
        status_code,
        (HttpError, "HTTP_ERROR", f"HTTP error! status: {status_code}"),
    )
    payload_trace_id = payload.get("trace_id")
    resolved_trace_id = str(payload_trace_id) if payload_trace_id is not None else trace_id
    return mapped(
        code=code,
        message=message,
        details={"server_message": server_message(payload), "payload": dict(payload)},
        trace_id=resolved_trace_id,
        status_code=status_code,
    )
