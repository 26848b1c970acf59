from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ConsoleError(Exception):
    code: str
    message: str
    details: object | None = None
    trace_id: str | None = None
    status_code: int = 0

    def __str__(self) -> str:
        trace = f" trace_id={self.trace_id}" if self.trace_id else ""
        status = f"[{self.status_code}] " if self.status_code else ""
        return f"{status}{self.code}: {self.message}{trace}"


class AuthMissingError(ConsoleError):
    """No Authorization header is available; raised before any request."""


class ValidationError(ConsoleError):
    """Required fields are missing from a mutation payload."""

    @property
    def missing_fields(self) -> list[str]:
        if isinstance(self.details, dict):
            return list(self.details.get("missing_fields", []))
        return []


class NotFoundError(ConsoleError):
    """Mutation target is not present in the mirror."""


class HttpError(ConsoleError):
    """Non-2xx response."""

    @property
    def server_message(self) -> str | None:
        if isinstance(self.details, dict):
            value = self.details.get("server_message")
            return str(value) if value else None
        return None


class UnauthorizedError(HttpError):
    pass


class ForbiddenError(HttpError):
    pass


class EndpointNotFoundError(HttpError):
    pass


class ServerError(HttpError):
    pass


class ParseError(ConsoleError):
    """Response body does not match the documented protocol."""


class NetworkError(ConsoleError):
    """Transport failure before an HTTP response was returned."""
