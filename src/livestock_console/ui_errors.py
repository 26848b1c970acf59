from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ConsoleError, HttpError


@dataclass(frozen=True)
class UserFacingError:
    message: str
    details: str | None = None
    trace_id: str | None = None

    def banner(self, prefix: str | None = None) -> str:
        text = f"{prefix}: {self.message}" if prefix else self.message
        if self.details:
            text = f"{text} ({self.details})"
        return text


def to_user_facing_error(exc: Exception) -> UserFacingError:
    if not isinstance(exc, ConsoleError):
        return UserFacingError(message=str(exc).strip() or "Unexpected error")
    primary = exc.message.strip() or "Request failed"
    details: str | None = None
    if isinstance(exc, HttpError) and exc.server_message:
        details = exc.server_message
    return UserFacingError(message=primary, details=details, trace_id=exc.trace_id)
