from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from platformdirs import user_data_dir
from pydantic import ValidationError as PydanticValidationError

from .models import SessionData


class AuthProvider(Protocol):
    def get_auth_header(self) -> dict[str, str]: ...


def _bearer(token: str | None) -> dict[str, str]:
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}


@dataclass
class StaticTokenAuth:
    token: str | None = None

    def get_auth_header(self) -> dict[str, str]:
        return _bearer(self.token)


@dataclass
class AuthStore:
    """Token handed over by the login flow, kept in the per-user data dir."""

    app_name: str = "livestock-console"
    filename: str = "session.json"
    directory: Path | None = None

    def _path(self) -> Path:
        base = self.directory or Path(user_data_dir(self.app_name, "Livestock"))
        base.mkdir(parents=True, exist_ok=True)
        return base / self.filename

    def save(self, session: SessionData) -> None:
        path = self._path()
        path.write_text(json.dumps(session.model_dump(), indent=2))
        try:
            path.chmod(0o600)
        except OSError:
            pass

    def load(self) -> SessionData | None:
        path = self._path()
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text())
            return SessionData.model_validate(data)
        except (json.JSONDecodeError, PydanticValidationError):
            self.clear()
            return None

    def clear(self) -> None:
        path = self._path()
        if path.exists():
            path.unlink()

    def get_auth_header(self) -> dict[str, str]:
        session = self.load()
        return _bearer(session.access_token if session else None)
