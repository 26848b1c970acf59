from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, TypeVar

from dotenv import load_dotenv

N = TypeVar("N", int, float)

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ClientConfig:
    env_name: str
    api_base_url: str
    connect_timeout_seconds: float = 5.0
    read_timeout_seconds: float = 15.0
    max_connections: int = 10
    verify_ssl: bool = True
    per_page: int = 10
    page_window: int = 5

    @property
    def normalized_env(self) -> str:
        return self.env_name.lower().strip()


def _positive(name: str, default: N, cast: Callable[[str], N]) -> N:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"Invalid {name}: expected a number, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"Invalid {name}: expected > 0, got {value}")
    return value


def _base_url(env_name: str) -> str:
    for key in (f"LIVESTOCK_API_BASE_URL_{env_name.upper()}", "LIVESTOCK_API_BASE_URL"):
        value = (os.getenv(key) or "").strip()
        if value:
            return value.rstrip("/")
    raise ConfigError("Missing required config values: LIVESTOCK_API_BASE_URL")


def load_config(env_file: str | None = None) -> ClientConfig:
    """Read the console settings from the environment, after loading ``env_file``.

    Variables already set in the process win over the file. The base URL may
    be given per profile (``LIVESTOCK_API_BASE_URL_STAGING``) and falls back
    to the unsuffixed name.
    """
    load_dotenv(env_file)

    env_name = (os.getenv("LIVESTOCK_ENV") or "dev").strip()
    timeout = _positive("LIVESTOCK_TIMEOUT_SECONDS", 15.0, float)

    return ClientConfig(
        env_name=env_name,
        api_base_url=_base_url(env_name),
        connect_timeout_seconds=min(timeout, 5.0),
        read_timeout_seconds=timeout,
        verify_ssl=(os.getenv("LIVESTOCK_VERIFY_SSL") or "true").strip().lower() in _TRUTHY,
        per_page=_positive("LIVESTOCK_PER_PAGE", 10, int),
        page_window=_positive("LIVESTOCK_PAGE_WINDOW", 5, int),
    )
