from __future__ import annotations

import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BASE_DIR / "src"))

from livestock_console.auth_store import StaticTokenAuth  # noqa: E402
from livestock_console.config import ClientConfig  # noqa: E402
from livestock_console.http_client import HttpClient  # noqa: E402

BASE_URL = "https://api.example.com"


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(env_name="test", api_base_url=BASE_URL, per_page=10)


@pytest.fixture
def http(config: ClientConfig) -> HttpClient:
    return HttpClient(config)


@pytest.fixture
def auth() -> StaticTokenAuth:
    return StaticTokenAuth("token-123")


def list_body(rows: list[dict], total: int | None = None, filtered: int | None = None) -> dict:
    count = len(rows) if total is None else total
    return {
        "draw": 1,
        "recordsTotal": count,
        "recordsFiltered": count if filtered is None else filtered,
        "data": rows,
    }


SUPPLIER_ROWS = [
    {"pubid": "S1", "pid": "enc-1", "name": "Feed Co", "description": "Feed", "order_no": 1, "status": 1},
    {"pubid": "S2", "pid": "enc-2", "name": "Vet Supply", "description": "Medicine", "order_no": 4, "status": 0},
    {"pubid": "S3", "pid": "enc-3", "name": "Farm Tools", "description": "Equipment", "order_no": 2, "status": 1},
]
