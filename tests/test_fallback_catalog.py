from __future__ import annotations

import pytest

from livestock_console import fallback_catalog
from livestock_console.entities import ENTITIES


def test_every_entity_has_a_catalog() -> None:
    assert fallback_catalog.kinds() == sorted(ENTITIES)


@pytest.mark.parametrize("kind", sorted(ENTITIES))
def test_catalog_rows_are_complete(kind: str) -> None:
    adapter = ENTITIES[kind]
    records = fallback_catalog.get(kind)
    assert records
    assert len({record.pubid for record in records}) == len(records)
    assert {record.status for record in records} == {0, 1}
    for record in records:
        assert record.server_id == record.pubid
        assert adapter.missing_fields(record.public_fields()) == []


def test_catalog_returns_fresh_copies() -> None:
    first = fallback_catalog.get("suppliers")
    first.pop()
    assert len(fallback_catalog.get("suppliers")) == 5


def test_unknown_kind() -> None:
    with pytest.raises(KeyError):
        fallback_catalog.get("cattle")
