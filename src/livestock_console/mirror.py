from __future__ import annotations

from typing import Iterable, Iterator, Literal

from .models import Record

MirrorSource = Literal["empty", "remote", "fallback"]


class CollectionMirror:
    """In-memory copy of one remote collection.

    Replaced wholesale on every fetch. The only partial edit is
    ``remove_local``, used by the optimistic delete.
    """

    def __init__(self) -> None:
        self._records: list[Record] = []
        self.source: MirrorSource = "empty"
        self.version = 0

    def replace(self, records: Iterable[Record], source: MirrorSource = "remote") -> None:
        fresh = list(records)
        seen: set[str] = set()
        for record in fresh:
            if record.pubid in seen:
                raise ValueError(f"Duplicate pubid in mirror: {record.pubid!r}")
            seen.add(record.pubid)
        self._records = fresh
        self.source = source
        self.version += 1

    def remove_local(self, pubid: str) -> bool:
        remaining = [record for record in self._records if record.pubid != pubid]
        if len(remaining) == len(self._records):
            return False
        self._records = remaining
        self.version += 1
        return True

    def find(self, pubid: str) -> Record | None:
        for record in self._records:
            if record.pubid == pubid:
                return record
        return None

    @property
    def records(self) -> list[Record]:
        return list(self._records)

    @property
    def pubids(self) -> list[str]:
        return [record.pubid for record in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(list(self._records))

    def __contains__(self, pubid: object) -> bool:
        return any(record.pubid == pubid for record in self._records)
