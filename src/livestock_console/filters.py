from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .entities import AggregateFn, EntityAdapter
from .models import STATUS_ACTIVE, STATUS_INACTIVE, FilterState, Record, Stats

ALL = "all"


def matches_search(record: Record, term: str, fields: Sequence[str]) -> bool:
    needle = term.strip().lower()
    if not needle:
        return True
    for name in fields:
        value = record.value(name)
        if isinstance(value, str) and needle in value.lower():
            return True
    return False


def matches_status(record: Record, status_filter: str) -> bool:
    if status_filter == ALL:
        return True
    if status_filter == "active":
        return record.status == STATUS_ACTIVE
    if status_filter == "inactive":
        return record.status == STATUS_INACTIVE
    return False


def matches_category(record: Record, field: str | None, category: str | None) -> bool:
    if category in (None, "", ALL) or field is None:
        return True
    return record.value(field) == category


@dataclass(frozen=True)
class ClientFilterEngine:
    searchable_fields: tuple[str, ...]
    category_field: str | None = None
    category_values: tuple[str, ...] = ()
    aggregates: AggregateFn | None = None

    @classmethod
    def for_entity(cls, adapter: EntityAdapter) -> "ClientFilterEngine":
        return cls(
            searchable_fields=adapter.searchable_fields,
            category_field=adapter.category_field,
            category_values=adapter.category_values,
            aggregates=adapter.aggregates,
        )

    def apply(self, mirror: Sequence[Record], filters: FilterState) -> list[Record]:
        return [
            record
            for record in mirror
            if matches_search(record, filters.search_term, self.searchable_fields)
            and matches_status(record, filters.status_filter)
            and matches_category(record, self.category_field, filters.category_filter)
        ]

    def stats(self, mirror: Sequence[Record]) -> Stats:
        by_category: dict[str, int] = {value: 0 for value in self.category_values}
        if self.category_field:
            for record in mirror:
                value = record.value(self.category_field)
                if isinstance(value, str) and value:
                    by_category[value] = by_category.get(value, 0) + 1
        return Stats(
            total=len(mirror),
            active=sum(1 for record in mirror if record.status == STATUS_ACTIVE),
            inactive=sum(1 for record in mirror if record.status == STATUS_INACTIVE),
            by_category=by_category,
            aggregates=self.aggregates(mirror) if self.aggregates else {},
        )

    def categories(self, mirror: Sequence[Record]) -> list[str]:
        if not self.category_field:
            return []
        values = {record.value(self.category_field) for record in mirror}
        return sorted(value for value in values if isinstance(value, str) and value)
