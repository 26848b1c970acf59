from __future__ import annotations

import math
from typing import Any, Callable, Mapping

from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError
from .models import ListPage, ListRequest, Record, ServerPaginationState

# The backend echoes draw but never relies on it; a constant keeps queries cacheable.
DRAW = 1

RecordMapper = Callable[[Mapping[str, Any], int], Record]


def build_query(request: ListRequest, extra: Mapping[str, Any] | None = None) -> dict[str, str]:
    params = {
        "start": str(request.offset),
        "length": str(request.per_page),
        "draw": str(DRAW),
        "search[value]": request.search_term or "",
        "order[0][column]": str(request.sort_column or 0),
        "order[0][dir]": request.sort_direction or "asc",
    }
    if extra:
        params.update({key: str(value) for key, value in extra.items() if value is not None})
    return params


def parse(raw: object, request: ListRequest, map_record: RecordMapper | None = None) -> ListPage:
    if not isinstance(raw, Mapping):
        raise _parse_error("expected a JSON object", raw)
    if "draw" not in raw:
        raise _parse_error("missing 'draw' field", raw)
    data = raw.get("data")
    if not isinstance(data, list):
        raise _parse_error("'data' must be an array", raw)

    draw = _as_count(raw.get("draw"), "draw", default=DRAW)
    total_items = _as_count(raw.get("recordsTotal"), "recordsTotal", default=len(data))
    filtered_items = _as_count(raw.get("recordsFiltered"), "recordsFiltered", default=len(data))

    mapper = map_record or _default_mapper
    records: list[Record] = []
    seen: set[str] = set()
    for index, row in enumerate(data):
        if not isinstance(row, Mapping):
            raise _parse_error(f"data[{index}] is not an object", raw)
        try:
            record = mapper(row, index)
        except (PydanticValidationError, TypeError, ValueError) as exc:
            raise ParseError(
                code="PARSE_ERROR",
                message=f"Invalid record at data[{index}]: {exc}",
                details={"row": dict(row)},
            ) from exc
        if record.pubid in seen:
            raise _parse_error(f"duplicate pubid {record.pubid!r} at data[{index}]", raw)
        seen.add(record.pubid)
        records.append(record)

    meta = ServerPaginationState(
        current_page=request.page,
        total_pages=math.ceil(total_items / request.per_page),
        total_items=total_items,
        filtered_items=filtered_items,
        per_page=request.per_page,
    )
    return ListPage(draw=draw, records=records, meta=meta)


def _default_mapper(row: Mapping[str, Any], index: int) -> Record:
    return Record.model_validate(dict(row))


def _as_count(value: object, field: str, *, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        raise ParseError(code="PARSE_ERROR", message=f"'{field}' must be an integer")
    try:
        count = int(value)
    except (TypeError, ValueError) as exc:
        raise ParseError(code="PARSE_ERROR", message=f"'{field}' must be an integer, got {value!r}") from exc
    if count < 0:
        raise ParseError(code="PARSE_ERROR", message=f"'{field}' must be >= 0, got {count}")
    return count


def _parse_error(reason: str, raw: object) -> ParseError:
    return ParseError(
        code="PARSE_ERROR",
        message=f"Unexpected list response format: {reason}",
        details={"response": str(raw)[:200]},
    )
