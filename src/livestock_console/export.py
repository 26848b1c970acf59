from __future__ import annotations

import csv
import io
import json
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, Sequence

from .models import STATUS_ACTIVE, Record

RECORD_CSV_HEADERS = ("ID", "Name", "Description", "Order", "Status")


@dataclass(frozen=True)
class ExportedRecord:
    filename: str
    content: str
    mime_type: str


def status_label(status: int | None) -> str:
    return "Active" if status == STATUS_ACTIVE else "Inactive"


def export_record(record: Record, kind: str, fmt: str = "json", today: date | None = None) -> ExportedRecord:
    stamp = (today or date.today()).isoformat()
    normalized = fmt.lower()
    if normalized == "json":
        return ExportedRecord(
            filename=f"{kind}_{record.pubid}_{stamp}.json",
            content=json.dumps(record.public_fields(), indent=2, default=str),
            mime_type="application/json",
        )
    if normalized == "csv":
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(RECORD_CSV_HEADERS)
        writer.writerow(
            [
                record.pubid,
                record.value("name") or "",
                record.value("description") or "",
                record.value("order_no") if record.value("order_no") is not None else "",
                status_label(record.status),
            ]
        )
        return ExportedRecord(
            filename=f"{kind}_{record.pubid}_{stamp}.csv",
            content=buffer.getvalue(),
            mime_type="text/csv",
        )
    raise ValueError(f"Unsupported export format: {fmt!r}")


def share_text(record: Record, label: str = "Supplier") -> str:
    """Plain-text summary of one record, ready for a clipboard or a chat message."""
    description = record.value("description") or "No description"
    return "\n".join(
        [
            f"{label}: {record.value('name') or record.pubid}",
            f"Description: {description}",
            f"Status: {status_label(record.status)}",
        ]
    )


def export_current_view(
    *,
    kind: str,
    records: Sequence[Record],
    headers: Sequence[str],
    output_dir: str | Path = "exports",
    filters: dict[str, Any] | None = None,
    now: datetime | None = None,
) -> Path:
    destination = Path(output_dir)
    destination.mkdir(parents=True, exist_ok=True)

    stamp_time = now or datetime.now().astimezone()
    path = destination / f"{kind}_{stamp_time.strftime('%Y%m%d_%H%M%S')}.csv"

    with path.open("w", newline="", encoding="utf-8-sig") as handle:
        handle.write(f"# timestamp_local: {stamp_time.isoformat()}\n")
        handle.write(f"# entity: {kind}\n")
        handle.write(f"# filters: {filters or {}}\n")
        writer = csv.DictWriter(handle, fieldnames=list(headers), extrasaction="ignore")
        writer.writeheader()
        for record in records:
            row = record.public_fields()
            writer.writerow({key: "" if row.get(key) is None else row.get(key) for key in headers})

    return path
