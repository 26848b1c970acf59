from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

from .exceptions import ValidationError
from .models import STATUS_ACTIVE, Record

AggregateFn = Callable[[Sequence[Record]], dict[str, float]]

_SERVER_ID_KEYS = {"pid", "encrypted_pid", "encryptedPid"}


def _wire_status(value: Any) -> Any:
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return value


@dataclass(frozen=True)
class EntityAdapter:
    """Everything that differs between the master-data screens.

    The controller, gateway and filter engine are generic; an adapter tells
    them where the entity lives on the server, which fields are mandatory,
    which fields the search box looks at and how wire rows become records.
    """

    kind: str
    label: str
    base_path: str
    required_fields: tuple[str, ...]
    searchable_fields: tuple[str, ...]
    form_fields: tuple[str, ...] = ()
    integer_fields: tuple[str, ...] = ("status",)
    decimal_fields: tuple[str, ...] = ()
    discriminator: Mapping[str, str] = field(default_factory=dict)
    category_field: str | None = None
    category_values: tuple[str, ...] = ()
    wire_defaults: Mapping[str, Any] = field(default_factory=dict)
    aggregates: AggregateFn | None = None

    @property
    def payload_fields(self) -> tuple[str, ...]:
        """Fields a create/update body may carry; anything else on a record is server-owned."""
        return self.form_fields or self.required_fields

    @property
    def supports_ordering(self) -> bool:
        return "order_no" in self.required_fields

    def endpoint(self, action: str) -> str:
        return f"{self.base_path.rstrip('/')}/{action}"

    def map_wire_to_record(self, row: Mapping[str, Any], index: int) -> Record:
        data = {key: value for key, value in row.items() if key not in _SERVER_ID_KEYS}
        pubid = row.get("pubid") or f"TEMP-{index + 1}"
        data["pubid"] = str(pubid)
        server_id = row.get("encrypted_pid") or row.get("encryptedPid") or row.get("pid")
        data["encrypted_pid"] = str(server_id) if server_id else data["pubid"]
        # Only an absent status defaults to active; null and unknown values are kept.
        if "status" not in row:
            data["status"] = STATUS_ACTIVE
        else:
            data["status"] = _wire_status(row["status"])
        for key, default in self.wire_defaults.items():
            if data.get(key) in (None, ""):
                data[key] = default
        if self.supports_ordering and data.get("order_no") in (None, ""):
            data["order_no"] = index + 1
        return Record.model_validate(data)

    def missing_fields(self, data: Mapping[str, Any]) -> list[str]:
        return [name for name in self.required_fields if data.get(name) in (None, "")]

    def clean_payload(self, data: Mapping[str, Any]) -> dict[str, Any]:
        missing = self.missing_fields(data)
        if missing:
            raise ValidationError(
                code="VALIDATION_ERROR",
                message=f"Missing required fields: {', '.join(missing)}",
                details={"missing_fields": missing},
            )
        cleaned: dict[str, Any] = {}
        invalid: list[str] = []
        for key in self.payload_fields:
            if key not in data:
                continue
            try:
                cleaned[key] = self._coerce(key, data[key])
            except (TypeError, ValueError):
                invalid.append(key)
        if invalid:
            raise ValidationError(
                code="VALIDATION_ERROR",
                message=f"Invalid numeric fields: {', '.join(invalid)}",
                details={"invalid_fields": invalid},
            )
        cleaned.update(self.discriminator)
        return cleaned

    def _coerce(self, key: str, value: Any) -> Any:
        if value is None:
            return None
        if key in self.integer_fields:
            return int(value)
        if key in self.decimal_fields:
            return float(value)
        if isinstance(value, str):
            return value.strip()
        return value


def _customer_aggregates(records: Sequence[Record]) -> dict[str, float]:
    return {"total_orders": float(sum(_number(r.value("total_orders")) for r in records))}


def _product_aggregates(records: Sequence[Record]) -> dict[str, float]:
    low_stock = 0
    total_value = 0.0
    for record in records:
        stock = _number(record.value("stock"))
        minimum = _number(record.value("minimum_stock"))
        if 0 < stock <= minimum:
            low_stock += 1
        total_value += _number(record.value("price")) * stock
    return {"low_stock": float(low_stock), "total_value": total_value}


def _number(value: object) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value))
    except (TypeError, ValueError):
        return 0.0


SUPPLIERS = EntityAdapter(
    kind="suppliers",
    label="Supplier",
    base_path="/api/master/supplier",
    required_fields=("name", "description", "order_no", "status"),
    searchable_fields=("name", "pubid", "description"),
    integer_fields=("order_no", "status"),
    wire_defaults={"name": "Name not available", "description": ""},
)

# Outlets and customers share the customer table; the kategori tag keeps them apart.
OUTLETS = EntityAdapter(
    kind="outlets",
    label="Outlet",
    base_path="/api/master/pelanggan",
    required_fields=("name", "location", "manager", "type", "status"),
    searchable_fields=("name", "location", "manager", "description"),
    form_fields=("name", "location", "manager", "type", "status", "phone", "description", "open_time", "close_time"),
    discriminator={"kategori": "outlet"},
    category_field="type",
    category_values=("Retail", "Wholesale"),
    wire_defaults={"name": "Name not available", "description": ""},
)

CUSTOMERS = EntityAdapter(
    kind="customers",
    label="Customer",
    base_path="/api/master/pelanggan",
    required_fields=("name", "phone", "address", "type", "status"),
    searchable_fields=("name", "email", "phone", "address", "description"),
    form_fields=("name", "email", "phone", "address", "type", "status", "credit_limit", "description"),
    decimal_fields=("credit_limit",),
    discriminator={"kategori": "pelanggan"},
    category_field="type",
    category_values=("Premium", "Regular"),
    wire_defaults={"name": "Name not available", "description": ""},
    aggregates=_customer_aggregates,
)

PRODUCTS = EntityAdapter(
    kind="products",
    label="Product",
    base_path="/api/master/produk",
    required_fields=("name", "category", "price", "stock", "unit", "status"),
    searchable_fields=("name", "category", "supplier", "description"),
    form_fields=(
        "name",
        "category",
        "price",
        "stock",
        "unit",
        "status",
        "supplier",
        "description",
        "minimum_stock",
        "location",
    ),
    integer_fields=("stock", "minimum_stock", "status"),
    decimal_fields=("price",),
    category_field="category",
    wire_defaults={"name": "Name not available", "description": ""},
    aggregates=_product_aggregates,
)

ENTITIES: dict[str, EntityAdapter] = {
    adapter.kind: adapter for adapter in (SUPPLIERS, OUTLETS, CUSTOMERS, PRODUCTS)
}


def get_entity(kind: str) -> EntityAdapter:
    try:
        return ENTITIES[kind]
    except KeyError as exc:
        raise KeyError(f"Unknown entity kind: {kind!r} (expected one of {', '.join(sorted(ENTITIES))})") from exc
