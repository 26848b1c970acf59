"""Built-in records shown when the remote collection cannot be loaded.

Each list mixes active and inactive rows so status-dependent screens stay
usable while the backend is unreachable. Records carry no server identifier
beyond their public one, so mutations issued against them reuse ``pubid``.
"""

from __future__ import annotations

from typing import Any

from .models import Record

_SUPPLIERS: tuple[dict[str, Any], ...] = (
    {"pubid": "SUP001", "name": "PT. Sumber Berkah", "description": "High quality livestock feed supplier", "order_no": 1, "status": 1},
    {"pubid": "SUP002", "name": "CV. Mitra Tani", "description": "Veterinary medicine and vitamin supplier", "order_no": 2, "status": 1},
    {"pubid": "SUP003", "name": "UD. Cahaya Mandiri", "description": "Farm equipment supplier", "order_no": 3, "status": 0},
    {"pubid": "SUP004", "name": "PT. Agro Nusantara", "description": "Seed stock and organic feed supplier", "order_no": 4, "status": 1},
    {"pubid": "SUP005", "name": "CV. Jaya Abadi", "description": "Animal health equipment supplier", "order_no": 5, "status": 1},
)

_OUTLETS: tuple[dict[str, Any], ...] = (
    {
        "pubid": "outlet-001",
        "name": "Outlet Peternakan Maju",
        "location": "Jl. Raya Bogor No. 123, Jakarta Timur",
        "manager": "Budi Santoso",
        "type": "Retail",
        "status": 1,
        "phone": "021-8876543",
        "description": "Main outlet for fresh beef and processed meat",
        "open_time": "06:00",
        "close_time": "18:00",
        "established": "2020-01-15",
    },
    {
        "pubid": "outlet-002",
        "name": "Outlet Ternak Sejahtera",
        "location": "Jl. Sudirman No. 45, Jakarta Selatan",
        "manager": "Siti Rahayu",
        "type": "Wholesale",
        "status": 1,
        "phone": "021-7765432",
        "description": "Wholesale outlet supplying restaurants and hotels",
        "open_time": "05:00",
        "close_time": "20:00",
        "established": "2019-03-20",
    },
    {
        "pubid": "outlet-003",
        "name": "Outlet Sapi Premium",
        "location": "Jl. Kemang Raya No. 88, Jakarta Selatan",
        "manager": "Ahmad Wijaya",
        "type": "Retail",
        "status": 1,
        "phone": "021-6654321",
        "description": "Premium and organic products",
        "open_time": "07:00",
        "close_time": "21:00",
        "established": "2021-06-10",
    },
    {
        "pubid": "outlet-004",
        "name": "Outlet Daging Segar",
        "location": "Jl. Fatmawati No. 67, Jakarta Selatan",
        "manager": "Rina Kartika",
        "type": "Retail",
        "status": 0,
        "phone": "021-5543210",
        "description": "Closed for renovation",
        "open_time": "06:30",
        "close_time": "19:00",
        "established": "2018-11-05",
    },
    {
        "pubid": "outlet-005",
        "name": "Outlet Ternak Nusantara",
        "location": "Jl. Cipete Raya No. 156, Jakarta Selatan",
        "manager": "Doni Prasetyo",
        "type": "Wholesale",
        "status": 1,
        "phone": "021-4432109",
        "description": "Regional distribution hub for greater Jakarta",
        "open_time": "04:00",
        "close_time": "22:00",
        "established": "2017-08-30",
    },
)

_CUSTOMERS: tuple[dict[str, Any], ...] = (
    {
        "pubid": "pelanggan-001",
        "name": "PT. Sumber Rejeki",
        "email": "info@sumberrejeki.com",
        "phone": "021-8876543",
        "address": "Jl. Raya Jakarta No. 123, Jakarta Timur",
        "type": "Premium",
        "status": 1,
        "join_date": "2020-01-15",
        "total_orders": 145,
        "last_order": "2024-01-10",
        "credit_limit": 50000000,
        "description": "Premium meat distributor serving a Jakarta restaurant chain",
    },
    {
        "pubid": "pelanggan-002",
        "name": "Warung Sate Pak Joko",
        "email": "satepakjoko@gmail.com",
        "phone": "081234567890",
        "address": "Jl. Kemang Raya No. 45, Jakarta Selatan",
        "type": "Regular",
        "status": 1,
        "join_date": "2021-03-20",
        "total_orders": 89,
        "last_order": "2024-01-12",
        "credit_limit": 5000000,
        "description": "Traditional satay stall running since 1995",
    },
    {
        "pubid": "pelanggan-003",
        "name": "Hotel Grand Indonesia",
        "email": "procurement@grandindonesia.com",
        "phone": "021-7765432",
        "address": "Jl. MH Thamrin No. 1, Jakarta Pusat",
        "type": "Premium",
        "status": 1,
        "join_date": "2019-06-10",
        "total_orders": 267,
        "last_order": "2024-01-13",
        "credit_limit": 100000000,
        "description": "Five-star hotel buying premium cuts for its restaurant and banquets",
    },
    {
        "pubid": "pelanggan-004",
        "name": "Ibu Sarah",
        "email": "sarah.rumahan@gmail.com",
        "phone": "085678901234",
        "address": "Jl. Fatmawati No. 67, Jakarta Selatan",
        "type": "Regular",
        "status": 0,
        "join_date": "2022-11-05",
        "total_orders": 23,
        "last_order": "2023-12-20",
        "credit_limit": 2000000,
        "description": "Household customer",
    },
    {
        "pubid": "pelanggan-005",
        "name": "Restoran Padang Sederhana",
        "email": "padangsederhana@yahoo.com",
        "phone": "021-4432109",
        "address": "Jl. Cipete Raya No. 156, Jakarta Selatan",
        "type": "Regular",
        "status": 1,
        "join_date": "2020-08-30",
        "total_orders": 178,
        "last_order": "2024-01-11",
        "credit_limit": 15000000,
        "description": "Padang restaurant with three branches in Jakarta",
    },
    {
        "pubid": "pelanggan-006",
        "name": "Catering Bunda Bahagia",
        "email": "bundabahagia.catering@gmail.com",
        "phone": "081987654321",
        "address": "Jl. Pondok Indah No. 88, Jakarta Selatan",
        "type": "Premium",
        "status": 1,
        "join_date": "2021-05-15",
        "total_orders": 234,
        "last_order": "2024-01-14",
        "credit_limit": 25000000,
        "description": "Corporate and wedding catering",
    },
)

_PRODUCTS: tuple[dict[str, Any], ...] = (
    {
        "pubid": "produk-001",
        "name": "Daging Sapi Premium A5",
        "category": "Daging Sapi",
        "price": 150000,
        "stock": 250,
        "unit": "Kg",
        "status": 1,
        "supplier": "PT. Sumber Rejeki",
        "description": "Grade A5 beef with fine marbling, for steak and BBQ",
        "last_updated": "2024-01-14",
        "minimum_stock": 50,
        "location": "Warehouse A - Rack 1",
    },
    {
        "pubid": "produk-002",
        "name": "Daging Sapi Rendang",
        "category": "Daging Sapi",
        "price": 120000,
        "stock": 180,
        "unit": "Kg",
        "status": 1,
        "supplier": "CV. Ternak Nusantara",
        "description": "Beef cuts for rendang and gulai",
        "last_updated": "2024-01-13",
        "minimum_stock": 30,
        "location": "Warehouse A - Rack 2",
    },
    {
        "pubid": "produk-003",
        "name": "Daging Kambing Muda",
        "category": "Daging Kambing",
        "price": 135000,
        "stock": 75,
        "unit": "Kg",
        "status": 1,
        "supplier": "UD. Kambing Sejahtera",
        "description": "Young goat meat for satay, gulai and tongseng",
        "last_updated": "2024-01-12",
        "minimum_stock": 20,
        "location": "Warehouse B - Rack 1",
    },
    {
        "pubid": "produk-004",
        "name": "Daging Domba Import",
        "category": "Daging Domba",
        "price": 180000,
        "stock": 0,
        "unit": "Kg",
        "status": 0,
        "supplier": "PT. Import Premium",
        "description": "Imported Australian lamb for fine dining",
        "last_updated": "2024-01-10",
        "minimum_stock": 15,
        "location": "Warehouse C - Rack 1",
    },
    {
        "pubid": "produk-005",
        "name": "Jeroan Sapi Mix",
        "category": "Jeroan",
        "price": 45000,
        "stock": 20,
        "unit": "Kg",
        "status": 1,
        "supplier": "CV. Ternak Nusantara",
        "description": "Mixed beef offal for soto and gule",
        "last_updated": "2024-01-14",
        "minimum_stock": 25,
        "location": "Warehouse A - Rack 3",
    },
    {
        "pubid": "produk-006",
        "name": "Tulang Sapi Sumsum",
        "category": "Tulang",
        "price": 35000,
        "stock": 95,
        "unit": "Kg",
        "status": 1,
        "supplier": "PT. Sumber Rejeki",
        "description": "Marrow bones for broth and soup",
        "last_updated": "2024-01-13",
        "minimum_stock": 20,
        "location": "Warehouse B - Rack 2",
    },
)

_CATALOG: dict[str, tuple[dict[str, Any], ...]] = {
    "suppliers": _SUPPLIERS,
    "outlets": _OUTLETS,
    "customers": _CUSTOMERS,
    "products": _PRODUCTS,
}


def kinds() -> list[str]:
    return sorted(_CATALOG)


def get(entity_kind: str) -> list[Record]:
    try:
        rows = _CATALOG[entity_kind]
    except KeyError as exc:
        raise KeyError(f"No fallback catalog for entity kind {entity_kind!r}") from exc
    return [Record.model_validate({**row, "encrypted_pid": row["pubid"]}) for row in rows]
