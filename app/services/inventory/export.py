"""CSV export of flat inventory lines."""
from __future__ import annotations

import csv
import datetime as dt
from io import StringIO
from typing import Iterable

from app.models.inventory_schemas import FlatInventoryItem

from .aggregator import derive_zone

CSV_HEADERS = [
    "Warehouse", "Location", "Zone", "SKU", "Product",
    "Quantity", "Barcode", "Pickable", "Sellable",
]


def flat_items_to_csv(items: Iterable[FlatInventoryItem]) -> str:
    buf = StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for item in items:
        writer.writerow([
            item.warehouse,
            item.location,
            derive_zone(item.location),
            item.sku,
            item.product_name,
            item.quantity,
            item.barcode or "",
            "yes" if item.pickable else "no",
            "yes" if item.sellable else "no",
        ])
    return buf.getvalue()


def csv_filename(today: dt.date | None = None) -> str:
    today = today or dt.date.today()
    return f"inventory-{today.isoformat()}.csv"
