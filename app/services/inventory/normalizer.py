"""
Flatten warehouse products into (sku, location) inventory lines.

A product is stored one of two ways:

- dynamic slotting: ``locations`` lists every bin holding the SKU;
- static slotting: a single ``inventory_bin`` holding ``on_hand`` units.

When a record carries both, the locations list wins.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from app.core.config import SellablePolicy
from app.models.inventory_schemas import FlatInventoryItem
from app.services.shiphero.schemas import RawProductRecord


@dataclass(frozen=True)
class Placement:
    """Stock of one product in one location."""
    location_id: str
    location_name: str
    quantity: int
    pickable: bool
    sellable: bool


def placements(
    record: RawProductRecord,
    sellable_policy: SellablePolicy = SellablePolicy.ALWAYS,
) -> list[Placement]:
    """Return where *record* holds sellable stock; empty when nowhere."""
    if record.locations:
        found: list[Placement] = []
        for entry in record.locations:
            if entry.quantity <= 0 or not entry.location_id:
                continue
            if sellable_policy is SellablePolicy.PICKABLE:
                sellable = entry.pickable
            else:
                sellable = True
            found.append(
                Placement(
                    location_id=entry.location_id,
                    location_name=entry.location_name or entry.location_id,
                    quantity=entry.quantity,
                    pickable=entry.pickable,
                    sellable=sellable,
                )
            )
        return found

    if record.inventory_bin and (record.on_hand or 0) > 0:
        available = record.active is not False
        return [
            Placement(
                location_id=record.inventory_bin,
                location_name=record.inventory_bin,
                quantity=record.on_hand,
                pickable=available,
                sellable=available,
            )
        ]
    return []


def normalize_to_flat_items(
    records: Iterable[RawProductRecord],
    sellable_policy: SellablePolicy = SellablePolicy.ALWAYS,
) -> list[FlatInventoryItem]:
    items: list[FlatInventoryItem] = []
    for record in records:
        for placement in placements(record, sellable_policy):
            items.append(
                FlatInventoryItem(
                    sku=record.sku,
                    product_name=record.product_name,
                    quantity=placement.quantity,
                    location=placement.location_name,
                    location_id=placement.location_id,
                    pickable=placement.pickable,
                    sellable=placement.sellable,
                    warehouse=record.warehouse_identifier,
                    barcode=record.barcode,
                )
            )
    return items
