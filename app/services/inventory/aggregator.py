"""Group warehouse products by physical location."""
from __future__ import annotations

import base64
import binascii
import re
from typing import Iterable

from app.core.config import SellablePolicy
from app.models.inventory_schemas import LocationAggregate, LocationProduct
from app.services.shiphero.schemas import RawProductRecord

from .normalizer import placements

UNKNOWN_ZONE = "Unknown"

_BASE64_ALPHABET = re.compile(r"^[A-Za-z0-9+/=]+$")
_PRINTABLE_ASCII = re.compile(r"^[\x20-\x7E]+$")
_MIN_ENCODED_LENGTH = 10


def decode_location_name(name: str) -> str:
    """Decode a location name that arrived base64-encoded.

    Only names made of base64 characters, longer than 10 characters, that
    decode to printable ASCII are decoded. Anything else comes back as is.
    """
    if len(name) <= _MIN_ENCODED_LENGTH or not _BASE64_ALPHABET.match(name):
        return name
    try:
        padded = name + "=" * (-len(name) % 4)
        decoded = base64.b64decode(padded).decode("utf-8")
    except (binascii.Error, ValueError):
        return name
    if _PRINTABLE_ASCII.match(decoded):
        return decoded
    return name


def derive_zone(location_name: str) -> str:
    """``"A-12-B"`` -> ``"A"``; names without a zone prefix -> ``"Unknown"``."""
    zone, sep, _ = location_name.partition("-")
    if sep and zone:
        return zone
    return UNKNOWN_ZONE


def aggregate_by_location(
    records: Iterable[RawProductRecord],
    sellable_policy: SellablePolicy = SellablePolicy.ALWAYS,
) -> list[LocationAggregate]:
    """
    Build one aggregate per (warehouse, location).

    The key includes the warehouse because location ids repeat across
    warehouses. Output order is the order each location was first seen.
    """
    by_key: dict[tuple[str, str], LocationAggregate] = {}

    for record in records:
        for placement in placements(record, sellable_policy):
            key = (record.warehouse_id or record.warehouse_identifier, placement.location_id)
            aggregate = by_key.get(key)
            if aggregate is None:
                display_name = decode_location_name(placement.location_name)
                aggregate = LocationAggregate(
                    location_id=placement.location_id,
                    location_name=display_name,
                    location_name_raw=placement.location_name,
                    zone=derive_zone(display_name),
                    pickable=placement.pickable,
                    sellable=placement.sellable,
                    warehouse_id=record.warehouse_id,
                )
                by_key[key] = aggregate
            aggregate.add_product(
                LocationProduct(
                    sku=record.sku,
                    product_name=record.product_name,
                    quantity=placement.quantity,
                    barcode=record.barcode,
                )
            )

    return [aggregate for aggregate in by_key.values() if aggregate.products]
