"""
Pydantic schemas for the inventory API.

Item payloads are serialized in camelCase because the dashboard's tables
and CSV export read them verbatim; ``meta`` blocks stay snake_case.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Flat inventory
# ============================================================================

class FlatInventoryItem(_CamelModel):
    """One (sku, location) pair ready for display or export."""
    sku: str
    product_name: str
    quantity: int
    location: str
    location_id: str
    pickable: bool
    sellable: bool
    warehouse: str
    barcode: str | None = None


class FlatInventoryMeta(BaseModel):
    total_items: int
    total_units: int
    customer_account_id: str
    pages_fetched: int
    truncated: bool = False
    warning: str | None = None


class FlatInventoryResponse(BaseModel):
    success: bool = True
    data: list[FlatInventoryItem]
    meta: FlatInventoryMeta


# ============================================================================
# Location aggregates
# ============================================================================

class LocationProduct(_CamelModel):
    sku: str
    product_name: str
    quantity: int
    barcode: str | None = None


class LocationAggregate(_CamelModel):
    """One physical location and every SKU stored in it."""
    location_id: str
    location_name: str
    location_name_raw: str
    zone: str
    pickable: bool
    sellable: bool
    warehouse_id: str | None = None
    products: list[LocationProduct] = Field(default_factory=list)
    total_items: int = 0

    def add_product(self, product: LocationProduct) -> None:
        """Append a product, keeping ``total_items`` equal to the quantity sum."""
        self.products.append(product)
        self.total_items += product.quantity


class LocationsMeta(BaseModel):
    total_locations: int
    total_skus: int
    total_units: int
    fetch_duration_ms: int
    customer_account_id: str
    pages_fetched: int
    truncated: bool = False
    warning: str | None = None


class LocationsResponse(BaseModel):
    success: bool = True
    data: list[LocationAggregate]
    meta: LocationsMeta
