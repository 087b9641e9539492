"""
Inventory Service Module.

Fetches ShipHero warehouse products for one 3PL customer and reshapes them
for the dashboard. The InventoryService class acts as a facade over the
pagination, normalization and aggregation steps.

Usage:
    from app.services.inventory import build_inventory_service, WarehouseProductFilter

    async with ShipHeroClient(token) as client:
        service = build_inventory_service(client)
        report = await service.list_flat_inventory(WarehouseProductFilter("Q3VzdG9t..."))
        locations = await service.list_locations(WarehouseProductFilter("Q3VzdG9t..."))
"""
from __future__ import annotations

from dataclasses import dataclass

from app.core.config import BaseAppSettings
from app.models.inventory_schemas import FlatInventoryItem, LocationAggregate
from app.services.shiphero.client import ShipHeroClient

from .aggregator import aggregate_by_location, decode_location_name, derive_zone
from .base import BaseInventoryService
from .export import csv_filename, flat_items_to_csv
from .normalizer import normalize_to_flat_items, placements
from .pagination import FetchResult, WarehouseProductFilter, fetch_all_pages


@dataclass
class FlatInventoryReport:
    items: list[FlatInventoryItem]
    fetch: FetchResult

    @property
    def total_units(self) -> int:
        return sum(item.quantity for item in self.items)


@dataclass
class LocationReport:
    locations: list[LocationAggregate]
    fetch: FetchResult

    @property
    def total_skus(self) -> int:
        return sum(len(loc.products) for loc in self.locations)

    @property
    def total_units(self) -> int:
        return sum(loc.total_items for loc in self.locations)


class InventoryService(BaseInventoryService):
    """Facade for the dashboard's two inventory views."""

    async def list_flat_inventory(self, filters: WarehouseProductFilter) -> FlatInventoryReport:
        """One line per (sku, location) with stock."""
        fetch = await fetch_all_pages(
            self.client,
            filters,
            page_size=self._config.INVENTORY_PAGE_SIZE,
            max_pages=self._config.INVENTORY_MAX_PAGES,
            page_delay=self.page_delay,
        )
        items = normalize_to_flat_items(fetch.records, self.sellable_policy)
        return FlatInventoryReport(items=items, fetch=fetch)

    async def list_locations(self, filters: WarehouseProductFilter) -> LocationReport:
        """One aggregate per physical location holding stock."""
        fetch = await fetch_all_pages(
            self.client,
            filters,
            page_size=self._config.LOCATIONS_PAGE_SIZE,
            max_pages=self._config.LOCATIONS_MAX_PAGES,
            page_delay=self.page_delay,
        )
        locations = aggregate_by_location(fetch.records, self.sellable_policy)
        return LocationReport(locations=locations, fetch=fetch)


def build_inventory_service(
    client: ShipHeroClient, config: BaseAppSettings | None = None
) -> InventoryService:
    """Factory function to create an InventoryService instance."""
    return InventoryService(client, config)


__all__ = [
    "InventoryService",
    "build_inventory_service",
    "FlatInventoryReport",
    "LocationReport",
    "FetchResult",
    "WarehouseProductFilter",
    "fetch_all_pages",
    "normalize_to_flat_items",
    "placements",
    "aggregate_by_location",
    "decode_location_name",
    "derive_zone",
    "flat_items_to_csv",
    "csv_filename",
]
