"""Common dependencies for inventory routes."""
from typing import Annotated, TypeAlias

from fastapi import Depends, Query

from app.api.dependencies import ShipHeroClientDep
from app.core.exceptions import MissingCustomerAccountError
from app.services.inventory import InventoryService, WarehouseProductFilter, build_inventory_service


def get_inventory_service(client: ShipHeroClientDep) -> InventoryService:
    """InventoryService bound to the caller's ShipHero credentials."""
    return build_inventory_service(client)


def get_product_filter(
    customer_account_id: Annotated[str | None, Query(description="Customer account UUID")] = None,
    warehouse_id: Annotated[str | None, Query(description="Restrict to one warehouse")] = None,
    sku: Annotated[str | None, Query(description="Restrict to one SKU")] = None,
) -> WarehouseProductFilter:
    """
    Build the query scope for an inventory fetch.

    Raises MissingCustomerAccountError (400) when no customer account is given:
    a 3PL account without that filter would pull every client's stock.
    """
    customer = (customer_account_id or "").strip()
    if not customer:
        raise MissingCustomerAccountError()
    return WarehouseProductFilter(
        customer_account_id=customer,
        warehouse_id=(warehouse_id or "").strip() or None,
        sku=(sku or "").strip() or None,
    )


InventoryServiceDep: TypeAlias = Annotated[InventoryService, Depends(get_inventory_service)]
ProductFilterDep: TypeAlias = Annotated[WarehouseProductFilter, Depends(get_product_filter)]
