"""Flat inventory endpoints: one row per (sku, location)."""
import logging

from fastapi import APIRouter, Request, Response

from app.api.rate_limit import limiter
from app.core.config import settings
from app.models import inventory_schemas as schemas
from app.services.inventory import csv_filename, flat_items_to_csv
from .dependencies import InventoryServiceDep, ProductFilterDep
from .helpers import flat_report_to_out

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/inventory", response_model=schemas.FlatInventoryResponse)
@limiter.limit(settings.RATE_LIMIT_INVENTORY)
async def list_inventory(
    request: Request,
    service: InventoryServiceDep,
    filters: ProductFilterDep,
):
    """
    Inventory with bin locations for one customer account.

    Dynamically slotted products yield one row per stocked location;
    statically slotted products yield one row for their inventory bin.
    """
    report = await service.list_flat_inventory(filters)
    logger.info(
        "Inventory items created: %d for customer %s",
        len(report.items),
        filters.customer_account_id,
    )
    return flat_report_to_out(report, filters)


@router.get("/inventory/export.csv", response_class=Response)
@limiter.limit(settings.RATE_LIMIT_INVENTORY)
async def export_inventory_csv(
    request: Request,
    service: InventoryServiceDep,
    filters: ProductFilterDep,
) -> Response:
    """Download the flat inventory as CSV."""
    report = await service.list_flat_inventory(filters)
    headers = {"Content-Disposition": f'attachment; filename="{csv_filename()}"'}
    if report.fetch.truncated:
        headers["X-Inventory-Truncated"] = "true"
    return Response(
        content=flat_items_to_csv(report.items),
        media_type="text/csv",
        headers=headers,
    )
