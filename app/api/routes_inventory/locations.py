"""Bin location endpoint: every location with the SKUs stored in it."""
import logging

from fastapi import APIRouter, Request

from app.api.rate_limit import limiter
from app.core.config import settings
from app.models import inventory_schemas as schemas
from .dependencies import InventoryServiceDep, ProductFilterDep
from .helpers import location_report_to_out

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/locations", response_model=schemas.LocationsResponse)
@limiter.limit(settings.RATE_LIMIT_INVENTORY)
async def list_locations(
    request: Request,
    service: InventoryServiceDep,
    filters: ProductFilterDep,
):
    """Location-keyed inventory, optionally narrowed to one warehouse or SKU."""
    report = await service.list_locations(filters)
    logger.info(
        "Returning %d locations with inventory (took %dms)",
        len(report.locations),
        report.fetch.duration_ms,
    )
    return location_report_to_out(report, filters)
