"""Customer account and warehouse endpoints."""
import logging

from fastapi import APIRouter, Path

from app.api.dependencies import ShipHeroClientDep
from app.core.config import settings
from app.models import account_schemas as schemas
from app.services import account_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/customers", response_model=schemas.CustomersResponse, tags=["customers"])
async def list_customers(client: ShipHeroClientDep):
    """Configured 3PL customer accounts, resolved to ShipHero UUIDs."""
    customers = await account_service.list_customers(client, settings.CUSTOMER_ACCOUNTS)
    return schemas.CustomersResponse(
        data=customers,
        meta={"total_customers": len(customers)},
    )


@router.get("/customers/{legacy_id}", response_model=schemas.CustomerResponse, tags=["customers"])
async def get_customer(client: ShipHeroClientDep, legacy_id: int = Path(..., ge=1)):
    """Resolve one legacy customer account id to its UUID."""
    name = settings.CUSTOMER_ACCOUNTS.get(legacy_id)
    customer = await account_service.resolve_customer(client, legacy_id, name)
    return schemas.CustomerResponse(data=customer)


@router.get("/warehouses", response_model=schemas.WarehousesResponse, tags=["warehouses"])
async def list_warehouses(client: ShipHeroClientDep):
    """Warehouses on the authenticated ShipHero account."""
    warehouses, meta = await account_service.list_warehouses(client)
    return schemas.WarehousesResponse(data=warehouses, meta=meta)
