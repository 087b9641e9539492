"""ShipHero account lookups: warehouses and 3PL customer accounts."""
from __future__ import annotations

import base64
import logging
from typing import Mapping

from app.core.exceptions import RemoteError, RemoteQueryError
from app.models.account_schemas import CustomerAccount, WarehousesMeta
from app.services.shiphero import queries
from app.services.shiphero.client import ShipHeroClient
from app.services.shiphero.schemas import AccountResult, UuidResult, Warehouse, parse_section

logger = logging.getLogger(__name__)


def encode_customer_id(legacy_id: int) -> str:
    """ShipHero UUIDs are base64 of ``"<Entity>:<legacy id>"``."""
    return base64.b64encode(f"CustomerAccount:{legacy_id}".encode("ascii")).decode("ascii")


async def list_warehouses(client: ShipHeroClient) -> tuple[list[Warehouse], WarehousesMeta]:
    data = await client.execute(queries.ACCOUNT_WAREHOUSES)
    account = parse_section(data, "account", AccountResult)
    if account is None or account.data is None or account.data.warehouses is None:
        raise RemoteQueryError("No warehouse data")
    warehouses = account.data.warehouses
    logger.info("Fetched %d warehouses", len(warehouses))
    meta = WarehousesMeta(
        request_id=account.request_id,
        complexity=account.complexity,
        total_warehouses=len(warehouses),
    )
    return warehouses, meta


async def resolve_customer(
    client: ShipHeroClient, legacy_id: int, name: str | None = None
) -> CustomerAccount:
    """
    Translate a legacy customer account id into its UUID.

    Falls back to encoding the UUID locally when the lookup fails, since the
    id format is deterministic and the dashboard should stay usable.
    """
    try:
        data = await client.execute(queries.CUSTOMER_UUID, {"legacy_id": legacy_id})
        result = parse_section(data, "uuid", UuidResult)
    except RemoteError as exc:
        logger.warning("UUID lookup failed for customer %s, using local encoding: %s", legacy_id, exc.message)
        result = None

    if result is None or result.data is None:
        return CustomerAccount(
            id=encode_customer_id(legacy_id),
            legacy_id=legacy_id,
            name=name,
            method="encoded",
        )
    return CustomerAccount(id=result.data.id, legacy_id=legacy_id, name=name, method="lookup")


async def list_customers(
    client: ShipHeroClient, accounts: Mapping[int, str]
) -> list[CustomerAccount]:
    """Resolve every configured 3PL customer account, in configuration order."""
    customers: list[CustomerAccount] = []
    for legacy_id, name in accounts.items():
        customers.append(await resolve_customer(client, legacy_id, name))
    return customers
