"""
Cursor pagination over ShipHero ``warehouse_products``.

Pages are requested strictly one after another: each request needs the
previous page's ``endCursor``. A short pause between pages keeps us under
ShipHero's complexity-based rate limit, and a hard page ceiling stops a
misbehaving cursor from looping forever.
"""
from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Any

from app import metrics
from app.core.exceptions import TruncatedResultWarning
from app.services.shiphero import queries
from app.services.shiphero.client import ShipHeroClient
from app.services.shiphero.schemas import (
    ProductConnection,
    RawProductRecord,
    WarehouseProductsResult,
    parse_section,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_DELAY_SECONDS = 0.3


@dataclass(frozen=True)
class WarehouseProductFilter:
    """Query scope for one inventory fetch."""
    customer_account_id: str
    warehouse_id: str | None = None
    sku: str | None = None

    def to_variables(self) -> dict[str, Any]:
        return {
            "customer_account_id": self.customer_account_id,
            "warehouse_id": self.warehouse_id or None,
            "sku": self.sku or None,
        }


@dataclass
class FetchResult:
    records: list[RawProductRecord] = field(default_factory=list)
    pages_fetched: int = 0
    has_more: bool = False
    complexity: int = 0
    duration_ms: int = 0

    @property
    def truncated(self) -> bool:
        """True when the loop stopped (page ceiling or missing cursor) before the source ran dry."""
        return self.has_more

    @property
    def warning(self) -> TruncatedResultWarning | None:
        if not self.truncated:
            return None
        return TruncatedResultWarning(self.pages_fetched, len(self.records))


async def fetch_all_pages(
    client: ShipHeroClient,
    filters: WarehouseProductFilter,
    page_size: int,
    max_pages: int,
    page_delay: float = DEFAULT_PAGE_DELAY_SECONDS,
) -> FetchResult:
    """
    Fetch every ``warehouse_products`` page for *filters*.

    Any failing page aborts the whole fetch; records from earlier pages are
    discarded rather than returned as if they were complete. Reaching
    *max_pages* while more pages remain is not an error: the result comes
    back with ``truncated`` set.

    Raises:
        RemoteApiError: A page request returned a non-2xx status
        RemoteQueryError: A page carried GraphQL errors or a malformed body
    """
    if page_size < 1:
        raise ValueError("page_size must be positive")
    if max_pages < 1:
        raise ValueError("max_pages must be positive")

    records: list[RawProductRecord] = []
    cursor: str | None = None
    has_more = True
    page = 0
    complexity = 0
    started = time.monotonic()

    logger.info(
        "Starting paginated warehouse products fetch customer=%s warehouse=%s sku=%s",
        filters.customer_account_id,
        filters.warehouse_id or "all",
        filters.sku or "all",
    )

    while has_more and page < max_pages:
        page += 1
        variables = {**filters.to_variables(), "first": page_size, "after": cursor}
        data = await client.execute(queries.WAREHOUSE_PRODUCTS, variables)

        result = parse_section(data, "warehouse_products", WarehouseProductsResult)
        connection = result.data if result is not None and result.data is not None else ProductConnection()
        records.extend(edge.node for edge in connection.edges)

        has_more = connection.page_info.has_next_page
        cursor = connection.page_info.end_cursor
        if result is not None and result.complexity:
            complexity += result.complexity
        metrics.page_fetched()

        logger.info(
            "Page %d: fetched %d products (total so far: %d, hasNextPage: %s, complexity: %s)",
            page,
            len(connection.edges),
            len(records),
            has_more,
            result.complexity if result is not None else None,
        )

        if has_more and not cursor:
            # Requesting again without a cursor would restart at page 1
            logger.warning("Page %d reported more pages but no endCursor; stopping", page)
            break

        if has_more and page < max_pages and page_delay > 0:
            await asyncio.sleep(page_delay)

    elapsed = time.monotonic() - started
    metrics.observe_fetch_duration(elapsed)
    fetch = FetchResult(
        records=records,
        pages_fetched=page,
        has_more=has_more,
        complexity=complexity,
        duration_ms=int(elapsed * 1000),
    )
    if fetch.truncated:
        metrics.fetch_truncated()
        logger.warning("Pagination truncated: %s", fetch.warning)
    logger.info("Pagination complete: %d pages, %d total products", page, len(records))
    return fetch
