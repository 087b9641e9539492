"""Metrics facade.

Service code should ONLY call the semantic helpers here so the backend can
change freely.

Metrics:
- shiphero_pages_fetched_total        Pages pulled from warehouse_products
- shiphero_remote_errors_total        Remote failures by kind (api, query)
- shiphero_truncated_fetches_total    Fetches stopped by the page ceiling
- shiphero_fetch_duration_seconds     Wall time of a full paginated fetch
"""

from __future__ import annotations

import logging

from prometheus_client import Counter, Histogram

logger = logging.getLogger("metrics")

_PAGES_FETCHED = Counter("shiphero_pages_fetched_total", "Pages fetched from the ShipHero API")
_REMOTE_ERRORS = Counter(
    "shiphero_remote_errors_total", "Failed ShipHero API calls", ["kind"]
)
_TRUNCATED_FETCHES = Counter(
    "shiphero_truncated_fetches_total", "Paginated fetches stopped at the page ceiling"
)
_FETCH_DURATION = Histogram(
    "shiphero_fetch_duration_seconds",
    "Duration of a complete paginated fetch",
    buckets=(0.5, 1, 2, 5, 10, 20, 30, 60, 120),
)


def page_fetched() -> None:
    _PAGES_FETCHED.inc()


def remote_error(kind: str) -> None:
    _REMOTE_ERRORS.labels(kind=kind).inc()


def fetch_truncated() -> None:
    _TRUNCATED_FETCHES.inc()


def observe_fetch_duration(seconds: float) -> None:
    if seconds < 0:
        logger.debug("Ignoring negative fetch duration %s", seconds)
        return
    _FETCH_DURATION.observe(seconds)
