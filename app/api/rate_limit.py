import logging

from prometheus_client import Counter
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from app.core.config import settings

logger = logging.getLogger(__name__)

_PROM_RATE_LIMIT = Counter("binview_rate_limit_exceeded_events", "Rate limit exceeded events (handler invocations)")


def get_client_identifier(request: Request) -> str:
    """Rate limit key: client IP.

    Every inventory request fans out into many ShipHero pages, so the
    limit protects the shared ShipHero quota rather than this service.
    """
    return get_remote_address(request)


# Counters live in process memory; the service holds no shared state.
limiter = Limiter(
    key_func=get_client_identifier,
    storage_uri="memory://",
    enabled=settings.ENV.lower() != "test",
)


def increment_rate_limit_exceeded() -> None:
    _PROM_RATE_LIMIT.inc()
    logger.warning("Rate limit exceeded")
