from __future__ import annotations

from urllib.parse import urlparse

from fastapi import APIRouter

from app.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/live")
async def live() -> dict[str, str]:
    """Kubernetes-style liveness endpoint (no dependencies)."""
    return {"status": "alive"}


@router.get("/healthz")
async def healthz() -> dict[str, object]:
    """Basic readiness probe.

    ShipHero is not called here: every call needs a caller's token and
    costs API complexity credits.
    """
    return {
        "status": "ok",
        "env": settings.ENV,
        "upstream": urlparse(settings.SHIPHERO_GRAPHQL_URL).netloc,
    }
