"""
Inventory API Routes.

Read-only endpoints over ShipHero warehouse products:
- Flat inventory (JSON and CSV export)
- Bin locations with per-location totals
"""
from fastapi import APIRouter

from .flat import router as flat_router
from .locations import router as locations_router

# Create main router and include sub-routers
router = APIRouter()
router.include_router(flat_router)
router.include_router(locations_router)

__all__ = ["router"]
