"""ShipHero GraphQL API integration."""
from .client import ShipHeroClient
from .schemas import LocationEntry, RawProductRecord, Warehouse

__all__ = ["ShipHeroClient", "LocationEntry", "RawProductRecord", "Warehouse"]
