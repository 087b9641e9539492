"""
Base inventory service with shared functionality.

Holds the per-request ShipHero client and the fetch tuning every inventory
view needs.
"""
from __future__ import annotations

import logging

from app.core.config import BaseAppSettings, SellablePolicy, settings
from app.services.shiphero.client import ShipHeroClient

logger = logging.getLogger(__name__)


class BaseInventoryService:
    """
    Base service class with shared inventory functionality.

    Instances are request-scoped: one per incoming call, discarded when the
    response is serialized.
    """

    def __init__(self, client: ShipHeroClient, config: BaseAppSettings | None = None):
        """
        Initialize the base inventory service.

        Args:
            client: ShipHero client bound to the caller's access token
            config: Settings override (defaults to the process settings)
        """
        self._client = client
        self._config = config or settings

    @property
    def client(self) -> ShipHeroClient:
        """ShipHero client accessor."""
        return self._client

    @property
    def sellable_policy(self) -> SellablePolicy:
        return self._config.SLOTTED_SELLABLE_POLICY

    @property
    def page_delay(self) -> float:
        return self._config.PAGE_DELAY_SECONDS
