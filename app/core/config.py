from __future__ import annotations

import os
from enum import Enum
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SellablePolicy(str, Enum):
    """How a dynamically slotted location decides its ``sellable`` flag."""

    ALWAYS = "always"  # presence in a slotted location implies sellable
    PICKABLE = "pickable"  # sellable mirrors the location's pickable flag


class BaseAppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "BinView"
    ENV: str = "dev"

    # ShipHero public GraphQL API
    SHIPHERO_GRAPHQL_URL: str = "https://public-api.shiphero.com/graphql"
    SHIPHERO_TIMEOUT_SECONDS: float = 30.0

    # Pagination tuning. The flat inventory view and the location view were
    # historically fetched with different page sizes and ceilings.
    INVENTORY_PAGE_SIZE: int = 100
    INVENTORY_MAX_PAGES: int = 20
    LOCATIONS_PAGE_SIZE: int = 50
    LOCATIONS_MAX_PAGES: int = 100
    PAGE_DELAY_SECONDS: float = 0.3

    SLOTTED_SELLABLE_POLICY: SellablePolicy = SellablePolicy.ALWAYS

    # 3PL client accounts shown in the customer picker: legacy id -> display name
    CUSTOMER_ACCOUNTS: dict[int, str] = {}

    RATE_LIMIT_INVENTORY: str = "30/minute"

    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    CORS_ALLOW_METHODS: list[str] = ["*"]
    CORS_ALLOW_HEADERS: list[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "plain"
    SENTRY_DSN: str | None = None

    @field_validator("INVENTORY_PAGE_SIZE", "LOCATIONS_PAGE_SIZE")
    @classmethod
    def _check_page_size(cls, v: int) -> int:
        """ShipHero caps connection pages at 100 nodes."""
        if not 1 <= v <= 100:
            raise ValueError("page size must be between 1 and 100")
        return v

    @field_validator("INVENTORY_MAX_PAGES", "LOCATIONS_MAX_PAGES")
    @classmethod
    def _check_max_pages(cls, v: int) -> int:
        if v < 1:
            raise ValueError("page ceiling must be at least 1")
        return v

    @field_validator("PAGE_DELAY_SECONDS")
    @classmethod
    def _check_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError("PAGE_DELAY_SECONDS cannot be negative")
        return v

    @model_validator(mode="after")
    def _validate_production(self) -> BaseAppSettings:
        if self.ENV.lower() == "prod":
            violations: list[str] = []
            if not self.SHIPHERO_GRAPHQL_URL.startswith("https://"):
                violations.append("SHIPHERO_GRAPHQL_URL must use https")
            if "*" in self.CORS_ALLOW_ORIGINS:
                violations.append("CORS_ALLOW_ORIGINS cannot be a wildcard")
            if violations:
                raise ValueError("Invalid production settings: " + ", ".join(violations))
        return self


class DevSettings(BaseAppSettings):
    ENV: str = "dev"


class TestSettings(BaseAppSettings):
    ENV: str = "test"
    PAGE_DELAY_SECONDS: float = 0.0


class ProdSettings(BaseAppSettings):
    ENV: str = "prod"
    CORS_ALLOW_ORIGINS: list[str] = [
        "http://localhost:3000",  # Local dashboard development
    ]
    LOG_FORMAT: str = "json"


_ENV_TO_SETTINGS: dict[str, type[BaseAppSettings]] = {
    "dev": DevSettings,
    "development": DevSettings,
    "test": TestSettings,
    "testing": TestSettings,
    "prod": ProdSettings,
    "production": ProdSettings,
}


@lru_cache
def get_settings() -> BaseAppSettings:
    env_name = os.getenv("APP_ENV") or os.getenv("ENV") or "dev"
    env = env_name.lower()
    settings_cls = _ENV_TO_SETTINGS.get(env, DevSettings)
    return settings_cls()


settings = get_settings()
