"""
Pydantic models for ShipHero GraphQL payloads.

Every response is validated here before the rest of the service sees it,
so a payload with an unexpected shape surfaces as ``RemoteQueryError``
instead of an ``AttributeError`` deep in the normalizer.
"""
from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.core.exceptions import RemoteQueryError

ModelT = TypeVar("ModelT", bound=BaseModel)


class _Remote(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# ============================================================================
# Warehouse products
# ============================================================================

class LocationEntry(_Remote):
    """One dynamic-slotting location holding part of a product's stock."""
    location_id: str | None = None
    location_name: str = ""
    quantity: int = 0
    pickable: bool = False

    @field_validator("location_name", mode="before")
    @classmethod
    def _name_default(cls, v):
        return "" if v is None else v

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity_default(cls, v):
        return 0 if v is None else v

    @field_validator("pickable", mode="before")
    @classmethod
    def _pickable_default(cls, v):
        return False if v is None else v


class ProductInfo(_Remote):
    name: str | None = None
    barcode: str | None = None


class RawProductRecord(_Remote):
    """A ``warehouse_products`` node: one SKU in one warehouse."""
    id: str | None = None
    legacy_id: int | None = None
    sku: str
    warehouse_id: str | None = None
    warehouse_identifier: str = ""
    on_hand: int | None = None
    inventory_bin: str | None = None
    active: bool | None = None
    product: ProductInfo | None = None
    locations: list[LocationEntry] | None = None

    @field_validator("warehouse_identifier", mode="before")
    @classmethod
    def _identifier_default(cls, v):
        return "" if v is None else v

    @field_validator("locations", mode="before")
    @classmethod
    def _unwrap_connection(cls, v: Any):
        # Newer API versions expose locations as an edges/node connection
        if isinstance(v, dict) and "edges" in v:
            edges = v.get("edges") or []
            return [edge["node"] for edge in edges if isinstance(edge, dict) and edge.get("node") is not None]
        return v

    @property
    def product_name(self) -> str:
        if self.product and self.product.name:
            return self.product.name
        return self.sku

    @property
    def barcode(self) -> str | None:
        return self.product.barcode if self.product else None


class PageInfo(_Remote):
    has_next_page: bool = Field(False, alias="hasNextPage")
    end_cursor: str | None = Field(None, alias="endCursor")

    @field_validator("has_next_page", mode="before")
    @classmethod
    def _missing_means_last_page(cls, v):
        return False if v is None else v


class ProductEdge(_Remote):
    node: RawProductRecord
    cursor: str | None = None


class ProductConnection(_Remote):
    edges: list[ProductEdge] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo, alias="pageInfo")

    @field_validator("edges", mode="before")
    @classmethod
    def _edges_default(cls, v):
        return [] if v is None else v

    @field_validator("page_info", mode="before")
    @classmethod
    def _page_info_default(cls, v):
        return {} if v is None else v


class WarehouseProductsResult(_Remote):
    request_id: str | None = None
    complexity: int | None = None
    data: ProductConnection | None = None


# ============================================================================
# Account / warehouses
# ============================================================================

class WarehouseAddress(_Remote):
    name: str | None = None
    city: str | None = None
    state: str | None = None


class Warehouse(_Remote):
    id: str
    legacy_id: int | None = None
    identifier: str | None = None
    address: WarehouseAddress | None = None


class AccountData(_Remote):
    warehouses: list[Warehouse] | None = None


class AccountResult(_Remote):
    request_id: str | None = None
    complexity: int | None = None
    data: AccountData | None = None


# ============================================================================
# Customer UUID lookup
# ============================================================================

class UuidData(_Remote):
    legacy_id: int | None = None
    id: str


class UuidResult(_Remote):
    request_id: str | None = None
    data: UuidData | None = None


# ============================================================================
# Access token mutation
# ============================================================================

class MutationError(_Remote):
    message: str = ""


class GenerateAccessTokenResult(_Remote):
    access_token: str | None = None
    errors: list[MutationError] | None = None


def parse_section(data: dict[str, Any], key: str, model: type[ModelT]) -> ModelT | None:
    """Validate ``data[key]`` against *model*.

    Returns ``None`` when the section is absent or null. Raises
    ``RemoteQueryError`` when it is present but malformed.
    """
    section = data.get(key)
    if section is None:
        return None
    try:
        return model.model_validate(section)
    except ValidationError as exc:
        raise RemoteQueryError(
            f"Unexpected {key} response shape",
            exc.errors(include_url=False, include_context=False),
        ) from exc
