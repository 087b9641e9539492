"""Pydantic schemas for auth, customer and warehouse endpoints."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from app.services.shiphero.schemas import Warehouse


class AccessTokenRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1)


class AccessTokenOut(BaseModel):
    access_token: str


class CustomerAccount(BaseModel):
    """A 3PL client account, addressed by its ShipHero UUID."""
    id: str
    legacy_id: int
    name: str | None = None
    method: Literal["lookup", "encoded"] = "lookup"


class CustomerResponse(BaseModel):
    success: bool = True
    data: CustomerAccount


class CustomersResponse(BaseModel):
    success: bool = True
    data: list[CustomerAccount]
    meta: dict[str, int] = Field(default_factory=dict)


class WarehousesMeta(BaseModel):
    request_id: str | None = None
    complexity: int | None = None
    total_warehouses: int = 0


class WarehousesResponse(BaseModel):
    success: bool = True
    data: list[Warehouse]
    meta: WarehousesMeta
