from __future__ import annotations

import json
import os
from types import SimpleNamespace
from typing import Any, Callable

# Must be set before any app module reads settings
os.environ.setdefault("APP_ENV", "test")

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.api.dependencies import get_shiphero_transport  # noqa: E402
from app.api.main import app  # noqa: E402

WAREHOUSE_1 = "V2FyZWhvdXNlOjEwMDE="
WAREHOUSE_2 = "V2FyZWhvdXNlOjEwMDI="
CUSTOMER_ID = "Q3VzdG9tZXJBY2NvdW50Ojg4Nzc0"


def _product(
    sku: str,
    *,
    warehouse_id: str = WAREHOUSE_1,
    warehouse_identifier: str = "Primary",
    on_hand: int | None = None,
    inventory_bin: str | None = None,
    active: bool | None = True,
    name: str | None = None,
    barcode: str | None = None,
    locations: list[dict] | None = None,
) -> dict[str, Any]:
    return {
        "id": f"id-{sku}",
        "sku": sku,
        "warehouse_id": warehouse_id,
        "warehouse_identifier": warehouse_identifier,
        "on_hand": on_hand,
        "inventory_bin": inventory_bin,
        "active": active,
        "product": {"name": name if name is not None else f"Product {sku}", "barcode": barcode},
        "locations": locations,
    }


def _location(location_id: str, name: str, quantity: int, pickable: bool = True) -> dict[str, Any]:
    return {
        "location_id": location_id,
        "location_name": name,
        "quantity": quantity,
        "pickable": pickable,
    }


def _page(nodes: list[dict], *, has_next: bool = False, cursor: str | None = None, complexity: int = 1) -> dict:
    return {
        "data": {
            "warehouse_products": {
                "request_id": "req-test",
                "complexity": complexity,
                "data": {
                    "edges": [{"node": node, "cursor": f"c-{i}"} for i, node in enumerate(nodes)],
                    "pageInfo": {"hasNextPage": has_next, "endCursor": cursor},
                },
            }
        }
    }


class FakeGraphQLSource:
    """Scripted ShipHero endpoint.

    Each entry in *responses* is a JSON payload (dict), an ``httpx.Response``
    factory, or an exception instance to raise. Once the script runs out the
    last entry is replayed, which models a source that never stops paging.
    """

    def __init__(self, responses: list[Any]):
        self.responses = responses
        self.requests: list[dict[str, Any]] = []
        self.headers: list[httpx.Headers] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        self.headers.append(request.headers)
        entry = self.responses[min(len(self.requests), len(self.responses)) - 1]
        if isinstance(entry, Exception):
            raise entry
        if callable(entry):
            return entry(request)
        return httpx.Response(200, json=entry)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def cursors(self) -> list[str | None]:
        return [body.get("variables", {}).get("after") for body in self.requests]


@pytest.fixture
def gql() -> SimpleNamespace:
    """Builders for ShipHero payloads plus the fake source class."""
    return SimpleNamespace(
        product=_product,
        location=_location,
        page=_page,
        Source=FakeGraphQLSource,
        WAREHOUSE_1=WAREHOUSE_1,
        WAREHOUSE_2=WAREHOUSE_2,
        CUSTOMER_ID=CUSTOMER_ID,
    )


@pytest.fixture
def client():  # noqa: D401 - simple factory fixture
    """Provide a FastAPI TestClient bound to the application."""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def use_source(client) -> Callable[[FakeGraphQLSource], FakeGraphQLSource]:
    """Route the app's outbound ShipHero calls to a fake source."""

    def _install(source: FakeGraphQLSource) -> FakeGraphQLSource:
        app.dependency_overrides[get_shiphero_transport] = lambda: source.transport
        return source

    return _install


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": "Bearer test-access-token"}
