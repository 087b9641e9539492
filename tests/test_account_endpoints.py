"""Tests for /auth/token, /customers and /warehouses."""

import base64

import httpx
import pytest

from app.core.config import settings
from app.services.account_service import encode_customer_id


def _warehouses_payload():
    return {
        "data": {
            "account": {
                "request_id": "req-wh",
                "complexity": 2,
                "data": {
                    "warehouses": [
                        {
                            "id": "V2FyZWhvdXNlOjEwMDE=",
                            "legacy_id": 1001,
                            "identifier": "Primary",
                            "address": {"name": "Main", "city": "Reno", "state": "NV"},
                        },
                        {"id": "V2FyZWhvdXNlOjEwMDI=", "legacy_id": 1002, "identifier": "Overflow"},
                    ]
                },
            }
        }
    }


def _uuid_payload(legacy_id: int, uuid: str):
    return {"data": {"uuid": {"request_id": "req-uuid", "data": {"legacy_id": legacy_id, "id": uuid}}}}


def test_encode_customer_id():
    encoded = encode_customer_id(88774)
    assert base64.b64decode(encoded).decode() == "CustomerAccount:88774"


def test_list_warehouses(client, gql, use_source, auth_headers):
    source = use_source(gql.Source([_warehouses_payload()]))

    resp = client.get("/warehouses", headers=auth_headers)

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["success"] is True
    assert [w["identifier"] for w in body["data"]] == ["Primary", "Overflow"]
    assert body["data"][0]["address"]["city"] == "Reno"
    assert body["meta"] == {"request_id": "req-wh", "complexity": 2, "total_warehouses": 2}
    assert source.headers[0]["Authorization"] == "Bearer test-access-token"


def test_list_warehouses_without_data(client, gql, use_source, auth_headers):
    use_source(gql.Source([{"data": {"account": {"data": None}}}]))

    resp = client.get("/warehouses", headers=auth_headers)

    assert resp.status_code == 502
    assert resp.json()["error"] == "No warehouse data"


def test_list_warehouses_requires_token(client):
    resp = client.get("/warehouses")

    assert resp.status_code == 401


def test_list_customers_resolves_configured_accounts(client, gql, use_source, auth_headers, monkeypatch):
    monkeypatch.setattr(settings, "CUSTOMER_ACCOUNTS", {88774: "Acme Apparel", 90001: "Bolt Bikes"})
    source = use_source(gql.Source([
        _uuid_payload(88774, "uuid-acme"),
        {"errors": [{"message": "Not found"}]},
    ]))

    resp = client.get("/customers", headers=auth_headers)

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["meta"] == {"total_customers": 2}
    assert body["data"] == [
        {"id": "uuid-acme", "legacy_id": 88774, "name": "Acme Apparel", "method": "lookup"},
        {"id": encode_customer_id(90001), "legacy_id": 90001, "name": "Bolt Bikes", "method": "encoded"},
    ]
    assert [r["variables"] for r in source.requests] == [{"legacy_id": 88774}, {"legacy_id": 90001}]


def test_get_customer_lookup(client, gql, use_source, auth_headers):
    use_source(gql.Source([_uuid_payload(42, "uuid-42")]))

    resp = client.get("/customers/42", headers=auth_headers)

    assert resp.status_code == 200, resp.text
    assert resp.json()["data"]["id"] == "uuid-42"
    assert resp.json()["data"]["method"] == "lookup"


def test_get_customer_falls_back_to_encoding_when_unreachable(client, gql, use_source, auth_headers):
    use_source(gql.Source([lambda request: httpx.Response(503, text="down")]))

    resp = client.get("/customers/42", headers=auth_headers)

    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["id"] == encode_customer_id(42)
    assert data["method"] == "encoded"


def test_get_customer_rejects_non_positive_id(client, auth_headers):
    resp = client.get("/customers/0", headers=auth_headers)

    assert resp.status_code == 422


def test_generate_access_token(client, gql, use_source):
    source = use_source(gql.Source([
        {"data": {"generateAccessToken": {"access_token": "fresh-token", "errors": None}}},
    ]))

    resp = client.post("/auth/token", json={"refresh_token": "refresh-abc"})

    assert resp.status_code == 200, resp.text
    assert resp.json() == {"access_token": "fresh-token"}
    assert source.requests[0]["variables"] == {"refresh_token": "refresh-abc"}
    assert "Authorization" not in source.headers[0]


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"errors": [{"message": "Invalid refresh token"}]}, "Invalid refresh token"),
        ({"data": {"generateAccessToken": {"errors": [{"message": "expired"}]}}}, "expired"),
        ({"data": {"generateAccessToken": {"access_token": None}}}, "Failed to generate token"),
        ({"data": {}}, "Failed to generate token"),
    ],
)
def test_generate_access_token_failures(client, gql, use_source, payload, message):
    use_source(gql.Source([payload]))

    resp = client.post("/auth/token", json={"refresh_token": "refresh-abc"})

    assert resp.status_code == 400
    body = resp.json()
    assert body["code"] == "AUTH002"
    assert body["error"] == message


def test_generate_access_token_requires_refresh_token(client):
    resp = client.post("/auth/token", json={"refresh_token": ""})

    assert resp.status_code == 422
