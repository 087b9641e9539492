"""Tests for the ShipHero GraphQL transport and its error mapping."""

import httpx
import pytest

from app.core.exceptions import RemoteApiError, RemoteQueryError
from app.services.shiphero.client import ShipHeroClient


async def _execute(source, token="token", variables=None):
    async with ShipHeroClient(token, base_url="https://shiphero.test/graphql", transport=source.transport) as client:
        return await client.execute("query { ping }", variables)


@pytest.mark.asyncio
async def test_returns_data_object(gql):
    source = gql.Source([{"data": {"ping": "pong"}}])

    data = await _execute(source, variables={"a": 1, "b": None})

    assert data == {"ping": "pong"}
    assert source.requests[0] == {"query": "query { ping }", "variables": {"a": 1}}
    assert source.headers[0]["Authorization"] == "Bearer token"


@pytest.mark.asyncio
async def test_anonymous_client_sends_no_authorization(gql):
    source = gql.Source([{"data": {}}])

    await _execute(source, token=None)

    assert "Authorization" not in source.headers[0]


@pytest.mark.asyncio
async def test_missing_data_returns_empty_dict(gql):
    source = gql.Source([{}])

    assert await _execute(source) == {}


@pytest.mark.asyncio
async def test_non_2xx_raises_remote_api_error(gql):
    source = gql.Source([lambda request: httpx.Response(401, text="x" * 500)])

    with pytest.raises(RemoteApiError) as exc_info:
        await _execute(source)

    err = exc_info.value
    assert err.remote_status == 401
    assert err.status_code == 502
    assert len(err.body) == 200
    assert err.to_dict()["code"] == "API001"


@pytest.mark.asyncio
async def test_connection_failure_raises_remote_api_error(gql):
    source = gql.Source([httpx.ConnectError("connection refused")])

    with pytest.raises(RemoteApiError) as exc_info:
        await _execute(source)

    assert exc_info.value.remote_status is None
    assert "connection refused" in exc_info.value.body


@pytest.mark.asyncio
async def test_graphql_errors_raise_remote_query_error(gql):
    errors = [{"message": "Invalid customer"}, {"message": "second"}]
    source = gql.Source([{"errors": errors}])

    with pytest.raises(RemoteQueryError) as exc_info:
        await _execute(source)

    assert exc_info.value.message == "Invalid customer"
    assert exc_info.value.raw_errors == errors


@pytest.mark.asyncio
async def test_empty_errors_list_is_not_an_error(gql):
    source = gql.Source([{"errors": [], "data": {"ok": True}}])

    assert await _execute(source) == {"ok": True}


@pytest.mark.asyncio
async def test_non_json_body_raises_remote_query_error(gql):
    source = gql.Source([lambda request: httpx.Response(200, text="<html>maintenance</html>")])

    with pytest.raises(RemoteQueryError):
        await _execute(source)


@pytest.mark.asyncio
async def test_non_object_payload_raises_remote_query_error(gql):
    source = gql.Source([lambda request: httpx.Response(200, json=[1, 2, 3])])

    with pytest.raises(RemoteQueryError):
        await _execute(source)


@pytest.mark.asyncio
async def test_execute_requires_context_manager():
    client = ShipHeroClient("token")
    with pytest.raises(RuntimeError):
        await client.execute("query { ping }")
