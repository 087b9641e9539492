"""Async client for the ShipHero public GraphQL API."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from app import metrics
from app.core.config import settings
from app.core.exceptions import RemoteApiError, RemoteQueryError
from app.core.logger import mask_token

logger = logging.getLogger(__name__)


class ShipHeroClient:
    """
    Thin GraphQL transport bound to one caller's access token.

    Credentials are passed in by the caller on every construction; the
    client holds no process-wide state. Use as an async context manager so
    the underlying connection pool is closed when the request finishes:

        async with ShipHeroClient(token) as client:
            data = await client.execute(query, {"first": 50})
    """

    def __init__(
        self,
        access_token: str | None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.access_token = access_token
        self.base_url = base_url or settings.SHIPHERO_GRAPHQL_URL
        self.timeout = timeout if timeout is not None else settings.SHIPHERO_TIMEOUT_SECONDS
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def __aenter__(self) -> ShipHeroClient:
        self._http = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    async def execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        POST one GraphQL document and return its ``data`` object.

        Args:
            query: GraphQL document
            variables: Variables; ``None`` values are dropped

        Returns:
            The ``data`` object of the response, or ``{}`` when absent.

        Raises:
            RemoteApiError: Non-2xx status or the request never completed
            RemoteQueryError: ``errors`` present, or the body is not a JSON object
        """
        if self._http is None:
            raise RuntimeError("ShipHeroClient must be used as an async context manager")

        body: dict[str, Any] = {"query": query}
        if variables:
            body["variables"] = {k: v for k, v in variables.items() if v is not None}

        try:
            response = await self._http.post(self.base_url, json=body, headers=self._headers())
        except httpx.RequestError as exc:
            metrics.remote_error("api")
            logger.error("ShipHero request failed token=%s error=%s", mask_token(self.access_token), exc)
            raise RemoteApiError(None, str(exc)) from exc

        if not response.is_success:
            metrics.remote_error("api")
            logger.error(
                "ShipHero HTTP error status=%s body=%s",
                response.status_code,
                response.text[:200],
            )
            raise RemoteApiError(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as exc:
            metrics.remote_error("query")
            raise RemoteQueryError("ShipHero returned a non-JSON response") from exc

        if not isinstance(payload, dict):
            metrics.remote_error("query")
            raise RemoteQueryError("ShipHero returned an unexpected response shape")

        errors = payload.get("errors")
        if errors:
            metrics.remote_error("query")
            if not isinstance(errors, list):
                errors = [errors]
            logger.error("ShipHero GraphQL errors: %s", errors)
            raise RemoteQueryError.from_errors(errors)

        data = payload.get("data")
        if data is None:
            return {}
        if not isinstance(data, dict):
            metrics.remote_error("query")
            raise RemoteQueryError("ShipHero returned an unexpected data shape")
        return data
