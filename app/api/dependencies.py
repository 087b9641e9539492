"""Common dependencies: caller credentials and the per-request ShipHero client."""
from typing import Annotated, AsyncIterator, TypeAlias

import httpx
from fastapi import Cookie, Depends, Header

from app.core.exceptions import AuthRequiredError
from app.services.shiphero.client import ShipHeroClient

_BEARER_PREFIX = "Bearer "


def get_access_token(
    authorization: Annotated[str | None, Header()] = None,
    shiphero_auth_token: Annotated[str | None, Cookie()] = None,
) -> str:
    """
    Extract the caller's ShipHero access token.

    The dashboard keeps the token client-side and forwards it on every call
    as ``Authorization: Bearer <token>``; older pages sent it as the
    ``shiphero_auth_token`` cookie instead.

    Raises AuthRequiredError (401) when neither is present.
    """
    if authorization and authorization.startswith(_BEARER_PREFIX):
        token = authorization[len(_BEARER_PREFIX):].strip()
        if token:
            return token
    if shiphero_auth_token:
        return shiphero_auth_token
    raise AuthRequiredError()


def get_shiphero_transport() -> httpx.AsyncBaseTransport | None:
    """Transport for outbound ShipHero calls; ``None`` means real network I/O."""
    return None


AccessTokenDep: TypeAlias = Annotated[str, Depends(get_access_token)]
TransportDep: TypeAlias = Annotated[httpx.AsyncBaseTransport | None, Depends(get_shiphero_transport)]


async def get_shiphero_client(token: AccessTokenDep, transport: TransportDep) -> AsyncIterator[ShipHeroClient]:
    async with ShipHeroClient(token, transport=transport) as client:
        yield client


async def get_anonymous_shiphero_client(transport: TransportDep) -> AsyncIterator[ShipHeroClient]:
    """Client without credentials, used for the token exchange itself."""
    async with ShipHeroClient(None, transport=transport) as client:
        yield client


ShipHeroClientDep: TypeAlias = Annotated[ShipHeroClient, Depends(get_shiphero_client)]
AnonymousShipHeroClientDep: TypeAlias = Annotated[ShipHeroClient, Depends(get_anonymous_shiphero_client)]
