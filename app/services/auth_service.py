"""Refresh-token to access-token exchange against ShipHero."""
from __future__ import annotations

import logging

from app.core.exceptions import RemoteQueryError, TokenGenerationError
from app.services.shiphero import queries
from app.services.shiphero.client import ShipHeroClient
from app.services.shiphero.schemas import GenerateAccessTokenResult, parse_section

logger = logging.getLogger(__name__)


async def generate_access_token(client: ShipHeroClient, refresh_token: str) -> str:
    """
    Exchange a ShipHero refresh token for an access token.

    Args:
        client: An unauthenticated ShipHero client
        refresh_token: Refresh token issued in the ShipHero developer portal

    Raises:
        TokenGenerationError: The API rejected the refresh token
        RemoteApiError: The API could not be reached
    """
    try:
        data = await client.execute(queries.GENERATE_ACCESS_TOKEN, {"refresh_token": refresh_token})
    except RemoteQueryError as exc:
        raise TokenGenerationError(exc.message) from exc

    result = parse_section(data, "generateAccessToken", GenerateAccessTokenResult)
    if result is None:
        raise TokenGenerationError()
    if result.errors:
        raise TokenGenerationError(result.errors[0].message or "Failed to generate token")
    if not result.access_token:
        raise TokenGenerationError()

    logger.info("Generated ShipHero access token")
    return result.access_token
