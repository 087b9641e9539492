import logging

from fastapi import APIRouter, Request

from app.api.dependencies import AnonymousShipHeroClientDep
from app.api.rate_limit import limiter
from app.models import account_schemas as schemas
from app.services.auth_service import generate_access_token

router = APIRouter()
logger = logging.getLogger(__name__)

TOKEN_RATE_LIMIT = "10/minute"


@router.post("/token", response_model=schemas.AccessTokenOut)
@limiter.limit(TOKEN_RATE_LIMIT)
async def create_access_token(
    request: Request,
    payload: schemas.AccessTokenRequest,
    client: AnonymousShipHeroClientDep,
):
    """Exchange a ShipHero refresh token for an access token.

    The dashboard stores the returned token itself; nothing is kept server-side.
    """
    access_token = await generate_access_token(client, payload.refresh_token)
    return schemas.AccessTokenOut(access_token=access_token)
