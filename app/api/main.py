from fastapi import FastAPI
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from app.api.rate_limit import limiter, increment_rate_limit_exceeded
from app.api.routes_account import router as account_router
from app.api.routes_auth import router as auth_router
from app.api.routes_health import router as health_router
from app.api.routes_inventory import router as inventory_router
from app.api.routes_metrics import router as metrics_router
from app.core.config import settings
from app.core.logger import init_logging
from app.core.monitoring import init_monitoring
from app.core.errors import register_error_handlers


async def _rate_limit_handler(request, exc: RateLimitExceeded):
    increment_rate_limit_exceeded()
    return JSONResponse(status_code=429, content={"success": False, "error": "Too many requests"})


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):  # type: ignore[override]
        response = await call_next(request)
        response.headers.setdefault("Referrer-Policy", "same-origin")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        # Inventory reflects live stock; never serve it from a cache
        response.headers.setdefault("Cache-Control", "no-store")
        return response


def create_app() -> FastAPI:
    init_logging()
    init_monitoring()

    is_production = settings.ENV.lower() == "prod"
    app = FastAPI(
        title=settings.APP_NAME,
        debug=False,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
        openapi_url=None if is_production else "/openapi.json",
    )
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )
    app.add_middleware(SecurityHeadersMiddleware)
    register_error_handlers(app)
    app.include_router(auth_router, prefix="/auth", tags=["auth"])
    app.include_router(account_router)
    app.include_router(inventory_router, tags=["inventory"])
    app.include_router(metrics_router, tags=["metrics"])
    app.include_router(health_router)

    return app


app = create_app()
