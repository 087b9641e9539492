import logging

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration

from app.core.config import settings

_initialized = False


def init_monitoring() -> None:
    """Start Sentry error reporting when a DSN is configured."""
    global _initialized
    if _initialized:
        return
    dsn = settings.SENTRY_DSN
    if dsn:
        try:
            sentry_sdk.init(
                dsn=dsn,
                integrations=[FastApiIntegration()],
                traces_sample_rate=0.1,
                profiles_sample_rate=0.0,
                environment=settings.ENV,
                release=f"binview@{settings.ENV}",
                send_default_pii=False,  # bearer tokens travel in headers
            )
            logging.getLogger(__name__).info("Sentry initialized")
        except Exception as exc:  # noqa: BLE001
            logging.getLogger(__name__).warning("Failed to init Sentry: %s", exc)
    _initialized = True
