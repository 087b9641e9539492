"""Exception hierarchy for BinView.

Every error the service raises on purpose derives from ``BinViewException``
so the API layer can map it to a response in one place.

Error codes follow pattern: [CATEGORY][NUMBER]
- API: Remote ShipHero API errors (001-099)
- AUTH: Credential errors (001-099)
- REQ: Request validation errors (001-099)
"""

from __future__ import annotations

from typing import Any

_BODY_PREVIEW_CHARS = 200


class BinViewException(Exception):
    """Base exception for all BinView application errors."""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        """Initialize exception with a client-facing message and metadata.

        Args:
            message: Human readable error message
            code: Unique error code (e.g., "API001")
            status_code: HTTP status code returned to the dashboard
            details: Optional additional context
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the dashboard's response envelope."""
        return {
            "success": False,
            "error": self.message,
            "code": self.code,
            "details": self.details,
        }


# ============================================================================
# REMOTE API ERRORS (API001-099)
# ============================================================================

class RemoteError(BinViewException):
    """Base class for failures talking to the ShipHero GraphQL API."""
    pass


class RemoteApiError(RemoteError):
    """The transport failed: non-2xx status, timeout or connection error.

    ``status_code`` here is the *remote* status (``None`` when no response
    was received); the HTTP status we answer with is always 502.
    """

    def __init__(self, status_code: int | None, body: str = ""):
        self.remote_status = status_code
        self.body = (body or "")[:_BODY_PREVIEW_CHARS]
        if status_code is None:
            message = "ShipHero API unreachable"
        else:
            message = f"ShipHero API {status_code}"
        super().__init__(
            message=message,
            code="API001",
            status_code=502,
            details={"remote_status": status_code, "body": self.body},
        )


class RemoteQueryError(RemoteError):
    """The transport succeeded but the payload reports errors or has a bad shape."""

    def __init__(self, message: str, raw_errors: list[Any] | None = None):
        self.raw_errors = list(raw_errors or [])
        super().__init__(
            message=message,
            code="API002",
            status_code=502,
            details={"graphql_errors": self.raw_errors},
        )

    @classmethod
    def from_errors(cls, errors: list[Any]) -> RemoteQueryError:
        first = errors[0] if errors else None
        if isinstance(first, dict):
            message = str(first.get("message") or "GraphQL query failed")
        else:
            message = str(first) if first is not None else "GraphQL query failed"
        return cls(message, errors)


# ============================================================================
# AUTH ERRORS (AUTH001-099)
# ============================================================================

class AuthRequiredError(BinViewException):
    """No access token was supplied with the request."""

    def __init__(self):
        super().__init__(
            message="Authorization header with access token required",
            code="AUTH001",
            status_code=401,
            details={"hint": "Include 'Authorization: Bearer {token}' header"},
        )


class TokenGenerationError(BinViewException):
    """Exchanging a refresh token for an access token failed."""

    def __init__(self, message: str = "Failed to generate token"):
        super().__init__(message=message, code="AUTH002", status_code=400)


# ============================================================================
# REQUEST ERRORS (REQ001-099)
# ============================================================================

class MissingCustomerAccountError(BinViewException):
    """Inventory queries are always scoped to one 3PL customer account."""

    def __init__(self):
        super().__init__(
            message="customer_account_id required for 3PL operations",
            code="REQ001",
            status_code=400,
        )


# ============================================================================
# WARNINGS (non-fatal)
# ============================================================================

class TruncatedResultWarning(UserWarning):
    """The page ceiling was reached while the source still reported more pages."""

    def __init__(self, pages_fetched: int, records_fetched: int):
        self.pages_fetched = pages_fetched
        self.records_fetched = records_fetched
        super().__init__(
            f"Stopped after {pages_fetched} pages ({records_fetched} records); "
            "more data is available, totals may be incomplete"
        )
