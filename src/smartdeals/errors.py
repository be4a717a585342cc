"""Error taxonomy surfaced to API callers.

Each error maps to one HTTP status and a fixed public message. The
optional ``reason`` is for server-side logs only and never leaves the
process, so a caller cannot tell an expired token from a forged one.
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class SmartDealsError(Exception):
    """Base class for errors rendered as ``{"message": ...}`` responses."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, reason: Optional[str] = None):
        super().__init__(reason or self.message)
        self.reason = reason


class Unauthorized(SmartDealsError):
    """Missing, malformed, expired or otherwise invalid bearer token."""

    status_code = 401
    message = "Unauthorized access"


class Forbidden(SmartDealsError):
    """Authenticated, but asking for someone else's records."""

    status_code = 403
    message = "Forbidden access"


class InvalidIdentifier(SmartDealsError):
    status_code = 400
    message = "Invalid identifier"


class WriteRejected(SmartDealsError):
    """The store refused a write, e.g. a duplicate _id."""

    status_code = 409
    message = "Write rejected"


class StoreUnavailable(SmartDealsError):
    """The document store could not be reached or the query failed."""

    status_code = 503
    message = "Store unavailable"


async def smartdeals_error_handler(request: Request, exc: SmartDealsError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SmartDealsError, smartdeals_error_handler)
