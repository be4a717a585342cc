"""Liveness and health endpoints.

Learn: GET / is the plain-text liveness string existing monitors poll.
GET /health additionally pings MongoDB. A failed ping reports
"degraded" instead of erroring, since the app keeps serving without it.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from smartdeals import __version__
from smartdeals.db.store import Store, get_store

router = APIRouter()

LIVENESS_MESSAGE = "Smart Deals Server Is Running"


@router.get("/", response_class=PlainTextResponse)
async def root():
    return LIVENESS_MESSAGE


@router.get("/health")
async def health_check(store: Store = Depends(get_store)):
    """Check server health and MongoDB connectivity."""
    checks = {"server": "ok", "version": __version__}

    try:
        await store.ping()
        checks["mongodb"] = "ok"
    except Exception as e:
        checks["mongodb"] = f"error: {e}"

    status = "healthy" if checks["mongodb"] == "ok" else "degraded"
    return {"status": status, **checks}
