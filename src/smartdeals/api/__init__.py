"""API route aggregation.

All routers registered here get mounted in main.py.

Learn: Paths are mounted at the root (no /api/v1 prefix) because
existing clients call them there. Auth is NOT applied at the
include_router level; only GET /bids is gated, and that route pulls
in its own dependency (see api/bids.py).
"""

from fastapi import APIRouter

from smartdeals.api.bids import router as bids_router
from smartdeals.api.health import router as health_router
from smartdeals.api.products import latest_router as latest_products_router
from smartdeals.api.products import router as products_router
from smartdeals.api.users import router as users_router

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(users_router, tags=["users"])
api_router.include_router(products_router, tags=["products"])
api_router.include_router(latest_products_router, tags=["products"])
api_router.include_router(bids_router, tags=["bids"])
