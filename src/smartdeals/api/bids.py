"""Bid API routes.

Learn: GET /bids is the only gated route in the API. The ownership
check happens in require_own_email, which runs before the service is
touched; creation, deletion and per-product listing are open.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends

from smartdeals.auth.dependencies import require_own_email
from smartdeals.db.store import Store, get_store
from smartdeals.schemas.results import DeleteAck, InsertAck
from smartdeals.services.bid_service import BidService

router = APIRouter()


def _svc(store: Store = Depends(get_store)) -> BidService:
    return BidService(store)


@router.post("/bids", response_model=InsertAck)
async def create_bid(
    body: dict[str, Any] = Body(...),
    svc: BidService = Depends(_svc),
):
    return await svc.create_bid(body)


@router.get("/bids")
async def list_bids(
    email: Optional[str] = Depends(require_own_email),
    svc: BidService = Depends(_svc),
) -> list[dict]:
    """List bids: the caller's own with ?email=, otherwise all of them."""
    return await svc.list_bids(buyer_email=email)


@router.delete("/bids/{bid_id}", response_model=DeleteAck)
async def delete_bid(bid_id: str, svc: BidService = Depends(_svc)):
    return await svc.delete_bid(bid_id)


@router.get("/products/bids/{product_id}")
async def list_product_bids(
    product_id: str, svc: BidService = Depends(_svc)
) -> list[dict]:
    """Bids for a product, highest bid_price first."""
    return await svc.list_product_bids(product_id)
