"""Product API routes.

Learn: /latest-products sits outside the /products prefix for
compatibility with existing clients, so this module exposes two routers.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends

from smartdeals.db.store import Store, get_store
from smartdeals.schemas.results import DeleteAck, InsertAck
from smartdeals.services.product_service import ProductService

router = APIRouter(prefix="/products")
latest_router = APIRouter()


def _svc(store: Store = Depends(get_store)) -> ProductService:
    return ProductService(store)


@router.post("", response_model=InsertAck)
async def create_product(
    body: dict[str, Any] = Body(...),
    svc: ProductService = Depends(_svc),
):
    """Create a listing. created_at is always set by the server."""
    return await svc.create_product(body)


@router.get("")
async def list_products(svc: ProductService = Depends(_svc)) -> list[dict]:
    return await svc.list_products()


@router.get("/{product_id}")
async def get_product(
    product_id: str, svc: ProductService = Depends(_svc)
) -> Optional[dict]:
    return await svc.get_product(product_id)


@router.delete("/{product_id}", response_model=DeleteAck)
async def delete_product(product_id: str, svc: ProductService = Depends(_svc)):
    return await svc.delete_product(product_id)


@latest_router.get("/latest-products")
async def latest_products(svc: ProductService = Depends(_svc)) -> list[dict]:
    """Up to six products, newest first."""
    return await svc.list_latest()
