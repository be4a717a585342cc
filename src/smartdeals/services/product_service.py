"""Product service: seller listings.

Learn: Products are schemaless apart from created_at, which the server
always stamps at insert time. Any created_at sent by the client is
overwritten so "latest products" ordering can't be gamed.
"""

from datetime import datetime, timezone
from typing import Optional

from smartdeals.db.store import Store, parse_object_id, serialize_document, store_errors
from smartdeals.schemas.results import DeleteAck, InsertAck

LATEST_PRODUCTS_LIMIT = 6


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProductService:
    """CRUD plus the newest-first listing for the Products collection."""

    def __init__(self, store: Store):
        self.store = store

    async def create_product(self, product: dict) -> InsertAck:
        doc = {**product, "created_at": utcnow()}
        with store_errors("products.create"):
            result = await self.store.products.insert_one(doc)
        return InsertAck.from_result(result)

    async def list_products(self) -> list[dict]:
        with store_errors("products.list"):
            docs = await self.store.products.find().to_list(length=None)
        return [serialize_document(d) for d in docs]

    async def get_product(self, product_id: str) -> Optional[dict]:
        oid = parse_object_id(product_id)
        with store_errors("products.get"):
            doc = await self.store.products.find_one({"_id": oid})
        return serialize_document(doc)

    async def delete_product(self, product_id: str) -> DeleteAck:
        """Delete one product. Bids referencing it are left in place."""
        oid = parse_object_id(product_id)
        with store_errors("products.delete"):
            result = await self.store.products.delete_one({"_id": oid})
        return DeleteAck.from_result(result)

    async def list_latest(self, limit: int = LATEST_PRODUCTS_LIMIT) -> list[dict]:
        with store_errors("products.latest"):
            cursor = self.store.products.find().sort("created_at", -1).limit(limit)
            docs = await cursor.to_list(length=None)
        return [serialize_document(d) for d in docs]
