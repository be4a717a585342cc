"""Bid service: offers placed by buyers on products.

Learn: Bids reference their product by id string and their buyer by
email, but neither reference is checked. Documents are independent;
a bid on a deleted (or never existing) product is still a valid bid.
"""

from typing import Optional

from smartdeals.db.store import Store, parse_object_id, serialize_document, store_errors
from smartdeals.schemas.results import DeleteAck, InsertAck


class BidService:
    """CRUD plus per-buyer and per-product listings for the Bids collection."""

    def __init__(self, store: Store):
        self.store = store

    async def create_bid(self, bid: dict) -> InsertAck:
        with store_errors("bids.create"):
            result = await self.store.bids.insert_one(dict(bid))
        return InsertAck.from_result(result)

    async def list_bids(self, buyer_email: Optional[str] = None) -> list[dict]:
        """List bids, scoped to one buyer when an email is given.

        With no email every bid is returned. Callers are expected to
        have authorized the scope already (see auth.dependencies).
        """
        query = {}
        if buyer_email:
            query["buyer_email"] = buyer_email
        with store_errors("bids.list"):
            docs = await self.store.bids.find(query).to_list(length=None)
        return [serialize_document(d) for d in docs]

    async def delete_bid(self, bid_id: str) -> DeleteAck:
        oid = parse_object_id(bid_id)
        with store_errors("bids.delete"):
            result = await self.store.bids.delete_one({"_id": oid})
        return DeleteAck.from_result(result)

    async def list_product_bids(self, product_id: str) -> list[dict]:
        """Bids for one product, highest price first."""
        with store_errors("bids.by_product"):
            cursor = self.store.bids.find({"product": product_id}).sort("bid_price", -1)
            docs = await cursor.to_list(length=None)
        return [serialize_document(d) for d in docs]
