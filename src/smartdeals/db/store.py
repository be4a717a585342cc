"""MongoDB store handle and helpers.

Learn: One AsyncIOMotorClient is opened at startup (see main.lifespan)
and shared by every request. The driver pools connections internally
and the server serializes conflicting writes per document, so there is
no locking here. Handlers never touch the client directly; they get the
Store through the get_store dependency, which makes it trivial to swap
in an in-memory client for tests.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Optional

import structlog
from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError, WriteError

from smartdeals.config import Settings
from smartdeals.errors import InvalidIdentifier, StoreUnavailable, WriteRejected

logger = structlog.get_logger()

USERS = "Users"
PRODUCTS = "Products"
BIDS = "Bids"


@dataclass
class Store:
    """Shared handle to the three marketplace collections."""

    client: Any
    database_name: str

    @property
    def database(self):
        return self.client[self.database_name]

    @property
    def users(self):
        return self.database[USERS]

    @property
    def products(self):
        return self.database[PRODUCTS]

    @property
    def bids(self):
        return self.database[BIDS]

    async def ping(self) -> None:
        await self.client.admin.command("ping")

    def close(self) -> None:
        self.client.close()


def open_store(settings: Settings) -> Store:
    """Create the client. Motor connects lazily, so this never blocks."""
    client = AsyncIOMotorClient(
        settings.mongodb_uri,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        tz_aware=True,
    )
    return Store(client=client, database_name=settings.database_name)


def get_store(request: Request) -> Store:
    """FastAPI dependency: the process-wide store opened in lifespan."""
    return request.app.state.store


def parse_object_id(value: str) -> ObjectId:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidIdentifier(f"not an ObjectId: {value!r}")


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Translate driver failures into API errors. No retries.

    A write the server refused (duplicate _id, failed validation) is the
    caller's problem; anything else means the store is unusable.
    """
    try:
        yield
    except WriteError as e:
        logger.info("store.write_rejected", operation=operation, code=e.code)
        raise WriteRejected(str(e)) from e
    except PyMongoError as e:
        logger.error("store.error", operation=operation, error=str(e))
        raise StoreUnavailable(str(e)) from e


def serialize_document(doc: Optional[dict]) -> Optional[dict]:
    """Render ObjectIds as hex strings and datetimes as ISO-8601."""
    if doc is None:
        return None
    return jsonable_encoder(doc, custom_encoder={ObjectId: str})
