"""User service: registration and profile records.

Learn: Registration is idempotent by email. The front end calls
POST /users after every sign-in, so a second call for the same email
must be a quiet no-op rather than a 409.
"""

from typing import Optional

from smartdeals.db.store import Store, parse_object_id, serialize_document, store_errors
from smartdeals.schemas.results import (
    DeleteAck,
    InsertAck,
    MessageResponse,
    UpdateAck,
    UserUpdate,
)

USER_EXISTS_MESSAGE = "User Already Exists"


class UserService:
    """CRUD for the Users collection."""

    def __init__(self, store: Store):
        self.store = store

    async def create_user(self, user: dict) -> InsertAck | MessageResponse:
        with store_errors("users.create"):
            existing = await self.store.users.find_one({"email": user.get("email")})
            if existing:
                return MessageResponse(message=USER_EXISTS_MESSAGE)
            result = await self.store.users.insert_one(dict(user))
        return InsertAck.from_result(result)

    async def list_users(self) -> list[dict]:
        with store_errors("users.list"):
            docs = await self.store.users.find().to_list(length=None)
        return [serialize_document(d) for d in docs]

    async def get_user(self, user_id: str) -> Optional[dict]:
        oid = parse_object_id(user_id)
        with store_errors("users.get"):
            doc = await self.store.users.find_one({"_id": oid})
        return serialize_document(doc)

    async def update_user(self, user_id: str, body: UserUpdate) -> UpdateAck:
        oid = parse_object_id(user_id)
        update = {"$set": {"name": body.name, "email": body.email, "role": body.role}}
        with store_errors("users.update"):
            result = await self.store.users.update_one({"_id": oid}, update)
        return UpdateAck.from_result(result)

    async def delete_user(self, user_id: str) -> DeleteAck:
        oid = parse_object_id(user_id)
        with store_errors("users.delete"):
            result = await self.store.users.delete_one({"_id": oid})
        return DeleteAck.from_result(result)
