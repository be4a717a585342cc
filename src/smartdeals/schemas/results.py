"""Pydantic schemas for write acknowledgments and request bodies.

Learn: Resource documents themselves are schemaless: sellers and
buyers can send any fields and they are stored as-is. What does have a
fixed shape is what the driver reports back after a write, so those
are modelled here. Field aliases keep the camelCase keys clients of the
original service already parse (insertedId, deletedCount, ...).
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Ack(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True


class InsertAck(_Ack):
    inserted_id: str = Field(alias="insertedId")

    @classmethod
    def from_result(cls, result) -> "InsertAck":
        return cls(
            acknowledged=result.acknowledged,
            inserted_id=str(result.inserted_id),
        )


class UpdateAck(_Ack):
    matched_count: int = Field(alias="matchedCount")
    modified_count: int = Field(alias="modifiedCount")
    upserted_count: int = Field(0, alias="upsertedCount")
    upserted_id: Optional[str] = Field(None, alias="upsertedId")

    @classmethod
    def from_result(cls, result) -> "UpdateAck":
        upserted = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_count=0 if upserted is None else 1,
            upserted_id=None if upserted is None else str(upserted),
        )


class DeleteAck(_Ack):
    deleted_count: int = Field(alias="deletedCount")

    @classmethod
    def from_result(cls, result) -> "DeleteAck":
        return cls(acknowledged=result.acknowledged, deleted_count=result.deleted_count)


class MessageResponse(BaseModel):
    message: str


class UserUpdate(BaseModel):
    """PUT /users/{id} body. Exactly these three fields are replaced.

    Values are written as sent, whatever their type.
    """

    name: Any = None
    email: Any = None
    role: Any = None
