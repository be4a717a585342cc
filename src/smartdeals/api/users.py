"""User API routes.

Learn: Routes handle HTTP concerns only and delegate to UserService.
All user routes are open (no auth).
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends

from smartdeals.db.store import Store, get_store
from smartdeals.schemas.results import (
    DeleteAck,
    InsertAck,
    MessageResponse,
    UpdateAck,
    UserUpdate,
)
from smartdeals.services.user_service import UserService

router = APIRouter(prefix="/users")


def _svc(store: Store = Depends(get_store)) -> UserService:
    return UserService(store)


@router.post("", response_model=InsertAck | MessageResponse)
async def create_user(
    body: dict[str, Any] = Body(...),
    svc: UserService = Depends(_svc),
):
    """Register a user. Repeat registrations by email are a no-op."""
    return await svc.create_user(body)


@router.get("")
async def list_users(svc: UserService = Depends(_svc)) -> list[dict]:
    return await svc.list_users()


@router.get("/{user_id}")
async def get_user(user_id: str, svc: UserService = Depends(_svc)) -> Optional[dict]:
    return await svc.get_user(user_id)


@router.put("/{user_id}", response_model=UpdateAck)
async def update_user(
    user_id: str,
    body: UserUpdate,
    svc: UserService = Depends(_svc),
):
    return await svc.update_user(user_id, body)


@router.delete("/{user_id}", response_model=DeleteAck)
async def delete_user(user_id: str, svc: UserService = Depends(_svc)):
    return await svc.delete_user(user_id)
