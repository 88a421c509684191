"""Profile endpoints for the signed-in user."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from profilehub.core.dependencies import get_store, require_user_id
from profilehub.db.store import RecordStore
from profilehub.schemas.user import ProfileUpdate, UserEnvelope, UserRead
from profilehub.services.profiles import get_current_user, update_current_user

router = APIRouter(prefix="/me", tags=["profile"])


@router.get("", response_model=UserEnvelope)
async def read_profile(
    store: RecordStore = Depends(get_store),
    user_id: str = Depends(require_user_id),
) -> UserEnvelope:
    return UserEnvelope(user=UserRead.model_validate(get_current_user(store, user_id)))


@router.put("", response_model=UserEnvelope)
async def update_profile(
    payload: ProfileUpdate | None = None,
    store: RecordStore = Depends(get_store),
    user_id: str = Depends(require_user_id),
) -> UserEnvelope:
    changes = payload.model_dump() if payload else {}
    return UserEnvelope(user=UserRead.model_validate(update_current_user(store, user_id, changes)))
