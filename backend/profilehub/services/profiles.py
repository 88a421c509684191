"""Profile service for the signed-in user."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from profilehub.core.exceptions import AuthError
from profilehub.db.store import RecordStore
from profilehub.models.user import UserRecord

EDITABLE_FIELDS = ("name", "bio", "avatar")


def _require_login(user_id: str | None) -> str:
    if not user_id:
        raise AuthError("Not logged in.")
    return user_id


def get_current_user(store: RecordStore, user_id: str | None) -> UserRecord:
    user = store.load().find_by_id(_require_login(user_id))
    if user is None:
        raise AuthError("Session invalid.")
    return user


def update_current_user(store: RecordStore, user_id: str | None, changes: Mapping[str, Any]) -> UserRecord:
    """Apply the string-valued editable fields in ``changes`` and persist.

    Fields that are absent or not strings are left as they are.
    """
    user_id = _require_login(user_id)
    collection = store.load()
    user = collection.find_by_id(user_id)
    if user is None:
        raise AuthError("Session invalid.")

    for field in EDITABLE_FIELDS:
        value = changes.get(field)
        if isinstance(value, str):
            setattr(user, field, value)

    store.save(collection)
    return user
