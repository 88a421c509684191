"""Pydantic schemas for user operations."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class SignupRequest(BaseModel):
    # Presence is checked by the account service so a missing field is a 400.
    name: str | None = None
    email: str | None = None
    password: str | None = None


class UserRead(BaseModel):
    """Public view of an account. Never carries the password hash."""

    id: str
    name: str
    email: str
    bio: str = ""
    avatar: str = ""

    model_config = ConfigDict(from_attributes=True)


class UserEnvelope(BaseModel):
    user: UserRead


class ProfileUpdate(BaseModel):
    """Partial update; values of the wrong type are ignored, not rejected."""

    name: Any = None
    bio: Any = None
    avatar: Any = None
