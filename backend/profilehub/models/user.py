"""Persisted shape of a user account."""
from __future__ import annotations

import time
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _new_id() -> str:
    return str(uuid.uuid4())


def _now_ms() -> int:
    return int(time.time() * 1000)


class UserRecord(BaseModel):
    """Stored account with its password hash.

    Field names are written with their camelCase aliases so the data file keeps
    the ``{"id", "name", "email", "passwordHash", ...}`` layout.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=_new_id)
    name: str
    email: str
    password_hash: str = Field(alias="passwordHash")
    bio: str = ""
    avatar: str = ""
    created_at: int = Field(default_factory=_now_ms, alias="createdAt")

    @field_validator("bio", "avatar", mode="before")
    @classmethod
    def _blank_if_missing(cls, value: str | None) -> str:
        return value or ""


class UserCollection(BaseModel):
    """Whole contents of the data file."""

    users: list[UserRecord] = Field(default_factory=list)

    def find_by_email(self, email: str) -> UserRecord | None:
        normalized = email.lower()
        return next((user for user in self.users if user.email.lower() == normalized), None)

    def find_by_id(self, user_id: str) -> UserRecord | None:
        return next((user for user in self.users if user.id == user_id), None)
