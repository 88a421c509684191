"""Authentication-related schemas."""
from __future__ import annotations

from pydantic import BaseModel


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class LogoutResponse(BaseModel):
    ok: bool = True
