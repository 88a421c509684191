"""Reusable dependencies for FastAPI routes."""
from __future__ import annotations

from fastapi import Depends, Request

from profilehub.core.config import Settings
from profilehub.core.exceptions import AuthError
from profilehub.db.store import RecordStore
from profilehub.services.sessions import SessionManager


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_sessions(request: Request) -> SessionManager:
    return request.app.state.sessions


def get_session_token(request: Request, settings: Settings = Depends(get_app_settings)) -> str | None:
    return request.cookies.get(settings.session_cookie_name)


def get_current_user_id(
    token: str | None = Depends(get_session_token),
    sessions: SessionManager = Depends(get_sessions),
) -> str | None:
    """Resolve the session cookie to a user id, or ``None`` when signed out."""
    return sessions.resolve(token)


def require_user_id(user_id: str | None = Depends(get_current_user_id)) -> str:
    """Reject the request with 401 before the body is looked at."""
    if not user_id:
        raise AuthError("Not logged in.")
    return user_id
