"""Authentication endpoints."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response

from profilehub.core.config import Settings
from profilehub.core.dependencies import get_app_settings, get_session_token, get_sessions, get_store
from profilehub.db.store import RecordStore
from profilehub.schemas.auth import LoginRequest, LogoutResponse
from profilehub.schemas.user import SignupRequest, UserEnvelope, UserRead
from profilehub.services.sessions import SessionManager
from profilehub.services.users import authenticate_user, create_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def start_session(
    response: Response,
    sessions: SessionManager,
    settings: Settings,
    user_id: str,
    previous_token: str | None = None,
) -> None:
    """Replace any existing session with a fresh one and set the cookie."""
    sessions.destroy(previous_token)
    token = sessions.start(user_id)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        max_age=settings.session_max_age_seconds,
    )


@router.post("/signup", response_model=UserEnvelope)
async def signup(
    payload: SignupRequest,
    response: Response,
    store: RecordStore = Depends(get_store),
    sessions: SessionManager = Depends(get_sessions),
    settings: Settings = Depends(get_app_settings),
    token: str | None = Depends(get_session_token),
) -> UserEnvelope:
    user = create_user(store, payload.name, payload.email, payload.password)
    start_session(response, sessions, settings, user.id, token)
    return UserEnvelope(user=UserRead.model_validate(user))


@router.post("/login", response_model=UserEnvelope)
async def login(
    payload: LoginRequest,
    response: Response,
    store: RecordStore = Depends(get_store),
    sessions: SessionManager = Depends(get_sessions),
    settings: Settings = Depends(get_app_settings),
    token: str | None = Depends(get_session_token),
) -> UserEnvelope:
    user = authenticate_user(store, payload.email, payload.password)
    start_session(response, sessions, settings, user.id, token)
    logger.info("User %s logged in", user.id)
    return UserEnvelope(user=UserRead.model_validate(user))


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    sessions: SessionManager = Depends(get_sessions),
    settings: Settings = Depends(get_app_settings),
    token: str | None = Depends(get_session_token),
) -> LogoutResponse:
    sessions.destroy(token)
    response.delete_cookie(
        settings.session_cookie_name,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return LogoutResponse()
