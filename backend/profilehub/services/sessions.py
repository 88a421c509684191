"""Server-side session registry behind a signed cookie."""
from __future__ import annotations

import logging
import secrets
import time
from dataclasses import dataclass

from profilehub.core.security import SessionSigner

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SessionEntry:
    user_id: str
    created_at: float


class SessionManager:
    """Tie opaque cookie tokens to user ids.

    The cookie only carries a random session id signed with the process secret.
    The id -> user mapping stays on the server, so destroying a session
    revokes it even if the client keeps sending the old cookie.
    """

    def __init__(self, secret_key: str, max_age_seconds: int) -> None:
        self.max_age_seconds = max_age_seconds
        self._signer = SessionSigner(secret_key)
        self._sessions: dict[str, SessionEntry] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def start(self, user_id: str) -> str:
        """Register a new session and return the signed cookie value."""
        session_id = secrets.token_urlsafe(32)
        self._sessions[session_id] = SessionEntry(user_id=user_id, created_at=time.time())
        return self._signer.dumps({"sid": session_id})

    def resolve(self, token: str | None) -> str | None:
        session_id = self._session_id(token)
        if session_id is None:
            return None
        entry = self._sessions.get(session_id)
        if entry is None:
            return None
        if self._expired(entry, time.time()):
            del self._sessions[session_id]
            return None
        return entry.user_id

    def destroy(self, token: str | None) -> None:
        session_id = self._session_id(token)
        if session_id is not None:
            self._sessions.pop(session_id, None)

    def purge_expired(self) -> int:
        """Drop every expired session and return how many were removed."""
        now = time.time()
        expired = [sid for sid, entry in self._sessions.items() if self._expired(entry, now)]
        for session_id in expired:
            del self._sessions[session_id]
        if expired:
            logger.info("Purged %d expired session(s)", len(expired))
        return len(expired)

    def _expired(self, entry: SessionEntry, now: float) -> bool:
        return now - entry.created_at >= self.max_age_seconds

    def _session_id(self, token: str | None) -> str | None:
        if not token:
            return None
        try:
            payload = self._signer.loads(token, max_age=self.max_age_seconds)
        except ValueError:
            return None
        session_id = payload.get("sid") if isinstance(payload, dict) else None
        return session_id if isinstance(session_id, str) else None
