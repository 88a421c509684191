"""Security helpers for password hashing and session signing."""
from __future__ import annotations

from typing import Any

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer
from passlib.context import CryptContext

from .exceptions import InternalError


_password_context = CryptContext(schemes=["argon2"], deprecated="auto")


class PasswordHasher:
    """Hash and verify user passwords using Argon2id."""

    @staticmethod
    def hash(password: str) -> str:
        try:
            return _password_context.hash(password)
        except (TypeError, ValueError) as exc:
            raise InternalError("Password hashing failed") from exc

    @staticmethod
    def verify(password: str, hashed: str) -> bool:
        try:
            return _password_context.verify(password, hashed)
        except (TypeError, ValueError) as exc:
            # An unreadable stored hash must never count as a match.
            raise InternalError("Password verification failed") from exc


class SessionSigner:
    """Sign and unsign session cookie payloads."""

    def __init__(self, secret_key: str, salt: str = "profilehub-session") -> None:
        self._serializer = URLSafeTimedSerializer(secret_key, salt=salt)

    def dumps(self, data: dict[str, Any]) -> str:
        return self._serializer.dumps(data)

    def loads(self, token: str, max_age: int | None = None) -> dict[str, Any]:
        try:
            return self._serializer.loads(token, max_age=max_age)
        except (BadSignature, SignatureExpired) as exc:
            raise ValueError("Invalid or expired session token") from exc
