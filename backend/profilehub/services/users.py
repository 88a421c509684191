"""Account service: signup and login against the record store."""
from __future__ import annotations

import logging

from profilehub.core.exceptions import AuthError, ConflictError, ValidationError
from profilehub.core.security import PasswordHasher
from profilehub.db.store import RecordStore
from profilehub.models.user import UserRecord

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password."


def _present(*values: object) -> bool:
    return all(isinstance(value, str) and value for value in values)


def get_user_by_email(store: RecordStore, email: str) -> UserRecord | None:
    return store.load().find_by_email(email)


def create_user(store: RecordStore, name: str | None, email: str | None, password: str | None) -> UserRecord:
    if not _present(name, email, password):
        raise ValidationError("Please provide name, email, and password.")

    collection = store.load()
    if collection.find_by_email(email):
        raise ConflictError("Email already registered.")

    user = UserRecord(name=name, email=email, password_hash=PasswordHasher.hash(password))
    collection.users.append(user)
    store.save(collection)
    logger.info("Created user %s", user.id)
    return user


def authenticate_user(store: RecordStore, email: str | None, password: str | None) -> UserRecord:
    if not _present(email, password):
        raise ValidationError("Please provide email and password.")

    user = get_user_by_email(store, email)
    # Same error for unknown email and wrong password.
    if not user:
        logger.info("Login failed for unknown email")
        raise AuthError(INVALID_CREDENTIALS)
    if not PasswordHasher.verify(password, user.password_hash):
        logger.info("Login failed for user %s", user.id)
        raise AuthError(INVALID_CREDENTIALS)
    return user
