"""Persisted record models."""
from .user import UserCollection, UserRecord

__all__ = ["UserRecord", "UserCollection"]
