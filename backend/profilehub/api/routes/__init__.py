"""Route modules for the ProfileHub API."""
from . import auth, profile

__all__ = ["auth", "profile"]
