"""API router aggregator."""
from fastapi import APIRouter

from profilehub.api.routes import auth, profile

api_router = APIRouter(prefix="/api")
api_router.include_router(auth.router)
api_router.include_router(profile.router)

__all__ = ["api_router"]
