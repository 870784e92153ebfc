"""API routers for different resource types."""

from gridiron.api.routers.leagues import router as leagues_router

__all__ = [
    "leagues_router",
]
