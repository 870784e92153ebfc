"""Gridiron API package - FastAPI backend for the season engine."""

from gridiron.api.main import app, create_app

__all__ = ["app", "create_app"]
