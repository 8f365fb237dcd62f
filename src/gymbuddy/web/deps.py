"""Request-scoped accessors for objects kept in app state."""

from fastapi import Request

from ..config import Settings
from ..db.engine import Store


def get_store(request: Request) -> Store:
    """Get the database store opened by the app lifespan."""
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
