"""HTTP API for gymbuddy."""

from .app import create_app

__all__ = ["create_app"]
