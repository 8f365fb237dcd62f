"""CLI commands for gymbuddy."""

from .exercises import exercises
from .init import init
from .marks import marks
from .routines import routines
from .serve import serve

__all__ = [
    "exercises",
    "init",
    "marks",
    "routines",
    "serve",
]
