"""API routers."""

from . import exercises, routines, workouts

__all__ = ["exercises", "routines", "workouts"]
