"""Database layer for gymbuddy."""

from .engine import Store, new_id, now_ms
from .repositories import (
    SEARCH_LIMIT,
    ExerciseRepository,
    PersonalRecordRepository,
    RoutineRepository,
    WorkoutRepository,
)

__all__ = [
    "ExerciseRepository",
    "new_id",
    "now_ms",
    "PersonalRecordRepository",
    "RoutineRepository",
    "SEARCH_LIMIT",
    "Store",
    "WorkoutRepository",
]
