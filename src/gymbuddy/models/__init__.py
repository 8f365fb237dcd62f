"""Data models for gymbuddy."""

from .exercises import Exercise
from .records import PersonalRecord
from .routine import (
    Routine,
    RoutineExercise,
    RoutineSet,
    RoutineSetUpdate,
    RoutineSummary,
)
from .workout import WorkoutItem, WorkoutSession, WorkoutSet

__all__ = [
    "Exercise",
    "PersonalRecord",
    "Routine",
    "RoutineExercise",
    "RoutineSet",
    "RoutineSetUpdate",
    "RoutineSummary",
    "WorkoutItem",
    "WorkoutSession",
    "WorkoutSet",
]
