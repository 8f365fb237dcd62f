"""Routine (workout template) models."""

from dataclasses import dataclass, field

from .exercises import Exercise


@dataclass
class RoutineSet:
    """A planned set. Both values stay null until the user fills them in."""

    id: str
    reps: int | None = None
    weight: float | None = None

    def to_dict(self) -> dict:
        return {"id": self.id, "reps": self.reps, "peso": self.weight}


@dataclass
class RoutineExercise:
    """An exercise placed in a routine at a given position."""

    id: str
    order_index: int
    exercise: Exercise
    sets: list[RoutineSet] = field(default_factory=list)

    def to_dict(self) -> dict:
        exercise = self.exercise.to_dict()
        exercise.pop("isCustom")
        return {
            "id": self.id,
            "order_index": self.order_index,
            "exercise": exercise,
            "sets": [s.to_dict() for s in self.sets],
        }


@dataclass
class Routine:
    """A named routine with its full exercise and set detail.

    ``updated_at`` is the latest write anywhere in the routine's subtree
    (exercises and sets included), in epoch milliseconds.
    """

    id: str
    name: str
    created_at: int
    updated_at: int
    exercises: list[RoutineExercise] = field(default_factory=list)

    @property
    def total_sets(self) -> int:
        return sum(len(ex.sets) for ex in self.exercises)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }


@dataclass
class RoutineSummary:
    """List entry for a routine.

    Carries only the exercise count, never the sets; fetch the routine
    itself for full detail.
    """

    id: str
    name: str
    created_at: int
    updated_at: int
    exercise_count: int = 0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "exerciseCount": self.exercise_count,
        }


# Columns a set update may touch
SET_UPDATE_FIELDS = ("reps", "weight")


@dataclass
class RoutineSetUpdate:
    """New values for one planned set.

    ``changes`` only holds the fields the caller supplied: a missing key
    leaves the stored value alone, an explicit ``None`` clears it.
    """

    set_id: str
    changes: dict[str, int | float | None] = field(default_factory=dict)

    def __post_init__(self):
        unknown = set(self.changes) - set(SET_UPDATE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown set fields: {sorted(unknown)}")
