"""Workout session snapshot models."""

from dataclasses import dataclass, field


@dataclass
class WorkoutSet:
    """A set as actually performed."""

    reps: int | None = None
    weight: float | None = None
    done: bool = False


@dataclass
class WorkoutItem:
    """One exercise within a finished session.

    Name, body part and image are copies taken when the session is
    recorded, so later catalog or routine edits never rewrite history.
    """

    exercise_id: str | None = None
    name: str | None = None
    body_part: str | None = None
    image: str | None = None
    sets: list[WorkoutSet] = field(default_factory=list)


@dataclass
class WorkoutSession:
    """A finished (or abandoned) execution of a routine.

    Times are epoch milliseconds. ``routine_id`` is informational only
    and is never checked against the routines table.
    """

    routine_id: str | None = None
    started_at: int | None = None
    finished_at: int | None = None
    duration_sec: int | None = None
    items: list[WorkoutItem] = field(default_factory=list)

    @property
    def set_count(self) -> int:
        return sum(len(item.sets) for item in self.items)

    @property
    def completed_set_count(self) -> int:
        return sum(1 for item in self.items for s in item.sets if s.done)
