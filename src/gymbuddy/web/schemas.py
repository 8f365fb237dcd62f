"""Request bodies accepted by the HTTP API.

Every field is optional so that a missing key means "not supplied";
the defaults documented on each model say what that implies. Unknown
keys are ignored.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..models.routine import SET_UPDATE_FIELDS, RoutineSetUpdate
from ..models.workout import WorkoutItem, WorkoutSession, WorkoutSet


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ExerciseIn(_Body):
    """New custom exercise. ``name`` is required (checked by the repository
    so a blank name is a 400, not a 422); the rest default to ``""``."""

    name: str | None = None
    image: str | None = None
    body_part: str | None = Field(None, alias="bodyPart")
    primary_muscles: str | None = Field(None, alias="primaryMuscles")
    secondary_muscles: str | None = Field(None, alias="secondaryMuscles")
    equipment: str | None = None


class RoutineCreateIn(_Body):
    """New routine. A missing or blank name gets the configured default."""

    name: str | None = None


class SetValuesIn(_Body):
    """Planned set values inside a routine update.

    Sets without ``id`` are skipped. Only the keys present in the request
    are written; ``null`` clears a value.
    """

    id: str | None = None
    reps: int | None = None
    weight: float | None = Field(None, alias="peso")

    def to_update(self) -> RoutineSetUpdate | None:
        if not self.id:
            return None
        changes = {
            name: getattr(self, name)
            for name in SET_UPDATE_FIELDS
            if name in self.model_fields_set
        }
        return RoutineSetUpdate(set_id=self.id, changes=changes)


class RoutineExerciseIn(_Body):
    id: str | None = None
    sets: list[SetValuesIn] = Field(default_factory=list)


class RoutineUpdateIn(_Body):
    """Routine edit.

    A non-blank ``name`` renames the routine. When ``exercises`` is present
    (even empty) the contained set values are applied and the routine's
    ``updatedAt`` is touched once.
    """

    name: str | None = None
    exercises: list[RoutineExerciseIn] | None = None

    def set_updates(self) -> list[RoutineSetUpdate]:
        updates = []
        for exercise in self.exercises or []:
            for values in exercise.sets:
                update = values.to_update()
                if update is not None:
                    updates.append(update)
        return updates


class AddExerciseIn(_Body):
    exercise_id: str | None = Field(None, alias="exerciseId")


class AddSetIn(_Body):
    """New planned set; both values default to null."""

    reps: int | None = None
    weight: float | None = Field(None, alias="peso")


class WorkoutSetIn(_Body):
    reps: int | None = None
    weight: float | None = Field(None, alias="peso")
    done: bool = False


class WorkoutItemIn(_Body):
    exercise_id: str | None = Field(None, alias="exerciseId")
    name: str | None = None
    body_part: str | None = Field(None, alias="bodyPart")
    image: str | None = None
    sets: list[WorkoutSetIn] = Field(default_factory=list)


class WorkoutIn(_Body):
    """Finished session snapshot, timestamps in epoch milliseconds.

    Nothing here is checked against routines or the catalog: the session
    records what happened, not what was planned.
    """

    routine_id: str | None = Field(None, alias="routineId")
    started_at: int | None = Field(None, alias="startedAt")
    finished_at: int | None = Field(None, alias="finishedAt")
    duration_sec: int | None = Field(None, alias="durationSec")
    items: list[WorkoutItemIn] = Field(default_factory=list)

    def to_session(self) -> WorkoutSession:
        return WorkoutSession(
            routine_id=self.routine_id,
            started_at=self.started_at,
            finished_at=self.finished_at,
            duration_sec=self.duration_sec,
            items=[
                WorkoutItem(
                    exercise_id=item.exercise_id,
                    name=item.name,
                    body_part=item.body_part,
                    image=item.image,
                    sets=[
                        WorkoutSet(reps=s.reps, weight=s.weight, done=s.done)
                        for s in item.sets
                    ],
                )
                for item in self.items
            ],
        )
