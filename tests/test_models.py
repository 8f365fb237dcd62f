"""Tests for data models and request bodies."""

import pytest

from gymbuddy.models.exercises import Exercise
from gymbuddy.models.records import PersonalRecord
from gymbuddy.models.routine import (
    Routine,
    RoutineExercise,
    RoutineSet,
    RoutineSetUpdate,
    RoutineSummary,
)
from gymbuddy.web.schemas import RoutineUpdateIn, SetValuesIn, WorkoutIn


@pytest.fixture
def bench():
    return Exercise(
        id="ex_bench",
        name="Bench Press",
        body_part="Chest",
        primary_muscles="Pectorals",
        equipment="Barbell",
    )


class TestExercise:
    """Tests for Exercise model."""

    def test_to_dict_uses_wire_keys(self, bench):
        data = bench.to_dict()

        assert data == {
            "id": "ex_bench",
            "name": "Bench Press",
            "image": "",
            "bodyPart": "Chest",
            "primaryMuscles": "Pectorals",
            "secondaryMuscles": "",
            "equipment": "Barbell",
            "isCustom": False,
        }

    def test_from_dict_fills_missing_fields(self):
        exercise = Exercise.from_dict({"id": "x1", "name": "Plank", "bodyPart": None})

        assert exercise.body_part == ""
        assert exercise.image == ""
        assert exercise.is_custom is False

    def test_from_dict_requires_id_and_name(self):
        with pytest.raises(KeyError):
            Exercise.from_dict({"name": "Plank"})


class TestRoutine:
    """Tests for routine models."""

    def test_full_routine_shape(self, bench):
        routine = Routine(
            id="rut_1",
            name="Push",
            created_at=1000,
            updated_at=2000,
            exercises=[
                RoutineExercise(
                    id="rex_1",
                    order_index=1,
                    exercise=bench,
                    sets=[RoutineSet(id="set_1", reps=8, weight=60.0), RoutineSet(id="set_2")],
                )
            ],
        )
        data = routine.to_dict()

        assert data["createdAt"] == 1000
        assert data["updatedAt"] == 2000
        item = data["exercises"][0]
        assert item["order_index"] == 1
        assert item["exercise"]["name"] == "Bench Press"
        assert "isCustom" not in item["exercise"]
        assert item["sets"] == [
            {"id": "set_1", "reps": 8, "peso": 60.0},
            {"id": "set_2", "reps": None, "peso": None},
        ]
        assert routine.total_sets == 2

    def test_summary_has_count_but_no_sets(self):
        data = RoutineSummary(
            id="rut_1", name="Push", created_at=1, updated_at=2, exercise_count=3
        ).to_dict()

        assert data["exerciseCount"] == 3
        assert "exercises" not in data

    def test_set_update_rejects_unknown_fields(self):
        with pytest.raises(ValueError):
            RoutineSetUpdate(set_id="set_1", changes={"rpe": 8})


class TestPersonalRecord:
    def test_to_dict(self):
        record = PersonalRecord(
            exercise_id="ex_bench",
            name="Bench Press",
            body_part="Chest",
            image="",
            pr_weight=100.0,
            reps_at_pr=8,
        )

        assert record.to_dict() == {
            "exerciseId": "ex_bench",
            "name": "Bench Press",
            "bodyPart": "Chest",
            "image": "",
            "prWeight": 100.0,
            "repsAtPr": 8,
        }


class TestRequestBodies:
    """Tests for API request models."""

    def test_set_values_only_carry_supplied_fields(self):
        update = SetValuesIn.model_validate({"id": "set_1", "reps": 10}).to_update()

        assert update.set_id == "set_1"
        assert update.changes == {"reps": 10}

    def test_explicit_null_clears(self):
        update = SetValuesIn.model_validate({"id": "set_1", "peso": None}).to_update()

        assert update.changes == {"weight": None}

    def test_set_without_id_is_skipped(self):
        body = RoutineUpdateIn.model_validate(
            {"exercises": [{"id": "rex_1", "sets": [{"reps": 5}, {"id": "set_9", "peso": 40}]}]}
        )

        updates = body.set_updates()
        assert [u.set_id for u in updates] == ["set_9"]
        assert updates[0].changes == {"weight": 40.0}

    def test_workout_payload_to_session(self):
        body = WorkoutIn.model_validate(
            {
                "routineId": "rut_1",
                "startedAt": 1000,
                "finishedAt": 61000,
                "durationSec": 60,
                "currentIndex": 1,
                "items": [
                    {
                        "exerciseId": "ex_bench",
                        "name": "Bench Press",
                        "bodyPart": "Chest",
                        "image": "",
                        "sets": [
                            {"id": "set_1", "reps": 8, "peso": 60, "done": True},
                            {"reps": 6, "peso": 65},
                        ],
                    }
                ],
            }
        )
        session = body.to_session()

        assert session.routine_id == "rut_1"
        assert session.duration_sec == 60
        assert session.items[0].body_part == "Chest"
        assert session.items[0].sets[0].done is True
        assert session.items[0].sets[1].done is False
        assert session.set_count == 2
        assert session.completed_set_count == 1
