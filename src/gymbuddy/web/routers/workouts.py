"""Workout session and personal record routes."""

from fastapi import APIRouter, Depends

from ...db.engine import Store
from ...db.repositories import PersonalRecordRepository, WorkoutRepository
from ..deps import get_store
from ..schemas import WorkoutIn

router = APIRouter(tags=["workouts"])


@router.post("/workouts")
async def record_workout(payload: WorkoutIn, store: Store = Depends(get_store)) -> dict:
    """Store a finished session snapshot."""
    workout_id = await WorkoutRepository(store).record(payload.to_session())
    return {"id": workout_id}


@router.get("/marks")
async def personal_records(store: Store = Depends(get_store)) -> list[dict]:
    """Personal record per exercise, sorted by name."""
    records = await PersonalRecordRepository(store).list_records()
    return [r.to_dict() for r in records]
