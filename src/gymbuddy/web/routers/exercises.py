"""Exercise catalog routes."""

from fastapi import APIRouter, Depends

from ...db.engine import Store
from ...db.repositories import ExerciseRepository
from ..deps import get_store
from ..schemas import ExerciseIn

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("/groups")
async def list_groups(store: Store = Depends(get_store)) -> list[str]:
    """Body-part groups present in the catalog."""
    return await ExerciseRepository(store).list_groups()


@router.get("")
async def search_exercises(
    q: str = "",
    group: str = "*",
    store: Store = Depends(get_store),
) -> list[dict]:
    """Search the catalog (at most 300 results)."""
    exercises = await ExerciseRepository(store).search(query=q, group=group)
    return [e.to_dict() for e in exercises]


@router.post("")
async def create_exercise(payload: ExerciseIn, store: Store = Depends(get_store)) -> dict:
    """Add a custom exercise."""
    exercise = await ExerciseRepository(store).create(
        name=payload.name,
        image=payload.image,
        body_part=payload.body_part,
        primary_muscles=payload.primary_muscles,
        secondary_muscles=payload.secondary_muscles,
        equipment=payload.equipment,
    )
    return exercise.to_dict()
