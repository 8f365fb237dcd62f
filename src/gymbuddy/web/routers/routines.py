"""Routine composition routes."""

from fastapi import APIRouter, Depends

from ...config import Settings
from ...db.engine import Store
from ...db.repositories import RoutineRepository
from ...errors import NotFoundError
from ..deps import get_app_settings, get_store
from ..schemas import AddExerciseIn, AddSetIn, RoutineCreateIn, RoutineUpdateIn

router = APIRouter(prefix="/routines", tags=["routines"])


def get_repo(
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> RoutineRepository:
    return RoutineRepository(store, default_name=settings.default_routine_name)


async def _full_routine(repo: RoutineRepository, routine_id: str) -> dict:
    routine = await repo.get(routine_id)
    if routine is None:
        raise NotFoundError(f"Routine {routine_id} not found")
    return routine.to_dict()


@router.get("")
async def list_routines(repo: RoutineRepository = Depends(get_repo)) -> list[dict]:
    """Routine summaries, most recently edited first.

    Entries carry ``exerciseCount`` but no sets.
    """
    return [r.to_dict() for r in await repo.list_summaries()]


@router.post("")
async def create_routine(
    payload: RoutineCreateIn | None = None,
    repo: RoutineRepository = Depends(get_repo),
) -> dict:
    routine = await repo.create(payload.name if payload else None)
    return routine.to_dict()


@router.get("/{routine_id}")
async def get_routine(routine_id: str, repo: RoutineRepository = Depends(get_repo)) -> dict:
    return await _full_routine(repo, routine_id)


@router.put("/{routine_id}")
async def update_routine(
    routine_id: str,
    payload: RoutineUpdateIn,
    repo: RoutineRepository = Depends(get_repo),
) -> dict:
    """Rename the routine and/or apply planned set values."""
    updates = payload.set_updates() if payload.exercises is not None else None
    routine = await repo.update(routine_id, name=payload.name, updates=updates)
    return routine.to_dict()


@router.post("/{routine_id}/exercises")
async def add_exercise(
    routine_id: str,
    payload: AddExerciseIn,
    repo: RoutineRepository = Depends(get_repo),
) -> dict:
    routine = await repo.add_exercise(routine_id, payload.exercise_id)
    return routine.to_dict()


@router.delete("/{routine_id}/exercises/{rex_id}")
async def remove_exercise(
    routine_id: str, rex_id: str, repo: RoutineRepository = Depends(get_repo)
) -> dict:
    await repo.remove_exercise(routine_id, rex_id)
    return {"ok": True}


@router.post("/{routine_id}/exercises/{rex_id}/sets")
async def add_set(
    routine_id: str,
    rex_id: str,
    payload: AddSetIn | None = None,
    repo: RoutineRepository = Depends(get_repo),
) -> dict:
    payload = payload or AddSetIn()
    set_id = await repo.add_set(routine_id, rex_id, reps=payload.reps, weight=payload.weight)
    return {"id": set_id}


@router.delete("/{routine_id}/exercises/{rex_id}/sets/{set_id}")
async def remove_set(
    routine_id: str,
    rex_id: str,
    set_id: str,
    repo: RoutineRepository = Depends(get_repo),
) -> dict:
    await repo.remove_set(routine_id, rex_id, set_id)
    return {"ok": True}
