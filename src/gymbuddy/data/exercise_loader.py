"""Exercise library loader from the bundled JSON dataset."""

import json
import logging
from pathlib import Path

from ..db.engine import Store
from ..db.repositories import ExerciseRepository
from ..models.exercises import Exercise

logger = logging.getLogger(__name__)


def get_seed_json_path() -> Path:
    """Get the path to the bundled exercises JSON file."""
    return Path(__file__).parent / "seed_exercises.json"


def load_seed_exercises(json_path: Path | None = None) -> list[Exercise]:
    """Load exercises from the seed JSON file.

    Args:
        json_path: Dataset to read. Uses the bundled file if not provided.

    Returns:
        List of Exercise objects loaded from JSON
    """
    json_path = json_path or get_seed_json_path()
    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)

    exercises = []
    for ex_data in data:
        try:
            exercise = Exercise.from_dict(ex_data)
        except (KeyError, TypeError) as e:
            # Skip invalid records but log the error
            logger.warning(
                "Skipping invalid exercise %s: %s",
                ex_data.get("name", "unknown") if isinstance(ex_data, dict) else ex_data,
                e,
            )
            continue
        if not exercise.id or not exercise.name.strip():
            logger.warning("Skipping exercise without id or name: %r", ex_data)
            continue
        exercises.append(exercise)

    return exercises


async def seed_exercises_if_empty(store: Store, json_path: Path | None = None) -> int:
    """Seed the catalog from the dataset when it holds no exercises.

    All rows go in as one transaction. Safe to call on every startup:
    once any exercise exists nothing is inserted.

    Args:
        store: Open database store.
        json_path: Optional dataset path. Uses the bundled file if not provided.

    Returns:
        Number of exercises seeded (0 when the catalog was not empty)
    """
    repo = ExerciseRepository(store)
    if await repo.count() > 0:
        logger.debug("Exercise catalog already populated; skipping seed")
        return 0

    exercises = load_seed_exercises(json_path)
    async with store.transaction() as db:
        # Re-check under the write lock in case another process seeded first
        cursor = await db.execute("SELECT COUNT(*) FROM exercises")
        (existing,) = await cursor.fetchone()
        if existing:
            return 0
        for exercise in exercises:
            await ExerciseRepository.insert(db, exercise)

    logger.info("Seeded %d exercises", len(exercises))
    return len(exercises)
