"""Database store handle and schema."""

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator
from uuid import uuid4

import aiosqlite

from ..errors import StoreClosedError

logger = logging.getLogger(__name__)

# Foreign keys are declared for documentation only; SQLite leaves them
# unenforced unless PRAGMA foreign_keys is switched on, which we never do.
SCHEMA = """
CREATE TABLE IF NOT EXISTS exercises (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    image TEXT,
    body_part TEXT,
    primary_muscles TEXT,
    secondary_muscles TEXT,
    equipment TEXT,
    is_custom INTEGER DEFAULT 0
);

CREATE TABLE IF NOT EXISTS routines (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    created_at INTEGER,
    updated_at INTEGER
);

CREATE TABLE IF NOT EXISTS routine_exercises (
    id TEXT PRIMARY KEY,
    routine_id TEXT NOT NULL,
    exercise_id TEXT NOT NULL,
    order_index INTEGER DEFAULT 0,
    FOREIGN KEY (routine_id) REFERENCES routines(id),
    FOREIGN KEY (exercise_id) REFERENCES exercises(id)
);

CREATE TABLE IF NOT EXISTS routine_sets (
    id TEXT PRIMARY KEY,
    routine_exercise_id TEXT NOT NULL,
    reps INTEGER,
    weight REAL,
    FOREIGN KEY (routine_exercise_id) REFERENCES routine_exercises(id)
);

CREATE TABLE IF NOT EXISTS workouts (
    id TEXT PRIMARY KEY,
    routine_id TEXT,
    started_at INTEGER,
    finished_at INTEGER,
    duration_sec INTEGER
);

CREATE TABLE IF NOT EXISTS workout_items (
    id TEXT PRIMARY KEY,
    workout_id TEXT NOT NULL,
    exercise_id TEXT,
    name TEXT,
    body_part TEXT,
    image TEXT,
    order_index INTEGER DEFAULT 0,
    FOREIGN KEY (workout_id) REFERENCES workouts(id)
);

CREATE TABLE IF NOT EXISTS workout_sets (
    id TEXT PRIMARY KEY,
    workout_item_id TEXT NOT NULL,
    reps INTEGER,
    weight REAL,
    done INTEGER DEFAULT 0,
    FOREIGN KEY (workout_item_id) REFERENCES workout_items(id)
);

CREATE INDEX IF NOT EXISTS idx_exercises_name ON exercises(name);
CREATE INDEX IF NOT EXISTS idx_routine_exercises_routine ON routine_exercises(routine_id);
CREATE INDEX IF NOT EXISTS idx_routine_sets_rex ON routine_sets(routine_exercise_id);
CREATE INDEX IF NOT EXISTS idx_workout_items_workout ON workout_items(workout_id);
CREATE INDEX IF NOT EXISTS idx_workout_sets_item ON workout_sets(workout_item_id);
"""


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


def new_id(prefix: str) -> str:
    """Generate an opaque identity such as ``rut_1f3a9c0d2b4e6a7f``."""
    return f"{prefix}_{uuid4().hex[:16]}"


def _casefold(value: str | None) -> str | None:
    return value.casefold() if value is not None else None


class Store:
    """Handle to the SQLite database shared by all repositories.

    Lifecycle: ``open()`` once at process start (creates the file and
    applies the schema), ``close()`` at shutdown. Each ``connect()`` or
    ``transaction()`` uses its own short-lived connection so readers
    proceed while a writer holds the WAL write lock.
    """

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def open(self) -> None:
        """Create the database file if needed and apply the schema."""
        self._ensure_open()
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("PRAGMA journal_mode = WAL")
            await db.executescript(SCHEMA)
            await db.commit()
        logger.debug("Opened database %s", self.db_path)

    async def close(self) -> None:
        if not self._closed:
            self._closed = True
            logger.debug("Closed database %s", self.db_path)

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[aiosqlite.Connection]:
        """Yield a connection in autocommit mode with ``Row`` factory.

        SQLite's own ``LOWER`` only folds ASCII, so a Unicode-aware
        ``casefold(text)`` SQL function is registered for searches.
        """
        self._ensure_open()
        async with aiosqlite.connect(self.db_path, isolation_level=None) as db:
            db.row_factory = aiosqlite.Row
            await db.create_function("casefold", 1, _casefold, deterministic=True)
            yield db

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """Yield a connection inside ``BEGIN IMMEDIATE``.

        Commits when the block exits normally, rolls back and re-raises
        otherwise.
        """
        async with self.connect() as db:
            await db.execute("BEGIN IMMEDIATE")
            try:
                yield db
            except Exception:
                await db.execute("ROLLBACK")
                raise
            await db.execute("COMMIT")

    def _ensure_open(self) -> None:
        if self._closed:
            raise StoreClosedError(f"Store for {self.db_path} is closed")
