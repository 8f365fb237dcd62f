"""Data access layer for gymbuddy."""

import logging

import aiosqlite

from ..config import get_settings
from ..errors import NotFoundError, ValidationError
from ..models.exercises import Exercise
from ..models.records import PersonalRecord
from ..models.routine import (
    SET_UPDATE_FIELDS,
    Routine,
    RoutineExercise,
    RoutineSet,
    RoutineSetUpdate,
    RoutineSummary,
)
from ..models.workout import WorkoutSession
from .engine import Store, new_id, now_ms

logger = logging.getLogger(__name__)

# Upper bound on rows returned by an exercise search
SEARCH_LIMIT = 300


def _like_pattern(text: str) -> str:
    """Build a substring LIKE pattern, escaping the LIKE wildcards."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class ExerciseRepository:
    """Repository for the exercise library."""

    def __init__(self, store: Store):
        self.store = store

    async def list_groups(self) -> list[str]:
        """Distinct non-empty body-part tags, sorted."""
        async with self.store.connect() as db:
            cursor = await db.execute(
                """
                SELECT DISTINCT body_part FROM exercises
                WHERE body_part IS NOT NULL AND body_part <> ''
                ORDER BY body_part
                """
            )
            rows = await cursor.fetchall()
            return [row["body_part"] for row in rows]

    async def search(
        self, query: str | None = None, group: str | None = None
    ) -> list[Exercise]:
        """Search exercises by name and body part.

        Both filters are case-insensitive substring matches, accented
        letters included. ``group`` of ``"*"`` (or empty) disables the
        body-part filter and an empty ``query`` matches every name.
        Results are sorted by name ignoring case (ASCII), then by id. At
        most ``SEARCH_LIMIT`` rows come back, so large libraries are
        truncated.
        """
        sql = "SELECT * FROM exercises WHERE 1 = 1"
        params: list = []
        if group and group.strip() and group != "*":
            sql += " AND casefold(body_part) LIKE ? ESCAPE '\\'"
            params.append(_like_pattern(group.strip().casefold()))
        if query and query.strip():
            sql += " AND casefold(name) LIKE ? ESCAPE '\\'"
            params.append(_like_pattern(query.strip().casefold()))
        sql += " ORDER BY name COLLATE NOCASE ASC, id ASC LIMIT ?"
        params.append(SEARCH_LIMIT)

        async with self.store.connect() as db:
            cursor = await db.execute(sql, params)
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def get(self, exercise_id: str) -> Exercise | None:
        """Get an exercise by ID."""
        async with self.store.connect() as db:
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE id = ?", (exercise_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_exercise(row)

    async def count(self) -> int:
        async with self.store.connect() as db:
            cursor = await db.execute("SELECT COUNT(*) FROM exercises")
            (total,) = await cursor.fetchone()
            return total

    async def create(
        self,
        name: str | None,
        image: str | None = "",
        body_part: str | None = "",
        primary_muscles: str | None = "",
        secondary_muscles: str | None = "",
        equipment: str | None = "",
    ) -> Exercise:
        """Add a custom exercise to the library."""
        name = (name or "").strip()
        if not name:
            logger.warning("Rejected exercise without a name")
            raise ValidationError("name required")

        exercise = Exercise(
            id=new_id("cus"),
            name=name,
            image=image or "",
            body_part=body_part or "",
            primary_muscles=primary_muscles or "",
            secondary_muscles=secondary_muscles or "",
            equipment=equipment or "",
            is_custom=True,
        )
        async with self.store.transaction() as db:
            await self.insert(db, exercise)
        logger.info("Created custom exercise %s (%s)", exercise.id, exercise.name)
        return exercise

    @staticmethod
    async def insert(db: aiosqlite.Connection, exercise: Exercise) -> None:
        """Insert one exercise row using an open connection."""
        await db.execute(
            """
            INSERT INTO exercises
            (id, name, image, body_part, primary_muscles, secondary_muscles,
             equipment, is_custom)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                exercise.id,
                exercise.name,
                exercise.image,
                exercise.body_part,
                exercise.primary_muscles,
                exercise.secondary_muscles,
                exercise.equipment,
                1 if exercise.is_custom else 0,
            ),
        )

    @staticmethod
    def _row_to_exercise(row: aiosqlite.Row) -> Exercise:
        """Convert a database row to an Exercise."""
        return Exercise(
            id=row["id"],
            name=row["name"],
            image=row["image"] or "",
            body_part=row["body_part"] or "",
            primary_muscles=row["primary_muscles"] or "",
            secondary_muscles=row["secondary_muscles"] or "",
            equipment=row["equipment"] or "",
            is_custom=bool(row["is_custom"]),
        )


class RoutineRepository:
    """Repository for routines, their exercises and planned sets.

    Every mutation touches the owning routine's ``updated_at`` inside the
    same transaction. Identities that do not exist are not errors on the
    update and delete paths; they simply match zero rows.
    """

    def __init__(self, store: Store, default_name: str | None = None):
        self.store = store
        self.default_name = default_name or get_settings().default_routine_name

    async def create(self, name: str | None = None) -> Routine:
        """Create an empty routine."""
        name = (name or "").strip() or self.default_name
        routine_id = new_id("rut")
        ts = now_ms()
        async with self.store.transaction() as db:
            await db.execute(
                """
                INSERT INTO routines (id, name, created_at, updated_at)
                VALUES (?, ?, ?, ?)
                """,
                (routine_id, name, ts, ts),
            )
            routine = await self._load(db, routine_id)
        logger.info("Created routine %s (%s)", routine_id, name)
        return routine

    async def get(self, routine_id: str) -> Routine | None:
        """Get a routine with its exercises and sets."""
        async with self.store.connect() as db:
            return await self._load(db, routine_id)

    async def list_summaries(self) -> list[RoutineSummary]:
        """List routines, most recently edited first, without set detail."""
        async with self.store.connect() as db:
            cursor = await db.execute(
                """
                SELECT r.*,
                       (SELECT COUNT(*) FROM routine_exercises re
                        WHERE re.routine_id = r.id) AS exercise_count
                FROM routines r
                ORDER BY r.updated_at DESC, r.id ASC
                """
            )
            rows = await cursor.fetchall()
            return [
                RoutineSummary(
                    id=row["id"],
                    name=row["name"],
                    created_at=row["created_at"],
                    updated_at=row["updated_at"],
                    exercise_count=row["exercise_count"],
                )
                for row in rows
            ]

    async def rename(self, routine_id: str, name: str | None) -> bool:
        """Rename a routine. A blank name is ignored."""
        name = (name or "").strip()
        if not name:
            return False
        async with self.store.transaction() as db:
            await db.execute(
                "UPDATE routines SET name = ? WHERE id = ?", (name, routine_id)
            )
            await self._touch(db, routine_id)
        return True

    async def update_sets(
        self, routine_id: str, updates: list[RoutineSetUpdate]
    ) -> int:
        """Apply planned set values by set identity.

        Unknown set identities are skipped. ``updated_at`` is touched once
        even when nothing changed. Returns the number of rows updated.
        """
        async with self.store.transaction() as db:
            changed = await self._apply_set_updates(db, updates)
            await self._touch(db, routine_id)
        return changed

    async def update(
        self,
        routine_id: str,
        name: str | None = None,
        updates: list[RoutineSetUpdate] | None = None,
    ) -> Routine:
        """Rename and/or apply set values as one atomic edit.

        A blank ``name`` is ignored; ``updates=None`` means the set values
        were not part of the edit, while an empty list still counts as an
        edit. ``updated_at`` is touched once when anything was edited.
        Raises ``NotFoundError`` (writing nothing) for an unknown routine.
        """
        name = (name or "").strip()
        async with self.store.transaction() as db:
            cursor = await db.execute(
                "SELECT 1 FROM routines WHERE id = ?", (routine_id,)
            )
            if await cursor.fetchone() is None:
                raise NotFoundError(f"Routine {routine_id} not found")

            if name:
                await db.execute(
                    "UPDATE routines SET name = ? WHERE id = ?", (name, routine_id)
                )
            if updates is not None:
                await self._apply_set_updates(db, updates)
            if name or updates is not None:
                await self._touch(db, routine_id)
            return await self._load(db, routine_id)

    @staticmethod
    async def _apply_set_updates(
        db: aiosqlite.Connection, updates: list[RoutineSetUpdate]
    ) -> int:
        changed = 0
        for update in updates:
            columns = [c for c in SET_UPDATE_FIELDS if c in update.changes]
            if not columns:
                continue
            assignments = ", ".join(f"{c} = ?" for c in columns)
            cursor = await db.execute(
                f"UPDATE routine_sets SET {assignments} WHERE id = ?",
                (*(update.changes[c] for c in columns), update.set_id),
            )
            changed += cursor.rowcount
        return changed

    async def add_exercise(self, routine_id: str, exercise_id: str | None) -> Routine:
        """Append a catalog exercise to the routine and return the routine."""
        if not exercise_id or not exercise_id.strip():
            logger.warning("Rejected add to routine %s without exerciseId", routine_id)
            raise ValidationError("exerciseId required")

        async with self.store.transaction() as db:
            cursor = await db.execute(
                "SELECT 1 FROM routines WHERE id = ?", (routine_id,)
            )
            if await cursor.fetchone() is None:
                raise NotFoundError(f"Routine {routine_id} not found")

            cursor = await db.execute(
                "SELECT 1 FROM exercises WHERE id = ?", (exercise_id,)
            )
            if await cursor.fetchone() is None:
                raise ValidationError(f"Unknown exercise {exercise_id}")

            # Read and insert under the same write lock
            cursor = await db.execute(
                """
                SELECT COALESCE(MAX(order_index), 0) + 1
                FROM routine_exercises WHERE routine_id = ?
                """,
                (routine_id,),
            )
            (order_index,) = await cursor.fetchone()
            await db.execute(
                """
                INSERT INTO routine_exercises (id, routine_id, exercise_id, order_index)
                VALUES (?, ?, ?, ?)
                """,
                (new_id("rex"), routine_id, exercise_id, order_index),
            )
            await self._touch(db, routine_id)
            return await self._load(db, routine_id)

    async def remove_exercise(self, routine_id: str, routine_exercise_id: str) -> None:
        """Remove an exercise and its sets from the routine."""
        async with self.store.transaction() as db:
            # Sets first: nothing in the schema cascades for us
            await db.execute(
                "DELETE FROM routine_sets WHERE routine_exercise_id = ?",
                (routine_exercise_id,),
            )
            await db.execute(
                "DELETE FROM routine_exercises WHERE id = ? AND routine_id = ?",
                (routine_exercise_id, routine_id),
            )
            await self._touch(db, routine_id)

    async def add_set(
        self,
        routine_id: str,
        routine_exercise_id: str,
        reps: int | None = None,
        weight: float | None = None,
    ) -> str:
        """Add a planned set and return its identity."""
        set_id = new_id("set")
        async with self.store.transaction() as db:
            await db.execute(
                """
                INSERT INTO routine_sets (id, routine_exercise_id, reps, weight)
                VALUES (?, ?, ?, ?)
                """,
                (set_id, routine_exercise_id, reps, weight),
            )
            await self._touch(db, routine_id)
        return set_id

    async def remove_set(
        self, routine_id: str, routine_exercise_id: str, set_id: str
    ) -> None:
        """Delete a planned set."""
        async with self.store.transaction() as db:
            await db.execute(
                "DELETE FROM routine_sets WHERE id = ? AND routine_exercise_id = ?",
                (set_id, routine_exercise_id),
            )
            await self._touch(db, routine_id)

    @staticmethod
    async def _touch(db: aiosqlite.Connection, routine_id: str) -> None:
        """Advance ``updated_at``; always strictly increases it."""
        await db.execute(
            """
            UPDATE routines SET updated_at = MAX(?, COALESCE(updated_at, 0) + 1)
            WHERE id = ?
            """,
            (now_ms(), routine_id),
        )

    async def _load(self, db: aiosqlite.Connection, routine_id: str) -> Routine | None:
        cursor = await db.execute("SELECT * FROM routines WHERE id = ?", (routine_id,))
        row = await cursor.fetchone()
        if row is None:
            return None

        cursor = await db.execute(
            """
            SELECT rs.id, rs.routine_exercise_id, rs.reps, rs.weight
            FROM routine_sets rs
            JOIN routine_exercises re ON re.id = rs.routine_exercise_id
            WHERE re.routine_id = ?
            ORDER BY rs.rowid ASC
            """,
            (routine_id,),
        )
        sets_by_rex: dict[str, list[RoutineSet]] = {}
        for s in await cursor.fetchall():
            sets_by_rex.setdefault(s["routine_exercise_id"], []).append(
                RoutineSet(id=s["id"], reps=s["reps"], weight=s["weight"])
            )

        cursor = await db.execute(
            """
            SELECT re.id AS rex_id, re.order_index, e.*
            FROM routine_exercises re
            JOIN exercises e ON e.id = re.exercise_id
            WHERE re.routine_id = ?
            ORDER BY re.order_index ASC, re.id ASC
            """,
            (routine_id,),
        )
        exercises = [
            RoutineExercise(
                id=ex["rex_id"],
                order_index=ex["order_index"],
                exercise=ExerciseRepository._row_to_exercise(ex),
                sets=sets_by_rex.get(ex["rex_id"], []),
            )
            for ex in await cursor.fetchall()
        ]

        return Routine(
            id=row["id"],
            name=row["name"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
            exercises=exercises,
        )


class WorkoutRepository:
    """Repository for finished workout sessions.

    Sessions are write-once: there are no update or delete paths.
    """

    def __init__(self, store: Store):
        self.store = store

    async def record(self, session: WorkoutSession) -> str:
        """Persist a whole session snapshot atomically and return its ID."""
        workout_id = new_id("wo")
        async with self.store.transaction() as db:
            await db.execute(
                """
                INSERT INTO workouts (id, routine_id, started_at, finished_at, duration_sec)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    workout_id,
                    session.routine_id,
                    session.started_at,
                    session.finished_at,
                    session.duration_sec,
                ),
            )
            for position, item in enumerate(session.items):
                item_id = new_id("wi")
                await db.execute(
                    """
                    INSERT INTO workout_items
                    (id, workout_id, exercise_id, name, body_part, image, order_index)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        item_id,
                        workout_id,
                        item.exercise_id,
                        item.name,
                        item.body_part,
                        item.image,
                        position,
                    ),
                )
                await db.executemany(
                    """
                    INSERT INTO workout_sets (id, workout_item_id, reps, weight, done)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    [
                        (new_id("ws"), item_id, s.reps, s.weight, 1 if s.done else 0)
                        for s in item.sets
                    ],
                )
        logger.info(
            "Recorded workout %s: %d exercises, %d/%d sets done",
            workout_id,
            len(session.items),
            session.completed_set_count,
            session.set_count,
        )
        return workout_id


class PersonalRecordRepository:
    """Read-only personal records derived from every logged set."""

    def __init__(self, store: Store):
        self.store = store

    async def list_records(self) -> list[PersonalRecord]:
        """Best set per exercise: heaviest weight, then most reps.

        Nulls rank last in both keys, so an exercise logged only with
        null weights still gets a record (with a null weight). Complete
        ties go to the earliest logged set. Name, body part and image are
        the snapshot values of the winning set's workout item.
        """
        async with self.store.connect() as db:
            cursor = await db.execute(
                """
                WITH ranked AS (
                    SELECT wi.exercise_id, wi.name, wi.body_part, wi.image,
                           ws.weight, ws.reps,
                           ROW_NUMBER() OVER (
                               PARTITION BY wi.exercise_id
                               ORDER BY (ws.weight IS NULL) ASC, ws.weight DESC,
                                        (ws.reps IS NULL) ASC, ws.reps DESC,
                                        ws.rowid ASC
                           ) AS rn
                    FROM workout_sets ws
                    JOIN workout_items wi ON wi.id = ws.workout_item_id
                )
                SELECT exercise_id, name, body_part, image,
                       weight AS pr_weight, COALESCE(reps, 0) AS reps_at_pr
                FROM ranked
                WHERE rn = 1
                ORDER BY name ASC, exercise_id ASC
                """
            )
            rows = await cursor.fetchall()
            return [
                PersonalRecord(
                    exercise_id=row["exercise_id"],
                    name=row["name"],
                    body_part=row["body_part"],
                    image=row["image"],
                    pr_weight=row["pr_weight"],
                    reps_at_pr=row["reps_at_pr"],
                )
                for row in rows
            ]
