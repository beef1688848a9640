"""Data access layer for lift-insights."""

import logging
from datetime import datetime, timezone
from pathlib import Path

import aiosqlite

from ..models.client import Client
from ..models.training_log import (
    LoggedExercise,
    LoggedSet,
    TrainingLog,
    parse_timestamp,
)
from .engine import get_db_path, open_db

logger = logging.getLogger(__name__)


def _to_utc_iso(value: datetime) -> str:
    """Timestamps are stored as UTC ISO strings so they sort correctly."""
    return value.astimezone(timezone.utc).isoformat()


class ClientRepository:
    """Repository for clients."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, client: Client) -> int:
        """Create a new client."""
        if not client.name.strip():
            raise ValueError("Client name is required")

        async with open_db(self.db_path) as db:
            cursor = await db.execute(
                "INSERT INTO clients (name) VALUES (?)", (client.name.strip(),)
            )
            await db.commit()
            logger.info("Created client %d", cursor.lastrowid)
            return cursor.lastrowid

    async def get(self, client_id: int) -> Client | None:
        """Get a client by ID."""
        async with open_db(self.db_path) as db:
            cursor = await db.execute("SELECT * FROM clients WHERE id = ?", (client_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_client(row)

    async def list_all(self) -> list[Client]:
        """List all clients."""
        async with open_db(self.db_path) as db:
            cursor = await db.execute("SELECT * FROM clients ORDER BY name")
            rows = await cursor.fetchall()
            return [self._row_to_client(row) for row in rows]

    async def delete(self, client_id: int) -> None:
        """Delete a client and, by cascade, their training logs."""
        async with open_db(self.db_path) as db:
            await db.execute("DELETE FROM clients WHERE id = ?", (client_id,))
            await db.commit()

    def _row_to_client(self, row: aiosqlite.Row) -> Client:
        return Client(
            id=row["id"],
            name=row["name"],
            created_at=parse_timestamp(row["created_at"]),
        )


class TrainingLogRepository:
    """Repository for training logs with their exercises and sets.

    A log and its subtree are always written in a single transaction.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, log: TrainingLog) -> int:
        """Create a training log with its exercises and sets.

        Returns:
            The new log ID

        Raises:
            ValueError: If the owning client does not exist
        """
        now = datetime.now(timezone.utc).isoformat()
        async with open_db(self.db_path) as db:
            try:
                cursor = await db.execute(
                    """
                    INSERT INTO training_logs
                    (client_id, logged_at, workout_name, duration_minutes, notes,
                     rpe, fatigue_level, created_at, updated_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        log.client_id,
                        _to_utc_iso(log.logged_at),
                        log.workout_name,
                        log.duration_minutes,
                        log.notes,
                        log.rpe,
                        log.fatigue_level.value if log.fatigue_level else None,
                        now,
                        now,
                    ),
                )
            except aiosqlite.IntegrityError as e:
                raise ValueError(f"Client {log.client_id} not found") from e
            log_id = cursor.lastrowid
            await self._insert_exercises(db, log_id, log.exercises)
            await db.commit()

        logger.info(
            "Created training log %d for client %d (%d exercises)",
            log_id,
            log.client_id,
            len(log.exercises),
        )
        return log_id

    async def get(self, log_id: int) -> TrainingLog | None:
        """Get a training log with its full exercise/set tree."""
        async with open_db(self.db_path) as db:
            cursor = await db.execute("SELECT * FROM training_logs WHERE id = ?", (log_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            exercises = await self._load_exercises(db, [log_id])
            return self._row_to_log(row, exercises.get(log_id, []))

    async def list_by_client(self, client_id: int) -> list[TrainingLog]:
        """List a client's training logs, newest first."""
        async with open_db(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT * FROM training_logs
                WHERE client_id = ?
                ORDER BY logged_at DESC, id DESC
                """,
                (client_id,),
            )
            rows = await cursor.fetchall()
            exercises = await self._load_exercises(db, [row["id"] for row in rows])
            return [self._row_to_log(row, exercises.get(row["id"], [])) for row in rows]

    async def update(self, log: TrainingLog, replace_exercises: bool = True) -> None:
        """Update a training log.

        Args:
            log: Log with an ID and the new field values
            replace_exercises: Replace the whole exercise/set subtree with
                ``log.exercises``; when False only the log fields change

        Raises:
            ValueError: If the log has no ID
            LookupError: If no log with that ID exists
        """
        if log.id is None:
            raise ValueError("Training log must have an ID to update")

        async with open_db(self.db_path) as db:
            cursor = await db.execute(
                """
                UPDATE training_logs SET
                    workout_name = ?, logged_at = ?, duration_minutes = ?,
                    notes = ?, rpe = ?, fatigue_level = ?, updated_at = ?
                WHERE id = ?
                """,
                (
                    log.workout_name,
                    _to_utc_iso(log.logged_at),
                    log.duration_minutes,
                    log.notes,
                    log.rpe,
                    log.fatigue_level.value if log.fatigue_level else None,
                    datetime.now(timezone.utc).isoformat(),
                    log.id,
                ),
            )
            if cursor.rowcount == 0:
                raise LookupError(f"Training log {log.id} not found")

            if replace_exercises:
                # Sets go with their exercises by cascade
                await db.execute(
                    "DELETE FROM training_log_exercises WHERE training_log_id = ?",
                    (log.id,),
                )
                await self._insert_exercises(db, log.id, log.exercises)

            await db.commit()

        logger.info("Updated training log %d", log.id)

    async def delete(self, log_id: int) -> bool:
        """Delete a training log and its exercises and sets.

        Returns:
            True if a log was deleted
        """
        async with open_db(self.db_path) as db:
            cursor = await db.execute("DELETE FROM training_logs WHERE id = ?", (log_id,))
            await db.commit()
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("Deleted training log %d", log_id)
        return deleted

    async def _insert_exercises(
        self,
        db: aiosqlite.Connection,
        log_id: int,
        exercises: list[LoggedExercise],
    ) -> None:
        for exercise in exercises:
            cursor = await db.execute(
                """
                INSERT INTO training_log_exercises
                (training_log_id, exercise_name, order_index, notes)
                VALUES (?, ?, ?, ?)
                """,
                (log_id, exercise.exercise_name, exercise.order_index, exercise.notes),
            )
            exercise_id = cursor.lastrowid

            if exercise.sets:
                await db.executemany(
                    """
                    INSERT INTO training_log_sets
                    (exercise_id, set_number, reps, weight_kg, duration_seconds,
                     distance_meters, rpe, is_warmup, is_drop_set, notes)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    [
                        (
                            exercise_id,
                            s.set_number,
                            s.reps,
                            s.weight_kg,
                            s.duration_seconds,
                            s.distance_meters,
                            s.rpe,
                            int(s.is_warmup),
                            int(s.is_drop_set),
                            s.notes,
                        )
                        for s in exercise.sets
                    ],
                )

    async def _load_exercises(
        self,
        db: aiosqlite.Connection,
        log_ids: list[int],
    ) -> dict[int, list[LoggedExercise]]:
        """Load exercises and sets for the given logs, sorted."""
        if not log_ids:
            return {}

        placeholders = ",".join("?" for _ in log_ids)
        cursor = await db.execute(
            f"""
            SELECT * FROM training_log_exercises
            WHERE training_log_id IN ({placeholders})
            ORDER BY order_index, id
            """,
            log_ids,
        )
        exercise_rows = await cursor.fetchall()

        sets_by_exercise: dict[int, list[LoggedSet]] = {}
        exercise_ids = [row["id"] for row in exercise_rows]
        if exercise_ids:
            placeholders = ",".join("?" for _ in exercise_ids)
            cursor = await db.execute(
                f"""
                SELECT * FROM training_log_sets
                WHERE exercise_id IN ({placeholders})
                ORDER BY set_number, id
                """,
                exercise_ids,
            )
            for row in await cursor.fetchall():
                sets_by_exercise.setdefault(row["exercise_id"], []).append(
                    LoggedSet(
                        id=row["id"],
                        set_number=row["set_number"],
                        reps=row["reps"],
                        weight_kg=row["weight_kg"],
                        duration_seconds=row["duration_seconds"],
                        distance_meters=row["distance_meters"],
                        rpe=row["rpe"],
                        is_warmup=bool(row["is_warmup"]),
                        is_drop_set=bool(row["is_drop_set"]),
                        notes=row["notes"],
                    )
                )

        result: dict[int, list[LoggedExercise]] = {}
        for row in exercise_rows:
            result.setdefault(row["training_log_id"], []).append(
                LoggedExercise(
                    id=row["id"],
                    exercise_name=row["exercise_name"],
                    order_index=row["order_index"],
                    notes=row["notes"],
                    sets=sets_by_exercise.get(row["id"], []),
                )
            )
        return result

    def _row_to_log(self, row: aiosqlite.Row, exercises: list[LoggedExercise]) -> TrainingLog:
        """Convert a database row to a TrainingLog."""
        data = {
            "client_id": row["client_id"],
            "logged_at": row["logged_at"],
            "workout_name": row["workout_name"],
            "duration_minutes": row["duration_minutes"],
            "notes": row["notes"],
            "rpe": row["rpe"],
            "fatigue_level": row["fatigue_level"],
            "created_at": row["created_at"],
            "updated_at": row["updated_at"],
        }
        log = TrainingLog.from_dict(data, id=row["id"])
        log.exercises = exercises
        return log
