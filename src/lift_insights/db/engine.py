"""Database engine setup and initialization."""

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

logger = logging.getLogger(__name__)

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
DATA_DIR_ENV = "LIFT_INSIGHTS_DATA_DIR"
DB_FILENAME = "lift_insights.db"


def get_data_dir() -> Path:
    """Get the data directory, honoring LIFT_INSIGHTS_DATA_DIR."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override)
    return DATA_DIR


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


@asynccontextmanager
async def open_db(db_path: Path) -> AsyncIterator[aiosqlite.Connection]:
    """Open a connection with row access by name and foreign keys enforced."""
    async with aiosqlite.connect(db_path) as db:
        db.row_factory = aiosqlite.Row
        await db.execute("PRAGMA foreign_keys = ON")
        yield db


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    logger.info("Initializing database at %s", db_path)

    async with aiosqlite.connect(db_path) as db:
        # Clients own training logs
        await db.execute("""
            CREATE TABLE IF NOT EXISTS clients (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # One row per logged workout session
        await db.execute("""
            CREATE TABLE IF NOT EXISTS training_logs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                client_id INTEGER NOT NULL,
                logged_at TIMESTAMP NOT NULL,
                workout_name TEXT NOT NULL,
                duration_minutes INTEGER,
                notes TEXT,
                rpe REAL,
                fatigue_level TEXT CHECK (fatigue_level IN ('low', 'moderate', 'high')),
                created_at TIMESTAMP NOT NULL,
                updated_at TIMESTAMP NOT NULL,
                FOREIGN KEY (client_id) REFERENCES clients(id) ON DELETE CASCADE
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS training_log_exercises (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                training_log_id INTEGER NOT NULL,
                exercise_name TEXT NOT NULL,
                order_index INTEGER NOT NULL DEFAULT 0,
                notes TEXT,
                FOREIGN KEY (training_log_id) REFERENCES training_logs(id) ON DELETE CASCADE
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS training_log_sets (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                exercise_id INTEGER NOT NULL,
                set_number INTEGER NOT NULL,
                reps INTEGER,
                weight_kg REAL,
                duration_seconds INTEGER,
                distance_meters REAL,
                rpe REAL,
                is_warmup INTEGER NOT NULL DEFAULT 0,
                is_drop_set INTEGER NOT NULL DEFAULT 0,
                notes TEXT,
                FOREIGN KEY (exercise_id) REFERENCES training_log_exercises(id) ON DELETE CASCADE
            )
        """)

        # Create indexes for common queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_training_logs_client
            ON training_logs(client_id, logged_at)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_training_log_exercises_log
            ON training_log_exercises(training_log_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_training_log_sets_exercise
            ON training_log_sets(exercise_id)
        """)

        await db.commit()
