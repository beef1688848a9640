"""Pytest configuration and fixtures."""

import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from lift_insights.models.training_log import (
    FatigueLevel,
    LoggedExercise,
    LoggedSet,
    TrainingLog,
)

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Fixed reference time for clock-dependent calculations."""
    return NOW


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the default data directory at a temporary folder."""
    monkeypatch.setenv("LIFT_INSIGHTS_DATA_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def make_log(now):
    """Factory for training logs relative to the fixed reference time.

    Exercises are given as ``(name, sets)`` pairs where each set is either
    a ``LoggedSet`` or a ``(weight, reps)`` tuple.
    """

    def _make_log(
        exercises,
        hours_ago: float = 0,
        fatigue: FatigueLevel | None = None,
        workout_name: str = "Workout",
        client_id: int = 1,
    ) -> TrainingLog:
        logged_exercises = []
        for index, (name, sets) in enumerate(exercises):
            logged_sets = []
            for number, entry in enumerate(sets, start=1):
                if isinstance(entry, LoggedSet):
                    logged_sets.append(entry)
                else:
                    weight, reps = entry
                    logged_sets.append(
                        LoggedSet(set_number=number, weight_kg=weight, reps=reps)
                    )
            logged_exercises.append(
                LoggedExercise(exercise_name=name, order_index=index, sets=logged_sets)
            )

        return TrainingLog(
            client_id=client_id,
            workout_name=workout_name,
            logged_at=now - timedelta(hours=hours_ago),
            fatigue_level=fatigue,
            exercises=logged_exercises,
        )

    return _make_log
