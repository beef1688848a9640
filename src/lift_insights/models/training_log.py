"""Training log models: a logged workout, its exercises and their sets."""

import math
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum


class FatigueLevel(str, Enum):
    """Self-reported session intensity."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """Parse an ISO-8601 timestamp, treating naive values as UTC.

    Raises:
        ValueError: If a string is not a valid ISO-8601 timestamp
        TypeError: If the value is neither a string nor a datetime
    """
    if value is None or value == "":
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    elif not isinstance(value, datetime):
        raise TypeError(f"Expected an ISO-8601 timestamp, got {value!r}")
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _number(data: dict, key: str, kind: type = float) -> int | float | None:
    """Read an optional numeric field, accepting numbers or numeric strings.

    Raises:
        ValueError: If the value cannot be read as a number
    """
    value = data.get(key)
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError(f"{key} must be a number, got {value!r}")
    try:
        number = kind(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise ValueError(f"{key} must be a number, got {value!r}") from e
    if not math.isfinite(number):
        raise ValueError(f"{key} must be a finite number, got {value!r}")
    return number


def _text(data: dict, key: str, required: bool = True) -> str | None:
    value = data[key] if required else data.get(key)
    if value is None and not required:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {value!r}")
    return value


@dataclass
class LoggedSet:
    """One performed set of an exercise."""

    set_number: int
    reps: int | None = None
    weight_kg: float | None = None
    duration_seconds: int | None = None
    distance_meters: float | None = None
    rpe: float | None = None
    is_warmup: bool = False
    is_drop_set: bool = False
    notes: str | None = None
    id: int | None = None

    @property
    def volume(self) -> float:
        """Reps times weight, missing values counting as zero."""
        return (self.reps or 0) * (self.weight_kg or 0)

    def has_data(self) -> bool:
        """True if the set records anything measurable."""
        return bool(
            self.reps or self.weight_kg or self.duration_seconds or self.distance_meters
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "set_number": self.set_number,
            "reps": self.reps,
            "weight_kg": self.weight_kg,
            "duration_seconds": self.duration_seconds,
            "distance_meters": self.distance_meters,
            "rpe": self.rpe,
            "is_warmup": self.is_warmup,
            "is_drop_set": self.is_drop_set,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "LoggedSet":
        """Create from dictionary.

        Numeric fields may arrive as numbers or numeric strings.

        Raises:
            KeyError: If ``set_number`` is missing
            ValueError: If a numeric field holds something else
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a set object, got {data!r}")
        set_number = _number(data, "set_number", int)
        if set_number is None:
            raise KeyError("set_number")
        return cls(
            id=id if id is not None else data.get("id"),
            set_number=set_number,
            reps=_number(data, "reps", int),
            weight_kg=_number(data, "weight_kg"),
            duration_seconds=_number(data, "duration_seconds", int),
            distance_meters=_number(data, "distance_meters"),
            rpe=_number(data, "rpe"),
            is_warmup=bool(data.get("is_warmup", False)),
            is_drop_set=bool(data.get("is_drop_set", False)),
            notes=_text(data, "notes", required=False),
        )


@dataclass
class LoggedExercise:
    """One named movement performed during a session."""

    exercise_name: str
    order_index: int = 0
    notes: str | None = None
    sets: list[LoggedSet] = field(default_factory=list)
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "exercise_name": self.exercise_name,
            "order_index": self.order_index,
            "notes": self.notes,
            "sets": [s.to_dict() for s in self.sets],
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "LoggedExercise":
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise TypeError(f"Expected an exercise object, got {data!r}")
        sets = [LoggedSet.from_dict(s) for s in data.get("sets") or []]
        return cls(
            id=id if id is not None else data.get("id"),
            exercise_name=_text(data, "exercise_name"),
            order_index=_number(data, "order_index", int) or 0,
            notes=_text(data, "notes", required=False),
            sets=sorted(sets, key=lambda s: s.set_number),
        )


@dataclass
class TrainingLog:
    """A logged workout session owned by a client.

    Exercises are kept ordered by ``order_index`` and each exercise's sets
    by ``set_number``.
    """

    client_id: int
    workout_name: str
    logged_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    duration_minutes: int | None = None
    notes: str | None = None
    rpe: float | None = None
    fatigue_level: FatigueLevel | None = None
    exercises: list[LoggedExercise] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    id: int | None = None

    @property
    def total_sets(self) -> int:
        """Number of sets across all exercises."""
        return sum(len(ex.sets) for ex in self.exercises)

    @property
    def total_volume(self) -> float:
        """Sum of reps x weight over every set, in kg."""
        return sum(s.volume for ex in self.exercises for s in ex.sets)

    def cleaned(self) -> "TrainingLog":
        """Return a copy ready to be saved.

        Blank exercises and empty sets are dropped, exercises are re-indexed
        from 0 and blank notes become None.

        Raises:
            ValueError: If the workout name is blank
        """
        name = self.workout_name.strip()
        if not name:
            raise ValueError("Workout name is required")

        exercises = []
        for ex in self.exercises:
            if not ex.exercise_name.strip():
                continue
            exercises.append(
                replace(
                    ex,
                    exercise_name=ex.exercise_name.strip(),
                    order_index=len(exercises),
                    notes=_blank_to_none(ex.notes),
                    sets=[s for s in ex.sets if s.has_data()],
                )
            )

        return replace(
            self,
            workout_name=name,
            notes=_blank_to_none(self.notes),
            exercises=exercises,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "client_id": self.client_id,
            "logged_at": self.logged_at.isoformat(),
            "workout_name": self.workout_name,
            "duration_minutes": self.duration_minutes,
            "notes": self.notes,
            "rpe": self.rpe,
            "fatigue_level": self.fatigue_level.value if self.fatigue_level else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: int | None = None,
        client_id: int | None = None,
    ) -> "TrainingLog":
        """Create from dictionary.

        Args:
            data: Log fields, with nested ``exercises`` and ``sets``
            id: Overrides ``data["id"]`` when given
            client_id: Overrides ``data["client_id"]`` when given
        """
        fatigue = data.get("fatigue_level")
        exercises = [LoggedExercise.from_dict(ex) for ex in data.get("exercises") or []]

        log = cls(
            id=id if id is not None else data.get("id"),
            client_id=client_id if client_id is not None else data["client_id"],
            workout_name=_text(data, "workout_name"),
            duration_minutes=_number(data, "duration_minutes", int),
            notes=_text(data, "notes", required=False),
            rpe=_number(data, "rpe"),
            fatigue_level=FatigueLevel(fatigue) if fatigue else None,
            exercises=sorted(exercises, key=lambda ex: ex.order_index),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
        )
        logged_at = parse_timestamp(data.get("logged_at"))
        if logged_at is not None:
            log.logged_at = logged_at
        return log
