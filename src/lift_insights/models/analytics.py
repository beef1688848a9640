"""Derived training analytics: muscle recovery and personal records.

None of these are persisted. They are recomputed from a client's
training logs whenever they are needed.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .muscles import MuscleGroup


class RecoveryStatus(str, Enum):
    """Recovery state of a muscle group."""

    FRESH = "fresh"
    RECOVERING = "recovering"
    RECOVERED = "recovered"


@dataclass
class MuscleStatus:
    """Recovery state of one muscle group."""

    muscle: MuscleGroup
    last_trained: datetime | None
    hours_ago: int | None
    recovery_percent: int
    status: RecoveryStatus
    suggested_wait_hours: int = 0

    @property
    def is_ready(self) -> bool:
        """True if the muscle can be trained again."""
        return self.status != RecoveryStatus.RECOVERING

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "muscle": self.muscle.value,
            "last_trained": self.last_trained.isoformat() if self.last_trained else None,
            "hours_ago": self.hours_ago,
            "recovery_percent": self.recovery_percent,
            "status": self.status.value,
            "suggested_wait_hours": self.suggested_wait_hours,
        }

    def get_status_display(self) -> str:
        """Get a human-readable status string."""
        status_map = {
            RecoveryStatus.FRESH: "Fresh",
            RecoveryStatus.RECOVERING: "Recovering",
            RecoveryStatus.RECOVERED: "Recovered",
        }
        return status_map.get(self.status, self.status.value)


@dataclass
class PersonalRecord:
    """Best estimated one-rep-max for an exercise."""

    exercise_name: str
    weight_kg: float
    reps: int
    estimated_1rm: int
    achieved_at: datetime
    previous_best: int | None = None
    improvement: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "exercise_name": self.exercise_name,
            "weight_kg": self.weight_kg,
            "reps": self.reps,
            "estimated_1rm": self.estimated_1rm,
            "achieved_at": self.achieved_at.isoformat(),
            "previous_best": self.previous_best,
            "improvement": self.improvement,
        }


@dataclass
class RecoverySummary:
    """Muscle statuses plus the views the dashboards read."""

    muscles: list[MuscleStatus] = field(default_factory=list)

    @property
    def ready_to_train(self) -> list[MuscleStatus]:
        return [m for m in self.muscles if m.is_ready]

    @property
    def still_recovering(self) -> list[MuscleStatus]:
        return [m for m in self.muscles if not m.is_ready]

    @property
    def has_data(self) -> bool:
        return bool(self.muscles)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "muscles": [m.to_dict() for m in self.muscles],
            "ready_to_train": [m.muscle.value for m in self.ready_to_train],
            "still_recovering": [m.muscle.value for m in self.still_recovering],
            "has_data": self.has_data,
        }


@dataclass
class PersonalRecordSummary:
    """Top personal records and those set recently."""

    records: list[PersonalRecord] = field(default_factory=list)
    recent_prs: list[PersonalRecord] = field(default_factory=list)
    is_loading: bool = False

    @property
    def has_records(self) -> bool:
        return bool(self.records)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "records": [r.to_dict() for r in self.records],
            "recent_prs": [r.to_dict() for r in self.recent_prs],
            "has_records": self.has_records,
            "is_loading": self.is_loading,
        }
