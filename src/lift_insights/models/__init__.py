"""Data models for lift-insights."""

from .analytics import (
    MuscleStatus,
    PersonalRecord,
    PersonalRecordSummary,
    RecoveryStatus,
    RecoverySummary,
)
from .client import Client
from .muscles import TRACKED_MUSCLES, MuscleGroup
from .training_log import FatigueLevel, LoggedExercise, LoggedSet, TrainingLog

__all__ = [
    "Client",
    "FatigueLevel",
    "LoggedExercise",
    "LoggedSet",
    "MuscleGroup",
    "MuscleStatus",
    "PersonalRecord",
    "PersonalRecordSummary",
    "RecoveryStatus",
    "RecoverySummary",
    "TRACKED_MUSCLES",
    "TrainingLog",
]
