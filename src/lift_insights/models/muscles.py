"""Muscle group definitions."""

from enum import Enum


class MuscleGroup(str, Enum):
    """Muscle groups tracked for recovery, in canonical order."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    CORE = "core"
    CALVES = "calves"


TRACKED_MUSCLES: tuple[MuscleGroup, ...] = tuple(MuscleGroup)
