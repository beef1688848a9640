"""Utility helpers for lift-insights."""

from .exercise_utils import classify_muscle_groups, normalize_exercise_name
from .rounding import round_half_up

__all__ = ["classify_muscle_groups", "normalize_exercise_name", "round_half_up"]
