"""Training analytics services."""

from ..utils.exercise_utils import classify_muscle_groups
from .personal_records import calculate_personal_records, estimate_one_rep_max
from .recovery import calculate_muscle_recovery, summarize_recovery

__all__ = [
    "calculate_muscle_recovery",
    "calculate_personal_records",
    "classify_muscle_groups",
    "estimate_one_rep_max",
    "summarize_recovery",
]
