"""Personal record tracking via estimated one-rep-max."""

import logging
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

from ..models.analytics import PersonalRecord, PersonalRecordSummary
from ..models.training_log import LoggedSet, TrainingLog, parse_timestamp
from ..utils.exercise_utils import normalize_exercise_name
from ..utils.rounding import round_half_up

logger = logging.getLogger(__name__)

# Brzycki is only trusted for low-rep sets
MAX_REPS_FOR_ESTIMATE = 12
TOP_RECORDS = 10
RECENT_WINDOW = timedelta(days=7)


def estimate_one_rep_max(weight: float | None, reps: int | None) -> int | None:
    """Estimate 1RM with the Brzycki formula: weight x 36 / (37 - reps).

    Args:
        weight: Weight lifted, in kg
        reps: Repetitions performed

    Returns:
        Rounded estimate, or None when weight or reps are missing or the
        formula is undefined for the rep count
    """
    if not weight or not reps or weight <= 0 or reps <= 0:
        return None
    if reps >= 37:
        return None
    return round_half_up(weight * 36 / (37 - reps))


def qualifies_for_estimate(logged_set: LoggedSet) -> bool:
    """True if a set is a working set the 1RM formula applies to."""
    if logged_set.is_warmup:
        return False
    if not logged_set.weight_kg or not logged_set.reps:
        return False
    return logged_set.reps <= MAX_REPS_FOR_ESTIMATE


def _best_per_exercise(logs: list[TrainingLog]) -> dict[str, PersonalRecord]:
    best: dict[str, PersonalRecord] = {}

    # Oldest first, so previous_best is the best that came before.
    for log in sorted(logs, key=lambda log: parse_timestamp(log.logged_at)):
        logged_at = parse_timestamp(log.logged_at)
        for exercise in log.exercises:
            key = normalize_exercise_name(exercise.exercise_name)
            for logged_set in exercise.sets:
                if not qualifies_for_estimate(logged_set):
                    continue
                estimate = estimate_one_rep_max(logged_set.weight_kg, logged_set.reps)
                if estimate is None:
                    continue

                current = best.get(key)
                if current is not None and estimate <= current.estimated_1rm:
                    continue

                previous = current.estimated_1rm if current else None
                best[key] = PersonalRecord(
                    exercise_name=exercise.exercise_name.strip(),
                    weight_kg=logged_set.weight_kg,
                    reps=logged_set.reps,
                    estimated_1rm=estimate,
                    achieved_at=logged_at,
                    previous_best=previous,
                    improvement=estimate - previous if previous is not None else None,
                )

    return best


def calculate_personal_records(
    logs: Iterable[TrainingLog] | None,
    now: datetime | None = None,
    is_loading: bool = False,
) -> PersonalRecordSummary:
    """Find the best estimated one-rep-max per exercise.

    Only the top records are kept. Recent PRs are picked from those top
    records, so a recent lift that ranks outside them is not reported.

    Args:
        logs: A client's training logs, in any order
        now: Reference time for the recent window (defaults to UTC now,
            naive values are read as UTC)
        is_loading: Passed through from whoever is fetching the logs

    Returns:
        Summary with the top records (highest first) and recent PRs
    """
    logs = list(logs or [])
    now = parse_timestamp(now) or datetime.now(timezone.utc)

    best = _best_per_exercise(logs)
    records = sorted(best.values(), key=lambda r: r.estimated_1rm, reverse=True)
    records = records[:TOP_RECORDS]
    recent = [r for r in records if now - r.achieved_at <= RECENT_WINDOW]

    logger.debug(
        "Personal records from %d logs: %d exercises, %d recent",
        len(logs),
        len(best),
        len(recent),
    )
    return PersonalRecordSummary(records=records, recent_prs=recent, is_loading=is_loading)
