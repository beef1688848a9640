"""Muscle recovery estimation from training history.

Every muscle group gets a recovery window after it is trained: 72 hours
after a high-fatigue session, 48 hours otherwise. The estimate is a
straight line from 0% right after the session to 100% at the end of the
window.
"""

import logging
from collections.abc import Iterable
from datetime import datetime, timezone

from ..models.analytics import MuscleStatus, RecoveryStatus, RecoverySummary
from ..models.muscles import TRACKED_MUSCLES, MuscleGroup
from ..models.training_log import FatigueLevel, TrainingLog, parse_timestamp
from ..utils.exercise_utils import classify_muscle_groups
from ..utils.rounding import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_RECOVERY_HOURS = 48
HIGH_FATIGUE_RECOVERY_HOURS = 72


def recovery_window_hours(fatigue: FatigueLevel) -> int:
    """Hours a muscle needs after a session of the given intensity."""
    if fatigue == FatigueLevel.HIGH:
        return HIGH_FATIGUE_RECOVERY_HOURS
    return DEFAULT_RECOVERY_HOURS


def _last_trained(
    logs: Iterable[TrainingLog],
) -> dict[MuscleGroup, tuple[datetime, FatigueLevel]]:
    """Newest session timestamp and intensity per muscle group."""
    last: dict[MuscleGroup, tuple[datetime, FatigueLevel]] = {}

    for log in logs:
        logged_at = parse_timestamp(log.logged_at)
        fatigue = log.fatigue_level or FatigueLevel.MODERATE
        for exercise in log.exercises:
            for muscle in classify_muscle_groups(exercise.exercise_name):
                seen = last.get(muscle)
                if seen is None or logged_at > seen[0]:
                    last[muscle] = (logged_at, fatigue)

    return last


def calculate_muscle_recovery(
    logs: Iterable[TrainingLog] | None,
    now: datetime | None = None,
) -> list[MuscleStatus]:
    """Estimate how recovered each tracked muscle group is.

    Args:
        logs: A client's training logs, in any order
        now: Reference time (defaults to the current UTC time); naive
            values are read as UTC

    Returns:
        One status per tracked muscle, least recovered first. Empty if
        there are no logs at all.
    """
    logs = list(logs or [])
    if not logs:
        return []

    now = parse_timestamp(now) or datetime.now(timezone.utc)

    last = _last_trained(logs)
    statuses: list[MuscleStatus] = []

    for muscle in TRACKED_MUSCLES:
        if muscle not in last:
            statuses.append(
                MuscleStatus(
                    muscle=muscle,
                    last_trained=None,
                    hours_ago=None,
                    recovery_percent=100,
                    status=RecoveryStatus.FRESH,
                    suggested_wait_hours=0,
                )
            )
            continue

        trained_at, fatigue = last[muscle]
        window = recovery_window_hours(fatigue)
        # Sessions dated after now count as just trained.
        hours_ago = max(0, int((now - trained_at).total_seconds() // 3600))
        percent = min(100, round_half_up(hours_ago / window * 100))

        # Early and late in the window are reported the same way.
        if hours_ago < window:
            status = RecoveryStatus.RECOVERING
        else:
            status = RecoveryStatus.RECOVERED

        statuses.append(
            MuscleStatus(
                muscle=muscle,
                last_trained=trained_at,
                hours_ago=hours_ago,
                recovery_percent=percent,
                status=status,
                suggested_wait_hours=max(0, window - hours_ago),
            )
        )

    statuses.sort(key=lambda s: s.recovery_percent)
    logger.debug(
        "Recovery computed from %d logs: %d muscles recovering",
        len(logs),
        sum(1 for s in statuses if s.status == RecoveryStatus.RECOVERING),
    )
    return statuses


def summarize_recovery(
    logs: Iterable[TrainingLog] | None,
    now: datetime | None = None,
) -> RecoverySummary:
    """Recovery statuses wrapped with ready / still-recovering views."""
    return RecoverySummary(muscles=calculate_muscle_recovery(logs, now=now))
