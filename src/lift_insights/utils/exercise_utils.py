"""Utilities for exercise name normalization and muscle group lookup."""

import re

from ..models.muscles import MuscleGroup

_M = MuscleGroup

# Ordered (phrase, muscle groups) table. Every phrase found at the start of
# a word in the exercise name contributes, so "romanian deadlift" picks up
# both rows while "narrow" does not match "row".
EXERCISE_MUSCLE_TABLE: tuple[tuple[str, tuple[MuscleGroup, ...]], ...] = (
    # Chest
    ("bench press", (_M.CHEST, _M.TRICEPS, _M.SHOULDERS)),
    ("chest press", (_M.CHEST, _M.TRICEPS)),
    ("incline press", (_M.CHEST, _M.SHOULDERS)),
    ("push up", (_M.CHEST, _M.TRICEPS)),
    ("push-up", (_M.CHEST, _M.TRICEPS)),
    ("pushup", (_M.CHEST, _M.TRICEPS)),
    ("dip", (_M.CHEST, _M.TRICEPS)),
    ("fly", (_M.CHEST,)),
    ("flye", (_M.CHEST,)),
    ("pec deck", (_M.CHEST,)),
    # Shoulders
    ("overhead press", (_M.SHOULDERS, _M.TRICEPS)),
    ("shoulder press", (_M.SHOULDERS, _M.TRICEPS)),
    ("military press", (_M.SHOULDERS, _M.TRICEPS)),
    ("arnold press", (_M.SHOULDERS, _M.TRICEPS)),
    ("lateral raise", (_M.SHOULDERS,)),
    ("front raise", (_M.SHOULDERS,)),
    ("rear delt", (_M.SHOULDERS, _M.BACK)),
    ("face pull", (_M.SHOULDERS, _M.BACK)),
    ("upright row", (_M.SHOULDERS,)),
    # Back
    ("deadlift", (_M.BACK, _M.HAMSTRINGS, _M.GLUTES)),
    ("romanian deadlift", (_M.HAMSTRINGS, _M.GLUTES)),
    ("row", (_M.BACK, _M.BICEPS)),
    ("pull up", (_M.BACK, _M.BICEPS)),
    ("pull-up", (_M.BACK, _M.BICEPS)),
    ("pullup", (_M.BACK, _M.BICEPS)),
    ("chin up", (_M.BACK, _M.BICEPS)),
    ("chin-up", (_M.BACK, _M.BICEPS)),
    ("pulldown", (_M.BACK, _M.BICEPS)),
    ("shrug", (_M.BACK,)),
    ("hyperextension", (_M.BACK, _M.GLUTES)),
    # Legs
    ("squat", (_M.QUADS, _M.GLUTES)),
    ("leg press", (_M.QUADS, _M.GLUTES)),
    ("lunge", (_M.QUADS, _M.GLUTES)),
    ("step up", (_M.QUADS, _M.GLUTES)),
    ("leg extension", (_M.QUADS,)),
    ("leg curl", (_M.HAMSTRINGS,)),
    ("hamstring curl", (_M.HAMSTRINGS,)),
    ("good morning", (_M.HAMSTRINGS, _M.BACK)),
    ("hip thrust", (_M.GLUTES, _M.HAMSTRINGS)),
    ("glute bridge", (_M.GLUTES,)),
    ("calf raise", (_M.CALVES,)),
    # Arms
    ("bicep curl", (_M.BICEPS,)),
    ("biceps curl", (_M.BICEPS,)),
    ("barbell curl", (_M.BICEPS,)),
    ("dumbbell curl", (_M.BICEPS,)),
    ("hammer curl", (_M.BICEPS,)),
    ("preacher curl", (_M.BICEPS,)),
    ("tricep", (_M.TRICEPS,)),
    ("skull crusher", (_M.TRICEPS,)),
    ("pushdown", (_M.TRICEPS,)),
    ("close grip", (_M.TRICEPS,)),
    # Core
    ("plank", (_M.CORE,)),
    ("crunch", (_M.CORE,)),
    ("sit up", (_M.CORE,)),
    ("sit-up", (_M.CORE,)),
    ("leg raise", (_M.CORE,)),
    ("ab wheel", (_M.CORE,)),
    ("russian twist", (_M.CORE,)),
)

# Consulted only when nothing in the table matched.
KEYWORD_FALLBACKS: tuple[tuple[tuple[str, ...], MuscleGroup], ...] = (
    (("chest", "pec"), _M.CHEST),
    (("back", "lat"), _M.BACK),
    (("shoulder", "delt"), _M.SHOULDERS),
    (("leg", "quad"), _M.QUADS),
    (("hamstring",), _M.HAMSTRINGS),
    (("glute",), _M.GLUTES),
    (("bicep",), _M.BICEPS),
    (("tricep",), _M.TRICEPS),
    (("core", "abs", "oblique"), _M.CORE),
    (("calf", "calves"), _M.CALVES),
)


def normalize_exercise_name(name: str) -> str:
    """Normalize an exercise name for comparison.

    Converts to lowercase, strips, and collapses inner whitespace.
    """
    return re.sub(r"\s+", " ", name.lower().strip())


def _contains_word(name: str, phrase: str) -> bool:
    """True if phrase occurs in name starting at a word boundary."""
    return re.search(r"(?<![a-z0-9])" + re.escape(phrase), name) is not None


def classify_muscle_groups(name: str) -> list[MuscleGroup]:
    """Map a free-text exercise name to the muscle groups it trains.

    Args:
        name: Exercise name as logged, in any case

    Returns:
        Deduplicated muscle groups in first-seen order; empty if the
        name is not recognized
    """
    lowered = normalize_exercise_name(name)
    groups: list[MuscleGroup] = []

    for phrase, muscles in EXERCISE_MUSCLE_TABLE:
        if _contains_word(lowered, phrase):
            for muscle in muscles:
                if muscle not in groups:
                    groups.append(muscle)

    if groups:
        return groups

    for keywords, muscle in KEYWORD_FALLBACKS:
        if muscle in groups:
            continue
        if any(_contains_word(lowered, keyword) for keyword in keywords):
            groups.append(muscle)

    return groups
