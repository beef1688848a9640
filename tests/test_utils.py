"""Tests for utility functions."""

import pytest

from lift_insights.clients.manual.client import parse_set_entry
from lift_insights.models.muscles import MuscleGroup
from lift_insights.utils.exercise_utils import (
    classify_muscle_groups,
    normalize_exercise_name,
)
from lift_insights.utils.rounding import round_half_up


class TestNormalizeExerciseName:
    """Tests for normalize_exercise_name function."""

    def test_lowercase_and_strip(self):
        assert normalize_exercise_name("  Bench Press  ") == "bench press"

    def test_extra_whitespace(self):
        assert normalize_exercise_name("Bench   Press") == "bench press"


class TestClassifyMuscleGroups:
    """Tests for classify_muscle_groups function."""

    def test_table_match(self):
        assert classify_muscle_groups("Barbell Bench Press") == [
            MuscleGroup.CHEST,
            MuscleGroup.TRICEPS,
            MuscleGroup.SHOULDERS,
        ]

    def test_case_insensitive(self):
        assert classify_muscle_groups("SQUAT") == classify_muscle_groups("squat")

    def test_variants_match_the_same_phrase(self):
        assert classify_muscle_groups("Front Squat") == classify_muscle_groups("Back Squat")

    def test_all_matching_phrases_contribute(self):
        # Both "deadlift" and "romanian deadlift" rows apply
        groups = classify_muscle_groups("Romanian Deadlift")
        assert groups == [MuscleGroup.BACK, MuscleGroup.HAMSTRINGS, MuscleGroup.GLUTES]

    def test_duplicates_removed(self):
        groups = classify_muscle_groups("Close Grip Bench Press")
        assert len(groups) == len(set(groups))
        assert groups.count(MuscleGroup.TRICEPS) == 1

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Chest Machine", [MuscleGroup.CHEST]),
            ("Leg Machine", [MuscleGroup.QUADS]),
            ("Quad Sweep", [MuscleGroup.QUADS]),
            ("Glute Activation", [MuscleGroup.GLUTES]),
            ("Standing Calves", [MuscleGroup.CALVES]),
        ],
    )
    def test_keyword_fallback(self, name, expected):
        assert classify_muscle_groups(name) == expected

    def test_phrases_match_at_word_start(self):
        assert classify_muscle_groups("Narrow Grip Bench Press") == [
            MuscleGroup.CHEST,
            MuscleGroup.TRICEPS,
            MuscleGroup.SHOULDERS,
        ]
        assert classify_muscle_groups("Plate Front Raise") == [MuscleGroup.SHOULDERS]
        assert classify_muscle_groups("Seated Cable Rows") == [
            MuscleGroup.BACK,
            MuscleGroup.BICEPS,
        ]

    def test_keywords_match_at_word_start(self):
        assert classify_muscle_groups("Plate Pinch") == []
        assert classify_muscle_groups("Lat Machine") == [MuscleGroup.BACK]

    def test_unknown_exercise(self):
        assert classify_muscle_groups("Treadmill") == []
        assert classify_muscle_groups("") == []


class TestRoundHalfUp:
    """Tests for round_half_up."""

    @pytest.mark.parametrize(
        "value, expected",
        [(112.5, 113), (12.5, 13), (2.4, 2), (69.44, 69), (0, 0)],
    )
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected


class TestParseSetEntry:
    """Tests for quick set entry parsing."""

    def test_weight_and_reps(self):
        s = parse_set_entry("100x5", 1)
        assert s.weight_kg == 100
        assert s.reps == 5
        assert s.set_number == 1
        assert not s.is_warmup

    def test_warmup_suffix(self):
        s = parse_set_entry("60 x 8 w", 2)
        assert s.is_warmup
        assert s.weight_kg == 60
        assert s.reps == 8

    def test_drop_set_suffix(self):
        assert parse_set_entry("70x10d", 3).is_drop_set

    def test_reps_only(self):
        s = parse_set_entry("x12", 1)
        assert s.weight_kg is None
        assert s.reps == 12

    @pytest.mark.parametrize("entry", ["", "abc", "x", "100"])
    def test_unreadable(self, entry):
        assert parse_set_entry(entry, 1) is None
