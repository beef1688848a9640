"""Manual workout entry via interactive questionnaire."""

from datetime import datetime, timezone

import questionary
from questionary import Style

from ...models.training_log import FatigueLevel, LoggedExercise, LoggedSet, TrainingLog

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("separator", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)


def _parse_number(value: str | None, kind=float):
    """Parse an optional numeric answer; blank or invalid gives None."""
    if value is None or not value.strip():
        return None
    try:
        return kind(value.strip())
    except ValueError:
        return None


def parse_set_entry(entry: str, set_number: int) -> LoggedSet | None:
    """Parse a quick set entry like ``100x5``, ``100x5w`` or ``x12``.

    A trailing ``w`` marks a warm-up and a trailing ``d`` a drop set.
    Returns None for blank or unreadable entries.
    """
    entry = entry.strip().lower().replace(" ", "")
    if not entry:
        return None

    is_warmup = entry.endswith("w")
    is_drop_set = entry.endswith("d")
    if is_warmup or is_drop_set:
        entry = entry[:-1]

    weight_str, sep, reps_str = entry.partition("x")
    if not sep:
        return None

    weight = _parse_number(weight_str, float)
    reps = _parse_number(reps_str, int)
    if weight is None and reps is None:
        return None

    return LoggedSet(
        set_number=set_number,
        reps=reps,
        weight_kg=weight,
        is_warmup=is_warmup,
        is_drop_set=is_drop_set,
    )


class ManualInputClient:
    """Interactive questionnaire for logging a workout."""

    async def collect_training_log(self, client_id: int) -> TrainingLog:
        """Run interactive questionnaire to collect one workout."""
        print("\n=== Log Workout ===\n")

        workout_name = await questionary.text(
            "Workout name:",
            validate=lambda text: bool(text.strip()) or "Workout name is required",
            style=custom_style,
        ).ask_async()

        logged_at_str = await questionary.text(
            "When? (YYYY-MM-DD HH:MM, blank for now)",
            default="",
            style=custom_style,
        ).ask_async()
        logged_at = datetime.now(timezone.utc)
        if logged_at_str and logged_at_str.strip():
            try:
                logged_at = datetime.fromisoformat(logged_at_str.strip()).astimezone(
                    timezone.utc
                )
            except ValueError:
                print("Could not read that date, using now.")

        duration_minutes = _parse_number(
            await questionary.text(
                "Duration in minutes (optional):", default="", style=custom_style
            ).ask_async(),
            int,
        )

        fatigue_level = await questionary.select(
            "How hard was the session?",
            choices=[
                questionary.Choice("Skip", None),
                questionary.Choice("Low", FatigueLevel.LOW),
                questionary.Choice("Moderate", FatigueLevel.MODERATE),
                questionary.Choice("High", FatigueLevel.HIGH),
            ],
            style=custom_style,
        ).ask_async()

        rpe = _parse_number(
            await questionary.text(
                "Session RPE 1-10 (optional):", default="", style=custom_style
            ).ask_async(),
            float,
        )

        exercises = await self._collect_exercises()

        notes = await questionary.text(
            "Notes (optional):", default="", style=custom_style
        ).ask_async()

        return TrainingLog(
            client_id=client_id,
            workout_name=workout_name or "",
            logged_at=logged_at,
            duration_minutes=duration_minutes,
            notes=notes,
            rpe=rpe,
            fatigue_level=fatigue_level,
            exercises=exercises,
        )

    async def _collect_exercises(self) -> list[LoggedExercise]:
        """Collect exercises until a blank name is entered."""
        exercises: list[LoggedExercise] = []

        print("\nEnter exercises one at a time. Leave the name blank to finish.")
        print("Sets are entered as weight x reps, e.g. '100x5'. Add 'w' for a")
        print("warm-up ('60x8w') or 'd' for a drop set.\n")

        while True:
            name = await questionary.text(
                f"Exercise {len(exercises) + 1} name:", default="", style=custom_style
            ).ask_async()
            if not name or not name.strip():
                break

            sets: list[LoggedSet] = []
            while True:
                entry = await questionary.text(
                    f"  Set {len(sets) + 1} (blank to finish):",
                    default="",
                    style=custom_style,
                ).ask_async()
                if not entry or not entry.strip():
                    break
                logged_set = parse_set_entry(entry, len(sets) + 1)
                if logged_set is None:
                    print("  Could not read that set, try e.g. '100x5'.")
                    continue
                sets.append(logged_set)

            exercises.append(
                LoggedExercise(
                    exercise_name=name.strip(),
                    order_index=len(exercises),
                    sets=sets,
                )
            )

        return exercises
