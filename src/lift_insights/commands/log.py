"""Training log commands."""

import json
from pathlib import Path

import click

from ..clients.manual.client import ManualInputClient
from ..db import ClientRepository, TrainingLogRepository
from ..models.training_log import TrainingLog
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_datetime,
    format_table,
)


def load_log_file(path: Path, client_id: int) -> TrainingLog:
    """Read a workout from a JSON file.

    The file holds one log object with nested ``exercises`` and ``sets``,
    in the same shape ``TrainingLog.to_dict`` produces. ``client_id`` in
    the file, if any, is ignored.

    Raises:
        ValueError: If the file is not valid JSON or misses required fields
    """
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a single workout object")

    try:
        return TrainingLog.from_dict(data, client_id=client_id)
    except KeyError as e:
        raise ValueError(f"Missing field {e} in {path}") from e
    except (TypeError, ValueError) as e:
        raise ValueError(f"Malformed workout in {path}: {e}") from e


@click.group()
def log():
    """Log, list and remove workouts."""
    pass


@log.command("add")
@click.argument("client_id", type=int)
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the workout from a JSON file instead of prompting",
)
@click.pass_context
@async_command
async def add_log(ctx: click.Context, client_id: int, file_path: Path | None):
    """Log a workout for a client.

    Without --file an interactive questionnaire asks for the workout,
    its exercises and their sets.
    """
    ensure_initialized(ctx)

    client = await ClientRepository().get(client_id)
    if not client:
        echo_error(f"Client {client_id} not found.")
        ctx.exit(1)

    try:
        if file_path:
            training_log = load_log_file(file_path, client_id)
        else:
            training_log = await ManualInputClient().collect_training_log(client_id)
        training_log = training_log.cleaned()
    except ValueError as e:
        echo_error(str(e))
        ctx.exit(1)

    log_id = await TrainingLogRepository().create(training_log)

    echo_success(f"Logged '{training_log.workout_name}' for {client.name} (ID: {log_id})")
    click.echo(
        f"  {len(training_log.exercises)} exercises, {training_log.total_sets} sets, "
        f"{training_log.total_volume:,.0f} kg volume"
    )


@log.command("list")
@click.argument("client_id", type=int)
@click.option("--limit", "-n", type=int, default=20, help="Maximum logs to show")
@click.pass_context
@async_command
async def list_logs(ctx: click.Context, client_id: int, limit: int):
    """List a client's workouts, newest first."""
    ensure_initialized(ctx)

    logs = await TrainingLogRepository().list_by_client(client_id)
    if not logs:
        echo_info("No workouts logged yet.")
        return

    rows = [
        [
            str(entry.id),
            format_datetime(entry.logged_at),
            entry.workout_name[:30],
            str(len(entry.exercises)),
            str(entry.total_sets),
            f"{entry.total_volume:,.0f}",
            entry.fatigue_level.value if entry.fatigue_level else "-",
        ]
        for entry in logs[:limit]
    ]

    click.echo()
    click.echo(
        format_table(
            headers=["ID", "Logged", "Workout", "Exercises", "Sets", "Volume (kg)", "Fatigue"],
            rows=rows,
        )
    )


@log.command("show")
@click.argument("log_id", type=int)
@click.pass_context
@async_command
async def show_log(ctx: click.Context, log_id: int):
    """Show a workout with all its sets."""
    ensure_initialized(ctx)

    entry = await TrainingLogRepository().get(log_id)
    if not entry:
        echo_error(f"Training log {log_id} not found.")
        ctx.exit(1)

    click.echo()
    click.echo(click.style(entry.workout_name, bold=True))
    click.echo("=" * 50)
    click.echo(f"Logged: {format_datetime(entry.logged_at)}")
    if entry.duration_minutes:
        click.echo(f"Duration: {entry.duration_minutes} min")
    if entry.rpe is not None:
        click.echo(f"RPE: {entry.rpe:g}")
    if entry.fatigue_level:
        click.echo(f"Fatigue: {entry.fatigue_level.value}")
    click.echo(f"Volume: {entry.total_volume:,.0f} kg over {entry.total_sets} sets")
    if entry.notes:
        click.echo(f"Notes: {entry.notes}")

    for exercise in entry.exercises:
        click.echo()
        click.echo(click.style(exercise.exercise_name, bold=True))
        for s in exercise.sets:
            parts = []
            if s.weight_kg is not None:
                parts.append(f"{s.weight_kg:g} kg")
            if s.reps is not None:
                parts.append(f"x {s.reps}")
            if s.duration_seconds:
                parts.append(f"{s.duration_seconds}s")
            if s.distance_meters:
                parts.append(f"{s.distance_meters:g} m")
            tags = []
            if s.is_warmup:
                tags.append("warm-up")
            if s.is_drop_set:
                tags.append("drop set")
            suffix = f" ({', '.join(tags)})" if tags else ""
            click.echo(f"  Set {s.set_number}: {' '.join(parts)}{suffix}")


@log.command("delete")
@click.argument("log_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete_log(ctx: click.Context, log_id: int, yes: bool):
    """Delete a workout and all its exercises and sets."""
    ensure_initialized(ctx)

    repo = TrainingLogRepository()
    entry = await repo.get(log_id)
    if not entry:
        echo_error(f"Training log {log_id} not found.")
        ctx.exit(1)

    if not yes and not click.confirm(f"Delete '{entry.workout_name}'?"):
        return

    await repo.delete(log_id)
    echo_success(f"Deleted training log {log_id}")
