"""Recovery and personal record commands."""

import click

from ..db import ClientRepository, TrainingLogRepository
from ..models.analytics import RecoveryStatus
from ..services.personal_records import calculate_personal_records
from ..services.recovery import summarize_recovery
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_datetime,
    format_table,
)

STATUS_COLORS = {
    RecoveryStatus.FRESH: "cyan",
    RecoveryStatus.RECOVERING: "yellow",
    RecoveryStatus.RECOVERED: "green",
}


async def _load_client_logs(ctx: click.Context, client_id: int):
    client = await ClientRepository().get(client_id)
    if not client:
        echo_error(f"Client {client_id} not found.")
        ctx.exit(1)
    return client, await TrainingLogRepository().list_by_client(client_id)


@click.command()
@click.argument("client_id", type=int)
@click.pass_context
@async_command
async def recovery(ctx: click.Context, client_id: int):
    """Show how recovered each muscle group is.

    Muscles are listed least recovered first. A session logged with high
    fatigue needs 72 hours, any other session 48 hours.
    """
    ensure_initialized(ctx)

    client, logs = await _load_client_logs(ctx, client_id)
    summary = summarize_recovery(logs)

    if not summary.has_data:
        echo_info(f"No workouts logged for {client.name} yet.")
        return

    rows = []
    for status in summary.muscles:
        rows.append([
            status.muscle.value,
            f"{status.recovery_percent}%",
            click.style(status.get_status_display(), fg=STATUS_COLORS[status.status]),
            f"{status.hours_ago}h" if status.hours_ago is not None else "-",
            f"{status.suggested_wait_hours}h" if status.suggested_wait_hours else "-",
        ])

    click.echo()
    click.echo(click.style(f"Muscle Recovery: {client.name}", bold=True))
    click.echo()
    click.echo(
        format_table(
            headers=["Muscle", "Recovered", "Status", "Since", "Wait"],
            rows=rows,
        )
    )

    click.echo()
    ready = ", ".join(m.muscle.value for m in summary.ready_to_train)
    if ready:
        echo_success(f"Ready to train: {ready}")
    if summary.still_recovering:
        echo_info(
            "Still recovering: "
            + ", ".join(m.muscle.value for m in summary.still_recovering)
        )


@click.command()
@click.argument("client_id", type=int)
@click.pass_context
@async_command
async def records(ctx: click.Context, client_id: int):
    """Show estimated one-rep-max personal records.

    Estimates use the Brzycki formula on working sets of 12 reps or fewer.
    """
    ensure_initialized(ctx)

    client, logs = await _load_client_logs(ctx, client_id)
    summary = calculate_personal_records(logs)

    if not summary.has_records:
        echo_info(f"No qualifying sets logged for {client.name} yet.")
        return

    rows = [
        [
            record.exercise_name[:30],
            f"{record.estimated_1rm} kg",
            f"{record.weight_kg:g} x {record.reps}",
            format_datetime(record.achieved_at),
            f"+{record.improvement}" if record.improvement else "-",
        ]
        for record in summary.records
    ]

    click.echo()
    click.echo(click.style(f"Personal Records: {client.name}", bold=True))
    click.echo()
    click.echo(
        format_table(
            headers=["Exercise", "Est. 1RM", "Best Set", "Achieved", "Gain"],
            rows=rows,
        )
    )

    if summary.recent_prs:
        click.echo()
        click.echo(click.style("New this week:", bold=True))
        for record in summary.recent_prs:
            click.echo(f"  {record.exercise_name}: {record.estimated_1rm} kg")
