"""Initialize project command."""

import click

from ..db import get_data_dir, get_db_path, init_db
from .base import async_command, echo_info, echo_success, echo_warning


@click.command()
@async_command
async def init():
    """Initialize the lift-insights data directory and database.

    Set LIFT_INSIGHTS_DATA_DIR to keep the database somewhere other than
    the default data directory.
    """
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing lift-insights in {data_dir}")
    if db_path.exists():
        echo_warning("Database already exists, existing data is kept")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Add a client:")
    click.echo('     lift-insights clients add "Jane Doe"')
    click.echo()
    click.echo("  2. Log a workout:")
    click.echo("     lift-insights log add 1")
    click.echo()
    click.echo("  3. Check recovery and personal records:")
    click.echo("     lift-insights recovery 1")
    click.echo("     lift-insights records 1")
