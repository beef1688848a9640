"""Client management commands."""

import click

from ..db import ClientRepository
from ..models.client import Client
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
)


@click.group()
def clients():
    """Manage coached clients."""
    pass


@clients.command("add")
@click.argument("name")
@click.pass_context
@async_command
async def add_client(ctx: click.Context, name: str):
    """Add a client."""
    ensure_initialized(ctx)

    try:
        client_id = await ClientRepository().create(Client(name=name))
    except ValueError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Added client {name} (ID: {client_id})")


@clients.command("list")
@click.pass_context
@async_command
async def list_clients(ctx: click.Context):
    """List all clients."""
    ensure_initialized(ctx)

    all_clients = await ClientRepository().list_all()
    if not all_clients:
        echo_info("No clients yet. Add one with 'lift-insights clients add NAME'.")
        return

    click.echo()
    click.echo(
        format_table(
            headers=["ID", "Name"],
            rows=[[str(c.id), c.name] for c in all_clients],
        )
    )
