"""Shared CLI utilities."""

import asyncio
from datetime import datetime
from functools import wraps

import click

from ..db import get_db_path

# Tag and color printed in front of each kind of status line
MESSAGE_TAGS = {
    "success": ("[OK] ", "green"),
    "error": ("[ERROR] ", "red"),
    "info": ("[INFO] ", "blue"),
    "warning": ("[WARN] ", "yellow"),
}


def async_command(f):
    """Run an async click command callback to completion."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def _echo_tagged(kind: str, message: str) -> None:
    tag, color = MESSAGE_TAGS[kind]
    click.echo(click.style(tag, fg=color) + message)


def echo_success(message: str) -> None:
    _echo_tagged("success", message)


def echo_error(message: str) -> None:
    _echo_tagged("error", message)


def echo_info(message: str) -> None:
    _echo_tagged("info", message)


def echo_warning(message: str) -> None:
    _echo_tagged("warning", message)


def ensure_initialized(ctx: click.Context) -> None:
    """Exit with status 1 unless the database file exists."""
    if not get_db_path().exists():
        echo_error("Project not initialized. Run 'lift-insights init' first.")
        ctx.exit(1)


def format_datetime(value: datetime | None) -> str:
    """Format a timestamp in local time for display."""
    if value is None:
        return "-"
    return value.astimezone().strftime("%Y-%m-%d %H:%M")


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Lay out rows under headers in left-aligned columns.

    A dashed rule separates the header from the rows. Returns an empty
    string when there are no rows.
    """
    if not rows:
        return ""

    cells = [[str(cell) for cell in row] for row in rows]
    widths = [
        max(len(header), *(len(row[i]) for row in cells))
        for i, header in enumerate(headers)
    ]

    def line(values: list[str]) -> str:
        return "".join(v.ljust(w + padding) for v, w in zip(values, widths)).rstrip()

    return "\n".join(
        [line(headers), line(["-" * w for w in widths])] + [line(row) for row in cells]
    )
