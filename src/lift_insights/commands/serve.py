"""JSON API server command."""

import click

from .base import echo_info, ensure_initialized

APP_FACTORY = "lift_insights.web:create_app"


@click.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to listen on")
@click.option("--port", "-p", default=8000, show_default=True, type=int, help="Port to listen on")
@click.option("--reload", is_flag=True, help="Restart when source files change")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="info",
    show_default=True,
    help="uvicorn log level",
)
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool, log_level: str):
    """Serve the clients, logs, recovery and records API.

    Interactive API docs are served under /docs.

        lift-insights serve --port 3000
    """
    ensure_initialized(ctx)

    import uvicorn

    echo_info(f"API listening on http://{host}:{port} (docs at /docs)")

    # uvicorn only reloads apps given as an import string
    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )
