"""CLI entry point for lift-insights."""

import logging

import click

from .commands import clients, init, log, records, recovery, serve

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


@click.group()
@click.version_option(version="0.1.0", prog_name="lift-insights")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """lift-insights: training log analytics for coaches and clients.

    Log workouts, then see which muscle groups are recovered and which
    personal records were set.

    Example usage:

        # Initialize the project
        lift-insights init

        # Add a client and log a workout
        lift-insights clients add "Jane Doe"
        lift-insights log add 1

        # Check recovery and estimated 1RM records
        lift-insights recovery 1
        lift-insights records 1
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


# Register commands
main.add_command(init)
main.add_command(clients)
main.add_command(log)
main.add_command(recovery)
main.add_command(records)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
