"""CLI entry point for gymbuddy."""

import click

from . import __version__
from .commands import exercises, init, marks, routines, serve
from .config import configure_logging, get_settings


@click.group()
@click.version_option(version=__version__, prog_name="gymbuddy")
def main():
    """gymbuddy: personal workout tracker.

    Keep an exercise library, compose routines with planned sets, log
    finished workouts through the API and review your personal records.

    Example usage:

        # Create the database and load the exercise library
        gymbuddy init

        # Browse exercises
        gymbuddy exercises search bench --group Chest

        # Start the API server
        gymbuddy serve
    """
    configure_logging(get_settings().log_level)


# Register commands
main.add_command(init)
main.add_command(serve)
main.add_command(exercises)
main.add_command(routines)
main.add_command(marks)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
