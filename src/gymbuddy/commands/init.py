"""Initialize database command."""

import click

from ..config import get_settings
from ..data.exercise_loader import seed_exercises_if_empty
from .base import async_command, echo_info, echo_success, open_store


@click.command()
@async_command
async def init():
    """Initialize the gymbuddy database.

    Creates the data directory and the SQLite database with the required
    schema, then loads the bundled exercise library if the catalog is
    empty. Running it again is harmless.
    """
    db_path = get_settings().db_path
    echo_info(f"Initializing gymbuddy in {db_path.parent}")

    async with open_store() as store:
        echo_success("Database initialized")
        count = await seed_exercises_if_empty(store)

    if count:
        echo_success(f"Exercise library populated ({count} exercises)")
    else:
        echo_info("Exercise library already populated")

    click.echo()
    click.echo("gymbuddy is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo('  gymbuddy routines create "Push day"')
    click.echo("  gymbuddy serve")
