"""Exercise library commands."""

import click

from ..db.repositories import SEARCH_LIMIT, ExerciseRepository
from ..errors import ValidationError
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    open_store,
)


@click.group()
@click.pass_context
def exercises(ctx):
    """Browse and extend the exercise library."""
    ensure_initialized(ctx)


@exercises.command()
@async_command
async def groups():
    """List body-part groups."""
    async with open_store() as store:
        names = await ExerciseRepository(store).list_groups()

    if not names:
        echo_info("The exercise library is empty")
        return
    for name in names:
        click.echo(name)


@exercises.command()
@click.argument("query", required=False, default="")
@click.option("--group", "-g", default="*", help="Body-part group filter ('*' for all)")
@async_command
async def search(query: str, group: str):
    """Search exercises by name."""
    async with open_store() as store:
        results = await ExerciseRepository(store).search(query=query, group=group)

    if not results:
        echo_info("No exercises found")
        return

    headers = ["ID", "Name", "Body part", "Equipment", "Custom"]
    rows = [
        [e.id, e.name, e.body_part, e.equipment, "yes" if e.is_custom else ""]
        for e in results
    ]
    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(results)} exercise(s)")
    if len(results) == SEARCH_LIMIT:
        echo_info(f"Showing the first {SEARCH_LIMIT} matches; narrow the search to see more")


@exercises.command()
@click.argument("name")
@click.option("--body-part", "-b", default="", help="Body-part group, e.g. Chest")
@click.option("--primary", default="", help="Primary muscles")
@click.option("--secondary", default="", help="Secondary muscles")
@click.option("--equipment", "-e", default="", help="Equipment needed")
@click.option("--image", default="", help="Image URL")
@click.pass_context
@async_command
async def add(
    ctx,
    name: str,
    body_part: str,
    primary: str,
    secondary: str,
    equipment: str,
    image: str,
):
    """Add a custom exercise."""
    async with open_store() as store:
        try:
            exercise = await ExerciseRepository(store).create(
                name=name,
                image=image,
                body_part=body_part,
                primary_muscles=primary,
                secondary_muscles=secondary,
                equipment=equipment,
            )
        except ValidationError as e:
            echo_error(str(e))
            ctx.exit(1)

    echo_success(f"Added {exercise.name} (ID: {exercise.id})")
