"""Routine commands."""

import click

from ..db.repositories import RoutineRepository
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_number,
    format_table,
    format_timestamp,
    open_store,
)


@click.group()
@click.pass_context
def routines(ctx):
    """Manage workout routines."""
    ensure_initialized(ctx)


@routines.command(name="list")
@async_command
async def list_routines():
    """List routines, most recently edited first."""
    async with open_store() as store:
        summaries = await RoutineRepository(store).list_summaries()

    if not summaries:
        echo_info("No routines found. Create one with 'gymbuddy routines create'")
        return

    headers = ["ID", "Name", "Exercises", "Updated"]
    rows = [
        [
            r.id,
            r.name[:30] + "..." if len(r.name) > 30 else r.name,
            str(r.exercise_count),
            format_timestamp(r.updated_at),
        ]
        for r in summaries
    ]
    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(summaries)} routine(s)")


@routines.command()
@click.argument("name", required=False)
@async_command
async def create(name: str | None):
    """Create an empty routine."""
    async with open_store() as store:
        routine = await RoutineRepository(store).create(name)
    echo_success(f"Created routine {routine.name} (ID: {routine.id})")


@routines.command()
@click.argument("routine_id")
@click.pass_context
@async_command
async def show(ctx, routine_id: str):
    """Show a routine with its planned sets."""
    async with open_store() as store:
        routine = await RoutineRepository(store).get(routine_id)

    if routine is None:
        echo_error(f"Routine {routine_id} not found")
        ctx.exit(1)

    click.echo()
    click.echo("=" * 60)
    click.echo(f"Routine: {routine.name} (ID: {routine.id})")
    click.echo("=" * 60)
    click.echo(f"Created: {format_timestamp(routine.created_at)}")
    click.echo(f"Updated: {format_timestamp(routine.updated_at)}")
    click.echo()

    if not routine.exercises:
        echo_info("No exercises yet")
        return

    for position, item in enumerate(routine.exercises, start=1):
        click.echo(f"{position}. {item.exercise.name} [{item.exercise.body_part or '-'}]")
        for number, planned in enumerate(item.sets, start=1):
            click.echo(
                f"     set {number}: {format_number(planned.reps)} reps"
                f" x {format_number(planned.weight)}"
            )
    click.echo()
    click.echo(f"{len(routine.exercises)} exercise(s), {routine.total_sets} set(s)")
