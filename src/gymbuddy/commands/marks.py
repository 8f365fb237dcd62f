"""Personal records command."""

import click

from ..db.repositories import PersonalRecordRepository
from .base import (
    async_command,
    echo_info,
    ensure_initialized,
    format_number,
    format_table,
    open_store,
)


@click.command()
@click.pass_context
@async_command
async def marks(ctx):
    """Show the personal record for every logged exercise."""
    ensure_initialized(ctx)

    async with open_store() as store:
        records = await PersonalRecordRepository(store).list_records()

    if not records:
        echo_info("No records yet. Finish a workout to see your best lifts here.")
        return

    headers = ["Exercise", "Body part", "Weight", "Reps"]
    rows = [
        [r.name or "?", r.body_part or "", format_number(r.pr_weight), str(r.reps_at_pr)]
        for r in records
    ]
    click.echo()
    click.echo(format_table(headers, rows))
