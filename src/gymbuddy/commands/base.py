"""Shared CLI utilities."""

import asyncio
from contextlib import asynccontextmanager
from datetime import datetime
from functools import wraps
from typing import AsyncIterator

import click

from ..config import get_settings
from ..db.engine import Store


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_settings().db_path
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Database not initialized. Run 'gymbuddy init' first."
        )
        ctx.exit(1)


@asynccontextmanager
async def open_store() -> AsyncIterator[Store]:
    """Open the configured store for the duration of a command."""
    store = Store(get_settings().db_path)
    await store.open()
    try:
        yield store
    finally:
        await store.close()


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def format_timestamp(ms: int | None) -> str:
    """Format epoch milliseconds for display."""
    if ms is None:
        return "N/A"
    return datetime.fromtimestamp(ms / 1000).strftime("%Y-%m-%d %H:%M")


def format_number(value: float | int | None) -> str:
    if value is None:
        return "-"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = [
        "".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)).rstrip(),
        "".join("-" * w + " " * padding for w in widths).rstrip(),
    ]
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)).rstrip()
        )

    return "\n".join(lines)
