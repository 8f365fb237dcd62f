"""Web server command."""

import click

from ..config import get_settings
from .base import ensure_initialized


@click.command()
@click.option("--host", default=None, help="Host to bind to (default: GYMBUDDY_HOST or 127.0.0.1)")
@click.option("--port", "-p", default=None, type=int, help="Port to bind to (default: GYMBUDDY_PORT or 3000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None, reload: bool):
    """Start the API server.

    Examples:

        # Start on the configured port
        gymbuddy serve

        # Expose to network (all interfaces)
        gymbuddy serve --host 0.0.0.0 --port 8080
    """
    ensure_initialized(ctx)

    import uvicorn

    from ..web import create_app

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port

    click.echo()
    click.echo(click.style("Starting gymbuddy API server...", fg="green"))
    click.echo()
    click.echo(f"  Local:   http://{host}:{port}{settings.api_prefix}/health")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    uvicorn.run(
        create_app() if not reload else "gymbuddy.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
    )
