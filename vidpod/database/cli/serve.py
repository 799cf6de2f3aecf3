"""
Server Command
---------------

Runs the FastAPI application with uvicorn.

Usage:
    vidpod-db serve --host 0.0.0.0 --port 8000
"""
import click
import uvicorn

from vidpod.core.logging_manager import handle_cli_error
from vidpod.core.exceptions import DatabaseError
from vidpod.web import create_app
from . import get_db


@click.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address")
@click.option("--port", default=8000, type=int, show_default=True, help="Bind port")
@click.pass_context
def serve(ctx, host, port):
    """Serve the HTTP API."""
    try:
        db = get_db(ctx)
    except DatabaseError as e:
        handle_cli_error(ctx, e, "serve")
        return

    click.echo(f"🌐 Serving VidPOD on http://{host}:{port}")
    uvicorn.run(create_app(db), host=host, port=port, log_level="info")
