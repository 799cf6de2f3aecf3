"""
Setup & Initialization Commands
--------------------------------

Commands:
    - init: Create the schema, or migrate an existing database to head
"""
import click

from vidpod.core.logging_manager import handle_cli_error
from vidpod.core.exceptions import DatabaseError
from . import get_db


@click.command()
@click.pass_context
def init(ctx):
    """Initialize or migrate the database schema."""
    try:
        click.echo("🚀 Initializing VidPOD database...")
        db = get_db(ctx)
        status = db.get_migration_history()
        if "error" in status:
            raise DatabaseError(status["error"])
        click.echo(f"🗄️  Schema revision: {status['current_revision']}")
        click.echo("✅ Database ready!")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "init")
