#!/usr/bin/env python3
"""
VidPOD Database Management CLI
-------------------------------

Command-line interface for the story idea database.

This module provides the main CLI group and shared context setup
for all commands.

Command Structure:
    - Setup (init)
    - Accounts (user add, user list)
    - Import (import, template, tags)
    - Server (serve)

Usage:
    # Create or migrate the database
    vidpod-db init

    # Add a teacher account
    vidpod-db user add ms.rivera rivera@school.org --role teacher

    # Import a spreadsheet as that teacher
    vidpod-db import ideas.csv --user-id 1

    # Run the HTTP API
    vidpod-db serve --port 8000
"""
import click
import logging
from pathlib import Path

from vidpod.core.logging_manager import VidpodLogger
from vidpod.core.paths import ALEMBIC_DIR, DATABASE_URL, LOG_DIR
from vidpod.database.manager import VidpodDB


@click.group()
@click.option(
    "--db-url",
    envvar="VIDPOD_DATABASE_URL",
    default=DATABASE_URL,
    show_default=True,
    help="SQLAlchemy URL or path to a SQLite file",
)
@click.option(
    "--alembic-dir",
    type=click.Path(),
    default=str(ALEMBIC_DIR),
    help="Path to Alembic directory",
)
@click.option(
    "--log-dir",
    envvar="VIDPOD_LOG_DIR",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Path to log directory",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Show detailed errors and tracebacks",
)
@click.pass_context
def cli(ctx, db_url, alembic_dir, log_dir, verbose):
    """VidPOD Story Idea Database CLI"""

    # Suppress Alembic INFO logging by default
    logging.getLogger("alembic").setLevel(logging.WARNING)

    ctx.ensure_object(dict)
    ctx.obj["db_url"] = db_url
    ctx.obj["alembic_dir"] = Path(alembic_dir)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = VidpodLogger(Path(log_dir), component_name="cli")


def get_db(ctx) -> VidpodDB:
    """Get or create database instance from context."""
    if "db" not in ctx.obj:
        ctx.obj["db"] = VidpodDB(
            db_url=ctx.obj["db_url"],
            alembic_dir=ctx.obj["alembic_dir"],
            logger=ctx.obj["logger"],
        )
    return ctx.obj["db"]


# Import and register command modules
# These imports must come after CLI group definition
from .setup import init  # noqa: E402
from .users import user  # noqa: E402
from .imports import import_csv, template, tags  # noqa: E402
from .serve import serve  # noqa: E402

# Register top-level commands
cli.add_command(init)
cli.add_command(import_csv)
cli.add_command(template)
cli.add_command(tags)
cli.add_command(serve)

# Register command groups
cli.add_command(user)


if __name__ == "__main__":
    cli(obj={})
