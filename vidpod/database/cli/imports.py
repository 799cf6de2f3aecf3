"""
Import Commands
----------------

Commands:
    - import: Import story ideas from a CSV file
    - template: Write the CSV template
    - tags: List tags with usage counts

Usage:
    # Import as user 1; rows are pending unless the user is an admin
    vidpod-db import ideas.csv --user-id 1

    # Import and approve immediately
    vidpod-db import ideas.csv --user-id 1 --auto-approve

    # Print the template, or write it to a directory or file
    vidpod-db template
    vidpod-db template ~/Downloads
"""
import click
from pathlib import Path

from vidpod.core.logging_manager import handle_cli_error
from vidpod.core.exceptions import (
    DatabaseError,
    ImportFileError,
    ImportPermissionError,
)
from vidpod.importer import StoryImporter, UploaderIdentity
from vidpod.importer.template import generate_template, write_template
from . import get_db


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--user-id", type=int, required=True, help="Id of the uploading user")
@click.option(
    "--auto-approve", is_flag=True, help="Store rows as approved instead of pending"
)
@click.pass_context
def import_csv(ctx, csv_file, user_id, auto_approve):
    """Import story ideas from CSV_FILE."""
    try:
        db = get_db(ctx)
        with db.session_scope():
            account = db.users.get_by_id(user_id)
            if account is None:
                raise ImportPermissionError(f"Unknown uploader id {user_id}")
            uploader = UploaderIdentity(user_id=account.id, role=account.role)

        click.echo(f"📥 Importing {csv_file.name}...")
        importer = StoryImporter(db, logger=ctx.obj.get("logger"))
        summary = importer.import_file(
            csv_file.read_bytes(), uploader, auto_approve=auto_approve
        )

        for error in summary.errors:
            click.echo(f"  ✗ Row {error.row} ({error.title}): {error.reason}")
        for warning in summary.warnings:
            click.echo(f"  ⚠️  Row {warning.row} ({warning.title}): {warning.warning}")

        icon = "✅" if summary.failed == 0 else "⚠️ "
        click.echo(f"{icon} {summary.message}")
        click.echo(f"   {summary.summary()}")

    except (DatabaseError, ImportFileError, ImportPermissionError) as e:
        handle_cli_error(ctx, e, "import", {"csv_file": str(csv_file)})


@click.command()
@click.argument("output", required=False, type=click.Path(path_type=Path))
def template(output):
    """Write the CSV template to OUTPUT (stdout when omitted)."""
    if output is None:
        click.echo(generate_template(), nl=False)
        return
    path = write_template(output)
    click.echo(f"✅ Template written to {path}")


@click.command()
@click.pass_context
def tags(ctx):
    """List tags with usage counts."""
    try:
        db = get_db(ctx)
        with db.session_scope():
            all_tags = db.tags.get_all()
            if not all_tags:
                click.echo("No tags found")
                return
            click.echo(f"🏷️  {len(all_tags)} tags:")
            for tag in all_tags:
                click.echo(f"  • {tag.tag_name} ({tag.usage_count})")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "tags")
