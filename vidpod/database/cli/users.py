"""
Account Commands
-----------------

Accounts normally come from the upstream auth service; these commands
provision them for local setups and imports from the shell.

Commands:
    - user add: Create an account
    - user list: List accounts

Usage:
    vidpod-db user add ms.rivera rivera@school.org --role teacher
    vidpod-db user list
"""
import click

from vidpod.core.logging_manager import handle_cli_error
from vidpod.core.exceptions import DatabaseError, ValidationError
from vidpod.database.models import UserRole
from . import get_db


@click.group()
@click.pass_context
def user(ctx: click.Context) -> None:
    """User account management."""
    pass


@user.command("add")
@click.argument("username")
@click.argument("email")
@click.option(
    "--role",
    type=click.Choice(UserRole.choices()),
    default=UserRole.TEACHER.value,
    show_default=True,
    help="Account role",
)
@click.pass_context
def user_add(ctx, username, email, role):
    """Create a user account."""
    try:
        db = get_db(ctx)
        with db.session_scope():
            account = db.users.create(
                {"username": username, "email": email, "role": role}
            )
            user_id = account.id
        click.echo(f"✅ Created {role} '{username}' (id {user_id})")

    except (DatabaseError, ValidationError) as e:
        handle_cli_error(ctx, e, "user_add", {"username": username})


@user.command("list")
@click.pass_context
def user_list(ctx):
    """List user accounts."""
    try:
        db = get_db(ctx)
        with db.session_scope():
            accounts = db.users.get_all()
            if not accounts:
                click.echo("No users found")
                return
            for account in accounts:
                click.echo(
                    f"{account.id:>5}  {account.username:<24} "
                    f"{account.role.value:<15} {account.email}"
                )

    except DatabaseError as e:
        handle_cli_error(ctx, e, "user_list")
