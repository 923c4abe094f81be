"""User profile commands."""

import click
from bazaar.cli.error_handling import handle_domain_error, require_user_or_exit
from bazaar.domain.errors import DomainError
from bazaar.domain.user import UserService


@click.group()
def user_group():
    """Manage your user profile."""
    pass


@user_group.command("create")
@click.argument("email")
@click.option("--name", help="Display name")
@click.option("--phone", help="Phone number")
@click.pass_context
def create_profile(ctx, email: str, name: str | None, phone: str | None):
    """Create the profile of the signed-in user.

    Examples:
        bazaar --user u1 user create seller@example.com --name "Aziz"
    """
    user_id = require_user_or_exit(ctx)
    service = UserService(ctx.obj["db"])

    try:
        service.create_profile(user_id, email=email, display_name=name, phone=phone)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created profile for '{email}' (ID: {user_id})")


@user_group.command("show")
@click.argument("user_id", required=False)
@click.pass_context
def show_profile(ctx, user_id: str | None):
    """Show a profile (yours if USER_ID is omitted)."""
    if user_id is None:
        user_id = require_user_or_exit(ctx)
    try:
        profile = UserService(ctx.obj["db"]).get_profile(user_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if profile is None:
        click.echo("User not found.")
        return

    click.echo(f"ID: {profile.id}")
    click.echo(f"  Email: {profile.email}")
    if profile.display_name:
        click.echo(f"  Name: {profile.display_name}")
    if profile.phone:
        click.echo(f"  Phone: {profile.phone}")


@user_group.command("update")
@click.option("--name", help="New display name")
@click.option("--phone", help="New phone number")
@click.pass_context
def update_profile(ctx, name: str | None, phone: str | None):
    """Update the signed-in user's profile."""
    user_id = require_user_or_exit(ctx)
    service = UserService(ctx.obj["db"])

    if name is None and phone is None:
        click.echo("Nothing to update.")
        return

    try:
        service.update_profile(user_id, display_name=name, phone=phone)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo("Profile updated")


def register_commands(cli):
    """Register user commands with main CLI."""
    cli.add_command(user_group, name="user")
