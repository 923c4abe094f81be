"""CLI error handling helpers."""

import click

from bazaar import get_logger
from bazaar.domain.errors import DomainError, StoreError
from bazaar.domain.session import SessionContext

LOGGER = get_logger("cli")


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    if isinstance(error, StoreError):
        LOGGER.error("Store call failed: %s", error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def require_user_or_exit(ctx: click.Context) -> str:
    """Return the signed-in user id, or exit with a CLI error."""
    session: SessionContext = ctx.obj["session"]
    if not session.is_authenticated():
        click.echo("Error: You are not signed in. Pass --user or set BAZAAR_USER.", err=True)
        ctx.exit(1)
    return session.require_user()
