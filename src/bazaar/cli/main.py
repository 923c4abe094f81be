"""Main CLI entry point."""

import logging

import click
from bazaar import get_logger
from bazaar.database.factories import create_sqlite_database
from bazaar.domain.catalog import DEFAULT_CITY
from bazaar.domain.session import SessionContext
from bazaar.config import Settings

# Import and register all commands at module level
from bazaar.cli.commands import (
    user,
    shop,
    listing,
    search,
    favorite,
    chat,
    ledger,
    task,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides BAZAAR_DB_PATH environment variable)",
    envvar="BAZAAR_DB_PATH",
)
@click.option(
    "--user",
    "user_id",
    help="Signed-in user ID (overrides BAZAAR_USER environment variable)",
    envvar="BAZAAR_USER",
)
@click.option(
    "--city",
    help=f"Selected city (defaults to {DEFAULT_CITY}; 'all' searches every city)",
    envvar="BAZAAR_CITY",
)
@click.option("--verbose", "-v", is_flag=True, help="Log store and search activity")
@click.pass_context
def cli(ctx, db_path: str | None, user_id: str | None, city: str | None, verbose: bool):
    """Bazaar - spare parts marketplace.

    Open a shop, list parts, search listings by city, category, delivery
    and availability, keep favorites, chat with sellers and track cash flow.
    """
    ctx.ensure_object(dict)

    if verbose:
        get_logger().setLevel(logging.INFO)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            settings = Settings.from_env()
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.obj["settings"] = settings
        ctx.obj["session"] = SessionContext(user_id=user_id, selected_city=city or DEFAULT_CITY)
        ctx.call_on_close(db.disconnect)


# Register all commands
user.register_commands(cli)
shop.register_commands(cli)
listing.register_commands(cli)
search.register_commands(cli)
favorite.register_commands(cli)
chat.register_commands(cli)
ledger.register_commands(cli)
task.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
