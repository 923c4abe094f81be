"""Favorite listing commands."""

import click
from bazaar.cli.commands.listing import echo_listings
from bazaar.cli.error_handling import handle_domain_error, require_user_or_exit
from bazaar.domain.errors import DomainError
from bazaar.domain.favorites import FavoritesService
from bazaar.domain.listing import ListingService


@click.group()
def favorite_group():
    """Manage your favorite listings."""
    pass


@favorite_group.command("add")
@click.argument("listing_id")
@click.pass_context
def add_favorite(ctx, listing_id: str):
    """Add a listing to your favorites."""
    user_id = require_user_or_exit(ctx)
    db = ctx.obj["db"]

    try:
        ListingService(db).require_listing(listing_id)
        result = FavoritesService(db).add(user_id, listing_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(result.message)


@favorite_group.command("remove")
@click.argument("listing_id")
@click.pass_context
def remove_favorite(ctx, listing_id: str):
    """Remove a listing from your favorites."""
    user_id = require_user_or_exit(ctx)

    try:
        FavoritesService(ctx.obj["db"]).remove(user_id, listing_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo("Removed from favorites")


@favorite_group.command("check")
@click.argument("listing_id")
@click.pass_context
def check_favorite(ctx, listing_id: str):
    """Tell whether a listing is in your favorites."""
    user_id = require_user_or_exit(ctx)
    try:
        found = FavoritesService(ctx.obj["db"]).is_favorite(user_id, listing_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo("yes" if found else "no")


@favorite_group.command("list")
@click.pass_context
def list_favorites(ctx):
    """List your favorite listings."""
    user_id = require_user_or_exit(ctx)
    try:
        listings = FavoritesService(ctx.obj["db"]).list_favorites(user_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    echo_listings(listings, empty_message="No favorites yet.")


def register_commands(cli):
    """Register favorite commands with main CLI."""
    cli.add_command(favorite_group, name="favorite")
