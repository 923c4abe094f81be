"""Listing management commands."""

from pathlib import Path

import click
from bazaar.cli.error_handling import handle_domain_error, require_user_or_exit
from bazaar.domain.catalog import CATEGORIES
from bazaar.domain.entities import Listing
from bazaar.domain.errors import DomainError
from bazaar.domain.listing import ListingService
from bazaar.integrations.image_host import ImageHost


def format_listing_line(listing: Listing) -> str:
    """One-line summary of a listing."""
    city = listing.city or "-"
    delivery = "delivery" if listing.has_delivery else "pickup"
    return (
        f"{listing.id} | #{listing.article_number} | {listing.name[:30]:30s} | "
        f"{listing.category:10s} | {listing.price:>12,.2f} | qty {listing.quantity:3d} | "
        f"{city} | {delivery}"
    )


def echo_listings(listings: list[Listing], empty_message: str = "No listings found.") -> None:
    """Print listings as a table."""
    if not listings:
        click.echo(empty_message)
        return

    click.echo(f"\nFound {len(listings)} listing(s):")
    click.echo("-" * 110)
    for listing in listings:
        click.echo(format_listing_line(listing))


@click.group()
def listing_group():
    """Manage listings in your shop."""
    pass


@listing_group.command("create")
@click.argument("name", metavar="NAME")
@click.option("--category", required=True, type=click.Choice(CATEGORIES), help="Listing category")
@click.option("--price", required=True, help="Price (e.g., 150000 or '150 000 UZS')")
@click.option("--quantity", default="1", show_default=True, help="Units in stock")
@click.option("--model", help="Device model")
@click.option("--description", help="Description")
@click.option("--image", type=click.Path(exists=True, dir_okay=False), help="Image file to upload")
@click.option("--image-url", help="Image URL (used instead of uploading)")
@click.option("--status", help="Status text (derived from quantity if omitted)")
@click.pass_context
def create_listing(
    ctx,
    name: str,
    category: str,
    price: str,
    quantity: str,
    model: str | None,
    description: str | None,
    image: str | None,
    image_url: str | None,
    status: str | None,
):
    """Create a listing in your shop.

    Examples:
        bazaar --user u1 listing create "iPhone 11 screen" --category Запчасти --price 350000
        bazaar --user u1 listing create "Case" --category Аксессуары --price 50000 --image case.jpg
    """
    user_id = require_user_or_exit(ctx)
    service = ListingService(ctx.obj["db"])

    if image and not image_url:
        host = ImageHost.from_settings(ctx.obj["settings"])
        image_url = host.upload(Path(image).read_bytes(), filename=Path(image).name)

    try:
        listing_id = service.create_listing(
            shop_id=user_id,
            name=name,
            category=category,
            price=price,
            quantity=quantity,
            model=model,
            description=description,
            image_url=image_url,
            status=status,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    listing = service.get_listing(listing_id)
    click.echo(f"Created listing '{name}' (ID: {listing_id}, article #{listing.article_number})")


@listing_group.command("show")
@click.argument("listing_id")
@click.pass_context
def show_listing(ctx, listing_id: str):
    """Show listing details."""
    try:
        listing = ListingService(ctx.obj["db"]).get_listing(listing_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if listing is None:
        click.echo("Listing not found.")
        return

    click.echo(f"{listing.name} (ID: {listing.id})")
    click.echo(f"  Article: #{listing.article_number}")
    click.echo(f"  Category: {listing.category}")
    if listing.model:
        click.echo(f"  Model: {listing.model}")
    click.echo(f"  Price: {listing.price:,.2f}")
    click.echo(f"  Quantity: {listing.quantity}")
    click.echo(f"  Status: {listing.status}")
    if listing.shop is not None:
        click.echo(f"  Shop: {listing.shop.name} (ID: {listing.shop_id})")
    click.echo(f"  City: {listing.city or '-'}")
    click.echo(f"  Delivery: {'yes' if listing.has_delivery else 'no'}")
    if listing.description:
        click.echo(f"  Description: {listing.description}")
    if listing.image_url:
        click.echo(f"  Image: {listing.image_url}")


@listing_group.command("update")
@click.argument("listing_id")
@click.option("--name", help="New name")
@click.option("--category", type=click.Choice(CATEGORIES), help="New category")
@click.option("--price", help="New price")
@click.option("--quantity", help="New quantity")
@click.option("--model", help="New model")
@click.option("--description", help="New description")
@click.option("--image-url", help="New image URL")
@click.option("--status", help="New status text")
@click.option("--refresh-shop", is_flag=True, help="Re-copy your shop's city and delivery setting")
@click.pass_context
def update_listing(
    ctx,
    listing_id: str,
    name: str | None,
    category: str | None,
    price: str | None,
    quantity: str | None,
    model: str | None,
    description: str | None,
    image_url: str | None,
    status: str | None,
    refresh_shop: bool,
):
    """Update one of your listings."""
    user_id = require_user_or_exit(ctx)
    service = ListingService(ctx.obj["db"])

    try:
        listing = service.require_listing(listing_id)
        if listing.shop_id != user_id:
            click.echo("Error: You can only edit listings of your own shop", err=True)
            ctx.exit(1)
        service.update_listing(
            listing_id,
            name=name,
            category=category,
            price=price,
            quantity=quantity,
            model=model,
            description=description,
            image_url=image_url,
            status=status,
            refresh_shop=refresh_shop,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated listing {listing_id}")


@listing_group.command("delete")
@click.argument("listing_id")
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_listing(ctx, listing_id: str, yes: bool):
    """Delete one of your listings."""
    user_id = require_user_or_exit(ctx)
    service = ListingService(ctx.obj["db"])

    try:
        listing = service.get_listing(listing_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    if listing is None or listing.shop_id != user_id:
        click.echo("Error: Listing not found in your shop", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(f"Are you sure you want to delete '{listing.name}'?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_listing(listing_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted listing '{listing.name}'")


@listing_group.command("list")
@click.option("--shop", "shop_id", help="Shop ID (defaults to your shop)")
@click.option("--status", help="Only listings with this status")
@click.pass_context
def list_listings(ctx, shop_id: str | None, status: str | None):
    """List a shop's listings."""
    if shop_id is None:
        shop_id = require_user_or_exit(ctx)
    try:
        listings = ListingService(ctx.obj["db"]).list_shop_listings(shop_id, status=status)
    except DomainError as e:
        handle_domain_error(ctx, e)
    echo_listings(listings)


@listing_group.command("warehouse")
@click.pass_context
def list_warehouse(ctx):
    """List listings kept in your warehouse."""
    user_id = require_user_or_exit(ctx)
    try:
        listings = ListingService(ctx.obj["db"]).list_warehouse(user_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    echo_listings(listings, empty_message="Warehouse is empty.")


def register_commands(cli):
    """Register listing commands with main CLI."""
    cli.add_command(listing_group, name="listing")
