"""Shop management commands."""

import click
from bazaar.cli.error_handling import handle_domain_error, require_user_or_exit
from bazaar.domain.errors import DomainError
from bazaar.domain.listing import ListingService
from bazaar.domain.shop import ShopService, parse_address


def _parse_addresses(ctx, values: tuple[str, ...]):
    try:
        return [parse_address(value) for value in values]
    except DomainError as e:
        handle_domain_error(ctx, e)


@click.group()
def shop_group():
    """Manage your shop."""
    pass


@shop_group.command("create")
@click.argument("name", metavar="SHOP_NAME")
@click.option(
    "--address",
    "addresses",
    multiple=True,
    help="Address as 'City, street'. Repeat for more; the first is the primary address.",
)
@click.option("--delivery/--no-delivery", default=False, help="Whether the shop delivers")
@click.option("--phone", help="Contact phone")
@click.option("--email", help="Contact email")
@click.option("--telegram", help="Telegram handle")
@click.option("--website", help="Website URL")
@click.option("--description", help="Shop description")
@click.pass_context
def create_shop(
    ctx,
    name: str,
    addresses: tuple[str, ...],
    delivery: bool,
    phone: str | None,
    email: str | None,
    telegram: str | None,
    website: str | None,
    description: str | None,
):
    """Create your shop.

    Examples:
        bazaar --user u1 shop create "Parts Hub" --address "Ташкент, Чиланзар 5" --delivery
    """
    user_id = require_user_or_exit(ctx)
    service = ShopService(ctx.obj["db"])
    parsed = _parse_addresses(ctx, addresses)

    try:
        shop_id = service.create_shop(
            owner_id=user_id,
            name=name,
            addresses=parsed,
            has_delivery=delivery,
            phone=phone,
            email=email,
            telegram=telegram,
            website=website,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created shop '{name}' (ID: {shop_id})")


@shop_group.command("show")
@click.argument("shop_id", required=False)
@click.pass_context
def show_shop(ctx, shop_id: str | None):
    """Show a shop (yours if SHOP_ID is omitted)."""
    if shop_id is None:
        shop_id = require_user_or_exit(ctx)
    try:
        shop = ShopService(ctx.obj["db"]).get_shop(shop_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if shop is None:
        click.echo("Shop not found.")
        return

    click.echo(f"{shop.name} (ID: {shop.id})")
    click.echo(f"  Delivery: {'yes' if shop.has_delivery else 'no'}")
    for index, address in enumerate(shop.addresses, start=1):
        street = f", {address.street}" if address.street else ""
        click.echo(f"  Address {index}: {address.city}{street}")
    for label, value in (
        ("Phone", shop.phone),
        ("Email", shop.email),
        ("Telegram", shop.telegram),
        ("Website", shop.website),
        ("Description", shop.description),
    ):
        if value:
            click.echo(f"  {label}: {value}")


@shop_group.command("update")
@click.option("--name", help="New shop name")
@click.option(
    "--address",
    "addresses",
    multiple=True,
    help="Replace the address list. Repeat for more; the first is the primary address.",
)
@click.option("--delivery/--no-delivery", default=None, help="Whether the shop delivers")
@click.option("--phone", help="Contact phone")
@click.option("--email", help="Contact email")
@click.option("--telegram", help="Telegram handle")
@click.option("--website", help="Website URL")
@click.option("--description", help="Shop description")
@click.option(
    "--refresh-listings",
    is_flag=True,
    help="Copy the new city and delivery setting onto existing listings",
)
@click.pass_context
def update_shop(
    ctx,
    name: str | None,
    addresses: tuple[str, ...],
    delivery: bool | None,
    phone: str | None,
    email: str | None,
    telegram: str | None,
    website: str | None,
    description: str | None,
    refresh_listings: bool,
):
    """Update your shop.

    Existing listings keep the old city and delivery setting unless
    --refresh-listings is given.
    """
    user_id = require_user_or_exit(ctx)
    db = ctx.obj["db"]
    service = ShopService(db)
    parsed = _parse_addresses(ctx, addresses) if addresses else None

    try:
        service.update_shop(
            user_id,
            name=name,
            addresses=parsed,
            has_delivery=delivery,
            phone=phone,
            email=email,
            telegram=telegram,
            website=website,
            description=description,
        )
        click.echo("Shop updated")
        if refresh_listings:
            count = ListingService(db).refresh_shop_snapshots(user_id)
            click.echo(f"Refreshed {count} listing(s)")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register shop commands with main CLI."""
    cli.add_command(shop_group, name="shop")
