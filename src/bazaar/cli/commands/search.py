"""Listing search command."""

import click
from bazaar.cli.commands.listing import echo_listings
from bazaar.domain.catalog import ALL_CATEGORIES, CATEGORIES
from bazaar.domain.entities import AvailabilityFilter, DeliveryFilter
from bazaar.domain.search import ListingQueryService, SearchFilters
from bazaar.utils.search_params import decode_search_params, encode_search_params


@click.command("search")
@click.argument("term", required=False, default="")
@click.option(
    "--category",
    type=click.Choice((ALL_CATEGORIES,) + CATEGORIES),
    default=ALL_CATEGORIES,
    show_default=True,
    help="Listing category",
)
@click.option("--city", help="City to search in (defaults to the selected city)")
@click.option("--country-wide", is_flag=True, help="Search every city")
@click.option(
    "--delivery",
    type=click.Choice([item.value for item in DeliveryFilter]),
    default=DeliveryFilter.ALL.value,
    show_default=True,
    help="Only listings with delivery, only without, or all",
)
@click.option(
    "--availability",
    type=click.Choice([item.value for item in AvailabilityFilter]),
    default=AvailabilityFilter.ALL.value,
    show_default=True,
    help="In stock, out of stock, or all",
)
@click.option("--from-url", "query", help="Restore a search from a query string")
@click.option("--show-url", is_flag=True, help="Print the shareable query string")
@click.pass_context
def search_listings(
    ctx,
    term: str,
    category: str,
    city: str | None,
    country_wide: bool,
    delivery: str,
    availability: str,
    query: str | None,
    show_url: bool,
):
    """Search listings.

    TERM is matched case-insensitively against name, description, model and
    category.

    Examples:
        bazaar search "iphone screen" --category Телефоны --delivery only
        bazaar --city Самарканд search --availability inStock
        bazaar search --from-url "term=&category=...&countrySearch=true"
    """
    session = ctx.obj["session"]
    service = ListingQueryService(ctx.obj["db"], session)

    if query is not None:
        term, filters = decode_search_params(query)
    else:
        filters = SearchFilters(
            category=category,
            city=city,
            country_wide=country_wide,
            delivery=DeliveryFilter(delivery),
            availability=AvailabilityFilter(availability),
        )

    result = service.search(term, filters)
    if result.notice:
        click.echo(f"Error: {result.notice}", err=True)
        ctx.exit(1)

    echo_listings(list(result.listings))

    if show_url:
        click.echo(f"\n?{encode_search_params(term, filters, city=session.selected_city)}")


def register_commands(cli):
    """Register search command with main CLI."""
    cli.add_command(search_listings)
