"""Listing query service: the search/filter pipeline."""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from bazaar import get_logger
from bazaar.database.base import Database
from bazaar.domain.catalog import ALL_CATEGORIES, ALL_CITIES
from bazaar.domain.entities import (
    AvailabilityFilter,
    DeliveryFilter,
    Listing,
    SearchResult,
)
from bazaar.domain.errors import StoreError
from bazaar.domain.session import SessionContext

LOGGER = get_logger("search")

SEARCH_FAILED_NOTICE = "Не удалось загрузить результаты поиска."


@dataclass(frozen=True)
class SearchFilters:
    """Structured filters of a listing search.

    ``city`` of None means "use the session's selected city".
    """

    category: str = ALL_CATEGORIES
    city: Optional[str] = None
    country_wide: bool = False
    delivery: DeliveryFilter = DeliveryFilter.ALL
    availability: AvailabilityFilter = AvailabilityFilter.ALL


def matches_term(listing: Listing, term: str) -> bool:
    """Case-insensitive substring match on name, description, model, category."""
    needle = term.lower()
    for value in (listing.name, listing.description, listing.model, listing.category):
        if value and needle in value.lower():
            return True
    return False


def resolve_city(listing: Listing) -> Optional[str]:
    """City of a listing, falling back to its shop snapshot."""
    if listing.city:
        return listing.city
    if listing.shop is not None:
        if listing.shop.city:
            return listing.shop.city
        if listing.shop.addresses:
            return listing.shop.addresses[0].city or None
    return None


def matches_city(listing: Listing, city: str) -> bool:
    listing_city = resolve_city(listing)
    if listing_city is None:
        return False
    return listing_city.lower() == city.lower()


def matches_delivery(listing: Listing, delivery: DeliveryFilter) -> bool:
    if delivery == DeliveryFilter.ONLY:
        return listing.has_delivery is True
    if delivery == DeliveryFilter.EXCLUDE:
        return listing.has_delivery is not True
    return True


def matches_availability(listing: Listing, availability: AvailabilityFilter) -> bool:
    if availability == AvailabilityFilter.IN_STOCK:
        return listing.quantity > 0
    if availability == AvailabilityFilter.OUT_OF_STOCK:
        return listing.quantity <= 0
    return True


def _narrow(listings: list[Listing], predicate: Callable[[Listing], bool]) -> list[Listing]:
    return [listing for listing in listings if predicate(listing)]


def apply_filters(
    listings: Iterable[Listing],
    term: str,
    filters: SearchFilters,
    city: Optional[str],
) -> list[Listing]:
    """Run the client-side stages over already fetched listings.

    Each stage only drops items, so survivors keep their fetch order.

    Args:
        listings: Listings from the store fetch
        term: Free-text term; empty disables the text stage
        filters: Structured filters
        city: Effective city; None, empty or "all" disables the city stage
    """
    result = list(listings)

    if term:
        result = _narrow(result, lambda item: matches_term(item, term))

    if not filters.country_wide and city and city != ALL_CITIES:
        result = _narrow(result, lambda item: matches_city(item, city))

    if filters.delivery != DeliveryFilter.ALL:
        result = _narrow(result, lambda item: matches_delivery(item, filters.delivery))

    if filters.availability != AvailabilityFilter.ALL:
        result = _narrow(result, lambda item: matches_availability(item, filters.availability))

    return result


class ListingQueryService:
    """Service for searching listings."""

    def __init__(self, db: Database, session: Optional[SessionContext] = None):
        """Initialize listing query service.

        Args:
            db: Database instance
            session: Session context supplying the selected city
        """
        self.db = db
        self.session = session or SessionContext()

    def fetch(self, category: str = ALL_CATEGORIES) -> list[Listing]:
        """Fetch listings, pushing only the category predicate to the store."""
        if category and category != ALL_CATEGORIES:
            return self.db.list_listings(category=category)
        return self.db.list_listings()

    def search(self, term: str = "", filters: Optional[SearchFilters] = None) -> SearchResult:
        """Search listings.

        Args:
            term: Free-text search term
            filters: Structured filters; defaults match everything in the
                session's selected city

        Returns:
            SearchResult with surviving listings in fetch order. When the
            store fetch fails the result is empty and carries a notice.
        """
        filters = filters or SearchFilters()
        term = term or ""
        city = filters.city if filters.city is not None else self.session.selected_city

        try:
            fetched = self.fetch(filters.category)
        except StoreError as exc:
            LOGGER.error("Error fetching search results: %s", exc)
            return SearchResult(listings=(), notice=SEARCH_FAILED_NOTICE)

        listings = apply_filters(fetched, term, filters, city)
        LOGGER.info(
            "Search term=%r category=%r city=%r: %d of %d listings",
            term,
            filters.category,
            city,
            len(listings),
            len(fetched),
        )
        return SearchResult(listings=tuple(listings))
