"""Search state <-> URL query string.

Parameters are written in a fixed order and encoded the way browsers
serialize URLSearchParams, so links stay shareable between clients.
"""

from typing import Optional
from urllib.parse import parse_qsl, quote_plus

from bazaar.domain.catalog import ALL_CATEGORIES
from bazaar.domain.entities import AvailabilityFilter, DeliveryFilter
from bazaar.domain.search import SearchFilters

# DeliveryFilter <-> wire value of the "delivery" parameter
DELIVERY_TO_PARAM = {
    DeliveryFilter.ALL: "all",
    DeliveryFilter.ONLY: "delivery",
    DeliveryFilter.EXCLUDE: "nodelivery",
}
PARAM_TO_DELIVERY = {value: key for key, value in DELIVERY_TO_PARAM.items()}

PARAM_ORDER = ("term", "category", "city", "delivery", "availability", "countrySearch")


def _encode_component(value: str) -> str:
    # URLSearchParams leaves only alphanumerics and "*-._" unescaped
    return quote_plus(value, safe="*").replace("~", "%7E")


def encode_search_params(term: str, filters: SearchFilters, city: Optional[str] = None) -> str:
    """Encode a search state as a query string (without the leading '?').

    Args:
        term: Free-text term
        filters: Structured filters
        city: City to write when ``filters.city`` is None (the session's
            selected city); written as empty when both are None
    """
    effective_city = filters.city if filters.city is not None else city
    values = {
        "term": term or "",
        "category": filters.category or ALL_CATEGORIES,
        "city": effective_city or "",
        "delivery": DELIVERY_TO_PARAM[DeliveryFilter(filters.delivery)],
        "availability": AvailabilityFilter(filters.availability).value,
        "countrySearch": "true" if filters.country_wide else "false",
    }
    return "&".join(f"{name}={_encode_component(values[name])}" for name in PARAM_ORDER)


def decode_search_params(query: str) -> tuple[str, SearchFilters]:
    """Decode a query string into (term, filters).

    Missing or unknown values fall back to defaults. An empty city decodes
    to None so the session's selected city applies.
    """
    if query.startswith("?"):
        query = query[1:]

    params: dict[str, str] = {}
    for name, value in parse_qsl(query, keep_blank_values=True):
        # First occurrence wins, like URLSearchParams.get
        params.setdefault(name, value)

    term = params.get("term", "")
    category = params.get("category") or ALL_CATEGORIES
    city = params.get("city") or None
    delivery = PARAM_TO_DELIVERY.get(params.get("delivery", "all"), DeliveryFilter.ALL)

    try:
        availability = AvailabilityFilter(params.get("availability", "all"))
    except ValueError:
        availability = AvailabilityFilter.ALL

    filters = SearchFilters(
        category=category,
        city=city,
        country_wide=params.get("countrySearch") == "true",
        delivery=delivery,
        availability=availability,
    )
    return term, filters
