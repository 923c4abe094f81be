"""Listing domain service."""

from decimal import Decimal
from typing import Optional, Union

from bazaar import get_logger
from bazaar.database.base import Database
from bazaar.domain.catalog import (
    CATEGORIES,
    FIRST_ARTICLE_NUMBER,
    STATUS_IN_WAREHOUSE,
    STATUS_ON_DISPLAY,
    STATUS_OUT_OF_STOCK,
)
from bazaar.domain.entities import Listing, Shop, ShopSnapshot
from bazaar.domain.errors import (
    NotFoundError,
    ValidationError,
    listing_not_found,
    missing_fields,
    shop_not_found,
)
from bazaar.utils.amount_parser import parse_amount, parse_quantity

LOGGER = get_logger("listing")


def build_snapshot(shop: Shop) -> ShopSnapshot:
    """Copy the shop fields a listing carries."""
    return ShopSnapshot(
        id=shop.id,
        name=shop.name,
        addresses=shop.addresses,
        has_delivery=shop.has_delivery,
        city=shop.primary_city,
    )


def validate_price(price: Union[str, Decimal, int, float, None]) -> Decimal:
    """Parse and check a listing price.

    Raises:
        ValidationError: If price is empty, not numeric or negative
    """
    if price is None or (isinstance(price, str) and not price.strip()):
        raise ValidationError(missing_fields(["price"]))
    try:
        value = parse_amount(price) if isinstance(price, str) else Decimal(str(price))
    except (ValueError, ArithmeticError):
        raise ValidationError(f"Price must be a number, got '{price}'")
    if not value.is_finite():
        raise ValidationError(f"Price must be a number, got '{price}'")
    if value < 0:
        raise ValidationError("Price cannot be negative")
    return value


def validate_quantity(quantity: Union[str, int]) -> int:
    """Parse and check a stock quantity.

    Raises:
        ValidationError: If quantity is not a whole number or negative
    """
    try:
        value = parse_quantity(quantity) if isinstance(quantity, str) else int(quantity)
    except (ValueError, TypeError):
        raise ValidationError(f"Quantity must be a whole number, got '{quantity}'")
    if value < 0:
        raise ValidationError("Quantity cannot be negative")
    return value


class ListingService:
    """Service for managing listings."""

    def __init__(self, db: Database):
        """Initialize listing service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_listing(
        self,
        shop_id: str,
        name: str,
        category: str,
        price: Union[str, Decimal, int, float],
        quantity: Union[str, int] = 1,
        model: Optional[str] = None,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        status: Optional[str] = None,
    ) -> str:
        """Create a listing in a shop.

        The shop's name, addresses, primary city and delivery flag are copied
        onto the listing. The article number is 10000 plus the number of
        listings already stored.

        Args:
            shop_id: Owning shop ID
            name: Listing name
            category: One of CATEGORIES
            price: Non-negative price, as a number or a string
            quantity: Units in stock
            model: Optional model
            description: Optional description
            image_url: Optional image URL
            status: Status text; derived from quantity when None

        Returns:
            Listing ID

        Raises:
            ValidationError: If a required field is missing or malformed
            NotFoundError: If the shop doesn't exist
        """
        missing = []
        if not name or not name.strip():
            missing.append("name")
        if not category:
            missing.append("category")
        if price is None or (isinstance(price, str) and not price.strip()):
            missing.append("price")
        if missing:
            raise ValidationError(missing_fields(missing))

        if category not in CATEGORIES:
            raise ValidationError(
                f"Unknown category '{category}'. Choose one of: {', '.join(CATEGORIES)}"
            )

        price_value = validate_price(price)
        quantity_value = validate_quantity(quantity)

        shop = self.db.get_shop(shop_id)
        if shop is None:
            raise NotFoundError(shop_not_found(shop_id))

        if status is None:
            status = STATUS_ON_DISPLAY if quantity_value > 0 else STATUS_OUT_OF_STOCK

        article_number = FIRST_ARTICLE_NUMBER + self.db.count_listings()
        snapshot = build_snapshot(shop)

        listing_id = self.db.create_listing(
            article_number=article_number,
            name=name.strip(),
            category=category,
            price=price_value,
            quantity=quantity_value,
            shop_id=shop_id,
            status=status,
            model=model or None,
            description=description or None,
            image_url=image_url or None,
            shop=snapshot,
            city=snapshot.city,
            has_delivery=snapshot.has_delivery,
        )
        LOGGER.info("Created listing %s (article %d) in shop %s", listing_id, article_number, shop_id)
        return listing_id

    def get_listing(self, listing_id: str) -> Optional[Listing]:
        """Get listing by ID.

        Returns:
            Listing entity or None if not found
        """
        return self.db.get_listing(listing_id)

    def require_listing(self, listing_id: str) -> Listing:
        """Get listing by ID or raise NotFoundError."""
        listing = self.db.get_listing(listing_id)
        if listing is None:
            raise NotFoundError(listing_not_found(listing_id))
        return listing

    def update_listing(
        self,
        listing_id: str,
        name: Optional[str] = None,
        model: Optional[str] = None,
        category: Optional[str] = None,
        price: Union[str, Decimal, int, float, None] = None,
        quantity: Union[str, int, None] = None,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        status: Optional[str] = None,
        refresh_shop: bool = False,
    ) -> None:
        """Update listing fields that are not None.

        Args:
            refresh_shop: If True, also re-copy the owning shop's snapshot,
                city and delivery flag

        Raises:
            NotFoundError: If listing doesn't exist
            ValidationError: If a given field is malformed
        """
        listing = self.require_listing(listing_id)

        if name is not None and not name.strip():
            raise ValidationError(missing_fields(["name"]))
        if category is not None and category not in CATEGORIES:
            raise ValidationError(
                f"Unknown category '{category}'. Choose one of: {', '.join(CATEGORIES)}"
            )
        price_value = validate_price(price) if price is not None else None
        quantity_value = validate_quantity(quantity) if quantity is not None else None

        self.db.update_listing(
            listing_id,
            name=name.strip() if name is not None else None,
            model=model,
            category=category,
            price=price_value,
            quantity=quantity_value,
            description=description,
            image_url=image_url,
            status=status,
        )

        if refresh_shop:
            shop = self.db.get_shop(listing.shop_id)
            if shop is not None:
                self._apply_snapshot(listing.id, shop)

    def refresh_shop_snapshots(self, shop_id: str) -> int:
        """Re-copy a shop's current fields onto all of its listings.

        Returns:
            Number of listings refreshed

        Raises:
            NotFoundError: If shop doesn't exist
        """
        shop = self.db.get_shop(shop_id)
        if shop is None:
            raise NotFoundError(shop_not_found(shop_id))

        listings = self.db.list_listings(shop_id=shop_id)
        for listing in listings:
            self._apply_snapshot(listing.id, shop)
        LOGGER.info("Refreshed shop snapshot on %d listings of shop %s", len(listings), shop_id)
        return len(listings)

    def _apply_snapshot(self, listing_id: str, shop: Shop) -> None:
        snapshot = build_snapshot(shop)
        self.db.update_listing_shop_snapshot(
            listing_id,
            shop=snapshot,
            city=snapshot.city,
            has_delivery=snapshot.has_delivery,
        )

    def delete_listing(self, listing_id: str) -> None:
        """Delete a listing.

        Raises:
            NotFoundError: If listing doesn't exist
        """
        self.require_listing(listing_id)
        self.db.delete_listing(listing_id)

    def list_shop_listings(self, shop_id: str, status: Optional[str] = None) -> list[Listing]:
        """List a shop's listings, optionally with one status."""
        return self.db.list_listings(shop_id=shop_id, status=status)

    def list_warehouse(self, owner_id: str) -> list[Listing]:
        """List listings the owner keeps in the warehouse."""
        return self.db.list_listings(shop_id=owner_id, status=STATUS_IN_WAREHOUSE)
