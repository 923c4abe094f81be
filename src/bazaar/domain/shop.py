"""Shop domain service."""

from typing import Optional
from bazaar.database.base import Database
from bazaar.domain.entities import Shop, ShopAddress
from bazaar.domain.errors import ConflictError, NotFoundError, ValidationError, shop_not_found


def parse_address(value: str) -> ShopAddress:
    """Parse "City, street" into a ShopAddress.

    Raises:
        ValidationError: If the city part is empty
    """
    city, _, street = value.partition(",")
    city = city.strip()
    if not city:
        raise ValidationError(f"Address '{value}' has no city")
    return ShopAddress(city=city, street=street.strip())


def validate_addresses(addresses: Optional[list[ShopAddress]]) -> list[ShopAddress]:
    """Check that every address has a city.

    Raises:
        ValidationError: If an address has an empty city
    """
    result = []
    for index, address in enumerate(addresses or [], start=1):
        city = (address.city or "").strip()
        if not city:
            raise ValidationError(f"Address {index} has no city")
        result.append(ShopAddress(city=city, street=(address.street or "").strip()))
    return result


class ShopService:
    """Service for managing shops."""

    def __init__(self, db: Database):
        """Initialize shop service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_shop(
        self,
        owner_id: str,
        name: str,
        addresses: Optional[list[ShopAddress]] = None,
        has_delivery: bool = False,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        telegram: Optional[str] = None,
        website: Optional[str] = None,
        description: Optional[str] = None,
    ) -> str:
        """Create the owner's shop.

        Args:
            owner_id: Owning user id; becomes the shop id
            name: Shop name
            addresses: Ordered addresses, first one is the primary address

        Returns:
            Shop ID

        Raises:
            ValidationError: If name is empty or an address has no city
            ConflictError: If the owner already has a shop
        """
        if not name or not name.strip():
            raise ValidationError("Shop name is required")
        checked = validate_addresses(addresses)

        if self.db.get_shop(owner_id) is not None:
            raise ConflictError(f"User {owner_id} already has a shop")

        return self.db.create_shop(
            owner_id=owner_id,
            name=name.strip(),
            addresses=checked,
            has_delivery=has_delivery,
            phone=phone,
            email=email,
            telegram=telegram,
            website=website,
            description=description,
        )

    def get_shop(self, shop_id: str) -> Optional[Shop]:
        """Get shop by ID.

        Returns:
            Shop entity or None if not found
        """
        return self.db.get_shop(shop_id)

    def require_shop(self, shop_id: str) -> Shop:
        """Get shop by ID or raise NotFoundError."""
        shop = self.db.get_shop(shop_id)
        if shop is None:
            raise NotFoundError(shop_not_found(shop_id))
        return shop

    def update_shop(
        self,
        shop_id: str,
        name: Optional[str] = None,
        addresses: Optional[list[ShopAddress]] = None,
        has_delivery: Optional[bool] = None,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        telegram: Optional[str] = None,
        website: Optional[str] = None,
        description: Optional[str] = None,
    ) -> None:
        """Update shop fields that are not None.

        Listings keep their old shop snapshot until
        ListingService.refresh_shop_snapshots is called for this shop.

        Raises:
            NotFoundError: If shop doesn't exist
            ValidationError: If name is given but empty, or an address has no city
        """
        self.require_shop(shop_id)
        if name is not None and not name.strip():
            raise ValidationError("Shop name is required")
        if addresses is not None:
            addresses = validate_addresses(addresses)

        self.db.update_shop(
            shop_id,
            name=name.strip() if name is not None else None,
            addresses=addresses,
            has_delivery=has_delivery,
            phone=phone,
            email=email,
            telegram=telegram,
            website=website,
            description=description,
        )
