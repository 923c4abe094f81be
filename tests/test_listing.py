"""Tests for the listing service."""

from decimal import Decimal

import pytest

from bazaar.domain.catalog import (
    FIRST_ARTICLE_NUMBER,
    STATUS_IN_WAREHOUSE,
    STATUS_ON_DISPLAY,
    STATUS_OUT_OF_STOCK,
)
from bazaar.domain.entities import ShopAddress
from bazaar.domain.errors import NotFoundError, ValidationError


def test_create_listing_copies_shop(listing_service, sample_shop):
    """Test that the shop snapshot, city and delivery flag are copied."""
    listing_id = listing_service.create_listing(
        shop_id=sample_shop.id,
        name="Galaxy S21 battery",
        category="Запчасти",
        price="120 000",
        quantity="4",
    )
    listing = listing_service.get_listing(listing_id)

    assert listing.price == Decimal("120000")
    assert listing.quantity == 4
    assert listing.status == STATUS_ON_DISPLAY
    assert listing.city == "Ташкент"
    assert listing.has_delivery is True
    assert listing.shop.id == sample_shop.id
    assert listing.shop.name == "Mobile Parts"
    assert listing.shop.addresses == (ShopAddress(city="Ташкент", street="Чиланзар 5"),)


def test_article_numbers_increase(listing_service, sample_shop):
    """Test that article numbers start at 10000 and follow the listing count."""
    first = listing_service.create_listing(
        shop_id=sample_shop.id, name="A", category="Запчасти", price="1"
    )
    second = listing_service.create_listing(
        shop_id=sample_shop.id, name="B", category="Запчасти", price="1"
    )

    assert listing_service.get_listing(first).article_number == FIRST_ARTICLE_NUMBER
    assert listing_service.get_listing(second).article_number == FIRST_ARTICLE_NUMBER + 1


def test_zero_quantity_is_out_of_stock(listing_service, sample_shop):
    """Test derived status for an empty stock."""
    listing_id = listing_service.create_listing(
        shop_id=sample_shop.id, name="A", category="Запчасти", price="1", quantity=0
    )
    assert listing_service.get_listing(listing_id).status == STATUS_OUT_OF_STOCK


def test_create_listing_missing_fields(listing_service, sample_shop):
    """Test the missing field message."""
    with pytest.raises(ValidationError, match="Required fields are missing: name, price"):
        listing_service.create_listing(
            shop_id=sample_shop.id, name=" ", category="Запчасти", price=""
        )


@pytest.mark.parametrize("price", ["abc", "-1", "NaN"])
def test_create_listing_rejects_bad_price(listing_service, sample_shop, price):
    """Test that non-numeric and negative prices are rejected."""
    with pytest.raises(ValidationError):
        listing_service.create_listing(
            shop_id=sample_shop.id, name="A", category="Запчасти", price=price
        )


def test_create_listing_rejects_unknown_category(listing_service, sample_shop):
    """Test that categories come from the fixed set."""
    with pytest.raises(ValidationError, match="Unknown category"):
        listing_service.create_listing(
            shop_id=sample_shop.id, name="A", category="Ноутбуки", price="1"
        )


def test_create_listing_rejects_bad_quantity(listing_service, sample_shop):
    """Test quantity validation."""
    with pytest.raises(ValidationError, match="whole number"):
        listing_service.create_listing(
            shop_id=sample_shop.id, name="A", category="Запчасти", price="1", quantity="1.5"
        )
    with pytest.raises(ValidationError, match="cannot be negative"):
        listing_service.create_listing(
            shop_id=sample_shop.id, name="A", category="Запчасти", price="1", quantity=-2
        )


def test_create_listing_without_shop(listing_service):
    """Test creating a listing for a missing shop."""
    with pytest.raises(NotFoundError, match="Shop nobody not found"):
        listing_service.create_listing(
            shop_id="nobody", name="A", category="Запчасти", price="1"
        )


def test_update_listing(listing_service, sample_listing):
    """Test merging fields into a listing."""
    listing_service.update_listing(sample_listing.id, price="400000", quantity=0)
    listing = listing_service.get_listing(sample_listing.id)

    assert listing.price == Decimal("400000")
    assert listing.quantity == 0
    assert listing.name == sample_listing.name


def test_update_missing_listing(listing_service):
    """Test updating a listing that doesn't exist."""
    with pytest.raises(NotFoundError, match="Listing missing not found"):
        listing_service.update_listing("missing", name="X")


def test_shop_update_leaves_snapshot_until_refresh(
    shop_service, listing_service, sample_shop, sample_listing
):
    """Test that listings keep the old shop fields until refreshed."""
    shop_service.update_shop(
        sample_shop.id,
        name="Mobile Parts Pro",
        addresses=[ShopAddress(city="Самарканд")],
        has_delivery=False,
    )

    stale = listing_service.get_listing(sample_listing.id)
    assert stale.city == "Ташкент"
    assert stale.shop.name == "Mobile Parts"

    assert listing_service.refresh_shop_snapshots(sample_shop.id) == 1

    fresh = listing_service.get_listing(sample_listing.id)
    assert fresh.city == "Самарканд"
    assert fresh.has_delivery is False
    assert fresh.shop.name == "Mobile Parts Pro"


def test_update_listing_with_refresh_shop(
    shop_service, listing_service, sample_shop, sample_listing
):
    """Test refreshing a single listing's snapshot on update."""
    shop_service.update_shop(sample_shop.id, addresses=[ShopAddress(city="Бухара")])

    listing_service.update_listing(sample_listing.id, refresh_shop=True)

    assert listing_service.get_listing(sample_listing.id).city == "Бухара"


def test_refresh_missing_shop(listing_service):
    """Test refreshing listings of a missing shop."""
    with pytest.raises(NotFoundError):
        listing_service.refresh_shop_snapshots("nobody")


def test_delete_listing(listing_service, sample_listing):
    """Test deleting a listing."""
    listing_service.delete_listing(sample_listing.id)
    assert listing_service.get_listing(sample_listing.id) is None
    with pytest.raises(NotFoundError):
        listing_service.delete_listing(sample_listing.id)


def test_warehouse_and_shop_listings(listing_service, sample_shop, sample_listing):
    """Test listing a shop's stock and its warehouse."""
    stored_id = listing_service.create_listing(
        shop_id=sample_shop.id,
        name="Spare glass",
        category="Запчасти",
        price="1000",
        status=STATUS_IN_WAREHOUSE,
    )

    assert [l.id for l in listing_service.list_shop_listings(sample_shop.id)] == [
        sample_listing.id,
        stored_id,
    ]
    assert [l.id for l in listing_service.list_warehouse(sample_shop.id)] == [stored_id]
