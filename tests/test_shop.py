"""Tests for shops and user profiles."""

import pytest

from bazaar.domain.entities import ShopAddress
from bazaar.domain.errors import ConflictError, NotFoundError, ValidationError
from bazaar.domain.shop import parse_address


def test_parse_address():
    """Test "City, street" parsing."""
    assert parse_address("Ташкент, Чиланзар 5") == ShopAddress("Ташкент", "Чиланзар 5")
    assert parse_address("Самарканд") == ShopAddress("Самарканд", "")
    with pytest.raises(ValidationError):
        parse_address(", street only")


def test_shop_id_is_owner_id(shop_service, sample_shop):
    """Test that the shop is keyed by its owner."""
    assert sample_shop.id == "seller-1"
    assert sample_shop.owner_id == "seller-1"
    assert sample_shop.primary_city == "Ташкент"


def test_second_shop_for_owner_fails(shop_service, sample_shop):
    """Test one shop per owner."""
    with pytest.raises(ConflictError):
        shop_service.create_shop(owner_id="seller-1", name="Another")


def test_create_shop_requires_name(shop_service):
    """Test that a shop name is required."""
    with pytest.raises(ValidationError, match="Shop name is required"):
        shop_service.create_shop(owner_id="u", name="  ")


def test_shop_without_addresses_has_no_city(shop_service):
    """Test primary city of a shop without addresses."""
    shop_id = shop_service.create_shop(owner_id="u", name="Online only")
    assert shop_service.get_shop(shop_id).primary_city is None


def test_update_shop(shop_service, sample_shop):
    """Test merging shop fields."""
    shop_service.update_shop(sample_shop.id, telegram="@parts", has_delivery=False)
    shop = shop_service.get_shop(sample_shop.id)

    assert shop.telegram == "@parts"
    assert shop.has_delivery is False
    assert shop.name == "Mobile Parts"


def test_update_missing_shop(shop_service):
    """Test updating a shop that doesn't exist."""
    with pytest.raises(NotFoundError, match="Shop nobody not found"):
        shop_service.update_shop("nobody", name="X")


def test_user_profile_lifecycle(user_service):
    """Test creating, reading and updating a profile."""
    user_service.create_profile("u1", "ali@example.com")
    assert user_service.display_name("u1") == "ali@example.com"

    user_service.update_profile("u1", display_name="Ali")
    assert user_service.get_profile("u1").display_name == "Ali"
    assert user_service.display_name("u1") == "Ali"
    assert user_service.display_name("unknown") == "unknown"


def test_user_profile_errors(user_service):
    """Test profile validation and conflicts."""
    with pytest.raises(ValidationError):
        user_service.create_profile("u1", "")
    user_service.create_profile("u1", "ali@example.com")
    with pytest.raises(ConflictError):
        user_service.create_profile("u1", "other@example.com")
    with pytest.raises(NotFoundError):
        user_service.update_profile("u2", phone="123")


def test_create_shop_rejects_address_without_city(shop_service):
    """Test that every address needs a city."""
    with pytest.raises(ValidationError, match="Address 1 has no city"):
        shop_service.create_shop(
            owner_id="u",
            name="Parts",
            addresses=[ShopAddress(city=" ", street="Главная 1"), ShopAddress(city="Самарканд")],
        )
    assert shop_service.get_shop("u") is None


def test_update_shop_rejects_address_without_city(shop_service, sample_shop):
    """Test that an update can't store a blank primary city."""
    with pytest.raises(ValidationError, match="Address 2 has no city"):
        shop_service.update_shop(
            sample_shop.id, addresses=[ShopAddress(city="Бухара"), ShopAddress(city="")]
        )
    assert shop_service.get_shop(sample_shop.id).primary_city == "Ташкент"


def test_stored_blank_primary_address_is_not_replaced(temp_db, listing_service):
    """Test that a blank first address doesn't promote the second one."""
    temp_db.create_shop(
        owner_id="legacy",
        name="Legacy",
        addresses=[ShopAddress(city="", street="Главная 1"), ShopAddress(city="Самарканд")],
    )
    shop = temp_db.get_shop("legacy")
    assert shop.addresses[0] == ShopAddress(city="", street="Главная 1")
    assert shop.primary_city is None

    listing_id = listing_service.create_listing(
        shop_id="legacy", name="Glass", category="Запчасти", price="1000"
    )
    assert listing_service.get_listing(listing_id).city is None

    from bazaar.domain.search import ListingQueryService, SearchFilters

    result = ListingQueryService(temp_db).search("", SearchFilters(city="Самарканд"))
    assert len(result) == 0
