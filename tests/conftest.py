"""Shared pytest fixtures for bazaar tests."""

import tempfile
import os
import pytest

from bazaar.database.factories import create_sqlite_database
from bazaar.domain.chat import ChatService
from bazaar.domain.entities import ShopAddress
from bazaar.domain.favorites import FavoritesService
from bazaar.domain.ledger import LedgerService
from bazaar.domain.listing import ListingService
from bazaar.domain.shop import ShopService
from bazaar.domain.user import UserService
from bazaar.domain.workshop import TaskService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def user_service(temp_db):
    """Create a UserService with a temporary database."""
    return UserService(temp_db)


@pytest.fixture
def shop_service(temp_db):
    """Create a ShopService with a temporary database."""
    return ShopService(temp_db)


@pytest.fixture
def listing_service(temp_db):
    """Create a ListingService with a temporary database."""
    return ListingService(temp_db)


@pytest.fixture
def favorites_service(temp_db):
    """Create a FavoritesService with a temporary database."""
    return FavoritesService(temp_db)


@pytest.fixture
def chat_service(temp_db):
    """Create a ChatService with a temporary database."""
    return ChatService(temp_db)


@pytest.fixture
def ledger_service(temp_db):
    """Create a LedgerService with a temporary database."""
    return LedgerService(temp_db)


@pytest.fixture
def task_service(temp_db):
    """Create a TaskService with a temporary database."""
    return TaskService(temp_db)


@pytest.fixture
def sample_shop(shop_service):
    """Create a shop in Ташкент with delivery, owned by 'seller-1'."""
    shop_id = shop_service.create_shop(
        owner_id="seller-1",
        name="Mobile Parts",
        addresses=[ShopAddress(city="Ташкент", street="Чиланзар 5")],
        has_delivery=True,
        phone="+998 90 000 00 00",
    )
    return shop_service.get_shop(shop_id)


@pytest.fixture
def sample_listing(listing_service, sample_shop):
    """Create a listing in the sample shop."""
    listing_id = listing_service.create_listing(
        shop_id=sample_shop.id,
        name="iPhone 12 screen",
        category="Телефоны",
        price="450000",
        quantity=3,
        model="iPhone 12",
        description="Original OLED screen",
    )
    return listing_service.get_listing(listing_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
