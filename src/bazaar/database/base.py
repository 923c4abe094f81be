"""Abstract document store interface."""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from bazaar.domain.entities import (
    UserProfile,
    Shop,
    ShopAddress,
    ShopSnapshot,
    Listing,
    Favorite,
    Chat,
    Message,
    LedgerEntry,
    Task,
)


class Database(ABC):
    """Abstract document store interface for bazaar.

    Queries filter by equality only. List operations return records in the
    order the store holds them (insertion order). A missing record is None
    or an empty list; backend failures raise StoreError.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize collections (create tables)."""
        pass

    # User profile operations
    @abstractmethod
    def create_user_profile(
        self,
        user_id: str,
        email: str,
        display_name: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> str:
        """Create a user profile keyed by the identity's user id. Returns the id."""
        pass

    @abstractmethod
    def get_user_profile(self, user_id: str) -> Optional[UserProfile]:
        """Get user profile by id."""
        pass

    @abstractmethod
    def update_user_profile(
        self,
        user_id: str,
        display_name: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> None:
        """Merge the given fields into a user profile."""
        pass

    # Shop operations
    @abstractmethod
    def create_shop(
        self,
        owner_id: str,
        name: str,
        addresses: list[ShopAddress],
        has_delivery: bool = False,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        telegram: Optional[str] = None,
        website: Optional[str] = None,
        description: Optional[str] = None,
    ) -> str:
        """Create the owner's shop. The shop id equals the owner id."""
        pass

    @abstractmethod
    def get_shop(self, shop_id: str) -> Optional[Shop]:
        """Get shop by id."""
        pass

    @abstractmethod
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
        """Merge the given fields into a shop."""
        pass

    # Listing operations
    @abstractmethod
    def count_listings(self) -> int:
        """Count all listings."""
        pass

    @abstractmethod
    def create_listing(
        self,
        article_number: int,
        name: str,
        category: str,
        price: Decimal,
        quantity: int,
        shop_id: str,
        status: str,
        model: Optional[str] = None,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        shop: Optional[ShopSnapshot] = None,
        city: Optional[str] = None,
        has_delivery: bool = False,
    ) -> str:
        """Create a listing. Returns listing id."""
        pass

    @abstractmethod
    def get_listing(self, listing_id: str) -> Optional[Listing]:
        """Get listing by id."""
        pass

    @abstractmethod
    def update_listing(
        self,
        listing_id: str,
        name: Optional[str] = None,
        model: Optional[str] = None,
        category: Optional[str] = None,
        price: Optional[Decimal] = None,
        quantity: Optional[int] = None,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        status: Optional[str] = None,
    ) -> None:
        """Merge the given fields into a listing."""
        pass

    @abstractmethod
    def update_listing_shop_snapshot(
        self,
        listing_id: str,
        shop: Optional[ShopSnapshot],
        city: Optional[str],
        has_delivery: bool,
    ) -> None:
        """Replace the denormalized shop fields of a listing."""
        pass

    @abstractmethod
    def delete_listing(self, listing_id: str) -> None:
        """Delete a listing."""
        pass

    @abstractmethod
    def list_listings(
        self,
        category: Optional[str] = None,
        shop_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> list[Listing]:
        """List listings matching every given equality filter."""
        pass

    # Favorite operations
    @abstractmethod
    def create_favorite(self, user_id: str, listing_id: str) -> str:
        """Insert a favorite record. Returns favorite id."""
        pass

    @abstractmethod
    def find_favorites(self, user_id: str, listing_id: str) -> list[Favorite]:
        """Find every favorite record for a (user, listing) pair."""
        pass

    @abstractmethod
    def delete_favorite(self, favorite_id: str) -> None:
        """Delete a favorite record."""
        pass

    @abstractmethod
    def list_favorites(self, user_id: str) -> list[Favorite]:
        """List a user's favorite records."""
        pass

    # Chat operations
    @abstractmethod
    def create_chat(self, buyer_id: str, seller_id: str, listing_id: str) -> str:
        """Create a chat. Returns chat id."""
        pass

    @abstractmethod
    def get_chat(self, chat_id: str) -> Optional[Chat]:
        """Get chat by id."""
        pass

    @abstractmethod
    def find_chats(self, buyer_id: str, seller_id: str, listing_id: str) -> list[Chat]:
        """Find chats matching a (buyer, seller, listing) triple."""
        pass

    @abstractmethod
    def list_chats(
        self, buyer_id: Optional[str] = None, seller_id: Optional[str] = None
    ) -> list[Chat]:
        """List chats by buyer or by seller."""
        pass

    @abstractmethod
    def touch_chat(self, chat_id: str) -> None:
        """Set a chat's updated_at to now."""
        pass

    @abstractmethod
    def create_message(self, chat_id: str, sender_id: str, content: str) -> str:
        """Append a message to a chat. Returns message id."""
        pass

    @abstractmethod
    def list_messages(self, chat_id: str) -> list[Message]:
        """List a chat's messages in store order."""
        pass

    # Ledger operations
    @abstractmethod
    def create_ledger_entry(
        self,
        user_id: str,
        entry_type: str,
        amount: Decimal,
        method: str,
        category: str,
        comment: Optional[str] = None,
    ) -> str:
        """Create a ledger entry. Returns entry id."""
        pass

    @abstractmethod
    def get_ledger_entry(self, entry_id: str) -> Optional[LedgerEntry]:
        """Get ledger entry by id."""
        pass

    @abstractmethod
    def delete_ledger_entry(self, entry_id: str) -> None:
        """Delete a ledger entry."""
        pass

    @abstractmethod
    def list_ledger_entries(self, user_id: str) -> list[LedgerEntry]:
        """List a user's ledger entries."""
        pass

    # Task operations
    @abstractmethod
    def create_task(
        self,
        user_id: str,
        name: str,
        client: str,
        price: Decimal,
        due_date: date,
        status: str,
    ) -> str:
        """Create an open workshop task. Returns task id."""
        pass

    @abstractmethod
    def get_task(self, task_id: str) -> Optional[Task]:
        """Get task by id."""
        pass

    @abstractmethod
    def update_task_completed(self, task_id: str, completed: bool) -> None:
        """Set a task's completed flag."""
        pass

    @abstractmethod
    def list_tasks(self, user_id: str) -> list[Task]:
        """List a user's tasks."""
        pass
