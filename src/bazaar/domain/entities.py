"""Domain model entities for bazaar.

These are pure data classes representing marketplace concepts, independent of
how the document store lays records out. Identifiers are opaque strings.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class DeliveryFilter(str, Enum):
    """Delivery stage of the listing search."""

    ALL = "all"
    ONLY = "only"
    EXCLUDE = "exclude"


class AvailabilityFilter(str, Enum):
    """Availability stage of the listing search."""

    ALL = "all"
    IN_STOCK = "inStock"
    OUT_OF_STOCK = "outOfStock"


class EntryType(str, Enum):
    """Ledger entry direction."""

    INCOME = "income"
    EXPENSE = "expense"


class PaymentMethod(str, Enum):
    """How a ledger entry was paid."""

    CARD = "card"
    CASH = "cash"


@dataclass(frozen=True)
class UserProfile:
    """User profile supplied by the identity provider."""

    id: str
    email: str
    display_name: Optional[str]
    phone: Optional[str]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ShopAddress:
    """A single shop address."""

    city: str
    street: str = ""


@dataclass(frozen=True)
class Shop:
    """Shop domain entity. One shop per owner, keyed by the owner's id."""

    id: str
    owner_id: str
    name: str
    phone: Optional[str]
    email: Optional[str]
    telegram: Optional[str]
    website: Optional[str]
    description: Optional[str]
    addresses: tuple[ShopAddress, ...]
    has_delivery: bool
    created_at: datetime
    updated_at: datetime

    @property
    def primary_city(self) -> Optional[str]:
        """City of the first address, if any."""
        if self.addresses:
            return self.addresses[0].city or None
        return None


@dataclass(frozen=True)
class ShopSnapshot:
    """Shop fields copied onto a listing when it is written."""

    id: str
    name: Optional[str]
    addresses: tuple[ShopAddress, ...] = ()
    has_delivery: bool = False
    city: Optional[str] = None


@dataclass(frozen=True)
class Listing:
    """Listing (product) domain entity."""

    id: str
    article_number: int
    name: str
    model: Optional[str]
    category: str
    price: Decimal
    quantity: int
    description: Optional[str]
    image_url: Optional[str]
    shop_id: str
    shop: Optional[ShopSnapshot]
    city: Optional[str]
    status: str
    has_delivery: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Favorite:
    """Favorite join record between a user and a listing."""

    id: str
    user_id: str
    listing_id: str
    created_at: datetime


@dataclass(frozen=True)
class Chat:
    """Conversation between a buyer and a seller about one listing."""

    id: str
    buyer_id: str
    seller_id: str
    listing_id: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Message:
    """A single chat message."""

    id: str
    chat_id: str
    sender_id: str
    content: str
    timestamp: datetime


@dataclass(frozen=True)
class LedgerEntry:
    """Cash-flow transaction recorded by a user."""

    id: str
    user_id: str
    type: EntryType
    amount: Decimal
    method: PaymentMethod
    category: str
    comment: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Task:
    """Workshop job."""

    id: str
    user_id: str
    name: str
    client: str
    price: Decimal
    due_date: date
    status: str
    completed: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class LedgerTotals:
    """Income, expense and balance summed over a ledger."""

    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")

    @property
    def balance(self) -> Decimal:
        return self.income - self.expense


@dataclass(frozen=True)
class AddFavoriteResult:
    """Outcome of adding a favorite."""

    added: bool
    message: str


@dataclass(frozen=True)
class ChatSummary:
    """A chat as seen from one participant's chat list."""

    chat: Chat
    is_owner: bool


@dataclass(frozen=True)
class SearchResult:
    """Listings that survived the search pipeline.

    ``notice`` carries a user-visible message when the fetch failed.
    """

    listings: tuple[Listing, ...] = field(default_factory=tuple)
    notice: Optional[str] = None

    def __len__(self) -> int:
        return len(self.listings)

    def __iter__(self):
        return iter(self.listings)
