"""Mapper functions to convert between domain models and SQLAlchemy models.

Address lists and shop snapshots are stored as JSON documents; this layer
is the only place that knows their shape.
"""

from decimal import Decimal
from typing import Any, Optional

from bazaar.domain import entities as domain
from bazaar.database.models import (
    User as ORMUser,
    Shop as ORMShop,
    Listing as ORMListing,
    Favorite as ORMFavorite,
    Chat as ORMChat,
    Message as ORMMessage,
    LedgerEntry as ORMLedgerEntry,
    Task as ORMTask,
)


def addresses_to_documents(addresses: list[domain.ShopAddress]) -> list[dict[str, str]]:
    """Convert shop addresses to their stored form."""
    return [{"city": addr.city, "street": addr.street} for addr in addresses]


def addresses_from_documents(documents: Optional[list[Any]]) -> tuple[domain.ShopAddress, ...]:
    """Convert stored addresses back to domain addresses.

    Positions are kept: a malformed entry reads back as an address with an
    empty city, so the first entry stays the primary address.
    """
    result = []
    for doc in documents or []:
        if not isinstance(doc, dict):
            doc = {}
        result.append(
            domain.ShopAddress(city=doc.get("city") or "", street=doc.get("street") or "")
        )
    return tuple(result)


def snapshot_to_document(snapshot: Optional[domain.ShopSnapshot]) -> Optional[dict[str, Any]]:
    """Convert a shop snapshot to its stored form."""
    if snapshot is None:
        return None
    document: dict[str, Any] = {
        "id": snapshot.id,
        "name": snapshot.name,
        "addresses": addresses_to_documents(list(snapshot.addresses)),
        "hasDelivery": snapshot.has_delivery,
    }
    if snapshot.city is not None:
        document["city"] = snapshot.city
    return document


def snapshot_from_document(document: Optional[dict[str, Any]]) -> Optional[domain.ShopSnapshot]:
    """Convert a stored shop snapshot to a domain snapshot."""
    if not document:
        return None
    return domain.ShopSnapshot(
        id=document.get("id") or "",
        name=document.get("name"),
        addresses=addresses_from_documents(document.get("addresses")),
        has_delivery=document.get("hasDelivery") is True,
        city=document.get("city"),
    )


def user_to_domain(orm_user: ORMUser) -> domain.UserProfile:
    """Convert SQLAlchemy User model to domain UserProfile entity."""
    return domain.UserProfile(
        id=orm_user.id,
        email=orm_user.email,
        display_name=orm_user.display_name,
        phone=orm_user.phone,
        created_at=orm_user.created_at,
        updated_at=orm_user.updated_at,
    )


def shop_to_domain(orm_shop: ORMShop) -> domain.Shop:
    """Convert SQLAlchemy Shop model to domain Shop entity."""
    return domain.Shop(
        id=orm_shop.id,
        owner_id=orm_shop.owner_id,
        name=orm_shop.name,
        phone=orm_shop.phone,
        email=orm_shop.email,
        telegram=orm_shop.telegram,
        website=orm_shop.website,
        description=orm_shop.description,
        addresses=addresses_from_documents(orm_shop.addresses),
        has_delivery=bool(orm_shop.has_delivery),
        created_at=orm_shop.created_at,
        updated_at=orm_shop.updated_at,
    )


def listing_to_domain(orm_listing: ORMListing) -> domain.Listing:
    """Convert SQLAlchemy Listing model to domain Listing entity."""
    return domain.Listing(
        id=orm_listing.id,
        article_number=orm_listing.article_number,
        name=orm_listing.name,
        model=orm_listing.model,
        category=orm_listing.category,
        price=Decimal(orm_listing.price),
        quantity=orm_listing.quantity,
        description=orm_listing.description,
        image_url=orm_listing.image_url,
        shop_id=orm_listing.shop_id,
        shop=snapshot_from_document(orm_listing.shop),
        city=orm_listing.city,
        status=orm_listing.status,
        has_delivery=bool(orm_listing.has_delivery),
        created_at=orm_listing.created_at,
        updated_at=orm_listing.updated_at,
    )


def favorite_to_domain(orm_favorite: ORMFavorite) -> domain.Favorite:
    """Convert SQLAlchemy Favorite model to domain Favorite entity."""
    return domain.Favorite(
        id=orm_favorite.id,
        user_id=orm_favorite.user_id,
        listing_id=orm_favorite.listing_id,
        created_at=orm_favorite.created_at,
    )


def chat_to_domain(orm_chat: ORMChat) -> domain.Chat:
    """Convert SQLAlchemy Chat model to domain Chat entity."""
    return domain.Chat(
        id=orm_chat.id,
        buyer_id=orm_chat.buyer_id,
        seller_id=orm_chat.seller_id,
        listing_id=orm_chat.listing_id,
        created_at=orm_chat.created_at,
        updated_at=orm_chat.updated_at,
    )


def message_to_domain(orm_message: ORMMessage) -> domain.Message:
    """Convert SQLAlchemy Message model to domain Message entity."""
    return domain.Message(
        id=orm_message.id,
        chat_id=orm_message.chat_id,
        sender_id=orm_message.sender_id,
        content=orm_message.content,
        timestamp=orm_message.timestamp,
    )


def ledger_entry_to_domain(orm_entry: ORMLedgerEntry) -> domain.LedgerEntry:
    """Convert SQLAlchemy LedgerEntry model to domain LedgerEntry entity."""
    return domain.LedgerEntry(
        id=orm_entry.id,
        user_id=orm_entry.user_id,
        type=domain.EntryType(orm_entry.type),
        amount=Decimal(orm_entry.amount),
        method=domain.PaymentMethod(orm_entry.method),
        category=orm_entry.category,
        comment=orm_entry.comment,
        created_at=orm_entry.created_at,
    )


def task_to_domain(orm_task: ORMTask) -> domain.Task:
    """Convert SQLAlchemy Task model to domain Task entity."""
    return domain.Task(
        id=orm_task.id,
        user_id=orm_task.user_id,
        name=orm_task.name,
        client=orm_task.client,
        price=Decimal(orm_task.price),
        due_date=orm_task.due_date,
        status=orm_task.status,
        completed=bool(orm_task.completed),
        created_at=orm_task.created_at,
        updated_at=orm_task.updated_at,
    )
