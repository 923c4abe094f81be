"""SQLAlchemy models for the bazaar document store."""

import uuid
from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    DateTime,
    Date,
    Numeric,
    Boolean,
    JSON,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


def new_document_id() -> str:
    """Generate an opaque document id."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(UTC)


class DocumentMixin:
    """Columns shared by every collection.

    ``pk`` preserves insertion order; ``id`` is the document id handed out
    to callers.
    """

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), unique=True, index=True, nullable=False, default=new_document_id)


class User(DocumentMixin, Base):
    """User profile model."""

    __tablename__ = "users"

    email = Column(String, nullable=False)
    display_name = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, nullable=False)


class Shop(DocumentMixin, Base):
    """Shop model. ``id`` equals the owner's user id."""

    __tablename__ = "shops"

    owner_id = Column(String(32), index=True, nullable=False)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    telegram = Column(String, nullable=True)
    website = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    # [{"city": ..., "street": ...}, ...]
    addresses = Column(JSON, default=list, nullable=False)
    has_delivery = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, nullable=False)


class Listing(DocumentMixin, Base):
    """Listing (product) model."""

    __tablename__ = "listings"

    article_number = Column(Integer, nullable=False)
    name = Column(String, nullable=False)
    model = Column(String, nullable=True)
    category = Column(String, index=True, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    quantity = Column(Integer, default=0, nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    shop_id = Column(String(32), index=True, nullable=False)
    # Denormalized copy of the owning shop, refreshed only on explicit update
    shop = Column(JSON, nullable=True)
    city = Column(String, nullable=True)
    status = Column(String, index=True, nullable=False)
    has_delivery = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, nullable=False)


class Favorite(DocumentMixin, Base):
    """Favorite join model. No uniqueness constraint on (user_id, listing_id)."""

    __tablename__ = "favorites"

    user_id = Column(String(32), index=True, nullable=False)
    listing_id = Column(String(32), index=True, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)


class Chat(DocumentMixin, Base):
    """Chat model."""

    __tablename__ = "chats"

    buyer_id = Column(String(32), index=True, nullable=False)
    seller_id = Column(String(32), index=True, nullable=False)
    listing_id = Column(String(32), index=True, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, nullable=False)


class Message(DocumentMixin, Base):
    """Chat message model."""

    __tablename__ = "messages"

    chat_id = Column(String(32), index=True, nullable=False)
    sender_id = Column(String(32), nullable=False)
    content = Column(Text, nullable=False)
    timestamp = Column(DateTime, default=utc_now, nullable=False)


class LedgerEntry(DocumentMixin, Base):
    """Cash-flow transaction model."""

    __tablename__ = "transactions"

    user_id = Column(String(32), index=True, nullable=False)
    type = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    method = Column(String, nullable=False)
    category = Column(String, nullable=False)
    comment = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utc_now, nullable=False)


class Task(DocumentMixin, Base):
    """Workshop task model."""

    __tablename__ = "tasks"

    user_id = Column(String(32), index=True, nullable=False)
    name = Column(String, nullable=False)
    client = Column(String, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    due_date = Column(Date, nullable=False)
    status = Column(String, nullable=False)
    completed = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
