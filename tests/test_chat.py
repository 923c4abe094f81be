"""Tests for the chat service."""

from datetime import datetime

import pytest

from bazaar.domain.entities import Chat, Message
from bazaar.domain.errors import NotFoundError, ValidationError


def test_get_or_create_chat_returns_same_id(chat_service, sample_listing):
    """Test that two sequential calls return the same chat."""
    first = chat_service.get_or_create_chat("buyer-1", "seller-1", sample_listing.id)
    second = chat_service.get_or_create_chat("buyer-1", "seller-1", sample_listing.id)
    assert first == second


def test_get_or_create_chat_returns_first_duplicate(temp_db, chat_service, sample_listing):
    """Test that the first of several racing chats is reused."""
    first = temp_db.create_chat("buyer-1", "seller-1", sample_listing.id)
    temp_db.create_chat("buyer-1", "seller-1", sample_listing.id)

    assert chat_service.get_or_create_chat("buyer-1", "seller-1", sample_listing.id) == first


def test_different_buyers_get_different_chats(chat_service, sample_listing):
    """Test that chats are keyed by buyer."""
    first = chat_service.get_or_create_chat("buyer-1", "seller-1", sample_listing.id)
    second = chat_service.get_or_create_chat("buyer-2", "seller-1", sample_listing.id)
    assert first != second


def test_messages_in_send_order(chat_service, sample_listing):
    """Test that two messages come back in send order with their senders."""
    chat_id = chat_service.get_or_create_chat("buyer-1", "seller-1", sample_listing.id)

    chat_service.send_message(chat_id, "buyer-1", "Is it still available?")
    chat_service.send_message(chat_id, "seller-1", "Yes")

    messages = chat_service.get_messages(chat_id)
    assert [(m.sender_id, m.content) for m in messages] == [
        ("buyer-1", "Is it still available?"),
        ("seller-1", "Yes"),
    ]


def test_send_message_bumps_chat(temp_db, chat_service, sample_listing):
    """Test that sending a message updates the chat timestamp."""
    chat_id = chat_service.get_or_create_chat("buyer-1", "seller-1", sample_listing.id)
    before = temp_db.get_chat(chat_id).updated_at

    chat_service.send_message(chat_id, "buyer-1", "Hello")

    assert temp_db.get_chat(chat_id).updated_at >= before


def test_send_empty_message_fails(chat_service, sample_listing):
    """Test that empty text is rejected."""
    chat_id = chat_service.get_or_create_chat("buyer-1", "seller-1", sample_listing.id)
    with pytest.raises(ValidationError):
        chat_service.send_message(chat_id, "buyer-1", "   ")


def test_send_to_missing_chat_fails(chat_service):
    """Test sending to a chat that doesn't exist."""
    with pytest.raises(NotFoundError, match="Chat missing not found"):
        chat_service.send_message("missing", "buyer-1", "Hello")


def test_list_user_chats_marks_ownership(chat_service, sample_listing):
    """Test that the seller side is flagged as owner."""
    chat_id = chat_service.get_or_create_chat("buyer-1", "seller-1", sample_listing.id)

    buyer_view = chat_service.list_user_chats("buyer-1")
    seller_view = chat_service.list_user_chats("seller-1")

    assert [(s.chat.id, s.is_owner) for s in buyer_view] == [(chat_id, False)]
    assert [(s.chat.id, s.is_owner) for s in seller_view] == [(chat_id, True)]
    assert chat_service.list_user_chats("stranger") == []


class StubChatStore:
    """Store stand-in with fixed chats and messages."""

    def __init__(self, chats, messages):
        self.chats = chats
        self.messages = messages

    def list_chats(self, buyer_id=None, seller_id=None):
        return [
            chat
            for chat in self.chats
            if (buyer_id is None or chat.buyer_id == buyer_id)
            and (seller_id is None or chat.seller_id == seller_id)
        ]

    def list_messages(self, chat_id):
        return [message for message in self.messages if message.chat_id == chat_id]


def test_list_user_chats_most_recent_first():
    """Test ordering by updated_at across buyer and seller chats."""
    from bazaar.domain.chat import ChatService

    chats = [
        Chat("old", "me", "s1", "l1", datetime(2026, 1, 1), datetime(2026, 1, 1)),
        Chat("new", "b1", "me", "l2", datetime(2026, 1, 2), datetime(2026, 3, 1)),
        Chat("mid", "me", "s2", "l3", datetime(2026, 1, 3), datetime(2026, 2, 1)),
    ]
    summaries = ChatService(StubChatStore(chats, [])).list_user_chats("me")
    assert [s.chat.id for s in summaries] == ["new", "mid", "old"]


def test_messages_with_equal_timestamps_keep_store_order():
    """Test that timestamp ties don't reorder messages."""
    from bazaar.domain.chat import ChatService

    same = datetime(2026, 5, 1, 12, 0)
    messages = [
        Message("m2", "c", "b", "second", datetime(2026, 5, 1, 12, 5)),
        Message("m1a", "c", "b", "first", same),
        Message("m1b", "c", "s", "also first", same),
    ]
    result = ChatService(StubChatStore([], messages)).get_messages("c")
    assert [m.id for m in result] == ["m1a", "m1b", "m2"]


def test_chat_with_self_is_rejected(temp_db, chat_service, sample_listing):
    """Test that a seller can't open a chat with themselves."""
    with pytest.raises(ValidationError, match="own listing"):
        chat_service.get_or_create_chat("seller-1", "seller-1", sample_listing.id)
    assert temp_db.list_chats(seller_id="seller-1") == []


def test_list_user_chats_lists_each_chat_once():
    """Test a stored chat with the same user on both sides."""
    from bazaar.domain.chat import ChatService

    chats = [Chat("self", "me", "me", "l1", datetime(2026, 1, 1), datetime(2026, 1, 1))]
    summaries = ChatService(StubChatStore(chats, [])).list_user_chats("me")

    assert [(s.chat.id, s.is_owner) for s in summaries] == [("self", True)]
