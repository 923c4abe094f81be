"""Chat domain service."""

from bazaar import get_logger
from bazaar.database.base import Database
from bazaar.domain.entities import ChatSummary, Message
from bazaar.domain.errors import NotFoundError, ValidationError, chat_not_found

LOGGER = get_logger("chat")


class ChatService:
    """Service for buyer/seller conversations about a listing."""

    def __init__(self, db: Database):
        """Initialize chat service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_or_create_chat(self, buyer_id: str, seller_id: str, listing_id: str) -> str:
        """Return the chat for a (buyer, seller, listing) triple, creating it if needed.

        The lookup and the insert are separate store calls. If concurrent
        first contacts produced several chats, the first one is returned.

        Returns:
            Chat ID

        Raises:
            ValidationError: If buyer and seller are the same user
        """
        if buyer_id == seller_id:
            raise ValidationError("You cannot start a chat about your own listing")

        existing = self.db.find_chats(buyer_id, seller_id, listing_id)
        if existing:
            return existing[0].id

        chat_id = self.db.create_chat(buyer_id, seller_id, listing_id)
        LOGGER.info("Created chat %s for listing %s", chat_id, listing_id)
        return chat_id

    def send_message(self, chat_id: str, sender_id: str, text: str) -> str:
        """Append a message and bump the chat's updated_at.

        The two writes are not transactional; a failure between them leaves
        the message stored with a stale chat timestamp.

        Returns:
            Message ID

        Raises:
            ValidationError: If text is empty
            NotFoundError: If chat doesn't exist
        """
        if not text or not text.strip():
            raise ValidationError("Message text is required")
        if self.db.get_chat(chat_id) is None:
            raise NotFoundError(chat_not_found(chat_id))

        message_id = self.db.create_message(chat_id, sender_id, text.strip())
        self.db.touch_chat(chat_id)
        return message_id

    def get_messages(self, chat_id: str) -> list[Message]:
        """Messages of a chat, oldest first. Ties keep store order."""
        messages = self.db.list_messages(chat_id)
        return sorted(messages, key=lambda message: message.timestamp)

    def list_user_chats(self, user_id: str) -> list[ChatSummary]:
        """Chats where the user is buyer or seller, most recently active first.

        ``is_owner`` is True when the user is the seller. A chat where the
        user is on both sides is listed once, as owner.
        """
        by_id = {}
        for chat in self.db.list_chats(buyer_id=user_id):
            by_id[chat.id] = ChatSummary(chat=chat, is_owner=False)
        for chat in self.db.list_chats(seller_id=user_id):
            by_id[chat.id] = ChatSummary(chat=chat, is_owner=True)
        summaries = list(by_id.values())
        return sorted(summaries, key=lambda summary: summary.chat.updated_at, reverse=True)
