"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as a second shop for the same owner."""


class AuthenticationError(DomainError):
    """Operation requires an authenticated user."""


class StoreError(DomainError):
    """The backing document store failed to complete a call."""


def listing_not_found(listing_id: str) -> str:
    """Return message for missing listing."""
    return f"Listing {listing_id} not found"


def shop_not_found(shop_id: str) -> str:
    """Return message for missing shop."""
    return f"Shop {shop_id} not found"


def chat_not_found(chat_id: str) -> str:
    """Return message for missing chat."""
    return f"Chat {chat_id} not found"


def user_not_found(user_id: str) -> str:
    """Return message for missing user profile."""
    return f"User {user_id} not found"


def task_not_found(task_id: str) -> str:
    """Return message for missing task."""
    return f"Task {task_id} not found"


def ledger_entry_not_found(entry_id: str) -> str:
    """Return message for missing ledger entry."""
    return f"Transaction {entry_id} not found"


def missing_fields(fields: list[str]) -> str:
    """Return message listing required fields that were left empty."""
    return f"Required fields are missing: {', '.join(fields)}"
