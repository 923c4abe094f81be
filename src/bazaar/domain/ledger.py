"""Ledger domain service for simple cash-flow transactions."""

from decimal import Decimal
from typing import Iterable, Optional, Union

from bazaar.database.base import Database
from bazaar.domain.catalog import EXPENSE_CATEGORIES, INCOME_CATEGORIES
from bazaar.domain.entities import EntryType, LedgerEntry, LedgerTotals, PaymentMethod
from bazaar.domain.errors import (
    NotFoundError,
    ValidationError,
    ledger_entry_not_found,
    missing_fields,
)
from bazaar.utils.amount_parser import parse_amount


def compute_totals(entries: Iterable[LedgerEntry]) -> LedgerTotals:
    """Sum income and expense over the full list of entries."""
    income = Decimal("0")
    expense = Decimal("0")
    for entry in entries:
        if entry.type == EntryType.INCOME:
            income += entry.amount
        else:
            expense += entry.amount
    return LedgerTotals(income=income, expense=expense)


def suggested_categories(entry_type: Union[EntryType, str]) -> tuple[str, ...]:
    """Category suggestions shown for an entry type."""
    if EntryType(entry_type) == EntryType.INCOME:
        return INCOME_CATEGORIES
    return EXPENSE_CATEGORIES


class LedgerService:
    """Service for a user's income and expense records.

    Entries are only created and deleted, never edited.
    """

    def __init__(self, db: Database):
        """Initialize ledger service.

        Args:
            db: Database instance
        """
        self.db = db

    def add_entry(
        self,
        user_id: str,
        entry_type: Union[EntryType, str],
        amount: Union[str, Decimal, int, float],
        method: Union[PaymentMethod, str],
        category: str,
        comment: Optional[str] = None,
    ) -> str:
        """Record an income or expense.

        Args:
            user_id: Owning user
            entry_type: income or expense
            amount: Positive amount
            method: card or cash
            category: Free text, usually one of the suggestions
            comment: Optional comment

        Returns:
            Entry ID

        Raises:
            ValidationError: If a field is missing or the amount isn't positive
        """
        missing = []
        if amount is None or (isinstance(amount, str) and not amount.strip()):
            missing.append("amount")
        if not category or not category.strip():
            missing.append("category")
        if missing:
            raise ValidationError(missing_fields(missing))

        try:
            entry_type = EntryType(entry_type)
        except ValueError:
            raise ValidationError(f"Unknown transaction type '{entry_type}'")
        try:
            method = PaymentMethod(method)
        except ValueError:
            raise ValidationError(f"Unknown payment method '{method}'")

        try:
            value = parse_amount(amount) if isinstance(amount, str) else Decimal(str(amount))
        except (ValueError, ArithmeticError):
            raise ValidationError(f"Amount must be a number, got '{amount}'")
        if not value.is_finite():
            raise ValidationError(f"Amount must be a number, got '{amount}'")
        if value <= 0:
            raise ValidationError("Amount must be greater than zero")

        return self.db.create_ledger_entry(
            user_id=user_id,
            entry_type=entry_type.value,
            amount=value,
            method=method.value,
            category=category.strip(),
            comment=comment or None,
        )

    def delete_entry(self, user_id: str, entry_id: str) -> None:
        """Delete one of the user's entries.

        Raises:
            NotFoundError: If the entry doesn't exist or belongs to another user
        """
        entry = self.db.get_ledger_entry(entry_id)
        if entry is None or entry.user_id != user_id:
            raise NotFoundError(ledger_entry_not_found(entry_id))
        self.db.delete_ledger_entry(entry_id)

    def list_entries(
        self, user_id: str, method: Union[PaymentMethod, str, None] = None
    ) -> list[LedgerEntry]:
        """List a user's entries newest first, optionally for one payment method."""
        # Store order is oldest first; reversed so ties stay newest first
        entries = list(reversed(self.db.list_ledger_entries(user_id)))
        entries.sort(key=lambda entry: entry.created_at, reverse=True)
        if method is not None:
            method = PaymentMethod(method)
            entries = [entry for entry in entries if entry.method == method]
        return entries

    def totals(self, user_id: str) -> LedgerTotals:
        """Income, expense and balance over all of a user's entries."""
        return compute_totals(self.db.list_ledger_entries(user_id))
