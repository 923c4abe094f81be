"""Utility functions for bazaar."""

from bazaar.utils.date_parser import parse_date
from bazaar.utils.amount_parser import parse_amount, parse_quantity

__all__ = ["parse_date", "parse_amount", "parse_quantity"]
