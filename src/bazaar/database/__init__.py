"""Document store layer for bazaar."""

from bazaar.database.base import Database
from bazaar.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
