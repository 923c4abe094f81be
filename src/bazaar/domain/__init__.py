"""Domain layer for bazaar.

Services live in their own modules (``bazaar.domain.search``,
``bazaar.domain.favorites``, ...) and are imported from there.
"""

from bazaar.domain.errors import (
    DomainError,
    ValidationError,
    NotFoundError,
    ConflictError,
    AuthenticationError,
    StoreError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "StoreError",
]
