"""Per-client session state: the authenticated identity and selected city."""

from dataclasses import dataclass, replace
from typing import Optional

from bazaar.domain.catalog import DEFAULT_CITY
from bazaar.domain.errors import AuthenticationError


@dataclass(frozen=True)
class SessionContext:
    """Identity and preferences of the current client.

    Services receive this explicitly instead of reading ambient state.
    """

    user_id: Optional[str] = None
    selected_city: str = DEFAULT_CITY

    def is_authenticated(self) -> bool:
        return bool(self.user_id)

    def current_user_id(self) -> Optional[str]:
        return self.user_id

    def require_user(self) -> str:
        """Return the current user id or raise AuthenticationError."""
        if not self.user_id:
            raise AuthenticationError("You are not signed in")
        return self.user_id

    def with_city(self, city: str) -> "SessionContext":
        return replace(self, selected_city=city)
