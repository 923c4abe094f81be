"""User profile domain service."""

from typing import Optional
from bazaar.database.base import Database
from bazaar.domain.entities import UserProfile
from bazaar.domain.errors import ConflictError, NotFoundError, ValidationError, user_not_found


class UserService:
    """Service for managing user profiles."""

    def __init__(self, db: Database):
        """Initialize user service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_profile(
        self,
        user_id: str,
        email: str,
        display_name: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> str:
        """Create a profile for an authenticated identity.

        Raises:
            ValidationError: If email is empty
            ConflictError: If the user already has a profile
        """
        if not email or not email.strip():
            raise ValidationError("Email is required")
        if self.db.get_user_profile(user_id) is not None:
            raise ConflictError(f"User {user_id} already has a profile")
        return self.db.create_user_profile(
            user_id=user_id, email=email.strip(), display_name=display_name, phone=phone
        )

    def get_profile(self, user_id: str) -> Optional[UserProfile]:
        return self.db.get_user_profile(user_id)

    def update_profile(
        self,
        user_id: str,
        display_name: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> None:
        """Update profile fields that are not None.

        Raises:
            NotFoundError: If the profile doesn't exist
        """
        if self.db.get_user_profile(user_id) is None:
            raise NotFoundError(user_not_found(user_id))
        self.db.update_user_profile(user_id, display_name=display_name, phone=phone)

    def display_name(self, user_id: str) -> str:
        """Name to show for a user: display name, email, or the raw id."""
        profile = self.db.get_user_profile(user_id)
        if profile is None:
            return user_id
        return profile.display_name or profile.email
