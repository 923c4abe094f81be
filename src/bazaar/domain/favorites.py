"""Favorites domain service."""

from bazaar import get_logger
from bazaar.database.base import Database
from bazaar.domain.entities import AddFavoriteResult, Listing

LOGGER = get_logger("favorites")

ALREADY_IN_FAVORITES = "Товар уже в избранном"
ADDED_TO_FAVORITES = "Товар добавлен в избранное"


class FavoritesService:
    """Service for a user's favorite listings.

    ``add`` checks for an existing record before inserting. The check and
    the insert are separate store calls, so two concurrent adds can both
    insert; ``remove`` deletes every record of the pair to cover that case.
    """

    def __init__(self, db: Database):
        """Initialize favorites service.

        Args:
            db: Database instance
        """
        self.db = db

    def is_favorite(self, user_id: str, listing_id: str) -> bool:
        """Check whether the listing is in the user's favorites."""
        return len(self.db.find_favorites(user_id, listing_id)) > 0

    def add(self, user_id: str, listing_id: str) -> AddFavoriteResult:
        """Add a listing to the user's favorites.

        Returns:
            AddFavoriteResult with added=False if it was already a favorite
        """
        if self.is_favorite(user_id, listing_id):
            LOGGER.info("Listing %s already in favorites of %s", listing_id, user_id)
            return AddFavoriteResult(added=False, message=ALREADY_IN_FAVORITES)

        self.db.create_favorite(user_id, listing_id)
        return AddFavoriteResult(added=True, message=ADDED_TO_FAVORITES)

    def remove(self, user_id: str, listing_id: str) -> None:
        """Remove every favorite record for the pair."""
        for favorite in self.db.find_favorites(user_id, listing_id):
            self.db.delete_favorite(favorite.id)

    def list_favorites(self, user_id: str) -> list[Listing]:
        """Resolve a user's favorites to listings.

        Favorites pointing at deleted listings are skipped.
        """
        listings = []
        for favorite in self.db.list_favorites(user_id):
            listing = self.db.get_listing(favorite.listing_id)
            if listing is not None:
                listings.append(listing)
        return listings
