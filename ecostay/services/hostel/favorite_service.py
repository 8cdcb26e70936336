"""
Favorite hostels of a user.
"""

from typing import Set

from ecostay.core.logging import get_logger
from ecostay.repositories.user import FavoriteRepository

logger = get_logger(__name__)


class FavoriteService:
    def __init__(self, favorites: FavoriteRepository):
        self.favorites = favorites

    async def favorite_ids(self, user_id: str) -> Set[str]:
        return await self.favorites.hostel_ids_for_user(user_id)

    async def toggle(self, user_id: str, hostel_id: str, is_favorite: bool) -> bool:
        """Flip the favorite state and return the new one."""
        if is_favorite:
            await self.favorites.remove(user_id, hostel_id)
            return False
        await self.favorites.add(user_id, hostel_id)
        return True
