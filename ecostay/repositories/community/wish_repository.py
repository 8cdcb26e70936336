"""
Wish Repository - the traveler wishlist.
"""

from typing import List

from ecostay.core.constants import TOP_WISHES_LIMIT
from ecostay.db.remote_store import Query
from ecostay.repositories.base import BaseRepository
from ecostay.schemas.common import WishStatus
from ecostay.schemas.wish import Wish, WishCreate


class WishRepository(BaseRepository[Wish]):
    """Fetchers for the `wishes` table."""

    table = "wishes"
    schema = Wish

    async def top_open(self, limit: int = TOP_WISHES_LIMIT) -> List[Wish]:
        """Most-voted open wishes with their author's name."""
        return await self._fetch(
            Query()
            .select("*,profiles(full_name)")
            .where(status=WishStatus.OPEN.value)
            .order_by("votes", ascending=False)
            .limit_to(limit)
        )

    async def create(self, payload: WishCreate) -> Wish:
        return await self._insert(payload)
