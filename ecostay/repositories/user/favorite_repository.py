"""
Favorite Repository - hostels a user bookmarked.
"""

from typing import Set

from ecostay.db.remote_store import Query
from ecostay.repositories.base import BaseRepository
from ecostay.schemas.profile import Favorite


class FavoriteRepository(BaseRepository[Favorite]):
    table = "favorites"
    schema = Favorite

    async def hostel_ids_for_user(self, user_id: str) -> Set[str]:
        rows = await self._fetch_raw(Query().select("hostel_id").where(user_id=user_id))
        return {row["hostel_id"] for row in rows}

    async def add(self, user_id: str, hostel_id: str) -> Favorite:
        return await self._insert({"user_id": user_id, "hostel_id": hostel_id})

    async def remove(self, user_id: str, hostel_id: str) -> None:
        await self._delete({"user_id": user_id, "hostel_id": hostel_id})
