"""
Profile Repository - user profiles keyed by auth user id.
"""

from typing import Any, Dict, Optional

from ecostay.db.remote_store import Query
from ecostay.repositories.base import BaseRepository
from ecostay.schemas.profile import Profile, ProfileCreate


class ProfileRepository(BaseRepository[Profile]):
    table = "profiles"
    schema = Profile

    async def get(self, user_id: str) -> Optional[Profile]:
        return await self._fetch_one(Query().where(id=user_id))

    async def create(self, payload: ProfileCreate) -> Profile:
        return await self._insert(payload)

    async def update(self, user_id: str, patch: Dict[str, Any]) -> Optional[Profile]:
        rows = await self._update({"id": user_id}, patch)
        return rows[0] if rows else None
