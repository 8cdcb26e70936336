"""
Activity Repository - sustainability activities of a hostel.
"""

from typing import List

from ecostay.db.remote_store import Query
from ecostay.repositories.base import BaseRepository
from ecostay.schemas.activity import Activity, ActivityCreate


class ActivityRepository(BaseRepository[Activity]):
    """Fetchers for the `hostel_activities` table."""

    table = "hostel_activities"
    schema = Activity

    async def list_for_hostel(self, hostel_id: str) -> List[Activity]:
        """Activities of a hostel, newest first."""
        return await self._fetch(
            Query().where(hostel_id=hostel_id).order_by("created_at", ascending=False)
        )

    async def create(self, payload: ActivityCreate) -> Activity:
        return await self._insert(payload)
