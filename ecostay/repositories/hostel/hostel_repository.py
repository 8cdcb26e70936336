"""
Hostel Repository - listings and manager lookups.
"""

from typing import List, Optional

from ecostay.db.remote_store import Query
from ecostay.repositories.base import BaseRepository
from ecostay.schemas.hostel import Hostel, HostelCreate


class HostelRepository(BaseRepository[Hostel]):
    """Fetchers for the `hostels` table."""

    table = "hostels"
    schema = Hostel

    async def list_all(self) -> List[Hostel]:
        """All hostels, best eco score first."""
        return await self._fetch(Query().order_by("eco_score", ascending=False))

    async def get(self, hostel_id: str) -> Optional[Hostel]:
        return await self._fetch_one(Query().where(id=hostel_id))

    async def get_by_manager(self, manager_id: str) -> Optional[Hostel]:
        """The hostel a manager owns, if any (at most one per manager)."""
        return await self._fetch_one(Query().where(manager_id=manager_id))

    async def create(self, payload: HostelCreate) -> Hostel:
        return await self._insert(payload)
