"""
Hostel listing state: hostels by eco score, the user's favorites, the
country filter and the map markers.
"""

from typing import List, Set

from ecostay.core.constants import ALL_COUNTRIES, ERROR_FAVORITE_SIGN_IN
from ecostay.schemas.hostel import Hostel, MapMarker
from ecostay.services import ServiceFactory
from ecostay.services.auth import SessionContext
from ecostay.services.hostel import filter_by_country, map_markers
from ecostay.views.base import ViewState


class HostelsListView(ViewState):
    name = "hostels_list"

    def __init__(self, services: ServiceFactory, session: SessionContext):
        super().__init__()
        self.services = services
        self.session = session
        self.hostels: List[Hostel] = []
        self.favorites: Set[str] = set()
        self.country_filter = ALL_COUNTRIES

    @property
    def visible_hostels(self) -> List[Hostel]:
        return filter_by_country(self.hostels, self.country_filter)

    @property
    def markers(self) -> List[MapMarker]:
        return map_markers(self.visible_hostels)

    def is_favorite(self, hostel_id: str) -> bool:
        return hostel_id in self.favorites

    async def load(self) -> None:
        ok, hostels = await self._load(
            self.services.hostels.list_hostels, "Failed to load hostels"
        )
        if ok:
            self.hostels = hostels
        if self.session.is_authenticated:
            await self.load_favorites()

    async def load_favorites(self) -> None:
        user_id = self.session.user_id
        if user_id is None:
            return
        ok, favorites = await self._load(
            lambda: self.services.favorites.favorite_ids(user_id),
            "Failed to load favorites",
            channel="favorites",
            track_loading=False,
        )
        if ok:
            self.favorites = favorites

    async def toggle_favorite(self, hostel_id: str) -> bool:
        if not self.session.is_authenticated:
            self.notify(ERROR_FAVORITE_SIGN_IN)
            return False
        user_id = self.session.user_id
        currently = self.is_favorite(hostel_id)

        async def action():
            await self.services.favorites.toggle(user_id, hostel_id, currently)

        ok = await self._perform(action, "Failed to update favorites")
        if ok:
            await self.load_favorites()
        return ok
