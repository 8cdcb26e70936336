"""
Hostel profile screen state: the hostel, its activities, their joined
comments/photos/videos/ratings, and the per-activity comment and
rating drafts.
"""

from typing import Dict, List, Optional, Union

from ecostay.schemas.activity import Activity
from ecostay.schemas.common import MediaKind
from ecostay.schemas.hostel import Hostel
from ecostay.services import ServiceFactory
from ecostay.services.aggregation import ActivityAggregate, RatingSummary
from ecostay.services.auth import SessionContext
from ecostay.views.base import ViewState


class HostelProfileView(ViewState):
    name = "hostel_profile"

    def __init__(self, services: ServiceFactory, session: SessionContext, hostel_id: str):
        super().__init__()
        self.services = services
        self.session = session
        self.hostel_id = hostel_id
        self.hostel: Optional[Hostel] = None
        self.activities: List[Activity] = []
        self.aggregate = ActivityAggregate()
        self.comment_drafts: Dict[str, str] = {}
        self.rating_drafts: Dict[str, int] = {}
        self.uploading = False

    @property
    def not_found(self) -> bool:
        return not self.loading and self.hostel is None

    def rating_for(self, activity_id: str) -> RatingSummary:
        return self.aggregate.rating_for(activity_id)

    async def load(self) -> None:
        ok, snapshot = await self._load(
            lambda: self.services.hostel_profiles.load_profile(self.hostel_id),
            "Failed to load hostel profile",
        )
        if not ok:
            return
        self.hostel = snapshot.hostel
        self.activities = snapshot.activities
        self.aggregate = snapshot.aggregate

    async def add_comment(self, activity_id: str) -> bool:
        text = self.comment_drafts.get(activity_id, "")
        if not text or not self.session.is_authenticated:
            return False

        async def action():
            await self.services.comments.add(activity_id, self.session.user_id, text)

        if not await self._perform(action, "Failed to add comment"):
            return False
        self.comment_drafts[activity_id] = ""
        await self.load()
        return True

    async def rate(self, activity_id: str) -> bool:
        if not self.session.is_authenticated:
            return False
        value = self.rating_drafts.get(activity_id)

        async def action():
            await self.services.ratings.rate(activity_id, self.session.user_id, value)

        if not await self._perform(action, "Failed to rate activity"):
            return False
        self.rating_drafts[activity_id] = 0
        await self.load()
        return True

    async def attach_media(
        self,
        activity_id: str,
        filename: str,
        data: bytes,
        kind: Union[MediaKind, str] = MediaKind.PHOTO,
    ) -> bool:
        if not filename or not self.session.is_authenticated:
            return False

        async def action():
            await self.services.media.attach(activity_id, self.session.user_id, filename, data, kind)

        self.uploading = True
        try:
            ok = await self._perform(action, "Failed to upload file")
            if ok:
                await self.load()
            return ok
        finally:
            self.uploading = False
