"""
Manager dashboard state: the manager's hostel, its activities, the
coin balance and the activity submission form.
"""

from typing import List, Optional

from ecostay.schemas.activity import Activity, ActivityDraft
from ecostay.schemas.hostel import Hostel, HostelDraft
from ecostay.services import ServiceFactory
from ecostay.services.auth import SessionContext
from ecostay.views.base import ViewState

SUBMITTED_NOTICE = "Activity submitted for verification!"
HOSTEL_CREATED_NOTICE = "Hostel created successfully"


class DashboardView(ViewState):
    name = "dashboard"

    def __init__(self, services: ServiceFactory, session: SessionContext):
        super().__init__()
        self.services = services
        self.session = session
        self.hostel: Optional[Hostel] = None
        self.activities: List[Activity] = []
        self.total_coins = 0
        self.activity_draft = ActivityDraft()
        self.hostel_draft = HostelDraft()

    @property
    def is_available(self) -> bool:
        """The dashboard is only offered to hostel managers."""
        return self.session.is_manager

    @property
    def needs_hostel(self) -> bool:
        return self.is_available and not self.loading and self.hostel is None

    async def load(self) -> None:
        if not self.is_available:
            return
        manager_id = self.session.user_id
        ok, snapshot = await self._load(
            lambda: self.services.hostel_profiles.load_dashboard(manager_id),
            "Failed to load dashboard",
        )
        if not ok:
            return
        self.hostel = snapshot.hostel
        self.activities = snapshot.activities
        self.total_coins = snapshot.total_coins

    async def submit_activity(self) -> bool:
        draft = self.activity_draft

        async def action():
            await self.services.activity_submission.submit(self.hostel, draft)

        ok = await self._perform(action, "Failed to submit activity", SUBMITTED_NOTICE)
        if ok:
            self.activity_draft = ActivityDraft()
        # A failed ledger insert leaves the activity stored
        if ok or (self.error is not None and "activity_id" in self.error.details):
            await self.load()
        return ok

    async def create_hostel(self) -> bool:
        draft = self.hostel_draft

        async def action():
            user = self.session.require_user("You must be signed in to create a hostel")
            await self.services.hostels.create(user.id, draft)

        ok = await self._perform(action, "Failed to create hostel", HOSTEL_CREATED_NOTICE)
        if ok:
            self.hostel_draft = HostelDraft()
            await self.load()
        return ok
