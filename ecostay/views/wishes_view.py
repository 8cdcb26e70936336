"""
Wishlist state: the top open wishes and the submission form.
"""

from typing import List

from ecostay.schemas.wish import Wish, WishDraft
from ecostay.services import ServiceFactory
from ecostay.services.auth import SessionContext
from ecostay.views.base import ViewState


class WishesView(ViewState):
    name = "wishes"

    def __init__(self, services: ServiceFactory, session: SessionContext):
        super().__init__()
        self.services = services
        self.session = session
        self.wishes: List[Wish] = []
        self.draft = WishDraft()

    async def load(self) -> None:
        ok, wishes = await self._load(self.services.wishes.top_wishes, "Failed to load wishes")
        if ok:
            self.wishes = wishes

    async def submit(self) -> bool:
        draft = self.draft

        async def action():
            await self.services.wishes.submit(self.session.user_id, draft)

        ok = await self._perform(
            action,
            "Failed to submit wish. Please try again.",
            "Wish submitted successfully!",
        )
        if ok:
            self.draft = WishDraft()
            await self.load()
        return ok
