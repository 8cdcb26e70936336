"""
Traveler wishes.
"""

from typing import List, Optional

from ecostay.core.constants import ERROR_WISH_SIGN_IN
from ecostay.core.exceptions import AuthenticationError, MissingFieldError
from ecostay.repositories.community import WishRepository
from ecostay.schemas.wish import Wish, WishCreate, WishDraft


class WishService:
    def __init__(self, wishes: WishRepository):
        self.wishes = wishes

    async def top_wishes(self) -> List[Wish]:
        return await self.wishes.top_open()

    async def submit(self, user_id: Optional[str], draft: WishDraft) -> Wish:
        if not user_id:
            raise AuthenticationError(ERROR_WISH_SIGN_IN)
        missing = [name for name in ("title", "description") if not getattr(draft, name)]
        if missing:
            raise MissingFieldError("Please describe your wish", missing)
        return await self.wishes.create(
            WishCreate(
                traveler_id=user_id,
                title=draft.title,
                description=draft.description,
                country=draft.country or None,
            )
        )
