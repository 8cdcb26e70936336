# --- File: ecostay/schemas/wish.py ---
"""
Traveler wish schemas.
"""

from typing import Optional

from pydantic import Field

from ecostay.schemas.common import BaseCreateSchema, BaseSchema, RowSchema, WishStatus

__all__ = [
    "Wish",
    "WishAuthor",
    "WishDraft",
    "WishCreate",
]


class WishAuthor(BaseSchema):
    """Embedded `profiles(full_name)` of the wish author."""

    full_name: Optional[str] = None


class Wish(RowSchema):
    """Row of `wishes` with the author's name joined in."""

    traveler_id: str
    title: str
    description: str = ""
    country: Optional[str] = None
    votes: int = Field(default=0, ge=0)
    status: WishStatus = WishStatus.OPEN
    adopted_by_hostel_id: Optional[str] = None
    profiles: Optional[WishAuthor] = None

    @property
    def author_name(self) -> Optional[str]:
        return self.profiles.full_name if self.profiles else None


class WishDraft(BaseSchema):
    title: str = ""
    description: str = ""
    country: str = ""


class WishCreate(BaseCreateSchema):
    traveler_id: str
    title: str
    description: str
    country: Optional[str] = None
