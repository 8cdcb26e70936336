# --- File: ecostay/schemas/activity.py ---
"""
Hostel activity schemas.

Points and coins are derived from the activity category when the
activity is created; the status only ever moves away from `pending`
through an external moderation tool.
"""

from datetime import date
from typing import Optional

from pydantic import Field

from ecostay.schemas.common import ActivityStatus, BaseCreateSchema, BaseSchema, RowSchema

__all__ = [
    "Activity",
    "ActivityDraft",
    "ActivityCreate",
]


class Activity(RowSchema):
    """Row of the `hostel_activities` table."""

    hostel_id: str
    type: str = Field(..., description="Activity category")
    title: str
    description: str = ""
    activity_date: Optional[date] = None
    points: int = 0
    coins: int = 0
    evidence_url: Optional[str] = None
    status: ActivityStatus = ActivityStatus.PENDING


class ActivityDraft(BaseSchema):
    """Form state of the dashboard's activity submission."""

    type: str = ""
    title: str = ""
    description: str = ""
    activity_date: Optional[date] = None


class ActivityCreate(BaseCreateSchema):
    """Insert payload for `hostel_activities`."""

    hostel_id: str
    type: str
    title: str
    description: str
    activity_date: date
    points: int
    coins: int
    status: ActivityStatus = ActivityStatus.PENDING
