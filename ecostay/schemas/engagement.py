# --- File: ecostay/schemas/engagement.py ---
"""
Schemas for traveler engagement with an activity: comments, photos,
videos and ratings.
"""

from typing import Optional

from pydantic import Field

from ecostay.schemas.common import BaseCreateSchema, BaseSchema, RowSchema

__all__ = [
    "Comment",
    "Photo",
    "Video",
    "Rating",
    "CommentCreate",
    "MediaCreate",
    "RatingUpsert",
]


class Comment(RowSchema):
    """Row of `event_comments`."""

    activity_id: str
    user_id: str
    comment: str


class Photo(RowSchema):
    """Row of `event_photos`."""

    activity_id: str
    user_id: str
    url: str


class Video(RowSchema):
    """Row of `event_videos`."""

    activity_id: str
    user_id: str
    url: str


class Rating(BaseSchema):
    """Row of `event_ratings`, unique per (activity_id, user_id)."""

    id: Optional[str] = None
    activity_id: str
    user_id: str
    rating: int = Field(..., ge=1, le=5)


class CommentCreate(BaseCreateSchema):
    activity_id: str
    user_id: str
    comment: str = Field(..., min_length=1)


class MediaCreate(BaseCreateSchema):
    activity_id: str
    user_id: str
    url: str


class RatingUpsert(BaseCreateSchema):
    activity_id: str
    user_id: str
    rating: int = Field(..., ge=1, le=5)
