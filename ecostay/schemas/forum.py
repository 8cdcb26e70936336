# --- File: ecostay/schemas/forum.py ---
"""
Forum thread and post schemas.
"""

from typing import Optional

from ecostay.schemas.common import BaseCreateSchema, RowSchema

__all__ = [
    "ForumThread",
    "ForumPost",
    "ForumThreadCreate",
    "ForumPostCreate",
]


class ForumThread(RowSchema):
    """Row of `forum_threads`; `country` scopes the thread when set."""

    title: str
    country: Optional[str] = None
    creator_id: str


class ForumPost(RowSchema):
    """Row of `forum_posts`."""

    thread_id: str
    author_id: str
    content: str


class ForumThreadCreate(BaseCreateSchema):
    title: str
    creator_id: str
    country: Optional[str] = None


class ForumPostCreate(BaseCreateSchema):
    thread_id: str
    author_id: str
    content: str
