"""
Comment Repository - traveler comments on activities.
"""

from ecostay.repositories.base import ActivityChildRepository
from ecostay.schemas.engagement import Comment, CommentCreate


class CommentRepository(ActivityChildRepository[Comment]):
    """Fetchers for `event_comments`; comments read chronologically."""

    table = "event_comments"
    schema = Comment
    ascending_by_created = True

    async def create(self, payload: CommentCreate) -> Comment:
        return await self._insert(payload)
