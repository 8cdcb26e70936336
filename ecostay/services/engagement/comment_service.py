"""
Activity comments.
"""

from ecostay.core.exceptions import MissingFieldError
from ecostay.repositories.engagement import CommentRepository
from ecostay.schemas.engagement import Comment, CommentCreate


class CommentService:
    def __init__(self, comments: CommentRepository):
        self.comments = comments

    async def add(self, activity_id: str, user_id: str, text: str) -> Comment:
        content = (text or "").strip()
        if not content:
            raise MissingFieldError("Please write a comment first", ["comment"])
        return await self.comments.create(
            CommentCreate(activity_id=activity_id, user_id=user_id, comment=content)
        )
