"""
Forum threads and posts.
"""

from typing import List, Optional

from ecostay.core.constants import ALL_COUNTRIES, ERROR_POST_FIELDS, ERROR_THREAD_FIELDS
from ecostay.core.exceptions import ValidationError
from ecostay.repositories.community import ForumPostRepository, ForumThreadRepository
from ecostay.schemas.forum import ForumPost, ForumPostCreate, ForumThread, ForumThreadCreate


class ForumService:
    def __init__(self, threads: ForumThreadRepository, posts: ForumPostRepository):
        self.threads = threads
        self.posts = posts

    async def list_threads(self) -> List[ForumThread]:
        return await self.threads.list_recent()

    async def list_posts(self, thread_id: str) -> List[ForumPost]:
        return await self.posts.for_thread(thread_id)

    async def create_thread(
        self, user_id: Optional[str], title: str, country: Optional[str] = None
    ) -> ForumThread:
        """Open a thread; a country of `all` means the thread is unscoped."""
        title = (title or "").strip()
        if not user_id or not title:
            raise ValidationError(ERROR_THREAD_FIELDS)
        scope = None if not country or country == ALL_COUNTRIES else country
        return await self.threads.create(
            ForumThreadCreate(title=title, creator_id=user_id, country=scope)
        )

    async def create_post(
        self, user_id: Optional[str], thread_id: Optional[str], content: str
    ) -> ForumPost:
        content = (content or "").strip()
        if not user_id or not thread_id or not content:
            raise ValidationError(ERROR_POST_FIELDS)
        return await self.posts.create(
            ForumPostCreate(thread_id=thread_id, author_id=user_id, content=content)
        )
