"""
Forum Repositories - threads and their posts.
"""

from typing import List

from ecostay.db.remote_store import Query
from ecostay.repositories.base import BaseRepository
from ecostay.schemas.forum import ForumPost, ForumPostCreate, ForumThread, ForumThreadCreate


class ForumThreadRepository(BaseRepository[ForumThread]):
    table = "forum_threads"
    schema = ForumThread

    async def list_recent(self) -> List[ForumThread]:
        """Threads, newest first."""
        return await self._fetch(Query().order_by("created_at", ascending=False))

    async def create(self, payload: ForumThreadCreate) -> ForumThread:
        return await self._insert(payload)


class ForumPostRepository(BaseRepository[ForumPost]):
    table = "forum_posts"
    schema = ForumPost

    async def for_thread(self, thread_id: str) -> List[ForumPost]:
        """Posts of a thread in chronological order."""
        return await self._fetch(
            Query().where(thread_id=thread_id).order_by("created_at", ascending=True)
        )

    async def create(self, payload: ForumPostCreate) -> ForumPost:
        return await self._insert(payload)
