"""
Forum state: threads, the open thread with its posts, and the thread
and post drafts.
"""

from typing import List, Optional

from ecostay.core.constants import ALL_COUNTRIES
from ecostay.schemas.forum import ForumPost, ForumThread
from ecostay.services import ServiceFactory
from ecostay.services.auth import SessionContext
from ecostay.views.base import ViewState

POSTS_CHANNEL = "posts"


class ForumView(ViewState):
    name = "forum"

    def __init__(self, services: ServiceFactory, session: SessionContext):
        super().__init__()
        self.services = services
        self.session = session
        self.threads: List[ForumThread] = []
        self.selected_thread: Optional[ForumThread] = None
        self.posts: List[ForumPost] = []
        self.thread_title_draft = ""
        profile = session.profile
        self.thread_country_draft = (profile.country if profile and profile.country else ALL_COUNTRIES)
        self.post_draft = ""

    async def load_threads(self) -> None:
        ok, threads = await self._load(self.services.forum.list_threads, "Failed to load threads")
        if ok:
            self.threads = threads

    async def open_thread(self, thread: ForumThread) -> None:
        self.selected_thread = thread
        ok, posts = await self._load(
            lambda: self.services.forum.list_posts(thread.id),
            "Failed to load posts",
            channel=POSTS_CHANNEL,
            track_loading=False,
        )
        if ok:
            self.posts = posts

    async def create_thread(self) -> bool:
        title, country = self.thread_title_draft, self.thread_country_draft

        async def action():
            await self.services.forum.create_thread(self.session.user_id, title, country)

        ok = await self._perform(action, "Failed to create thread")
        if ok:
            self.thread_title_draft = ""
            await self.load_threads()
        return ok

    async def create_post(self) -> bool:
        thread = self.selected_thread
        content = self.post_draft

        async def action():
            await self.services.forum.create_post(
                self.session.user_id, thread.id if thread else None, content
            )

        ok = await self._perform(action, "Failed to create post")
        if ok:
            self.post_draft = ""
            await self.open_thread(thread)
        return ok
