"""
Service factory for dependency injection and service instantiation.
"""

from functools import cached_property
from typing import Optional

from ecostay.config.settings import Settings, settings as default_settings
from ecostay.db.remote_store import RemoteStore
from ecostay.repositories import (
    ActivityRepository,
    CoinTransactionRepository,
    CommentRepository,
    FavoriteRepository,
    ForumPostRepository,
    ForumThreadRepository,
    HostelRepository,
    PhotoRepository,
    ProfileRepository,
    RatingRepository,
    VideoRepository,
    WishRepository,
)
from ecostay.services.activity import ActivitySubmissionService
from ecostay.services.aggregation import ActivityAggregationService, CoinLedgerService
from ecostay.services.auth import SessionContext
from ecostay.services.chat import ChatClient
from ecostay.services.community import ForumService, WishService
from ecostay.services.engagement import CommentService, MediaService, RatingService
from ecostay.services.hostel import FavoriteService, HostelProfileService, HostelService


class ServiceFactory:
    """
    Builds repositories and services over one remote store.

    Instances are created on first access and reused afterwards.
    """

    def __init__(
        self,
        store: RemoteStore,
        config: Optional[Settings] = None,
        chat_client: Optional[ChatClient] = None,
    ):
        self.store = store
        self.config = config or default_settings
        self._chat_client = chat_client

    # -------------------------------------------------------------------------
    # Repositories
    # -------------------------------------------------------------------------

    @cached_property
    def hostel_repository(self) -> HostelRepository:
        return HostelRepository(self.store)

    @cached_property
    def activity_repository(self) -> ActivityRepository:
        return ActivityRepository(self.store)

    @cached_property
    def coin_repository(self) -> CoinTransactionRepository:
        return CoinTransactionRepository(self.store)

    @cached_property
    def profile_repository(self) -> ProfileRepository:
        return ProfileRepository(self.store)

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @cached_property
    def aggregation(self) -> ActivityAggregationService:
        return ActivityAggregationService(
            CommentRepository(self.store),
            PhotoRepository(self.store),
            VideoRepository(self.store),
            RatingRepository(self.store),
        )

    @cached_property
    def ledger(self) -> CoinLedgerService:
        return CoinLedgerService(self.coin_repository)

    @cached_property
    def hostels(self) -> HostelService:
        return HostelService(self.hostel_repository)

    @cached_property
    def hostel_profiles(self) -> HostelProfileService:
        return HostelProfileService(
            self.hostel_repository,
            self.activity_repository,
            self.aggregation,
            self.ledger,
        )

    @cached_property
    def activity_submission(self) -> ActivitySubmissionService:
        return ActivitySubmissionService(self.activity_repository, self.coin_repository)

    @cached_property
    def comments(self) -> CommentService:
        return CommentService(CommentRepository(self.store))

    @cached_property
    def media(self) -> MediaService:
        return MediaService(
            self.store,
            PhotoRepository(self.store),
            VideoRepository(self.store),
            photo_bucket=self.config.PHOTO_BUCKET,
            video_bucket=self.config.VIDEO_BUCKET,
        )

    @cached_property
    def ratings(self) -> RatingService:
        return RatingService(RatingRepository(self.store))

    @cached_property
    def favorites(self) -> FavoriteService:
        return FavoriteService(FavoriteRepository(self.store))

    @cached_property
    def wishes(self) -> WishService:
        return WishService(WishRepository(self.store))

    @cached_property
    def forum(self) -> ForumService:
        return ForumService(ForumThreadRepository(self.store), ForumPostRepository(self.store))

    @property
    def chat(self) -> ChatClient:
        if self._chat_client is None:
            self._chat_client = ChatClient(self.config.CHAT_PROXY_URL)
        return self._chat_client

    def new_session(self) -> SessionContext:
        """A fresh, not yet initialized session over this factory's store."""
        return SessionContext(self.store, self.profile_repository)
