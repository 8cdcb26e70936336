"""
Entity fetchers.

One repository per entity kind. Reads return ordered sequences of
schema instances or raise RemoteFetchError; writes raise
RemoteWriteError. No repository retries.

Example Usage:
    from ecostay.repositories import HostelRepository

    hostels = await HostelRepository(store).list_all()
"""

from ecostay.repositories.base import ActivityChildRepository, BaseRepository
from ecostay.repositories.community import ForumPostRepository, ForumThreadRepository, WishRepository
from ecostay.repositories.engagement import (
    CommentRepository,
    PhotoRepository,
    RatingRepository,
    VideoRepository,
)
from ecostay.repositories.hostel import (
    ActivityRepository,
    CoinTransactionRepository,
    HostelRepository,
)
from ecostay.repositories.user import FavoriteRepository, ProfileRepository

__all__ = [
    "ActivityChildRepository",
    "ActivityRepository",
    "BaseRepository",
    "CoinTransactionRepository",
    "CommentRepository",
    "FavoriteRepository",
    "ForumPostRepository",
    "ForumThreadRepository",
    "HostelRepository",
    "PhotoRepository",
    "ProfileRepository",
    "RatingRepository",
    "VideoRepository",
    "WishRepository",
]
