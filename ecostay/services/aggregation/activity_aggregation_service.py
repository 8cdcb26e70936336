"""
Activity aggregation.

Joins the child rows of a hostel's activities (comments, photos, videos,
ratings) onto their parent activity and reduces ratings into
(average, count) pairs and coin ledger rows into totals. Results are
recomputed on every load and never cached.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, TypeVar

from ecostay.core.constants import RATING_PLACEHOLDER
from ecostay.core.logging import get_logger
from ecostay.repositories.engagement import (
    CommentRepository,
    PhotoRepository,
    RatingRepository,
    VideoRepository,
)
from ecostay.schemas.activity import Activity
from ecostay.schemas.coin import CoinTransaction
from ecostay.schemas.engagement import Comment, Photo, Rating, Video

logger = get_logger(__name__)


class _ActivityChild(Protocol):
    activity_id: str


TChild = TypeVar("TChild", bound=_ActivityChild)


@dataclass(frozen=True)
class RatingSummary:
    """Average and count of the ratings of one activity."""

    average: Optional[float]
    count: int

    @property
    def display(self) -> str:
        """Average to one decimal, or a dash when nobody rated yet."""
        if not self.count or self.average is None:
            return RATING_PLACEHOLDER
        return f"{self.average:.1f}"


NO_RATINGS = RatingSummary(average=None, count=0)


@dataclass
class ActivityAggregate:
    """Per-activity child rows and rating summaries for one hostel."""

    comments: Dict[str, List[Comment]] = field(default_factory=dict)
    photos: Dict[str, List[Photo]] = field(default_factory=dict)
    videos: Dict[str, List[Video]] = field(default_factory=dict)
    ratings: Dict[str, RatingSummary] = field(default_factory=dict)

    def comments_for(self, activity_id: str) -> List[Comment]:
        return self.comments.get(activity_id, [])

    def photos_for(self, activity_id: str) -> List[Photo]:
        return self.photos.get(activity_id, [])

    def videos_for(self, activity_id: str) -> List[Video]:
        return self.videos.get(activity_id, [])

    def rating_for(self, activity_id: str) -> RatingSummary:
        return self.ratings.get(activity_id, NO_RATINGS)

    @property
    def is_empty(self) -> bool:
        return not (self.comments or self.photos or self.videos or self.ratings)


def group_by_activity(rows: Iterable[TChild]) -> Dict[str, List[TChild]]:
    """Group child rows by parent activity, keeping their original order."""
    grouped: Dict[str, List[TChild]] = {}
    for row in rows:
        grouped.setdefault(row.activity_id, []).append(row)
    return grouped


def summarize_ratings(ratings: Iterable[Rating]) -> Dict[str, RatingSummary]:
    """Sum and count ratings per activity, then divide."""
    totals: Dict[str, List[int]] = {}
    for rating in ratings:
        bucket = totals.setdefault(rating.activity_id, [0, 0])
        bucket[0] += rating.rating
        bucket[1] += 1
    return {
        activity_id: RatingSummary(average=total / count, count=count)
        for activity_id, (total, count) in totals.items()
    }


def total_coins(transactions: Iterable[CoinTransaction]) -> int:
    """Arithmetic sum of the ledger; zero when empty, negative when debits dominate."""
    return sum(transaction.coins for transaction in transactions)


class ActivityAggregationService:
    """
    Fans out the four child fetches for a set of activities and joins
    the results.
    """

    def __init__(
        self,
        comments: CommentRepository,
        photos: PhotoRepository,
        videos: VideoRepository,
        ratings: RatingRepository,
    ):
        self.comments = comments
        self.photos = photos
        self.videos = videos
        self.ratings = ratings

    async def aggregate(self, activities: Sequence[Activity]) -> ActivityAggregate:
        """
        Aggregate children of the given activities.

        An empty activity set yields empty mappings and issues no child
        fetch. A failing child fetch propagates as RemoteFetchError.
        """
        activity_ids = [activity.id for activity in activities]
        if not activity_ids:
            return ActivityAggregate()

        comments, photos, videos, ratings = await asyncio.gather(
            self.comments.for_activities(activity_ids),
            self.photos.for_activities(activity_ids),
            self.videos.for_activities(activity_ids),
            self.ratings.for_activities(activity_ids),
        )
        logger.debug(
            f"Aggregated {len(activity_ids)} activities",
            extra={
                "comment_count": len(comments),
                "photo_count": len(photos),
                "video_count": len(videos),
                "rating_count": len(ratings),
            },
        )
        return ActivityAggregate(
            comments=group_by_activity(comments),
            photos=group_by_activity(photos),
            videos=group_by_activity(videos),
            ratings=summarize_ratings(ratings),
        )
