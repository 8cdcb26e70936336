"""
Rating Repository - one rating per (activity, user).
"""

from ecostay.repositories.base import ActivityChildRepository
from ecostay.schemas.engagement import Rating, RatingUpsert

RATING_CONFLICT_KEY = ("activity_id", "user_id")


class RatingRepository(ActivityChildRepository[Rating]):
    """Fetchers for `event_ratings`."""

    table = "event_ratings"
    schema = Rating

    async def upsert(self, payload: RatingUpsert) -> Rating:
        """Insert the rating or replace the user's previous one."""
        return await self._upsert(payload, RATING_CONFLICT_KEY)
