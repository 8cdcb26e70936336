"""
Activity rating.

A rating is validated before any request is made and stored with an
upsert keyed on (activity, user), so resubmitting replaces the user's
previous value instead of adding another one.
"""

from typing import Any

from ecostay.core.constants import ERROR_RATING_RANGE, MAX_RATING, MIN_RATING
from ecostay.core.exceptions import ValidationError
from ecostay.core.logging import get_logger
from ecostay.repositories.engagement import RatingRepository
from ecostay.schemas.engagement import Rating, RatingUpsert

logger = get_logger(__name__)


def validate_rating(value: Any) -> int:
    """Return the rating as an int, or raise when it is not 1..5."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(ERROR_RATING_RANGE, field_errors={"rating": [ERROR_RATING_RANGE]})
    if not MIN_RATING <= value <= MAX_RATING:
        raise ValidationError(ERROR_RATING_RANGE, field_errors={"rating": [ERROR_RATING_RANGE]})
    return value


class RatingService:
    def __init__(self, ratings: RatingRepository):
        self.ratings = ratings

    async def rate(self, activity_id: str, user_id: str, value: Any) -> Rating:
        rating = validate_rating(value)
        stored = await self.ratings.upsert(
            RatingUpsert(activity_id=activity_id, user_id=user_id, rating=rating)
        )
        logger.info(f"Rated activity {activity_id}", extra={"user_id": user_id, "rating": rating})
        return stored
