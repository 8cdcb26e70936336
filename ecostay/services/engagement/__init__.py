"""
Engagement services: comments, media attachments and ratings.
"""

from ecostay.services.engagement.comment_service import CommentService
from ecostay.services.engagement.media_service import MediaService, media_path
from ecostay.services.engagement.rating_service import RatingService, validate_rating

__all__ = [
    "CommentService",
    "MediaService",
    "RatingService",
    "media_path",
    "validate_rating",
]
