"""
Engagement repositories: comments, photos, videos and ratings.
"""

from ecostay.repositories.engagement.comment_repository import CommentRepository
from ecostay.repositories.engagement.media_repository import PhotoRepository, VideoRepository
from ecostay.repositories.engagement.rating_repository import RatingRepository

__all__ = [
    "CommentRepository",
    "PhotoRepository",
    "RatingRepository",
    "VideoRepository",
]
