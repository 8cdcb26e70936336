"""
Community repositories: wishes and the forum.
"""

from ecostay.repositories.community.forum_repository import ForumPostRepository, ForumThreadRepository
from ecostay.repositories.community.wish_repository import WishRepository

__all__ = [
    "ForumPostRepository",
    "ForumThreadRepository",
    "WishRepository",
]
