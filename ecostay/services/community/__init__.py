"""
Community services: wishes and the forum.
"""

from ecostay.services.community.forum_service import ForumService
from ecostay.services.community.wish_service import WishService

__all__ = ["ForumService", "WishService"]
