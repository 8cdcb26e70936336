"""
User repositories: profiles and favorites.
"""

from ecostay.repositories.user.favorite_repository import FavoriteRepository
from ecostay.repositories.user.profile_repository import ProfileRepository

__all__ = [
    "FavoriteRepository",
    "ProfileRepository",
]
