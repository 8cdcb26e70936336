"""
Base repositories package.
"""

from ecostay.repositories.base.base_repository import (
    ActivityChildRepository,
    BaseRepository,
)

__all__ = [
    "ActivityChildRepository",
    "BaseRepository",
]
