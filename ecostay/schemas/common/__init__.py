"""
Common schema building blocks.
"""

from ecostay.schemas.common.base import BaseCreateSchema, BaseSchema, RowSchema
from ecostay.schemas.common.enums import (
    ActivityStatus,
    ActivityType,
    Country,
    MediaKind,
    UserRole,
    WishStatus,
)

__all__ = [
    "BaseSchema",
    "RowSchema",
    "BaseCreateSchema",
    "UserRole",
    "Country",
    "ActivityType",
    "ActivityStatus",
    "WishStatus",
    "MediaKind",
]
