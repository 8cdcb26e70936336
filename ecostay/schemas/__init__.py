"""
Schemas package.

Explicit row records for every table the client reads, plus the insert
payloads and form drafts used by services and views.
"""

from ecostay.schemas.activity import Activity, ActivityCreate, ActivityDraft
from ecostay.schemas.coin import CoinTransaction, CoinTransactionCreate
from ecostay.schemas.common import (
    ActivityStatus,
    ActivityType,
    Country,
    MediaKind,
    UserRole,
    WishStatus,
)
from ecostay.schemas.engagement import (
    Comment,
    CommentCreate,
    MediaCreate,
    Photo,
    Rating,
    RatingUpsert,
    Video,
)
from ecostay.schemas.forum import ForumPost, ForumPostCreate, ForumThread, ForumThreadCreate
from ecostay.schemas.hostel import Hostel, HostelCreate, HostelDraft, MapMarker
from ecostay.schemas.profile import Favorite, Profile, ProfileCreate, ProfileUpdate, SignUpForm
from ecostay.schemas.wish import Wish, WishAuthor, WishCreate, WishDraft

__all__ = [
    "Activity",
    "ActivityCreate",
    "ActivityDraft",
    "ActivityStatus",
    "ActivityType",
    "CoinTransaction",
    "CoinTransactionCreate",
    "Comment",
    "CommentCreate",
    "Country",
    "Favorite",
    "ForumPost",
    "ForumPostCreate",
    "ForumThread",
    "ForumThreadCreate",
    "Hostel",
    "HostelCreate",
    "HostelDraft",
    "MapMarker",
    "MediaCreate",
    "MediaKind",
    "Photo",
    "Profile",
    "ProfileCreate",
    "ProfileUpdate",
    "Rating",
    "RatingUpsert",
    "SignUpForm",
    "UserRole",
    "Video",
    "Wish",
    "WishAuthor",
    "WishCreate",
    "WishDraft",
    "WishStatus",
]
