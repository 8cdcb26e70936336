# --- File: ecostay/schemas/common/enums.py ---
"""
All enumeration types used across the application.

These enums mirror the check constraints of the remote store tables
(profiles, hostels, hostel_activities, wishes).
"""

from enum import Enum

__all__ = [
    "UserRole",
    "Country",
    "ActivityType",
    "ActivityStatus",
    "WishStatus",
    "MediaKind",
]


class UserRole(str, Enum):
    """User role enumeration."""

    TRAVELER = "traveler"
    HOSTEL_MANAGER = "hostel_manager"


class Country(str, Enum):
    """Countries covered by the network."""

    TUNISIA = "tunisia"
    MOROCCO = "morocco"
    EGYPT = "egypt"
    JORDAN = "jordan"
    UAE = "uae"


class ActivityType(str, Enum):
    """Sustainability activity categories."""

    ENERGY = "energy"
    WATER = "water"
    WASTE = "waste"
    COMMUNITY = "community"
    EDUCATION = "education"
    BIODIVERSITY = "biodiversity"


class ActivityStatus(str, Enum):
    """Verification status of an activity."""

    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


class WishStatus(str, Enum):
    """Lifecycle of a traveler wish."""

    OPEN = "open"
    ADOPTED = "adopted"
    COMPLETED = "completed"


class MediaKind(str, Enum):
    """Attachment kinds accepted on an activity."""

    PHOTO = "photo"
    VIDEO = "video"
