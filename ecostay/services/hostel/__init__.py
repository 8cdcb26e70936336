"""
Hostel services.

- Listing, country filtering, map markers and registration
- Profile and dashboard loaders
- Favorites
"""

from ecostay.services.hostel.favorite_service import FavoriteService
from ecostay.services.hostel.hostel_profile_service import (
    DashboardSnapshot,
    HostelProfileService,
    HostelProfileSnapshot,
)
from ecostay.services.hostel.hostel_service import HostelService, filter_by_country, map_markers

__all__ = [
    "DashboardSnapshot",
    "FavoriteService",
    "HostelProfileService",
    "HostelProfileSnapshot",
    "HostelService",
    "filter_by_country",
    "map_markers",
]
