# --- File: ecostay/schemas/hostel.py ---
"""
Hostel schemas.

A hostel carries three independent sustainability sub-scores and a
geocoordinate pair used for the map view.
"""

from typing import List, Optional

from pydantic import Field

from ecostay.schemas.common import BaseCreateSchema, BaseSchema, Country, RowSchema

__all__ = [
    "Hostel",
    "HostelDraft",
    "HostelCreate",
    "MapMarker",
]


class Hostel(RowSchema):
    """Row of the `hostels` table."""

    manager_id: Optional[str] = Field(default=None, description="Owning manager profile")
    name: str
    location: str = Field(..., description="Free-text location")
    description: str = ""
    country: Country
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    eco_score: int = Field(default=0, ge=0)
    travel_score: int = Field(default=0, ge=0)
    education_score: int = Field(default=0, ge=0)
    rating: float = Field(default=0, ge=0)
    image_url: Optional[str] = None


class HostelDraft(BaseSchema):
    """Unvalidated form state of the create-hostel screen."""

    name: str = ""
    location: str = ""
    country: str = Country.TUNISIA.value
    description: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    image_url: str = ""

    def missing_fields(self) -> List[str]:
        missing = [
            field
            for field in ("name", "location", "country", "description")
            if not getattr(self, field)
        ]
        missing.extend(
            field for field in ("latitude", "longitude") if getattr(self, field) is None
        )
        return missing


class HostelCreate(BaseCreateSchema):
    """Insert payload for a new hostel; scores start at zero."""

    manager_id: str
    name: str
    location: str
    description: str
    country: Country
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    eco_score: int = 0
    travel_score: int = 0
    education_score: int = 0
    rating: float = 0
    image_url: Optional[str] = None


class MapMarker(BaseSchema):
    """Point rendered on the hostel map."""

    hostel_id: str
    name: str
    latitude: float
    longitude: float
    eco_score: int
