"""
Hostel listing and registration.
"""

from typing import Dict, List, Optional, Sequence

from ecostay.core.constants import (
    ALL_COUNTRIES,
    ERROR_HOSTEL_COORDINATES,
    ERROR_HOSTEL_EXISTS,
    ERROR_HOSTEL_FIELDS,
)
from ecostay.core.exceptions import MissingFieldError, ValidationError
from ecostay.core.logging import get_logger
from ecostay.repositories.hostel import HostelRepository
from ecostay.schemas.common import Country
from ecostay.schemas.hostel import Hostel, HostelCreate, HostelDraft, MapMarker

logger = get_logger(__name__)


def filter_by_country(hostels: Sequence[Hostel], country: str = ALL_COUNTRIES) -> List[Hostel]:
    """Client-side country filter; `all` keeps every hostel."""
    if not country or country == ALL_COUNTRIES:
        return list(hostels)
    return [hostel for hostel in hostels if hostel.country.value == country]


def map_markers(hostels: Sequence[Hostel]) -> List[MapMarker]:
    return [
        MapMarker(
            hostel_id=hostel.id,
            name=hostel.name,
            latitude=hostel.latitude,
            longitude=hostel.longitude,
            eco_score=hostel.eco_score,
        )
        for hostel in hostels
    ]


class HostelService:
    def __init__(self, hostels: HostelRepository):
        self.hostels = hostels

    async def list_hostels(self) -> List[Hostel]:
        return await self.hostels.list_all()

    async def get(self, hostel_id: str) -> Optional[Hostel]:
        return await self.hostels.get(hostel_id)

    async def for_manager(self, manager_id: str) -> Optional[Hostel]:
        return await self.hostels.get_by_manager(manager_id)

    @staticmethod
    def _coordinate_errors(draft: HostelDraft) -> Dict[str, List[str]]:
        errors: Dict[str, List[str]] = {}
        if not -90 <= draft.latitude <= 90:
            errors["latitude"] = ["Latitude must be between -90 and 90"]
        if not -180 <= draft.longitude <= 180:
            errors["longitude"] = ["Longitude must be between -180 and 180"]
        return errors

    async def create(self, manager_id: str, draft: HostelDraft) -> Hostel:
        """
        Register the manager's hostel with zeroed scores.

        Raises:
            MissingFieldError: a required field is empty
            ValidationError: unsupported country, coordinates out of range,
                or the manager already has a hostel
        """
        missing = draft.missing_fields()
        if missing:
            raise MissingFieldError(ERROR_HOSTEL_FIELDS, missing)
        try:
            country = Country(draft.country)
        except ValueError:
            raise ValidationError(
                f"Unsupported country: {draft.country}",
                field_errors={"country": ["Unsupported country"]},
            )
        coordinate_errors = self._coordinate_errors(draft)
        if coordinate_errors:
            raise ValidationError(ERROR_HOSTEL_COORDINATES, field_errors=coordinate_errors)

        if await self.hostels.get_by_manager(manager_id) is not None:
            raise ValidationError(ERROR_HOSTEL_EXISTS)

        hostel = await self.hostels.create(
            HostelCreate(
                manager_id=manager_id,
                name=draft.name,
                location=draft.location,
                description=draft.description,
                country=country,
                latitude=draft.latitude,
                longitude=draft.longitude,
                image_url=draft.image_url or None,
            )
        )
        logger.info(f"Hostel {hostel.id} created", extra={"manager_id": manager_id})
        return hostel
