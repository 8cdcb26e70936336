# --- File: ecostay/schemas/profile.py ---
"""
User profile and favorite schemas.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from ecostay.schemas.common import BaseCreateSchema, BaseSchema, RowSchema, UserRole

__all__ = [
    "Profile",
    "ProfileCreate",
    "ProfileUpdate",
    "Favorite",
    "SignUpForm",
]


class Profile(RowSchema):
    """Row of `profiles`, keyed by the auth user id."""

    email: str
    full_name: str = ""
    role: UserRole = UserRole.TRAVELER
    phone: Optional[str] = None
    country: Optional[str] = None
    bio: Optional[str] = None
    updated_at: Optional[datetime] = None

    @property
    def is_manager(self) -> bool:
        return self.role == UserRole.HOSTEL_MANAGER


class ProfileCreate(BaseCreateSchema):
    id: str
    email: str
    full_name: str
    role: UserRole


class ProfileUpdate(BaseSchema):
    """Editable profile fields; unset fields are left untouched."""

    full_name: Optional[str] = None
    phone: Optional[str] = None
    country: Optional[str] = None
    bio: Optional[str] = None

    def to_patch(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)


class Favorite(RowSchema):
    """Row of `favorites`."""

    user_id: str
    hostel_id: str


class SignUpForm(BaseSchema):
    """Sign-up modal state."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    is_hostel: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def role(self) -> UserRole:
        return UserRole.HOSTEL_MANAGER if self.is_hostel else UserRole.TRAVELER
