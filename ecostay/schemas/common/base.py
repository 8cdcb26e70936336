# --- File: ecostay/schemas/common/base.py ---
"""
Base schema classes with common fields and configurations.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "BaseSchema",
    "RowSchema",
    "BaseCreateSchema",
]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    All row and payload schemas inherit from this to ensure consistent
    behaviour (e.g. validation, whitespace stripping).
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        # Keep enums as Enum instances to retain full type information;
        # callers can still access `.value` if needed.
        use_enum_values=False,
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="ignore",
    )


class RowSchema(BaseSchema):
    """Base schema for rows owned by the remote store."""

    id: str = Field(..., description="Unique identifier")
    created_at: Optional[datetime] = Field(default=None, description="Creation timestamp")


class BaseCreateSchema(BaseSchema):
    """Base schema for insert payloads."""

    def to_row(self, **extra: Any) -> Dict[str, Any]:
        """JSON-ready row for the remote store."""
        row = self.model_dump(mode="json")
        row.update(extra)
        return row
