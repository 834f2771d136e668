"""Vehicle, draft and filter models."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from vehicledash.models._base import Timestamp

VehicleId = str | int
"""Opaque identifier assigned by the service."""


class VehicleStatus(enum.StrEnum):
    """Operational status of a vehicle, as sent on the wire."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    MAINTENANCE = "Maintenance"


class StatusFilter(enum.StrEnum):
    """View-side status predicate. Never sent to the service."""

    ALL = "All"
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    MAINTENANCE = "Maintenance"

    def matches(self, status: VehicleStatus) -> bool:
        if self is StatusFilter.ALL:
            return True
        return self.value == status.value


class Vehicle(BaseModel):
    """A vehicle as held by the remote service.

    The identifier is read from ``_id`` (document-store style) or ``id``.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    id: VehicleId = Field(validation_alias=AliasChoices("_id", "id"))
    """Service-assigned identifier."""
    name: str = Field(validation_alias=AliasChoices("name"))
    """Display label."""
    status: VehicleStatus = Field(validation_alias=AliasChoices("status"))
    """Current status."""
    last_updated: Timestamp = Field(
        default=None,
        validation_alias=AliasChoices("lastUpdated", "last_updated"),
    )
    """Time of last modification (UTC), set by the service."""

    raw: dict[str, Any] = Field(default_factory=dict)
    """Full API response dict for access to additional fields."""

    @model_validator(mode="before")
    @classmethod
    def _ensure_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        merged = dict(values)
        merged.setdefault("raw", values)
        return merged


class Draft(BaseModel):
    """Unsaved state of the "add vehicle" form."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    name: str = ""
    status: VehicleStatus = VehicleStatus.INACTIVE

    def merged(self, **changes: Any) -> Draft:
        """Return a copy with *changes* shallow-merged in (validated)."""
        return Draft.model_validate({**self.model_dump(), **changes})
