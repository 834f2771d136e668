"""Data models for the vehicle service."""

from vehicledash.models._base import Timestamp, parse_timestamp
from vehicledash.models.vehicle import Draft, StatusFilter, Vehicle, VehicleId, VehicleStatus

__all__ = [
    "Draft",
    "StatusFilter",
    "Timestamp",
    "Vehicle",
    "VehicleId",
    "VehicleStatus",
    "parse_timestamp",
]
