"""Vehicle collection endpoints: ``/api/vehicles`` and ``/api/vehicles/{id}``.

It is internal to vehicledash and may change at any time.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import TypeAdapter, ValidationError

from vehicledash._constants import VEHICLES_ENDPOINT, vehicle_endpoint
from vehicledash._transport import Transport
from vehicledash.exceptions import UnexpectedFormatError, VehicleValidationError
from vehicledash.models.vehicle import Vehicle, VehicleId, VehicleStatus

_logger = logging.getLogger(__name__)

_VEHICLE_LIST = TypeAdapter(list[Vehicle])


class ListShape(enum.StrEnum):
    """Recognized shapes of the list response body."""

    BARE = "bare"
    """A JSON array of vehicles."""
    WRAPPED = "wrapped"
    """An object whose ``vehicles`` field is a JSON array."""
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True, slots=True)
class DecodedList:
    shape: ListShape
    items: list[Any] = field(default_factory=list)


def decode_list_payload(payload: Any) -> DecodedList:
    """Classify a list response body. Never raises."""
    if isinstance(payload, list):
        return DecodedList(ListShape.BARE, list(payload))
    if isinstance(payload, dict) and isinstance(payload.get("vehicles"), list):
        return DecodedList(ListShape.WRAPPED, list(payload["vehicles"]))
    return DecodedList(ListShape.UNRECOGNIZED)


def normalize_vehicle_list(payload: Any, *, endpoint: str = VEHICLES_ENDPOINT) -> list[Vehicle]:
    """Turn a list response body into vehicles.

    Raises
    ------
    UnexpectedFormatError
        If the body is neither shape, or an element is not a vehicle.
    """
    decoded = decode_list_payload(payload)
    if decoded.shape is ListShape.UNRECOGNIZED:
        raise UnexpectedFormatError(
            f"{endpoint} returned {type(payload).__name__}, expected a vehicle list",
            endpoint=endpoint,
        )
    try:
        return _VEHICLE_LIST.validate_python(decoded.items)
    except ValidationError as exc:
        raise UnexpectedFormatError(
            f"{endpoint} returned malformed vehicles ({exc.error_count()} errors)",
            endpoint=endpoint,
        ) from exc


async def fetch_vehicle_list(transport: Transport) -> list[Vehicle]:
    """Fetch the full vehicle collection."""
    decoded = await transport.request_json("GET", VEHICLES_ENDPOINT)
    return normalize_vehicle_list(decoded)


async def create_vehicle(transport: Transport, name: str, status: VehicleStatus) -> Vehicle | None:
    """Create a vehicle.

    The name check happens before any request is sent. The created
    vehicle is parsed best-effort; ``None`` means the service replied
    with something other than a vehicle.
    """
    if not name:
        raise VehicleValidationError("Vehicle name must be non-empty", field="name")

    body = {"name": name, "status": VehicleStatus(status).value}
    decoded = await transport.request_json("POST", VEHICLES_ENDPOINT, payload=body)
    try:
        return Vehicle.model_validate(decoded)
    except ValidationError:
        _logger.debug("Create response is not a vehicle: %r", decoded)
        return None


async def update_vehicle_status(transport: Transport, vehicle_id: VehicleId, status: VehicleStatus) -> None:
    """Set the status of an existing vehicle. The response body is ignored."""
    body = {"status": VehicleStatus(status).value}
    await transport.request_json("PUT", vehicle_endpoint(vehicle_id), payload=body, expect_body=False)
