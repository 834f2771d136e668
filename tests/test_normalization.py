"""Tests for list-response shape decoding and the vehicle endpoints."""

from __future__ import annotations

import pytest
from conftest import FakeVehicleBackend

from vehicledash._api.vehicles import (
    ListShape,
    create_vehicle,
    decode_list_payload,
    normalize_vehicle_list,
    update_vehicle_status,
)
from vehicledash.exceptions import UnexpectedFormatError, VehicleValidationError
from vehicledash.models.vehicle import VehicleStatus

ITEMS = [
    {"_id": "a1", "name": "Van", "status": "Active", "lastUpdated": "2026-01-01T00:00:00Z"},
    {"_id": "b2", "name": "Truck", "status": "Inactive", "lastUpdated": "2026-01-01T01:00:00Z"},
]


class TestDecodeListPayload:
    def test_bare_array(self) -> None:
        decoded = decode_list_payload(ITEMS)
        assert decoded.shape is ListShape.BARE
        assert decoded.items == ITEMS

    def test_wrapped_array(self) -> None:
        decoded = decode_list_payload({"vehicles": ITEMS, "total": 2})
        assert decoded.shape is ListShape.WRAPPED
        assert decoded.items == ITEMS

    @pytest.mark.parametrize(
        "payload",
        [None, "vehicles", 42, {}, {"vehicles": None}, {"vehicles": {"a1": {}}}, {"data": ITEMS}],
    )
    def test_unrecognized(self, payload: object) -> None:
        decoded = decode_list_payload(payload)
        assert decoded.shape is ListShape.UNRECOGNIZED
        assert decoded.items == []


class TestNormalizeVehicleList:
    def test_wrapped_and_bare_normalize_identically(self) -> None:
        assert normalize_vehicle_list({"vehicles": ITEMS}) == normalize_vehicle_list(ITEMS)

    def test_empty_list(self) -> None:
        assert normalize_vehicle_list([]) == []
        assert normalize_vehicle_list({"vehicles": []}) == []

    def test_order_preserved(self) -> None:
        assert [vehicle.name for vehicle in normalize_vehicle_list(ITEMS)] == ["Van", "Truck"]

    def test_unrecognized_shape_raises(self) -> None:
        with pytest.raises(UnexpectedFormatError) as exc_info:
            normalize_vehicle_list({"message": "ok"})
        assert exc_info.value.endpoint == "/api/vehicles"

    def test_malformed_element_raises(self) -> None:
        with pytest.raises(UnexpectedFormatError):
            normalize_vehicle_list([*ITEMS, {"name": "No id", "status": "Active"}])


@pytest.mark.asyncio
async def test_create_with_empty_name_sends_nothing() -> None:
    backend = FakeVehicleBackend()
    with pytest.raises(VehicleValidationError) as exc_info:
        await create_vehicle(backend, "", VehicleStatus.ACTIVE)
    assert exc_info.value.field == "name"
    assert backend.requests == []


@pytest.mark.asyncio
async def test_create_posts_name_and_status() -> None:
    backend = FakeVehicleBackend()
    created = await create_vehicle(backend, "Truck1", VehicleStatus.ACTIVE)
    assert backend.requests == [("POST", "/api/vehicles", {"name": "Truck1", "status": "Active"})]
    assert created is not None
    assert created.name == "Truck1"


@pytest.mark.asyncio
async def test_create_tolerates_non_vehicle_reply() -> None:
    class _AckTransport:
        async def request_json(self, method, endpoint, *, payload=None, expect_body=True):  # noqa: ANN001, ANN202
            return {"message": "created"}

    assert await create_vehicle(_AckTransport(), "Truck1", VehicleStatus.INACTIVE) is None


@pytest.mark.asyncio
async def test_update_puts_status_to_vehicle_path() -> None:
    backend = FakeVehicleBackend(vehicles=[dict(ITEMS[0])])
    await update_vehicle_status(backend, "a1", VehicleStatus.MAINTENANCE)
    assert backend.requests == [("PUT", "/api/vehicles/a1", {"status": "Maintenance"})]
