from __future__ import annotations

import asyncio
import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest

from vehicledash.client import VehicleClient
from vehicledash.exceptions import RequestFailedError

_UNSET: Any = object()


@dataclass
class FakeVehicleBackend:
    """In-memory stand-in for the vehicle service, usable as a transport."""

    vehicles: list[dict[str, Any]] = field(default_factory=list)
    wrap_list: bool = False
    list_payload: Any = _UNSET
    failing_methods: set[str] = field(default_factory=set)
    list_gate: asyncio.Event | None = None
    requests: list[tuple[str, str, dict[str, Any] | None]] = field(default_factory=list)
    next_id: int = 100
    _ticks: int = 0

    def count(self, method: str) -> int:
        return sum(1 for m, _endpoint, _payload in self.requests if m == method)

    def _timestamp(self) -> str:
        self._ticks += 1
        return f"2026-01-01T00:{self._ticks:02d}:00Z"

    async def request_json(
        self,
        method: str,
        endpoint: str,
        *,
        payload: Mapping[str, Any] | None = None,
        expect_body: bool = True,
    ) -> Any:
        self.requests.append((method, endpoint, dict(payload) if payload is not None else None))

        if method in self.failing_methods:
            raise RequestFailedError(f"HTTP 500 from {method} {endpoint}", status_code=500, endpoint=endpoint)

        if method == "GET" and endpoint == "/api/vehicles":
            if self.list_gate is not None:
                await self.list_gate.wait()
            if self.list_payload is not _UNSET:
                return self.list_payload
            items = copy.deepcopy(self.vehicles)
            return {"vehicles": items} if self.wrap_list else items

        if method == "POST" and endpoint == "/api/vehicles":
            assert payload is not None
            vehicle = {
                "_id": str(self.next_id),
                "name": payload["name"],
                "status": payload["status"],
                "lastUpdated": self._timestamp(),
            }
            self.next_id += 1
            self.vehicles.append(vehicle)
            return dict(vehicle)

        if method == "PUT" and endpoint.startswith("/api/vehicles/"):
            assert payload is not None
            vehicle_id = endpoint.rsplit("/", 1)[1]
            for vehicle in self.vehicles:
                if str(vehicle["_id"]) == vehicle_id:
                    vehicle["status"] = payload["status"]
                    vehicle["lastUpdated"] = self._timestamp()
                    return None
            raise RequestFailedError(f"HTTP 404 from PUT {endpoint}", status_code=404, endpoint=endpoint)

        raise AssertionError(f"Unexpected request in fake backend: {method} {endpoint}")


@dataclass
class RecordingNotifier:
    successes: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def notify_success(self, message: str) -> None:
        self.successes.append(message)

    def notify_error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def backend() -> FakeVehicleBackend:
    return FakeVehicleBackend(
        vehicles=[
            {"_id": "a1", "name": "Van", "status": "Active", "lastUpdated": "2025-12-31T08:00:00Z"},
            {"_id": "b2", "name": "Truck", "status": "Inactive", "lastUpdated": "2025-12-31T09:00:00Z"},
            {"_id": "c3", "name": "Bus", "status": "Active", "lastUpdated": "2025-12-31T10:00:00Z"},
        ]
    )


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def client(backend: FakeVehicleBackend) -> VehicleClient:
    return VehicleClient(transport=backend)
