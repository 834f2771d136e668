"""High-level async client for the vehicle collection service."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from vehicledash._api import vehicles as _vehicles_api
from vehicledash._transport import HttpTransport, Transport
from vehicledash.config import DashboardConfig
from vehicledash.exceptions import VehicleDashError
from vehicledash.models.vehicle import Vehicle, VehicleId, VehicleStatus

_logger = logging.getLogger(__name__)


class VehicleClient:
    """Async client for the vehicle collection service.

    Usage::

        async with VehicleClient(config) as client:
            vehicles = await client.list_vehicles()

    An ``aiohttp.ClientSession`` passed as *session* is used as-is and
    left open on exit. A *transport* bypasses HTTP entirely, which is
    how tests plug in a fake backend.
    """

    def __init__(
        self,
        config: DashboardConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config if config is not None else DashboardConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport
        self._external_transport = transport is not None

    @property
    def config(self) -> DashboardConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> VehicleClient:
        if self._external_transport:
            return self
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise VehicleDashError("Client not initialized. Use 'async with VehicleClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Collection operations
    # ------------------------------------------------------------------

    async def list_vehicles(self) -> list[Vehicle]:
        """Fetch the full vehicle collection.

        Raises
        ------
        UnexpectedFormatError
            If the response body is not a vehicle list.
        RequestFailedError
            On any transport or service failure.
        """
        vehicles = await _vehicles_api.fetch_vehicle_list(self._require_transport())
        _logger.debug("Fetched %d vehicles", len(vehicles))
        return vehicles

    async def create_vehicle(self, name: str, status: VehicleStatus = VehicleStatus.INACTIVE) -> Vehicle | None:
        """Create a vehicle.

        Raises
        ------
        VehicleValidationError
            If *name* is empty. No request is sent.
        RequestFailedError
            On any transport or service failure.
        """
        return await _vehicles_api.create_vehicle(self._require_transport(), name, status)

    async def update_vehicle_status(self, vehicle_id: VehicleId, status: VehicleStatus) -> None:
        """Set the status of vehicle *vehicle_id*.

        The id is not checked locally; the service rejects unknown ids.
        """
        await _vehicles_api.update_vehicle_status(self._require_transport(), vehicle_id, status)
