"""Dashboard orchestration: ties the client, the view store and a notifier together.

Every mutation is followed by a full re-fetch; the fetched list is the
only thing ever written into the store. Errors are handled here, at
the operation that failed: the cause goes to the log, the user gets a
fixed message, and nothing is re-raised.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from vehicledash._constants import (
    MSG_ADD_FAILED,
    MSG_ADDED,
    MSG_FETCH_FAILED,
    MSG_NAME_REQUIRED,
    MSG_STATUS_UPDATED,
    MSG_UNEXPECTED_FORMAT,
    MSG_UPDATE_FAILED,
)
from vehicledash.exceptions import (
    RequestFailedError,
    UnexpectedFormatError,
    VehicleDashError,
    VehicleValidationError,
)
from vehicledash.models.vehicle import Draft, StatusFilter, Vehicle, VehicleId, VehicleStatus
from vehicledash.notify import Notifier
from vehicledash.state.store import ViewStateStore

_logger = logging.getLogger(__name__)


class VehicleCollection(Protocol):
    """The subset of :class:`~vehicledash.client.VehicleClient` the dashboard uses."""

    async def list_vehicles(self) -> list[Vehicle]:
        ...

    async def create_vehicle(self, name: str, status: VehicleStatus = ...) -> Vehicle | None:
        ...

    async def update_vehicle_status(self, vehicle_id: VehicleId, status: VehicleStatus) -> None:
        ...


class VehicleDashboard:
    """Vehicle management dashboard.

    Usage::

        async with VehicleClient(config) as client:
            async with VehicleDashboard(client, LoggingNotifier()) as dashboard:
                dashboard.update_draft(name="Truck1", status="Active")
                await dashboard.add_vehicle()

    Entering the context mounts (initial fetch); leaving it unmounts.
    """

    def __init__(
        self,
        client: VehicleCollection,
        notifier: Notifier,
        *,
        store: ViewStateStore | None = None,
    ) -> None:
        self._client = client
        self._notifier = notifier
        self._store = store if store is not None else ViewStateStore()

    async def __aenter__(self) -> VehicleDashboard:
        await self.mount()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        self.unmount()

    # ------------------------------------------------------------------
    # View state passthroughs
    # ------------------------------------------------------------------

    @property
    def store(self) -> ViewStateStore:
        return self._store

    @property
    def vehicles(self) -> list[Vehicle]:
        return self._store.vehicles

    @property
    def draft(self) -> Draft:
        return self._store.draft

    @property
    def status_filter(self) -> StatusFilter:
        return self._store.status_filter

    def filtered_vehicles(self) -> list[Vehicle]:
        return self._store.filtered_vehicles()

    def update_draft(self, **changes: Any) -> None:
        self._store.update_draft(**changes)

    def set_filter(self, value: StatusFilter | str) -> None:
        self._store.set_filter(value)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def mount(self) -> bool:
        """Initial fetch."""
        return await self.refresh()

    def unmount(self) -> None:
        """Close the store; responses still in flight are dropped."""
        self._store.close()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def refresh(self) -> bool:
        """Fetch the full list and replace the local copy.

        Returns ``True`` when the fetch succeeded. After :meth:`unmount`
        a successful fetch is not applied.
        """
        try:
            vehicles = await self._client.list_vehicles()
        except UnexpectedFormatError as exc:
            _logger.warning("Unexpected vehicle list format: %s", exc)
            self._notifier.notify_error(MSG_UNEXPECTED_FORMAT)
            return False
        except RequestFailedError as exc:
            _logger.warning("Error fetching vehicles: %s", exc, exc_info=exc.__cause__ is not None)
            self._notifier.notify_error(MSG_FETCH_FAILED)
            return False

        self._store.set_vehicles(vehicles)
        return True

    async def add_vehicle(self) -> bool:
        """Create a vehicle from the current draft.

        On success the draft is reset and the list re-fetched. On failure
        the draft is left as it was so the user can retry.
        """
        draft = self._store.draft
        if not draft.name:
            self._notifier.notify_error(MSG_NAME_REQUIRED)
            return False

        try:
            await self._client.create_vehicle(draft.name, draft.status)
        except VehicleValidationError as exc:
            _logger.debug("Draft rejected before sending: %s", exc)
            self._notifier.notify_error(MSG_NAME_REQUIRED)
            return False
        except VehicleDashError as exc:
            _logger.warning("Error adding vehicle: %s", exc, exc_info=exc.__cause__ is not None)
            self._notifier.notify_error(MSG_ADD_FAILED)
            return False

        self._store.reset_draft()
        self._notifier.notify_success(MSG_ADDED)
        await self.refresh()
        return True

    async def set_status(self, vehicle_id: VehicleId, status: VehicleStatus | str) -> bool:
        """Change the status of one vehicle, then re-fetch.

        Raises ``ValueError`` if *status* is not a vehicle status.
        """
        target = VehicleStatus(status)
        try:
            await self._client.update_vehicle_status(vehicle_id, target)
        except VehicleDashError as exc:
            _logger.warning("Error updating status: %s", exc, exc_info=exc.__cause__ is not None)
            self._notifier.notify_error(MSG_UPDATE_FAILED)
            return False

        self._notifier.notify_success(MSG_STATUS_UPDATED.format(status=target.value))
        await self.refresh()
        return True
