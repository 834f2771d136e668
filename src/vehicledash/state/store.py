"""In-memory view state for the dashboard.

The vehicle list is a cache of the last successful full fetch. It has
no write path other than :meth:`ViewStateStore.set_vehicles`, which
replaces it wholesale.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from vehicledash.models.vehicle import Draft, StatusFilter, Vehicle

_logger = logging.getLogger(__name__)


class ViewStateStore:
    """Vehicle list, "add vehicle" draft and status filter.

    Once :meth:`close` has been called every write is dropped, so
    responses that resolve after the dashboard is torn down cannot
    land anywhere.
    """

    def __init__(self) -> None:
        self._vehicles: tuple[Vehicle, ...] = ()
        self._draft = Draft()
        self._filter = StatusFilter.ALL
        self._closed = False

    @property
    def vehicles(self) -> list[Vehicle]:
        return list(self._vehicles)

    @property
    def draft(self) -> Draft:
        return self._draft

    @property
    def status_filter(self) -> StatusFilter:
        return self._filter

    @property
    def closed(self) -> bool:
        return self._closed

    def _writable(self, operation: str) -> bool:
        if self._closed:
            _logger.debug("Ignoring %s on closed store", operation)
            return False
        return True

    def set_vehicles(self, vehicles: Iterable[Vehicle]) -> None:
        """Replace the held list (no merge)."""
        if self._writable("set_vehicles"):
            self._vehicles = tuple(vehicles)

    def update_draft(self, **changes: Any) -> None:
        """Shallow-merge *changes* into the draft.

        Raises ``pydantic.ValidationError`` for unknown fields or an
        invalid status.
        """
        if self._writable("update_draft"):
            self._draft = self._draft.merged(**changes)

    def reset_draft(self) -> None:
        if self._writable("reset_draft"):
            self._draft = Draft()

    def set_filter(self, value: StatusFilter | str) -> None:
        """Replace the active filter. Raises ``ValueError`` for unknown values."""
        if self._writable("set_filter"):
            self._filter = StatusFilter(value)

    def filtered_vehicles(self) -> list[Vehicle]:
        """Vehicles matching the active filter, in fetch order."""
        status_filter = self._filter
        return [vehicle for vehicle in self._vehicles if status_filter.matches(vehicle.status)]

    def close(self) -> None:
        self._closed = True
