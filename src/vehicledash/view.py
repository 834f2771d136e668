"""Plain-text rendering of the dashboard."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, tzinfo
from typing import TYPE_CHECKING

from vehicledash.models.vehicle import Vehicle

if TYPE_CHECKING:
    from vehicledash.dashboard import VehicleDashboard

TITLE = "Vehicle Management Dashboard"
EMPTY_ROW = "No vehicles found."
COLUMNS: tuple[str, ...] = ("Vehicle Name", "Status", "Last Updated", "ID")


def format_timestamp(value: datetime | None, tz: tzinfo | None = None) -> str:
    """Render *value* in *tz* (local time when ``None``)."""
    if value is None:
        return "-"
    return value.astimezone(tz).strftime("%Y-%m-%d %H:%M:%S")


def _row(vehicle: Vehicle, tz: tzinfo | None) -> tuple[str, ...]:
    return (vehicle.name, vehicle.status.value, format_timestamp(vehicle.last_updated, tz), str(vehicle.id))


def render_table(vehicles: Sequence[Vehicle], *, tz: tzinfo | None = None) -> str:
    """Render *vehicles* as an aligned table, or the empty-state row."""
    rows = [_row(vehicle, tz) for vehicle in vehicles]
    widths = [len(title) for title in COLUMNS]
    for row in rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row, strict=True)]

    def _line(cells: Sequence[str]) -> str:
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths, strict=True)).rstrip()

    lines = [_line(COLUMNS), "  ".join("-" * width for width in widths)]
    if rows:
        lines.extend(_line(row) for row in rows)
    else:
        lines.append(EMPTY_ROW)
    return "\n".join(lines)


def render_dashboard(dashboard: VehicleDashboard, *, tz: tzinfo | None = None) -> str:
    """Title, active filter and the filtered table."""
    shown = dashboard.filtered_vehicles()
    header = f"{TITLE}\nFilter: {dashboard.status_filter.value} ({len(shown)} of {len(dashboard.vehicles)})"
    return f"{header}\n\n{render_table(shown, tz=tz)}"
