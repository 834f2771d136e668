"""vehicledash - Async client and dashboard for a vehicle collection service."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("vehicledash")
except PackageNotFoundError:
    __version__ = "0+local"
from vehicledash.client import VehicleClient
from vehicledash.config import DashboardConfig
from vehicledash.dashboard import VehicleCollection, VehicleDashboard
from vehicledash.exceptions import (
    DashboardConfigError,
    RequestFailedError,
    UnexpectedFormatError,
    VehicleDashError,
    VehicleValidationError,
)
from vehicledash.models import Draft, StatusFilter, Vehicle, VehicleId, VehicleStatus
from vehicledash.notify import ConsoleNotifier, LoggingNotifier, Notifier
from vehicledash.state import ViewStateStore
from vehicledash.view import render_dashboard, render_table

__all__ = [
    "__version__",
    "ConsoleNotifier",
    "DashboardConfig",
    "DashboardConfigError",
    "Draft",
    "LoggingNotifier",
    "Notifier",
    "RequestFailedError",
    "StatusFilter",
    "UnexpectedFormatError",
    "Vehicle",
    "VehicleClient",
    "VehicleCollection",
    "VehicleDashError",
    "VehicleDashboard",
    "VehicleId",
    "VehicleStatus",
    "VehicleValidationError",
    "ViewStateStore",
    "render_dashboard",
    "render_table",
]
