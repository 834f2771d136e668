"""Custom exception hierarchy for vehicledash."""

from __future__ import annotations


class VehicleDashError(Exception):
    """Base exception for all vehicledash errors."""


class DashboardConfigError(VehicleDashError):
    """Invalid or missing configuration."""


class VehicleValidationError(VehicleDashError):
    """Local input check failed; no request was sent."""

    def __init__(self, message: str, *, field: str = "") -> None:
        self.field = field
        super().__init__(message)


class UnexpectedFormatError(VehicleDashError):
    """Response body did not have a recognized shape."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class RequestFailedError(VehicleDashError):
    """Transport or service failure (network, timeout, non-2xx, invalid JSON).

    The original cause, when there is one, is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)
