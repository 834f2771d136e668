"""Internal constants shared across the library."""

BASE_URL = "http://localhost:5000"
USER_AGENT = "vehicledash/1"

VEHICLES_ENDPOINT = "/api/vehicles"

# ------------------------------------------------------------------
# Notification messages
# ------------------------------------------------------------------

MSG_FETCH_FAILED = "Error fetching vehicles!"
MSG_UNEXPECTED_FORMAT = "Unexpected response format!"
MSG_NAME_REQUIRED = "Vehicle name is required!"
MSG_ADD_FAILED = "Error adding vehicle!"
MSG_ADDED = "Vehicle added!"
MSG_UPDATE_FAILED = "Error updating status!"
MSG_STATUS_UPDATED = "Status updated to {status}!"


def vehicle_endpoint(vehicle_id: str | int) -> str:
    """Path of a single vehicle resource."""
    return f"{VEHICLES_ENDPOINT}/{vehicle_id}"
