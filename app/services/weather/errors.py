from __future__ import annotations

from app.schemas.page import ErrorKind


# Banner text per failure; fetch failures get the "Error: " prefix at display time.
VALIDATION_MESSAGE = "Please enter a city name."
NOT_FOUND_MESSAGE = "City not found. Please check the name."
FETCH_STATUS_MESSAGE = "Weather data failed to fetch (Status: {status})"
MALFORMED_MESSAGE = "Weather data could not be read."
TRANSPORT_MESSAGE = "Could not reach the weather service. Check your connection."

GEOLOCATION_MESSAGES = {
    ErrorKind.GEOLOCATION_PERMISSION: "You denied location access. Please use the city search.",
    ErrorKind.GEOLOCATION_UNAVAILABLE: "Geolocation failed. Ensure location services are enabled.",
    ErrorKind.GEOLOCATION_UNSUPPORTED: "Geolocation is not supported by your browser.",
}


class InvalidTransition(Exception):
    """Raised when the controller is asked to move between unrelated phases."""


def fetch_error_message(message: str) -> str:
    return f"Error: {message}"
