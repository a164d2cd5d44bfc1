"""Geolocation results as reported by the browser.

The browser runs ``navigator.geolocation.getCurrentPosition`` and submits
either the coordinates or an error code. Providers wrap that outcome so the
controller can await it like any other asynchronous source.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union

from app.schemas.page import ErrorKind
from app.schemas.weather import Coordinates


# Codes submitted by the page script.
PERMISSION_DENIED = "permission_denied"
UNAVAILABLE = "unavailable"
UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class GeolocationFailure:
    kind: ErrorKind


GeolocationResult = Union[Coordinates, GeolocationFailure]


class GeolocationProvider(Protocol):
    async def locate(self) -> GeolocationResult: ...


def failure_from_code(code: str) -> GeolocationFailure:
    if code == PERMISSION_DENIED:
        return GeolocationFailure(kind=ErrorKind.GEOLOCATION_PERMISSION)
    if code == UNSUPPORTED:
        return GeolocationFailure(kind=ErrorKind.GEOLOCATION_UNSUPPORTED)
    # Timeouts, position unavailable and unknown codes all read as a generic failure.
    return GeolocationFailure(kind=ErrorKind.GEOLOCATION_UNAVAILABLE)


@dataclass(frozen=True)
class SubmittedGeolocation:
    """Provider for a result the browser already resolved."""

    lat: float | None = None
    lon: float | None = None
    error: str | None = None

    async def locate(self) -> GeolocationResult:
        if self.error:
            return failure_from_code(self.error)
        if self.lat is None or self.lon is None:
            return GeolocationFailure(kind=ErrorKind.GEOLOCATION_UNAVAILABLE)
        return Coordinates(lat=self.lat, lon=self.lon)
