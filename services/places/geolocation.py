from __future__ import annotations

from typing import Any, Protocol

from core.config import settings
from domain.value_objects import Coordinates

NOT_SUPPORTED = "Geolocation is not supported by your browser"


class LocationUnavailable(Exception): ...


class LocationProvider(Protocol):
    async def __call__(self) -> Coordinates: ...


class FixedLocationProvider:
    """A device with a known position (kiosk, tests, DEVICE_LATITUDE/LONGITUDE)."""

    def __init__(self, latitude: float, longitude: float):
        self.coords = Coordinates(latitude, longitude)

    async def __call__(self) -> Coordinates:
        return self.coords


class BrowserLocationProvider:
    """
    Position reported by the user's browser (navigator.geolocation).

    The page asks the browser for a fix and hands the raw reading to
    `report()`; the next lookup turns it into Coordinates. A reading is used
    once, so every "use my location" request needs a fresh fix.
    """

    def __init__(self):
        self._reading: Any = None

    def report(self, reading: Any) -> None:
        self._reading = reading

    async def __call__(self) -> Coordinates:
        reading, self._reading = self._reading, None
        return coordinates_from_browser(reading)


class UnsupportedLocationProvider:
    async def __call__(self) -> Coordinates:
        raise LocationUnavailable(NOT_SUPPORTED)


def default_location_provider() -> LocationProvider:
    if settings.DEVICE_LATITUDE is None or settings.DEVICE_LONGITUDE is None:
        return UnsupportedLocationProvider()
    return FixedLocationProvider(settings.DEVICE_LATITUDE, settings.DEVICE_LONGITUDE)


def coordinates_from_browser(reading: Any) -> Coordinates:
    """
    Parse a GeolocationPosition as serialized by the page:
    {"coords": {"latitude": .., "longitude": ..}, "timestamp": ..}.
    A denied or failed request arrives as {"error": {"code": .., "message": ..}}.
    """
    if not isinstance(reading, dict):
        raise LocationUnavailable("")
    if "error" in reading:
        raise LocationUnavailable("")
    coords = reading.get("coords") or {}
    try:
        return Coordinates(float(coords["latitude"]), float(coords["longitude"]))
    except (KeyError, TypeError, ValueError) as e:
        raise LocationUnavailable("") from e
