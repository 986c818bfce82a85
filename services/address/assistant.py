from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from core.config import settings
from domain.models import AddressSuggestion
from services.address.dispatcher import QueryDispatcher
from services.places.autocomplete import PlacesError, autocomplete
from services.places.geolocation import (
    LocationProvider,
    LocationUnavailable,
    default_location_provider,
)

logger = logging.getLogger(__name__)

LOCATION_FAILED = "Could not get your location"
ADDRESS_FAILED = "Could not get address for your location"

Lookup = Callable[[str], Awaitable[list[AddressSuggestion]]]


class LocationLookupError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AddressAssistant:
    """Text search and geolocation lookup against the places service."""

    def __init__(
        self,
        lookup: Lookup = autocomplete,
        location_provider: LocationProvider | None = None,
        dispatcher: QueryDispatcher | None = None,
    ):
        self.lookup = lookup
        self.location_provider = location_provider or default_location_provider()
        self.dispatcher = dispatcher or QueryDispatcher(settings.ADDRESS_DEBOUNCE_MS / 1000)

    async def suggest(self, text: str) -> list[AddressSuggestion] | None:
        """
        Candidates for `text`. Blank text gives [] without a request, a failed
        query gives []. None means a newer search superseded this one.
        """
        if not text.strip():
            self.dispatcher.cancel()
            return []

        async def query() -> list[AddressSuggestion]:
            try:
                return await self.lookup(text)
            except PlacesError as e:
                logger.warning("address search failed: %s", e)
                return []

        return await self.dispatcher.dispatch(query)

    def select(self, suggestion: AddressSuggestion) -> str:
        self.dispatcher.cancel()
        return suggestion.description

    async def locate(self) -> AddressSuggestion | None:
        """First candidate near the device, or None when the service knows none."""
        try:
            coords = await self.location_provider()
        except LocationUnavailable as e:
            raise LocationLookupError(str(e) or LOCATION_FAILED) from e
        except Exception as e:  # noqa: BLE001
            logger.warning("location provider failed: %s", e)
            raise LocationLookupError(LOCATION_FAILED) from e

        try:
            candidates = await self.lookup(coords.as_query())
        except PlacesError as e:
            logger.warning("reverse lookup for %s failed: %s", coords.as_query(), e)
            raise LocationLookupError(ADDRESS_FAILED) from e

        if not candidates:
            return None
        self.dispatcher.cancel()
        return candidates[0]
