import asyncio

import pytest

from domain.models import AddressSuggestion
from services.address.assistant import (
    ADDRESS_FAILED,
    LOCATION_FAILED,
    AddressAssistant,
    LocationLookupError,
)
from services.address.dispatcher import QueryDispatcher
from services.places.autocomplete import PlacesError
from services.places.geolocation import (
    NOT_SUPPORTED,
    FixedLocationProvider,
    LocationUnavailable,
    UnsupportedLocationProvider,
)

MAIN_ST = AddressSuggestion(place_id="p1", description="100 Main St, Springfield")


class FakeLookup:
    def __init__(self, results=None, error=None):
        self.results = results or []
        self.error = error
        self.inputs: list[str] = []

    async def __call__(self, text):
        self.inputs.append(text)
        if self.error:
            raise self.error
        return list(self.results)


async def test_blank_text_skips_the_request():
    lookup = FakeLookup([MAIN_ST])
    assistant = AddressAssistant(lookup=lookup, location_provider=UnsupportedLocationProvider())

    assert await assistant.suggest("") == []
    assert await assistant.suggest("   ") == []
    assert lookup.inputs == []


async def test_search_returns_candidates():
    lookup = FakeLookup([MAIN_ST])
    assistant = AddressAssistant(lookup=lookup, location_provider=UnsupportedLocationProvider())

    assert await assistant.suggest("100 Main") == [MAIN_ST]
    assert lookup.inputs == ["100 Main"]


async def test_failed_search_clears():
    assistant = AddressAssistant(
        lookup=FakeLookup(error=PlacesError("down")),
        location_provider=UnsupportedLocationProvider(),
    )
    assert await assistant.suggest("100 Main") == []


async def test_late_response_is_discarded():
    release = asyncio.Event()

    async def lookup(text):
        if text == "1":
            await release.wait()
        return [AddressSuggestion(place_id=text, description=text)]

    assistant = AddressAssistant(lookup=lookup, location_provider=UnsupportedLocationProvider())
    slow = asyncio.create_task(assistant.suggest("1"))
    await asyncio.sleep(0)
    fast = await assistant.suggest("10")
    release.set()

    assert [s.place_id for s in fast] == ["10"]
    assert await slow is None


async def test_debounce_runs_only_the_last_query():
    lookup = FakeLookup([MAIN_ST])
    assistant = AddressAssistant(
        lookup=lookup,
        location_provider=UnsupportedLocationProvider(),
        dispatcher=QueryDispatcher(debounce_s=0.01),
    )
    results = await asyncio.gather(
        assistant.suggest("1"), assistant.suggest("10"), assistant.suggest("100")
    )

    assert results == [None, None, [MAIN_ST]]
    assert lookup.inputs == ["100"]


async def test_locate_uses_coordinates_as_input():
    lookup = FakeLookup([MAIN_ST, AddressSuggestion(place_id="p2", description="other")])
    assistant = AddressAssistant(lookup=lookup, location_provider=FixedLocationProvider(39.8, -89.6))

    assert await assistant.locate() == MAIN_ST
    assert lookup.inputs == ["39.8,-89.6"]


async def test_locate_without_candidates_returns_none():
    assistant = AddressAssistant(lookup=FakeLookup([]), location_provider=FixedLocationProvider(0, 0))
    assert await assistant.locate() is None


class DeniedProvider:
    async def __call__(self):
        raise LocationUnavailable("")


class CrashingProvider:
    async def __call__(self):
        raise OSError("no gps")


@pytest.mark.parametrize(
    "provider,message",
    [
        (UnsupportedLocationProvider(), NOT_SUPPORTED),
        (DeniedProvider(), LOCATION_FAILED),
        (CrashingProvider(), LOCATION_FAILED),
    ],
)
async def test_location_step_failures(provider, message):
    lookup = FakeLookup([MAIN_ST])
    assistant = AddressAssistant(lookup=lookup, location_provider=provider)

    with pytest.raises(LocationLookupError) as exc:
        await assistant.locate()
    assert exc.value.message == message
    assert lookup.inputs == []


async def test_lookup_failure_after_fix():
    assistant = AddressAssistant(
        lookup=FakeLookup(error=PlacesError("down")),
        location_provider=FixedLocationProvider(1, 2),
    )
    with pytest.raises(LocationLookupError) as exc:
        await assistant.locate()
    assert exc.value.message == ADDRESS_FAILED
