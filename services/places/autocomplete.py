from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from core.config import settings
from domain.models import AddressSuggestion
from services.observability.metrics import timing_metric

logger = logging.getLogger(__name__)


class PlacesError(Exception): ...


async def autocomplete(
    input_text: str,
    *,
    radius: str | None = None,
    url: str | None = None,
    timeout_s: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[AddressSuggestion]:
    """GET address candidates for free text or a "lat,lng" position."""
    url = url or settings.url(settings.PLACES_AUTOCOMPLETE_PATH)
    params = {"input": input_text, "radius": radius or settings.PLACES_RADIUS}
    try:
        with timing_metric("places.autocomplete") as m:
            async with httpx.AsyncClient(
                timeout=timeout_s or settings.HTTP_TIMEOUT_S, transport=transport
            ) as client:
                r = await client.get(url, params=params)
            m.status_code = r.status_code
        r.raise_for_status()
        data = r.json() or {}
        predictions = data.get("predictions") or []
        status = data.get("status")
        out = [AddressSuggestion.model_validate(p) for p in predictions]
    except (httpx.HTTPError, ValueError, AttributeError, ValidationError) as e:
        raise PlacesError(f"autocomplete failed: {e}") from e
    if not out and status not in (None, "OK", "ZERO_RESULTS"):
        logger.warning("places returned status=%s for %r", status, input_text)
    return out
