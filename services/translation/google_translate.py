from __future__ import annotations

import html

import httpx

from core.config import settings
from services.observability.metrics import timing_metric


class TranslationError(Exception): ...


async def translate(
    text: str,
    target: str,
    *,
    url: str | None = None,
    timeout_s: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """POST one string to the translate v2 integration (form-encoded q/target)."""
    url = url or settings.url(settings.TRANSLATE_PATH)
    try:
        with timing_metric("translate") as m:
            async with httpx.AsyncClient(
                timeout=timeout_s or settings.HTTP_TIMEOUT_S, transport=transport
            ) as client:
                r = await client.post(url, data={"q": text, "target": target})
            m.status_code = r.status_code
        r.raise_for_status()
        data = r.json()
        translated = data["data"]["translations"][0]["translatedText"]
    except (httpx.HTTPError, ValueError, KeyError, IndexError, TypeError) as e:
        raise TranslationError(f"translate {target!r} failed: {e}") from e
    if not isinstance(translated, str):
        raise TranslationError(f"translate {target!r} returned {type(translated).__name__}")
    # v2 answers in HTML format by default ("you&#39;d")
    return html.unescape(translated)
