from __future__ import annotations

import logging

import httpx

from core.config import settings
from domain.models import FormRecord
from services.observability.metrics import timing_metric

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Application submitted successfully!"
GENERIC_FAILURE = "Failed to submit application"


class SubmissionError(Exception):
    """Carries the message the applicant should see."""

    def __init__(self, message: str = GENERIC_FAILURE):
        super().__init__(message)
        self.message = message


async def submit_application(
    record: FormRecord,
    *,
    url: str | None = None,
    timeout_s: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """
    POST the record as JSON and return the success message.

    A JSON body with a non-empty `error` raises SubmissionError with that text;
    transport and decoding failures raise it with the generic message.
    """
    url = url or settings.url(settings.SUBMIT_PATH)
    try:
        with timing_metric("submit") as m:
            async with httpx.AsyncClient(
                timeout=timeout_s or settings.HTTP_TIMEOUT_S, transport=transport
            ) as client:
                r = await client.post(url, json=record.to_payload())
            m.status_code = r.status_code
        data = r.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("submission transport/parse failure: %s", e)
        raise SubmissionError() from e

    error = data.get("error") if isinstance(data, dict) else None
    if error:
        logger.info("submission rejected by backend: %s", error)
        raise SubmissionError(str(error))
    if r.is_error:
        logger.warning("submission failed with HTTP %s and no error text", r.status_code)
        raise SubmissionError()
    return SUCCESS_MESSAGE
