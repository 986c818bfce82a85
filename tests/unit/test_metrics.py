import logging

import httpx
import pytest

from services.observability.metrics import call_stats, reset_call_stats, timing_metric
from services.translation.google_translate import TranslationError, translate


@pytest.fixture(autouse=True)
def _clean_stats():
    reset_call_stats()
    yield
    reset_call_stats()


def test_outcomes_are_recorded_per_integration(caplog):
    with caplog.at_level(logging.DEBUG, logger="services.observability.metrics"):
        with timing_metric("places.autocomplete") as m:
            m.status_code = 200
        with timing_metric("places.autocomplete") as m:
            m.status_code = 503
        with pytest.raises(httpx.ConnectError):
            with timing_metric("submit"):
                raise httpx.ConnectError("refused")

    stats = call_stats()
    assert stats[("places.autocomplete", "ok")].calls == 1
    assert stats[("places.autocomplete", "http_503")].calls == 1
    assert stats[("submit", "error:ConnectError")].calls == 1
    assert "places.autocomplete outcome=http_503" in caplog.text


async def test_client_calls_report_http_status(recorder_factory):
    rec = recorder_factory(lambda req: httpx.Response(429))
    with pytest.raises(TranslationError):
        await translate("x", "es", url="http://t/", transport=rec.transport)

    assert call_stats()[("translate", "http_429")].calls == 1
