from core.config import Settings, settings
from services.places.geolocation import (
    FixedLocationProvider,
    UnsupportedLocationProvider,
    default_location_provider,
)


def test_url_joins_base_and_path():
    s = Settings(INTEGRATIONS_BASE_URL="http://host:3000/")
    assert s.url("/api/submit-rental-application") == "http://host:3000/api/submit-rental-application"
    assert s.url("x") == "http://host:3000/x"


def test_default_endpoints():
    s = Settings()
    assert s.PLACES_RADIUS == "500"
    assert s.TRANSLATE_PATH.endswith("/language/translate/v2")
    assert s.PLACES_AUTOCOMPLETE_PATH.endswith("/autocomplete/json")


def test_location_provider_follows_device_settings(monkeypatch):
    monkeypatch.setattr(settings, "DEVICE_LATITUDE", None)
    monkeypatch.setattr(settings, "DEVICE_LONGITUDE", None)
    assert isinstance(default_location_provider(), UnsupportedLocationProvider)

    monkeypatch.setattr(settings, "DEVICE_LATITUDE", 51.5)
    monkeypatch.setattr(settings, "DEVICE_LONGITUDE", -0.12)
    provider = default_location_provider()
    assert isinstance(provider, FixedLocationProvider)
    assert provider.coords.as_query() == "51.5,-0.12"
