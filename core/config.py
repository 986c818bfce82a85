from __future__ import annotations

import os

from pydantic import BaseModel


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


class Settings(BaseModel):
    INTEGRATIONS_BASE_URL: str = os.getenv("INTEGRATIONS_BASE_URL", "http://localhost:3000")
    TRANSLATE_PATH: str = os.getenv(
        "TRANSLATE_PATH", "/integrations/google-translate/language/translate/v2"
    )
    PLACES_AUTOCOMPLETE_PATH: str = os.getenv(
        "PLACES_AUTOCOMPLETE_PATH", "/integrations/google-place-autocomplete/autocomplete/json"
    )
    SUBMIT_PATH: str = os.getenv("SUBMIT_PATH", "/api/submit-rental-application")

    PLACES_RADIUS: str = os.getenv("PLACES_RADIUS", "500")
    HTTP_TIMEOUT_S: float = float(os.getenv("HTTP_TIMEOUT_S", "10"))

    SOURCE_LANGUAGE: str = os.getenv("SOURCE_LANGUAGE", "en")
    ADDRESS_DEBOUNCE_MS: int = int(os.getenv("ADDRESS_DEBOUNCE_MS", "0"))

    DEVICE_LATITUDE: float | None = _optional_float("DEVICE_LATITUDE")
    DEVICE_LONGITUDE: float | None = _optional_float("DEVICE_LONGITUDE")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def url(self, path: str) -> str:
        return f"{self.INTEGRATIONS_BASE_URL.rstrip('/')}/{path.lstrip('/')}"


settings = Settings()
