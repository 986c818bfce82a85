import math
from datetime import date
from functools import partial

import streamlit as st

from core.config import settings
from domain.models import FormRecord
from services.address.assistant import AddressAssistant
from services.intake.form_controller import FormController
from services.places.geolocation import (
    BrowserLocationProvider,
    LocationProvider,
    default_location_provider,
)

DEFAULTS = {
    "controller": None,
    "location_provider": None,
    "locating": False,
    "locate_requests": 0,
}


def field_key(name: str) -> str:
    return f"field_{name}"


def location_provider() -> LocationProvider:
    """The visitor's browser, unless the deployment pins a device position."""
    if settings.DEVICE_LATITUDE is not None and settings.DEVICE_LONGITUDE is not None:
        return default_location_provider()
    return BrowserLocationProvider()


def ensure() -> FormController:
    for k, v in DEFAULTS.items():
        if k not in st.session_state:
            st.session_state[k] = v
    if st.session_state["controller"] is None:
        provider = location_provider()
        st.session_state["location_provider"] = provider
        st.session_state["controller"] = FormController(
            address=AddressAssistant(location_provider=provider)
        )
    return st.session_state["controller"]


def _to_date(value: str) -> date | None:
    try:
        return date.fromisoformat(value) if value else None
    except ValueError:
        return None


def _to_number(value: str, kind: type) -> float | int | None:
    try:
        n = float(value)
    except ValueError:
        return None
    if not math.isfinite(n):
        return None
    return int(n) if kind is int else n


def _date_text(value: date | None) -> str:
    return value.isoformat() if value else ""


def _number_text(value: float | int | None) -> str:
    if value is None:
        return ""
    return str(int(value)) if float(value).is_integer() else str(value)


# record field -> (record string -> widget value, widget value -> record string)
WIDGET_CODECS = {
    "desired_move_in_date": (_to_date, _date_text),
    "monthly_income": (partial(_to_number, kind=float), _number_text),
    "number_of_occupants": (partial(_to_number, kind=int), _number_text),
    "credit_score": (partial(_to_number, kind=int), _number_text),
}


def to_widget(name: str, value):
    codec = WIDGET_CODECS.get(name)
    return codec[0](value) if codec else value


def from_widget(name: str, value):
    codec = WIDGET_CODECS.get(name)
    return codec[1](value) if codec else value


def sync_widgets(controller: FormController) -> None:
    """Push the controller snapshot into widget state before widgets render."""
    record = controller.state.record
    for name in FormRecord.field_names():
        st.session_state[field_key(name)] = to_widget(name, getattr(record, name))
    st.session_state["language"] = controller.state.language
