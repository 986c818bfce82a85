import asyncio

import streamlit as st
from streamlit_js_eval import get_geolocation

from apps.ui.session import ensure, field_key, from_widget, sync_widgets
from core.logging import configure_logging, logger
from domain.labels import EMPLOYMENT_OPTION_LABELS, LANGUAGES_BY_CODE, SUPPORTED_LANGUAGES
from domain.models import SubmissionPhase
from services.places.geolocation import BrowserLocationProvider

configure_logging()

st.set_page_config(page_title="Rental Application", layout="centered")

controller = ensure()


def _run(coro):
    return asyncio.run(coro)


def _on_field_change(name: str) -> None:
    controller.update_field(name, from_widget(name, st.session_state[field_key(name)]))


def _on_address_change() -> None:
    _run(controller.search_address(st.session_state[field_key("current_address")]))


def _on_language_change() -> None:
    code = st.session_state["language"]
    logger.info("language -> %s", code)
    _run(controller.change_language(code))


def _on_use_location() -> None:
    if isinstance(st.session_state["location_provider"], BrowserLocationProvider):
        # the fix arrives on a later rerun, see below
        st.session_state["locate_requests"] += 1
        st.session_state["locating"] = True
        return
    _run(controller.use_current_location())


def _on_submit() -> None:
    _run(controller.submit())


def _text(name: str, t, **kwargs) -> None:
    st.text_input(
        t[name],
        key=field_key(name),
        on_change=_on_field_change,
        args=(name,),
        **kwargs,
    )


def _number(name: str, t, **kwargs) -> None:
    st.number_input(
        t[name],
        value=None,
        key=field_key(name),
        on_change=_on_field_change,
        args=(name,),
        **kwargs,
    )


if st.session_state["locating"]:
    fix_key = f"device_location_{st.session_state['locate_requests']}"
    reading = get_geolocation(component_key=fix_key)
    if reading is not None:
        st.session_state["locating"] = False
        st.session_state["location_provider"].report(reading)
        _run(controller.use_current_location())

sync_widgets(controller)
state = controller.state
t = state.translations

if controller.text_direction == "rtl":
    st.markdown(
        "<style>.stApp, .stApp input, .stApp textarea {direction: rtl; text-align: right;}</style>",
        unsafe_allow_html=True,
    )

head, lang_col = st.columns([3, 1])
head.title(t["title"])
lang_col.selectbox(
    "Language",
    options=[lang.code for lang in SUPPORTED_LANGUAGES],
    format_func=lambda code: LANGUAGES_BY_CODE[code].name,
    key="language",
    on_change=_on_language_change,
    label_visibility="collapsed",
)

if state.status.message:
    if state.status.is_error:
        st.error(state.status.message)
    else:
        st.success(state.status.message)

c1, c2 = st.columns(2)
with c1:
    _text("first_name", t)
with c2:
    _text("last_name", t)

c1, c2 = st.columns(2)
with c1:
    _text("email", t)
with c2:
    _text("phone", t)

addr_col, loc_col = st.columns([4, 1])
with addr_col:
    st.text_input(
        t["current_address"],
        key=field_key("current_address"),
        placeholder=t["search_address"],
        on_change=_on_address_change,
    )
with loc_col:
    st.button(t["use_current_location"], on_click=_on_use_location)

if state.location_error:
    st.caption(f":red[{state.location_error}]")

for suggestion in state.suggestions:
    st.button(
        suggestion.description,
        key=f"suggestion_{suggestion.place_id}",
        on_click=controller.select_suggestion,
        args=(suggestion,),
        use_container_width=True,
    )

c1, c2 = st.columns(2)
with c1:
    options = ["", *EMPLOYMENT_OPTION_LABELS]
    st.selectbox(
        t["employment_status"],
        options=options,
        format_func=lambda v: t[EMPLOYMENT_OPTION_LABELS[v]] if v else t["select_status"],
        key=field_key("employment_status"),
        on_change=_on_field_change,
        args=("employment_status",),
    )
with c2:
    _number("monthly_income", t, min_value=0.0, step=100.0)

c1, c2 = st.columns(2)
with c1:
    st.date_input(
        t["desired_move_in_date"],
        value=None,
        key=field_key("desired_move_in_date"),
        on_change=_on_field_change,
        args=("desired_move_in_date",),
    )
with c2:
    _number("number_of_occupants", t, min_value=1, step=1)

c1, c2 = st.columns(2)
with c1:
    _number("credit_score", t, min_value=300, max_value=850, step=1)
with c2:
    st.checkbox(
        t["has_pets"],
        key=field_key("has_pets"),
        on_change=_on_field_change,
        args=("has_pets",),
    )

if state.record.has_pets:
    st.text_area(
        t["pet_details"],
        key=field_key("pet_details"),
        placeholder=t["pet_details_placeholder"],
        on_change=_on_field_change,
        args=("pet_details",),
        height=90,
    )

st.text_area(
    t["additional_notes"],
    key=field_key("additional_notes"),
    placeholder=t["additional_notes_placeholder"],
    on_change=_on_field_change,
    args=("additional_notes",),
    height=120,
)

st.button(
    t["submit"],
    type="primary",
    on_click=_on_submit,
    disabled=state.status.phase == SubmissionPhase.PENDING,
)
