from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from core.config import settings
from domain.labels import get_language
from domain.models import (
    AddressSuggestion,
    FormRecord,
    FormState,
    StatusRecord,
    SubmissionPhase,
    invalid_fields,
)
from services.address.assistant import AddressAssistant, LocationLookupError
from services.address.dispatcher import QueryDispatcher
from services.localization.controller import LocalizationController
from services.submission.client import GENERIC_FAILURE, SubmissionError, submit_application

logger = logging.getLogger(__name__)

Submitter = Callable[[FormRecord], Awaitable[str]]


class FormController:
    """
    Single owner of the page state.

    Every operation swaps `state` for a new FormState snapshot and returns it.
    Async operations apply their result to whatever snapshot is current when
    the response lands, so edits made while a request was in flight survive.
    """

    def __init__(
        self,
        localization: LocalizationController | None = None,
        address: AddressAssistant | None = None,
        submitter: Submitter = submit_application,
        source_language: str | None = None,
    ):
        self.source_language = source_language or settings.SOURCE_LANGUAGE
        self.localization = localization or LocalizationController(
            source_language=self.source_language
        )
        self.address = address or AddressAssistant()
        self.submitter = submitter
        self._languages = QueryDispatcher()
        self.state = FormState(language=self.source_language)

    @property
    def text_direction(self) -> str:
        lang = get_language(self.state.language)
        return "rtl" if lang is not None and lang.rtl else "ltr"

    def update_field(self, name: str, value: Any) -> FormState:
        self.state = self.state.with_field(name, value)
        return self.state

    async def change_language(self, code: str) -> FormState:
        self.localization.ensure_supported(code)
        self.state = self.state.with_language(code)
        translations = await self._languages.dispatch(lambda: self.localization.resolve(code))
        if translations is not None:
            self.state = self.state.with_translations(translations)
        return self.state

    async def search_address(self, text: str) -> FormState:
        self.state = self.state.with_address(text)
        suggestions = await self.address.suggest(text)
        if suggestions is not None:
            self.state = self.state.with_suggestions(suggestions)
        return self.state

    def select_suggestion(self, suggestion: AddressSuggestion) -> FormState:
        self.state = self.state.with_address(
            self.address.select(suggestion), clear_suggestions=True
        )
        return self.state

    async def use_current_location(self) -> FormState:
        try:
            candidate = await self.address.locate()
        except LocationLookupError as e:
            self.state = self.state.with_location_error(e.message)
            return self.state
        if candidate is None:
            logger.info("no address candidates for the current location")
            return self.state
        self.state = self.state.with_address(
            candidate.description, clear_suggestions=True
        ).with_location_error("")
        return self.state

    async def submit(self) -> FormState:
        bad = invalid_fields(self.state.record)
        if bad:
            t = self.state.translations
            names = ", ".join(t.get(name) for name in bad)
            self.state = self.state.with_status(
                StatusRecord(f"{t['please_check']}: {names}", True, SubmissionPhase.ERROR)
            )
            return self.state

        self.state = self.state.with_status(StatusRecord(phase=SubmissionPhase.PENDING))
        try:
            message = await self.submitter(self.state.record)
        except SubmissionError as e:
            self.state = self.state.with_status(
                StatusRecord(e.message, True, SubmissionPhase.ERROR)
            )
            return self.state
        except Exception:  # noqa: BLE001
            logger.exception("unexpected failure while submitting the application")
            self.state = self.state.with_status(
                StatusRecord(GENERIC_FAILURE, True, SubmissionPhase.ERROR)
            )
            return self.state

        self.state = self.state.with_status(
            StatusRecord(message, False, SubmissionPhase.SUCCESS)
        ).reset_record()
        return self.state
