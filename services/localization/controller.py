from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping

from core.config import settings
from domain.labels import LANGUAGES_BY_CODE, SOURCE_TEXT
from domain.value_objects import TranslationMap
from services.translation.google_translate import translate

logger = logging.getLogger(__name__)

Translator = Callable[[str, str], Awaitable[str]]


class UnsupportedLanguage(ValueError): ...


class LocalizationController:
    """
    Resolves the full label set for a language.

    The source language never touches the network. Any other language gets
    one translate call per label; a label whose call fails keeps its source
    text while the rest still translate.
    """

    def __init__(
        self,
        translator: Translator = translate,
        source_language: str | None = None,
        labels: Mapping[str, str] = SOURCE_TEXT,
        languages: Mapping[str, object] = LANGUAGES_BY_CODE,
    ):
        self.translator = translator
        self.source_language = source_language or settings.SOURCE_LANGUAGE
        self.labels = labels
        self.languages = languages

    def ensure_supported(self, code: str) -> None:
        if code not in self.languages:
            raise UnsupportedLanguage(f"unsupported language: {code!r}")

    async def resolve(self, code: str) -> TranslationMap:
        self.ensure_supported(code)
        if code == self.source_language:
            return TranslationMap(primary=self.labels, fallback=self.labels)

        keys = list(self.labels)
        results = await asyncio.gather(*(self._translate_label(k, code) for k in keys))
        translated = {k: text for k, text in zip(keys, results) if text is not None}
        if len(translated) < len(keys):
            logger.warning(
                "%d/%d labels kept source text for %s", len(keys) - len(translated), len(keys), code
            )
        return TranslationMap(primary=translated, fallback=self.labels)

    async def _translate_label(self, key: str, code: str) -> str | None:
        try:
            return await self.translator(self.labels[key], code)
        except Exception as e:  # noqa: BLE001
            logger.warning("translation of %r to %s failed: %s", key, code, e)
            return None
