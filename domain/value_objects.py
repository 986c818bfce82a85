from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class Language:
    code: str
    name: str  # shown in its own script in the selector
    rtl: bool = False


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def as_query(self) -> str:
        """Places autocomplete accepts a position as "lat,lng" input text."""
        return f"{self.latitude},{self.longitude}"


@dataclass(frozen=True)
class TranslationMap:
    """
    Label key -> display text, resolved in two tiers.

    `primary` holds the translated strings for the selected language,
    `fallback` the source-language text. A key missing from `primary`, or
    mapped to an empty string there, resolves from `fallback`.
    """

    primary: Mapping[str, str] = field(default_factory=dict)
    fallback: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "primary", MappingProxyType(dict(self.primary)))
        object.__setattr__(self, "fallback", MappingProxyType(dict(self.fallback)))

    def get(self, key: str) -> str:
        return self.primary.get(key) or self.fallback.get(key, key)

    def __getitem__(self, key: str) -> str:
        return self.get(key)

    def keys(self) -> set[str]:
        return set(self.fallback) | set(self.primary)

    def as_dict(self) -> dict[str, str]:
        return {k: self.get(k) for k in self.keys()}
