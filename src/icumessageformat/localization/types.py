"""Type aliases and lookup results for the localization domain.

Provides semantic type aliases used throughout the localization package,
and the tagged Found | Missing result that every lookup returns instead of
raising for an absent key.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass

__all__ = [
    "Found",
    "LocaleCode",
    "LookupResult",
    "Missing",
    "TranslationData",
    "TranslationKey",
]

type LocaleCode = str
"""BCP-47 or POSIX locale code (e.g., 'en', 'pt-BR', 'de_AT')."""

type TranslationKey = str
"""Dot-separated translation key (e.g., 'cart.items')."""

type TranslationData = Mapping[str, object]
"""Possibly nested mapping of translation keys to values."""


@dataclass(frozen=True, slots=True)
class Found:
    """Lookup succeeded.

    Attributes:
        value: Pattern string, formatted string, or any non-string value
            stored under the key (returned unchanged)
    """

    value: object


@dataclass(frozen=True, slots=True)
class Missing:
    """Lookup found nothing for locale and key."""

    locale: LocaleCode
    key: TranslationKey


type LookupResult = Found | Missing
