"""In-memory translation store.

Holds per-locale translations as flat dictionaries. Nested documents are
flattened on the way in, so {"cart": {"items": "..."}} is stored under
"cart.items".

Python 3.13+.
"""

import logging
from collections.abc import Iterable, Mapping
from threading import RLock

from icumessageformat.constants import KEY_SEPARATOR
from icumessageformat.locale_utils import normalize_locale
from icumessageformat.localization.types import (
    Found,
    LocaleCode,
    LookupResult,
    Missing,
    TranslationData,
    TranslationKey,
)

__all__ = ["TranslationStore", "flatten_translations"]

logger = logging.getLogger(__name__)


def flatten_translations(data: TranslationData, prefix: str = "") -> dict[str, object]:
    """Flatten nested mappings into dot-joined keys.

    Non-mapping values (strings, numbers, lists) are leaves and kept as-is.

    Example:
        >>> flatten_translations({"cart": {"items": "{n} items", "empty": "Empty"}})
        {'cart.items': '{n} items', 'cart.empty': 'Empty'}
    """
    flat: dict[str, object] = {}
    for key, value in data.items():
        full_key = f"{prefix}{KEY_SEPARATOR}{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten_translations(value, full_key))
        else:
            flat[full_key] = value
    return flat


def _join_key(
    key: TranslationKey, scope: str | Iterable[str] | None, separator: str
) -> str:
    """Join scope and key into the stored dot-separated form."""
    parts: list[str] = []
    if isinstance(scope, str):
        parts.append(scope)
    elif scope is not None:
        parts.extend(scope)
    parts.append(key)

    joined = separator.join(part for part in parts if part)
    if separator != KEY_SEPARATOR:
        joined = joined.replace(separator, KEY_SEPARATOR)
    return joined


class TranslationStore:
    """Thread-safe per-locale translation storage.

    Locales are stored under their normalized code, so "en-US" and "en_US"
    are the same locale.

    Example:
        >>> store = TranslationStore()
        >>> store.store_translations("en", {"greeting": {"hello": "Hi {name}"}})
        >>> store.resolve("en", "hello", scope="greeting")
        Found(value='Hi {name}')
        >>> store.resolve("en", "nope")
        Missing(locale='en', key='nope')
    """

    __slots__ = ("_lock", "_translations")

    def __init__(self) -> None:
        self._translations: dict[str, dict[str, object]] = {}
        self._lock = RLock()

    def store_translations(self, locale: LocaleCode, data: TranslationData) -> None:
        """Merge data into the translations of locale.

        Later values replace earlier ones key by key.
        """
        flat = flatten_translations(data)
        with self._lock:
            self._translations.setdefault(normalize_locale(locale), {}).update(flat)
        logger.debug("Stored %d translations for %s", len(flat), locale)

    def resolve(
        self,
        locale: LocaleCode,
        key: TranslationKey,
        scope: str | Iterable[str] | None = None,
        separator: str = KEY_SEPARATOR,
    ) -> LookupResult:
        """Look up the value stored for key in locale.

        Args:
            locale: Locale code
            key: Translation key, may itself contain separators
            scope: Key prefix as a string or sequence of segments
            separator: Segment separator used in key and scope

        Returns:
            Found(value) or Missing(locale, full_key); never raises for an
            absent key
        """
        full_key = _join_key(key, scope, separator)
        with self._lock:
            translations = self._translations.get(normalize_locale(locale))
            if translations is not None and full_key in translations:
                return Found(translations[full_key])
        return Missing(locale, full_key)

    @property
    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Locales that have stored translations, in insertion order."""
        with self._lock:
            return tuple(self._translations)

    @property
    def is_initialized(self) -> bool:
        """True once any translations have been stored."""
        with self._lock:
            return bool(self._translations)
