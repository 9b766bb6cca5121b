"""MessageFormat translation backend.

Looks up a key in a TranslationStore and, when the stored value is a
string, formats it as a MessageFormat pattern with the call's arguments.
Non-string values (lists, numbers, nested data) are returned unchanged.

Python 3.13+.
"""

from collections.abc import Iterable

from icumessageformat.constants import KEY_SEPARATOR
from icumessageformat.localization.loading import load_translations
from icumessageformat.localization.store import TranslationStore
from icumessageformat.localization.types import (
    Found,
    LocaleCode,
    LookupResult,
    Missing,
    TranslationKey,
)
from icumessageformat.runtime.engine import MessageFormat

__all__ = ["MessageFormatBackend"]


class MessageFormatBackend:
    """Translation backend that formats stored patterns.

    The backend owns an engine (and so a pattern cache) unless one is
    passed in. Register plural/ordinal rules on ``backend.engine.plural_rules``.

    Example:
        >>> store = TranslationStore()
        >>> items = "{count, plural, one {# item} other {# items}}"
        >>> store.store_translations("en", {"items": items})
        >>> backend = MessageFormatBackend(store)
        >>> backend.translate("en", "items", count=5)
        Found(value='5 items')
        >>> backend.translate("en", "nope")
        Missing(locale='en', key='nope')
    """

    __slots__ = ("_engine", "_store")

    def __init__(self, store: TranslationStore, engine: MessageFormat | None = None) -> None:
        self._store = store
        self._engine = engine if engine is not None else MessageFormat()

    @classmethod
    def from_files(
        cls, *glob_patterns: str, engine: MessageFormat | None = None
    ) -> "MessageFormatBackend":
        """Create a backend over a fresh store loaded from bundle files."""
        store = TranslationStore()
        load_translations(store, *glob_patterns)
        return cls(store, engine)

    @property
    def store(self) -> TranslationStore:
        """Underlying translation store."""
        return self._store

    @property
    def engine(self) -> MessageFormat:
        """Engine used to format stored patterns."""
        return self._engine

    @property
    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Locales that have stored translations."""
        return self._store.available_locales

    @property
    def is_initialized(self) -> bool:
        """True once any translations have been stored."""
        return self._store.is_initialized

    def translate(
        self,
        locale: LocaleCode,
        key: TranslationKey,
        *,
        scope: str | Iterable[str] | None = None,
        separator: str = KEY_SEPARATOR,
        **arguments: object,
    ) -> LookupResult:
        """Look up key for locale and format it with arguments.

        Returns:
            Found(formatted string or non-string value), or Missing

        Raises:
            ParseError: The stored pattern is malformed
            MessageFormatResolutionError: Rendering failed (missing argument,
                no matching branch, wrong argument type)
        """
        result = self._store.resolve(locale, key, scope, separator)
        match result:
            case Missing():
                return result
            case Found(value=str() as pattern):
                return Found(self._engine.format(pattern, arguments, locale=locale))
            case _:
                return result
