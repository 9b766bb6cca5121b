"""Fallback chain over several translation backends.

Asks each backend in turn and returns the first Found. A Missing result
moves on to the next backend; errors raised by a backend propagate.

Python 3.13+.
"""

from collections.abc import Iterable
from typing import Protocol

from icumessageformat.constants import KEY_SEPARATOR
from icumessageformat.localization.types import (
    Found,
    LocaleCode,
    LookupResult,
    Missing,
    TranslationKey,
)

__all__ = ["FallbackChain", "Translator"]


class Translator(Protocol):
    """Anything that can translate a key: a backend or another chain."""

    def translate(
        self,
        locale: LocaleCode,
        key: TranslationKey,
        *,
        scope: str | Iterable[str] | None = None,
        separator: str = KEY_SEPARATOR,
        **arguments: object,
    ) -> LookupResult:
        """Return Found or Missing for key in locale."""
        ...


class FallbackChain:
    """First-found-wins chain of translators.

    Example:
        >>> chain = FallbackChain(app_backend, defaults_backend)
        >>> chain.translate("en", "greeting", name="Alice")
        Found(value='Hello Alice!')
    """

    __slots__ = ("_backends",)

    def __init__(self, *backends: Translator) -> None:
        if not backends:
            msg = "FallbackChain needs at least one backend"
            raise ValueError(msg)
        self._backends: tuple[Translator, ...] = backends

    @property
    def backends(self) -> tuple[Translator, ...]:
        """Backends in lookup order."""
        return self._backends

    def translate(
        self,
        locale: LocaleCode,
        key: TranslationKey,
        *,
        scope: str | Iterable[str] | None = None,
        separator: str = KEY_SEPARATOR,
        **arguments: object,
    ) -> LookupResult:
        """Return the first Found from the backends, else the last Missing."""
        result: LookupResult = Missing(locale, key)
        for backend in self._backends:
            result = backend.translate(
                locale, key, scope=scope, separator=separator, **arguments
            )
            if isinstance(result, Found):
                return result
        return result
