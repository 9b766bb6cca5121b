"""icumessageformat - ICU MessageFormat patterns for Python.

Parses ICU MessageFormat patterns (arguments, number/date/time formats,
plural, select and selectordinal with nesting, offsets and exact matches,
apostrophe quoting) into an immutable AST, caches parsed patterns, and
renders them against caller arguments with locale-aware plural rules and
Babel-backed number/date/time formatting.

Public API:
    format_message - Format a pattern with the default engine
    clear_cache - Drop the default engine's parsed patterns
    get_default_engine - The default MessageFormat instance
    MessageFormat - Constructible engine with injectable cache, rules and localizer
    parse_pattern - Parse a pattern to AST (no caching)
    PluralRules - Per-locale plural/ordinal rule registry

Exceptions:
    MessageFormatError - Base exception class
    ParseError - Pattern syntax errors
    MessageFormatResolutionError - Runtime rendering errors
    MissingArgumentError, BranchError, ArgumentTypeError - Resolution subtypes
    LocalizationDataError - No locale data for a number/date/time

Submodules:
    icumessageformat.syntax - Parser, AST node types and visitor
    icumessageformat.runtime - Cache, plural rules, localizer, renderer, engine
    icumessageformat.localization - Translation store, backends, YAML/JSON loading
    icumessageformat.introspection - Which arguments a pattern uses
    icumessageformat.diagnostics - Error types, codes and formatting
"""

from collections.abc import Mapping
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    ArgumentTypeError,
    BranchError,
    LocalizationDataError,
    MessageFormatError,
    MessageFormatResolutionError,
    MissingArgumentError,
    ParseError,
)
from .runtime import CacheConfig, MessageFormat, PatternCache, PluralRules
from .syntax import parse as parse_pattern

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("icumessageformat")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Composition root: the one engine shared by the module-level helpers
_default_engine = MessageFormat()


def get_default_engine() -> MessageFormat:
    """The engine behind format_message() and clear_cache().

    Register plural/ordinal rules for module-level formatting here:

        >>> from icumessageformat.runtime import install_ordinal_rules
        >>> install_ordinal_rules(get_default_engine().plural_rules, "en")
        True
    """
    return _default_engine


def format_message(
    pattern: str,
    arguments: Mapping[str, object] | None = None,
    *,
    locale: str | None = None,
    **kwargs: object,
) -> str:
    """Format a pattern with the default engine.

    Example:
        >>> format_message("Hello, {name}!", name="world")
        'Hello, world!'
        >>> format_message("{gender, select, male {He} female {She} other {They}}",
        ...                {"gender": "nonbinary"})
        'They'
    """
    return _default_engine.format(pattern, arguments, locale=locale, **kwargs)


def clear_cache() -> None:
    """Drop every pattern cached by the default engine."""
    _default_engine.clear_cache()


__all__ = [
    "ArgumentTypeError",
    "BranchError",
    "CacheConfig",
    "LocalizationDataError",
    "MessageFormat",
    "MessageFormatError",
    "MessageFormatResolutionError",
    "MissingArgumentError",
    "ParseError",
    "PatternCache",
    "PluralRules",
    "__version__",
    "clear_cache",
    "format_message",
    "get_default_engine",
    "parse_pattern",
]
