"""MessageFormat - main API for pattern formatting.

Ties the parser, the pattern cache and the renderer together: a pattern is
parsed once, cached by its exact text, and rendered against each call's
arguments.

Python 3.13+. External dependency: Babel (CLDR locale data).
"""

import logging
from collections.abc import Mapping

from icumessageformat.constants import DEFAULT_LOCALE
from icumessageformat.runtime.cache import PatternCache
from icumessageformat.runtime.cache_config import CacheConfig
from icumessageformat.runtime.formatter import MessageRenderer
from icumessageformat.runtime.localizer import Localizer
from icumessageformat.runtime.plural_rules import PluralRules
from icumessageformat.syntax.ast import MessageNodes
from icumessageformat.syntax.parser import MessageFormatParser

__all__ = ["MessageFormat"]

logger = logging.getLogger(__name__)

# Pattern prefix length shown in debug logs
_LOG_TRUNCATE_DEBUG: int = 50


class MessageFormat:
    """Formats MessageFormat patterns for a default locale.

    Every collaborator is injectable: tests and applications can give each
    engine its own cache, rule registry, localizer or parser. Nothing is
    shared between engines unless the caller passes the same object.

    Thread Safety:
        format() and parse() are safe for concurrent use. The cache locks
        internally and parsed patterns are immutable. Register plural rules
        before sharing the engine across threads.

    Examples:
        >>> mf = MessageFormat("en")
        >>> mf.format("Hello, {name}!", {"name": "world"})
        'Hello, world!'
        >>> mf.format("{count, plural, one {# item} other {# items}}", count=5)
        '5 items'
    """

    __slots__ = ("_cache", "_locale", "_parser", "_renderer")

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        *,
        cache: PatternCache | None = None,
        cache_config: CacheConfig | None = None,
        plural_rules: PluralRules | None = None,
        localizer: Localizer | None = None,
        parser: MessageFormatParser | None = None,
    ) -> None:
        """Initialize engine.

        Args:
            locale: Locale used when format() is not given one (default: "en")
            cache: Pattern cache to use (default: a new PatternCache)
            cache_config: Size of the new cache; not allowed together with cache
            plural_rules: Category registry (default: empty registry)
            localizer: Number/date/time renderer (default: BabelLocalizer)
            parser: Pattern parser (default: MessageFormatParser())

        Raises:
            ValueError: If both cache and cache_config are given
        """
        if cache is not None and cache_config is not None:
            msg = "Pass either cache or cache_config, not both"
            raise ValueError(msg)

        if cache is None:
            config = cache_config if cache_config is not None else CacheConfig()
            cache = PatternCache(maxsize=config.size)

        self._locale = locale
        self._cache = cache
        self._parser = parser if parser is not None else MessageFormatParser()
        self._renderer = MessageRenderer(plural_rules, localizer)

    @property
    def locale(self) -> str:
        """Default locale of this engine."""
        return self._locale

    @property
    def cache(self) -> PatternCache:
        """Parsed-pattern cache of this engine."""
        return self._cache

    @property
    def plural_rules(self) -> PluralRules:
        """Category registry consulted for plural and selectordinal."""
        return self._renderer.plural_rules

    @property
    def localizer(self) -> Localizer:
        """Localizer used for number, date and time arguments."""
        return self._renderer.localizer

    def parse(self, pattern: str) -> MessageNodes:
        """Parse pattern, consulting the cache first.

        Raises:
            ParseError: On malformed input (nothing is cached)
            ValueError: If pattern exceeds the parser's max_source_size
        """
        return self._cache.fetch(pattern, lambda: self._parse_uncached(pattern))

    def _parse_uncached(self, pattern: str) -> MessageNodes:
        logger.debug("Pattern cache miss, parsing: %s", pattern[:_LOG_TRUNCATE_DEBUG])
        return self._parser.parse(pattern)

    def format(
        self,
        pattern: str,
        arguments: Mapping[str, object] | None = None,
        *,
        locale: str | None = None,
        **kwargs: object,
    ) -> str:
        """Format pattern with arguments.

        Arguments can be passed as a mapping, as keyword arguments, or both;
        keyword arguments win on name clashes.

        Args:
            pattern: MessageFormat pattern
            arguments: Argument values by name
            locale: Locale for this call (default: the engine's locale)
            **kwargs: Further argument values

        Returns:
            Rendered string

        Raises:
            ParseError: Malformed pattern
            MissingArgumentError: A rendered placeholder has no argument
            BranchError: Neither the selected key nor 'other' exists
            ArgumentTypeError: Plural/selectordinal argument is not a number
        """
        values: Mapping[str, object]
        if kwargs:
            values = {**arguments, **kwargs} if arguments else kwargs
        else:
            values = arguments if arguments is not None else {}

        nodes = self.parse(pattern)
        return self._renderer.render(nodes, values, locale if locale is not None else self._locale)

    def clear_cache(self) -> None:
        """Drop every cached pattern and reset cache metrics."""
        self._cache.clear()
