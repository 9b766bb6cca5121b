"""Cache configuration for the MessageFormat engine.

Provides a single frozen dataclass that carries the pattern cache
parameters into MessageFormat.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from icumessageformat.constants import DEFAULT_CACHE_SIZE

__all__ = ["CacheConfig"]


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """Immutable configuration for parsed-pattern caching.

    Constructing ``CacheConfig()`` with no arguments produces a usable
    configuration. Pass an instance to ``MessageFormat(cache_config=...)``
    to size the engine's own cache.

    Attributes:
        size: Maximum number of cached patterns (default: 1000).

    Example:
        >>> from icumessageformat import MessageFormat
        >>> engine = MessageFormat(cache_config=CacheConfig(size=50))
        >>> engine.cache.maxsize
        50
    """

    size: int = DEFAULT_CACHE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If size is not positive.
        """
        if self.size <= 0:
            msg = "size must be positive"
            raise ValueError(msg)
