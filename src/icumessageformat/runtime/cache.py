"""Thread-safe LRU cache for parsed patterns.

Maps a pattern string, used verbatim as the key, to its parsed node tuple.
Parsing is the expensive step of formatting, and a parsed pattern is
immutable, so one cached AST can serve any number of concurrent renders.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - Exact LRU eviction via OrderedDict
    - Lock is never held while computing a missing value

Thread Safety:
    All structural operations protected by RLock. Two threads missing the
    same key at the same time may both compute it; the last store wins.

Python 3.13+.
"""

from collections import OrderedDict
from collections.abc import Callable
from threading import RLock

from icumessageformat.constants import DEFAULT_CACHE_SIZE
from icumessageformat.syntax.ast import MessageNodes

__all__ = ["PatternCache"]

# Internal type aliases (prefixed with _ per naming convention)
type _CacheKey = str
type _CacheValue = MessageNodes


class PatternCache:
    """Thread-safe LRU cache for parsed patterns.

    Uses OrderedDict for LRU eviction and RLock for thread safety.
    Returns None on cache miss.

    Attributes:
        maxsize: Maximum number of cache entries
        hits: Number of cache hits (for metrics)
        misses: Number of cache misses (for metrics)
        evictions: Number of entries dropped to stay within maxsize

    Example:
        >>> cache = PatternCache(maxsize=2)
        >>> cache.set("a", ())
        >>> cache.set("b", ())
        >>> cache.get("a")
        ()
        >>> cache.set("c", ())  # evicts "b", the least recently used
        >>> "b" in cache
        False
    """

    __slots__ = ("_cache", "_evictions", "_hits", "_lock", "_maxsize", "_misses")

    def __init__(self, maxsize: int = DEFAULT_CACHE_SIZE) -> None:
        """Initialize pattern cache.

        Args:
            maxsize: Maximum number of entries (default: 1000)

        Raises:
            ValueError: If maxsize is not positive
        """
        if maxsize <= 0:
            msg = "maxsize must be positive"
            raise ValueError(msg)

        self._cache: OrderedDict[_CacheKey, _CacheValue] = OrderedDict()
        self._maxsize = maxsize
        self._lock = RLock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: _CacheKey) -> _CacheValue | None:
        """Get cached AST and mark it most recently used.

        Thread-safe. Returns None on cache miss.
        """
        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
                self._hits += 1
                return self._cache[key]

            self._misses += 1
            return None

    def set(self, key: _CacheKey, value: _CacheValue) -> None:
        """Store AST as most recently used.

        Thread-safe. Evicts the least recently used entry if the cache is full.
        """
        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
            elif len(self._cache) >= self._maxsize:
                self._cache.popitem(last=False)
                self._evictions += 1

            self._cache[key] = value

    def fetch(self, key: _CacheKey, compute: Callable[[], _CacheValue]) -> _CacheValue:
        """Get cached AST, computing and storing it on a miss.

        compute() runs outside the lock. If it raises, nothing is stored and
        the exception propagates.

        Args:
            key: Pattern string
            compute: Zero-argument callable producing the AST

        Returns:
            Cached or freshly computed AST
        """
        cached = self.get(key)
        if cached is not None:
            return cached

        value = compute()
        self.set(key, value)
        return value

    def clear(self) -> None:
        """Clear all cached entries and reset metrics.

        Thread-safe.
        """
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Thread-safe. Returns current metrics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached entries
            - maxsize (int): Maximum cache capacity
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - evictions (int): Number of LRU evictions
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0

            return {
                "size": len(self._cache),
                "maxsize": self._maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
                "hit_rate": round(hit_rate, 2),
            }

    def __len__(self) -> int:
        """Get current cache size.

        Thread-safe.
        """
        with self._lock:
            return len(self._cache)

    def __contains__(self, key: object) -> bool:
        """Check membership without touching recency or metrics.

        Thread-safe.
        """
        with self._lock:
            return key in self._cache

    @property
    def maxsize(self) -> int:
        """Maximum cache size."""
        return self._maxsize

    @property
    def hits(self) -> int:
        """Number of cache hits.

        Thread-safe.
        """
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses.

        Thread-safe.
        """
        with self._lock:
            return self._misses

    @property
    def evictions(self) -> int:
        """Number of entries evicted to stay within maxsize.

        Thread-safe.
        """
        with self._lock:
            return self._evictions
