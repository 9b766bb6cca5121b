"""Tests for PatternCache: LRU behavior, metrics and thread safety."""

import threading
from collections import OrderedDict
from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from icumessageformat.runtime import CacheConfig, PatternCache
from icumessageformat.syntax import ArgumentNode, TextNode, parse


class TestCacheBasics:
    """get, set, eviction."""

    def test_miss_returns_none(self) -> None:
        """A missing key is None and counts as a miss."""
        cache = PatternCache()
        assert cache.get("nope") is None
        assert cache.misses == 1
        assert cache.hits == 0

    def test_set_then_get(self) -> None:
        """A stored AST is returned by identity."""
        cache = PatternCache()
        nodes = (TextNode("hi"),)
        cache.set("hi", nodes)
        assert cache.get("hi") is nodes
        assert cache.hits == 1

    def test_empty_ast_is_a_hit(self) -> None:
        """The empty pattern's () is a cached value, not a miss."""
        cache = PatternCache()
        cache.set("", ())
        assert cache.get("") == ()
        assert cache.hits == 1

    def test_lru_eviction(self) -> None:
        """The least recently used entry is evicted first."""
        cache = PatternCache(maxsize=2)
        cache.set("a", (TextNode("a"),))
        cache.set("b", (TextNode("b"),))
        cache.get("a")
        cache.set("c", (TextNode("c"),))
        assert "a" in cache
        assert "b" not in cache
        assert "c" in cache
        assert cache.evictions == 1

    def test_overwrite_does_not_evict(self) -> None:
        """Replacing an existing key keeps the size."""
        cache = PatternCache(maxsize=1)
        cache.set("a", ())
        cache.set("a", (TextNode("a"),))
        assert len(cache) == 1
        assert cache.evictions == 0
        assert cache.get("a") == (TextNode("a"),)

    def test_contains_does_not_touch_recency(self) -> None:
        """Membership checks neither refresh an entry nor count."""
        cache = PatternCache(maxsize=2)
        cache.set("a", ())
        cache.set("b", ())
        assert "a" in cache
        cache.set("c", ())
        assert "a" not in cache
        assert cache.hits == 0
        assert cache.misses == 0

    def test_keys_are_exact_pattern_text(self) -> None:
        """Patterns that differ only in whitespace are different keys."""
        cache = PatternCache()
        cache.set("{a}", (ArgumentNode("a"),))
        assert cache.get("{ a }") is None

    @pytest.mark.parametrize("maxsize", [0, -1])
    def test_invalid_maxsize(self, maxsize: int) -> None:
        """maxsize must be positive."""
        with pytest.raises(ValueError, match="maxsize must be positive"):
            PatternCache(maxsize=maxsize)

    @given(st.lists(st.sampled_from("abcdefgh"), max_size=60), st.integers(1, 5))
    def test_never_exceeds_maxsize(self, keys: list[str], maxsize: int) -> None:
        """Size stays within maxsize whatever the access sequence."""
        cache = PatternCache(maxsize=maxsize)
        for key in keys:
            cache.set(key, (TextNode(key),))
            assert len(cache) <= maxsize
        if keys:
            assert keys[-1] in cache


class TestFetch:
    """Compute-on-miss."""

    def test_compute_called_once(self) -> None:
        """The second fetch is served from the cache."""
        cache = PatternCache()
        calls: list[str] = []

        def compute() -> tuple[TextNode, ...]:
            calls.append("x")
            return (TextNode("x"),)

        assert cache.fetch("x", compute) == (TextNode("x"),)
        assert cache.fetch("x", compute) == (TextNode("x"),)
        assert calls == ["x"]

    def test_failed_compute_stores_nothing(self) -> None:
        """An exception from compute propagates and leaves no entry."""
        cache = PatternCache()

        def compute() -> tuple[TextNode, ...]:
            msg = "boom"
            raise RuntimeError(msg)

        with pytest.raises(RuntimeError, match="boom"):
            cache.fetch("x", compute)
        assert "x" not in cache
        assert len(cache) == 0


class TestMetrics:
    """Statistics and clear()."""

    def test_get_stats(self) -> None:
        """Stats report size, capacity, counters and hit rate."""
        cache = PatternCache(maxsize=10)
        cache.set("a", ())
        cache.get("a")
        cache.get("a")
        cache.get("a")
        cache.get("b")
        assert cache.get_stats() == {
            "size": 1,
            "maxsize": 10,
            "hits": 3,
            "misses": 1,
            "evictions": 0,
            "hit_rate": 75.0,
        }

    def test_hit_rate_without_lookups(self) -> None:
        """No lookups yet means a 0.0 hit rate."""
        assert PatternCache().get_stats()["hit_rate"] == 0.0

    def test_clear_resets_everything(self) -> None:
        """clear() drops entries and metrics."""
        cache = PatternCache(maxsize=1)
        cache.set("a", ())
        cache.set("b", ())
        cache.get("b")
        cache.get("zzz")
        cache.clear()
        stats = cache.get_stats()
        assert stats["size"] == 0
        assert stats["hits"] == stats["misses"] == stats["evictions"] == 0


class TestCacheConfig:
    """CacheConfig validation."""

    def test_default_size(self) -> None:
        """Default size matches the cache default."""
        assert CacheConfig().size == PatternCache().maxsize == 1000

    def test_invalid_size(self) -> None:
        """Non-positive sizes are rejected at construction."""
        with pytest.raises(ValueError, match="size must be positive"):
            CacheConfig(size=0)


class TestConcurrency:
    """Thread safety under concurrent access."""

    def test_concurrent_fetch_and_set(self) -> None:
        """Concurrent fetches of overlapping patterns stay consistent."""
        cache = PatternCache(maxsize=8)
        patterns = [f"{{a{i}}} text {i}" for i in range(20)]

        def worker(index: int) -> bool:
            pattern = patterns[index % len(patterns)]
            nodes = cache.fetch(pattern, lambda: parse(pattern))
            return nodes == parse(pattern)

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(worker, range(400)))

        assert all(results)
        assert len(cache) <= 8
        stats = cache.get_stats()
        assert stats["hits"] + stats["misses"] == 400

    def test_concurrent_clear(self) -> None:
        """clear() racing with set() never corrupts the cache."""
        cache = PatternCache(maxsize=4)

        def writer(index: int) -> None:
            cache.set(str(index % 10), ())
            if index % 7 == 0:
                cache.clear()

        with ThreadPoolExecutor(max_workers=4) as executor:
            list(executor.map(writer, range(200)))

        assert len(cache) <= 4

    def test_compute_runs_without_holding_lock(self) -> None:
        """Other threads use the cache while a fetch is still computing."""
        cache = PatternCache()
        entered = threading.Event()
        release = threading.Event()
        slow_value = (TextNode("slow"),)

        def slow_compute() -> tuple[TextNode, ...]:
            entered.set()
            assert release.wait(timeout=5)
            return slow_value

        def use_cache() -> object:
            cache.set("other", ())
            return cache.get("other")

        with ThreadPoolExecutor(max_workers=2) as executor:
            slow = executor.submit(cache.fetch, "slow", slow_compute)
            try:
                assert entered.wait(timeout=5)
                assert executor.submit(use_cache).result(timeout=5) == ()
            finally:
                release.set()
            assert slow.result(timeout=5) == slow_value

        assert cache.get("slow") == slow_value

    def test_cold_fetch_race_last_store_wins(self) -> None:
        """Racing fetches of one key both compute; the later store is kept."""
        cache = PatternCache()
        both_computing = threading.Barrier(2, timeout=5)
        first_stored = threading.Event()
        first = (TextNode("first"),)
        second = (TextNode("second"),)
        calls: list[str] = []

        def compute_first() -> tuple[TextNode, ...]:
            calls.append("first")
            both_computing.wait()
            return first

        def compute_second() -> tuple[TextNode, ...]:
            calls.append("second")
            both_computing.wait()
            assert first_stored.wait(timeout=5)
            return second

        def fetch_first() -> object:
            result = cache.fetch("key", compute_first)
            first_stored.set()
            return result

        with ThreadPoolExecutor(max_workers=2) as executor:
            a = executor.submit(fetch_first)
            b = executor.submit(cache.fetch, "key", compute_second)
            assert a.result(timeout=10) == first
            assert b.result(timeout=10) == second

        assert sorted(calls) == ["first", "second"]
        assert cache.misses == 2
        assert cache.get("key") == second
        assert len(cache) == 1


_KEYS = "abcdefghij"
_operations = st.lists(st.tuples(st.sampled_from(["get", "set"]), st.sampled_from(_KEYS)))


@pytest.mark.fuzz
class TestCacheModel:
    """PatternCache against a reference LRU built on OrderedDict."""

    @given(_operations, st.integers(min_value=1, max_value=6))
    @settings(max_examples=1000)
    def test_matches_reference_lru(self, operations: list[tuple[str, str]], maxsize: int) -> None:
        """Membership, hits and evictions agree with the model after every step."""
        cache = PatternCache(maxsize=maxsize)
        model: OrderedDict[str, tuple[TextNode, ...]] = OrderedDict()
        hits = evictions = 0

        for op, key in operations:
            value = (TextNode(key),)
            if op == "get":
                expected = model.get(key)
                if expected is not None:
                    model.move_to_end(key)
                    hits += 1
                assert cache.get(key) == expected
            else:
                if key in model:
                    model.move_to_end(key)
                elif len(model) >= maxsize:
                    model.popitem(last=False)
                    evictions += 1
                model[key] = value
                cache.set(key, value)

            assert {k for k in _KEYS if k in cache} == set(model)

        stats = cache.get_stats()
        assert stats["hits"] == hits
        assert stats["evictions"] == evictions
