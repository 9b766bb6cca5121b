"""Tests for the MessageFormat engine and the module-level API."""

import logging
from datetime import date

import pytest

import icumessageformat
from icumessageformat import (
    ArgumentTypeError,
    CacheConfig,
    MessageFormat,
    MessageFormatError,
    ParseError,
    PatternCache,
    PluralRules,
    clear_cache,
    format_message,
    get_default_engine,
    parse_pattern,
)
from icumessageformat.runtime import BabelLocalizer, install_cldr_rules, install_ordinal_rules
from icumessageformat.syntax import ArgumentNode, MessageFormatParser, TextNode


class TestEndToEnd:
    """Pattern in, string out."""

    def test_hello(self, engine: MessageFormat) -> None:
        """Simple argument."""
        assert engine.format("Hello, {name}!", {"name": "world"}) == "Hello, world!"

    @pytest.mark.parametrize(("count", "expected"), [(1, "1 item"), (5, "5 items")])
    def test_plural(self, engine: MessageFormat, count: int, expected: str) -> None:
        """Plural with '#'."""
        pattern = "{count, plural, one {# item} other {# items}}"
        assert engine.format(pattern, {"count": count}) == expected

    @pytest.mark.parametrize(
        ("count", "expected"),
        [(0, "nobody"), (1, "just Alice"), (2, "Alice and 1 other"), (3, "Alice and 2 others")],
    )
    def test_plural_offset(self, engine: MessageFormat, count: int, expected: str) -> None:
        """Offset, exact keys and '#' together."""
        pattern = (
            "{count, plural, offset:1 =0 {nobody} =1 {just {name}} "
            "one {{name} and # other} other {{name} and # others}}"
        )
        assert engine.format(pattern, {"count": count, "name": "Alice"}) == expected

    def test_select_other(self, engine: MessageFormat) -> None:
        """Unknown select value falls to other."""
        pattern = "{gender, select, male {He} female {She} other {They}}"
        assert engine.format(pattern, {"gender": "nonbinary"}) == "They"

    def test_apostrophes(self, engine: MessageFormat) -> None:
        """Doubled apostrophes render as one."""
        assert engine.format("it''s {name}''s", {"name": "Alice"}) == "it's Alice's"

    def test_unknown_type_is_parse_error(self, engine: MessageFormat) -> None:
        """Malformed patterns raise ParseError at the offending keyword."""
        with pytest.raises(ParseError) as exc_info:
            engine.format("{x, unknown}", {})
        assert exc_info.value.position == 4

    def test_ordinal_with_bundled_rule(self, engine: MessageFormat) -> None:
        """selectordinal with the English rule installed."""
        install_ordinal_rules(engine.plural_rules, "en")
        pattern = "You finished {place, selectordinal, one {#st} two {#nd} few {#rd} other {#th}}"
        assert engine.format(pattern, place=3) == "You finished 3rd"
        assert engine.format(pattern, place=12) == "You finished 12th"

    def test_nested_select_and_plural(self, engine: MessageFormat) -> None:
        """Plural nested in select."""
        pattern = (
            "{gender, select, female {She has {n, plural, one {# item} other {# items}}} "
            "other {They have {n, plural, one {# item} other {# items}}}}"
        )
        assert engine.format(pattern, gender="female", n=3) == "She has 3 items"
        assert engine.format(pattern, gender="x", n=1) == "They have 1 item"

    def test_typed_arguments(self, engine: MessageFormat) -> None:
        """Numbers and dates are localized for the call's locale."""
        pattern = "{total, number} on {day, date, short}"
        result = engine.format(pattern, locale="de", total=1234.5, day=date(2026, 1, 15))
        assert result == "1.234,5 on 15.01.26"

    def test_cldr_rules_per_locale(self) -> None:
        """One engine serves several locales with their own rules."""
        rules = PluralRules()
        install_cldr_rules(rules, "ru")
        engine = MessageFormat("en", plural_rules=rules)
        pattern = "{n, plural, one {one} few {few} many {many} other {other}}"
        assert engine.format(pattern, n=5) == "other"
        assert engine.format(pattern, locale="ru", n=5) == "many"

    def test_resolution_errors_share_base(self, engine: MessageFormat) -> None:
        """Every engine error is a MessageFormatError."""
        with pytest.raises(MessageFormatError):
            engine.format("{n, plural, other {#}}", n="three")
        with pytest.raises(ArgumentTypeError):
            engine.format("{n, plural, other {#}}", n="three")


class TestArguments:
    """Mapping and keyword arguments."""

    def test_kwargs_only(self, engine: MessageFormat) -> None:
        """Keyword arguments alone."""
        assert engine.format("{a}-{b}", a=1, b=2) == "1-2"

    def test_kwargs_win_over_mapping(self, engine: MessageFormat) -> None:
        """On a clash the keyword argument wins."""
        assert engine.format("{a}-{b}", {"a": 1, "b": 2}, b=3) == "1-3"

    def test_no_arguments(self, engine: MessageFormat) -> None:
        """Text-only patterns need no arguments."""
        assert engine.format("plain") == "plain"

    def test_mapping_not_mutated(self, engine: MessageFormat) -> None:
        """Merging keyword arguments leaves the caller's mapping alone."""
        arguments = {"a": 1}
        engine.format("{a}{b}", arguments, b=2)
        assert arguments == {"a": 1}


class TestLocale:
    """Engine and per-call locales."""

    def test_default_locale(self) -> None:
        """Default engine locale is en."""
        assert MessageFormat().locale == "en"

    def test_engine_locale_used(self) -> None:
        """The engine's locale applies when the call names none."""
        engine = MessageFormat("de")
        assert engine.format("{n, number}", n=1234.5) == "1.234,5"

    def test_call_locale_overrides(self) -> None:
        """A per-call locale overrides the engine's."""
        engine = MessageFormat("de")
        assert engine.format("{n, number}", locale="en", n=1234.5) == "1,234.5"


class TestCaching:
    """Parsed patterns are cached by exact text."""

    def test_second_format_hits_cache(self, engine: MessageFormat) -> None:
        """The same pattern is parsed once."""
        engine.format("Hello, {name}!", name="a")
        engine.format("Hello, {name}!", name="b")
        assert engine.cache.misses == 1
        assert engine.cache.hits == 1
        assert len(engine.cache) == 1

    def test_parse_returns_cached_ast(self, engine: MessageFormat) -> None:
        """parse() hands back the cached tuple."""
        first = engine.parse("{a} b")
        assert engine.parse("{a} b") is first
        assert first == (ArgumentNode("a"), TextNode(" b"))

    def test_parse_errors_not_cached(self, engine: MessageFormat) -> None:
        """A failed parse leaves nothing in the cache."""
        with pytest.raises(ParseError):
            engine.format("{")
        assert len(engine.cache) == 0

    def test_render_errors_keep_cached_ast(self, engine: MessageFormat) -> None:
        """A rendering failure does not evict the parsed pattern."""
        with pytest.raises(MessageFormatError):
            engine.format("{missing}")
        assert "{missing}" in engine.cache

    def test_clear_cache(self, engine: MessageFormat) -> None:
        """clear_cache() empties the cache and resets its metrics."""
        engine.format("a")
        engine.clear_cache()
        assert len(engine.cache) == 0
        assert engine.cache.misses == 0

    def test_cache_config(self) -> None:
        """cache_config sizes the engine's own cache."""
        engine = MessageFormat(cache_config=CacheConfig(size=2))
        assert engine.cache.maxsize == 2
        for pattern in ("a", "b", "c"):
            engine.format(pattern)
        assert engine.cache.evictions == 1

    def test_shared_cache(self) -> None:
        """Engines given the same cache share parsed patterns."""
        cache = PatternCache()
        first = MessageFormat("en", cache=cache)
        second = MessageFormat("de", cache=cache)
        first.format("{n, number}", n=1)
        second.format("{n, number}", n=1)
        assert cache.hits == 1
        assert cache.misses == 1

    def test_separate_engines_do_not_share(self) -> None:
        """Each engine gets its own cache by default."""
        assert MessageFormat().cache is not MessageFormat().cache

    def test_cache_and_cache_config_conflict(self) -> None:
        """Passing both is ambiguous."""
        with pytest.raises(ValueError, match="either cache or cache_config"):
            MessageFormat(cache=PatternCache(), cache_config=CacheConfig())

    def test_cache_miss_logged(
        self, engine: MessageFormat, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A cache miss is logged at debug with the pattern prefix."""
        with caplog.at_level(logging.DEBUG, logger="icumessageformat"):
            engine.format("Hello, {name}!", name="x")
        assert "Pattern cache miss, parsing: Hello, {name}!" in caplog.text


class TestCollaborators:
    """Injected parser, rules and localizer."""

    def test_injected_parser_limits_apply(self) -> None:
        """A custom parser's limits are enforced through the engine."""
        engine = MessageFormat(parser=MessageFormatParser(max_source_size=3))
        with pytest.raises(ValueError, match="exceeds maximum"):
            engine.format("abcd")

    def test_injected_rules_and_localizer_exposed(self) -> None:
        """Collaborators are reachable through properties."""
        rules = PluralRules()
        localizer = BabelLocalizer()
        engine = MessageFormat(plural_rules=rules, localizer=localizer)
        assert engine.plural_rules is rules
        assert engine.localizer is localizer

    def test_engines_have_independent_rules(self) -> None:
        """Registering on one engine does not affect another."""
        first = MessageFormat()
        second = MessageFormat()
        install_ordinal_rules(first.plural_rules, "en")
        pattern = "{p, selectordinal, one {#st} other {#th}}"
        assert first.format(pattern, p=1) == "1st"
        assert second.format(pattern, p=1) == "1th"


class TestModuleLevelApi:
    """format_message(), clear_cache() and friends."""

    def test_format_message(self) -> None:
        """Module-level formatting uses the default engine."""
        assert format_message("Hello, {name}!", name="world") == "Hello, world!"
        assert format_message("{n, number}", {"n": 1234.5}, locale="de") == "1.234,5"

    def test_default_engine_is_stable(self) -> None:
        """get_default_engine() always returns the same engine."""
        assert get_default_engine() is get_default_engine()

    def test_clear_cache(self) -> None:
        """clear_cache() empties the default engine's cache."""
        format_message("cached {x}", x=1)
        assert "cached {x}" in get_default_engine().cache
        clear_cache()
        assert "cached {x}" not in get_default_engine().cache

    def test_parse_pattern(self) -> None:
        """parse_pattern() parses without touching any cache."""
        before = len(get_default_engine().cache)
        assert parse_pattern("{a}") == (ArgumentNode("a"),)
        assert len(get_default_engine().cache) == before

    def test_version(self) -> None:
        """A version string is always available."""
        assert isinstance(icumessageformat.__version__, str)
        assert icumessageformat.__version__
