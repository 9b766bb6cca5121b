"""Tests for the plural/ordinal rule registry and bundled rules."""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from icumessageformat.enums import PluralCategory
from icumessageformat.runtime import (
    ORDINAL_RULES,
    PluralRules,
    default_cardinal,
    default_ordinal,
    english_ordinal,
    install_all_ordinal_rules,
    install_cldr_rules,
    install_ordinal_rules,
)


class TestDefaultRules:
    """Built-in fallbacks."""

    @given(st.integers(min_value=-10_000, max_value=10_000))
    def test_default_cardinal_is_one_only_for_one(self, n: int) -> None:
        """one iff n == 1."""
        expected = PluralCategory.ONE if n == 1 else PluralCategory.OTHER
        assert default_cardinal(n) == expected

    def test_default_cardinal_float(self) -> None:
        """1.0 is one, 1.5 is other."""
        assert default_cardinal(1.0) == "one"
        assert default_cardinal(1.5) == "other"

    @given(st.integers())
    def test_default_ordinal_is_always_other(self, n: int) -> None:
        """No ordinal data means other."""
        assert default_ordinal(n) == "other"


class TestEnglishOrdinal:
    """English ordinal categories."""

    @pytest.mark.parametrize(
        ("n", "category"),
        [
            (1, "one"),
            (2, "two"),
            (3, "few"),
            (4, "other"),
            (11, "other"),
            (12, "other"),
            (13, "other"),
            (21, "one"),
            (102, "two"),
            (111, "other"),
            (0, "other"),
        ],
    )
    def test_categories(self, n: int, category: str) -> None:
        """Teens take th; other endings take st/nd/rd."""
        assert english_ordinal(n) == category

    def test_bundled(self) -> None:
        """English is the bundled ordinal rule."""
        assert ORDINAL_RULES["en"] is english_ordinal


class TestRegistry:
    """Registration and lookup."""

    def test_empty_registry_uses_defaults(self, plural_rules: PluralRules) -> None:
        """Nothing registered: defaults apply and lookups return None."""
        assert plural_rules.cardinal_rule("en") is None
        assert plural_rules.ordinal_rule("en") is None
        assert plural_rules.select_cardinal(1, "en") == "one"
        assert plural_rules.select_ordinal(1, "en") == "other"

    def test_language_fallback(self, plural_rules: PluralRules) -> None:
        """A rule for the language serves its regional locales."""
        plural_rules.register_ordinal("en", english_ordinal)
        assert plural_rules.ordinal_rule("en-GB") is english_ordinal
        assert plural_rules.select_ordinal(2, "en_US") == "two"

    def test_exact_locale_beats_language(self, plural_rules: PluralRules) -> None:
        """A regional rule takes precedence over its language's rule."""
        plural_rules.register_cardinal("pt", lambda n: "one")
        plural_rules.register_cardinal("pt-PT", lambda n: "many")
        assert plural_rules.select_cardinal(5, "pt_PT") == "many"
        assert plural_rules.select_cardinal(5, "pt-BR") == "one"

    def test_bcp47_and_posix_are_same_key(self, plural_rules: PluralRules) -> None:
        """en-US and en_US name the same locale."""
        plural_rules.register_cardinal("en-US", lambda n: "few")
        assert plural_rules.select_cardinal(3, "en_US") == "few"

    def test_register_replaces(self, plural_rules: PluralRules) -> None:
        """Registering again replaces the previous rule."""
        plural_rules.register_cardinal("xx", lambda n: "one")
        plural_rules.register_cardinal("xx", lambda n: "two")
        assert plural_rules.select_cardinal(0, "xx") == "two"

    def test_rule_result_coerced_to_str(self, plural_rules: PluralRules) -> None:
        """Rules may return StrEnum members; selection yields plain strings."""
        plural_rules.register_cardinal("xx", lambda n: PluralCategory.FEW)
        result = plural_rules.select_cardinal(0, "xx")
        assert result == "few"
        assert type(result) is str

    def test_clear(self, plural_rules: PluralRules) -> None:
        """clear() drops every rule."""
        plural_rules.register_cardinal("en", lambda n: "few")
        plural_rules.register_ordinal("en", english_ordinal)
        plural_rules.clear()
        assert plural_rules.cardinal_rule("en") is None
        assert plural_rules.ordinal_rule("en") is None


class TestInstallers:
    """Bundled and CLDR rule installation."""

    def test_install_ordinal_rules(self, plural_rules: PluralRules) -> None:
        """Bundled rule is installed by language."""
        assert install_ordinal_rules(plural_rules, "en-US") is True
        assert plural_rules.select_ordinal(3, "en-US") == "few"

    def test_install_ordinal_rules_unknown(
        self, plural_rules: PluralRules, caplog: pytest.LogCaptureFixture
    ) -> None:
        """No bundled rule: False and a warning."""
        with caplog.at_level(logging.WARNING):
            assert install_ordinal_rules(plural_rules, "fr") is False
        assert "No bundled ordinal rule for locale fr" in caplog.text
        assert plural_rules.ordinal_rule("fr") is None

    def test_install_all_ordinal_rules(self, plural_rules: PluralRules) -> None:
        """Every bundled language gets its rule."""
        install_all_ordinal_rules(plural_rules)
        for language, rule in ORDINAL_RULES.items():
            assert plural_rules.ordinal_rule(language) is rule

    def test_install_cldr_rules_russian(self, plural_rules: PluralRules) -> None:
        """CLDR data gives Russian its one/few/many cardinals."""
        assert install_cldr_rules(plural_rules, "ru") is True
        assert plural_rules.select_cardinal(1, "ru") == "one"
        assert plural_rules.select_cardinal(3, "ru") == "few"
        assert plural_rules.select_cardinal(5, "ru") == "many"
        assert plural_rules.select_cardinal(21, "ru") == "one"

    def test_install_cldr_rules_english_ordinals(self, plural_rules: PluralRules) -> None:
        """CLDR English ordinals agree with the bundled rule."""
        install_cldr_rules(plural_rules, "en")
        for n in (1, 2, 3, 4, 11, 12, 13, 21, 22, 23, 101):
            assert plural_rules.select_ordinal(n, "en") == english_ordinal(n)

    def test_install_cldr_rules_unknown_locale(
        self, plural_rules: PluralRules, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Unknown locale: False, a warning, and nothing registered."""
        with caplog.at_level(logging.WARNING):
            assert install_cldr_rules(plural_rules, "xx") is False
        assert "xx" in caplog.text
        assert plural_rules.cardinal_rule("xx") is None
