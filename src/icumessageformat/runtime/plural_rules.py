"""Plural and ordinal category selection.

Provides the PluralRules registry that the renderer consults to turn a
number into a category tag ("zero", "one", "two", "few", "many", "other")
for plural and selectordinal arguments.

Rules are plain callables registered per locale. Lookup yields either the
registered rule or None, and the select_* methods fall back to the
built-in defaults when no rule is registered:
- cardinal: "one" iff the number equals 1, else "other"
- ordinal: always "other"

Rules come from three places:
- callers, via register_cardinal()/register_ordinal()
- the bundled ORDINAL_RULES, via install_ordinal_rules()
- Babel's CLDR data, via install_cldr_rules()

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

import logging
from collections.abc import Callable, Mapping
from decimal import Decimal
from threading import RLock
from types import MappingProxyType

from babel.core import UnknownLocaleError

from icumessageformat.enums import PluralCategory
from icumessageformat.locale_utils import get_babel_locale, language_of, normalize_locale

__all__ = [
    "ORDINAL_RULES",
    "PluralRule",
    "PluralRules",
    "default_cardinal",
    "default_ordinal",
    "english_ordinal",
    "install_all_ordinal_rules",
    "install_cldr_rules",
    "install_ordinal_rules",
]

logger = logging.getLogger(__name__)

type Number = int | float | Decimal

# A rule maps a number to its category tag
type PluralRule = Callable[[Number], str]


def default_cardinal(n: Number) -> str:
    """Cardinal category when no rule is registered.

    Examples:
        >>> default_cardinal(1)
        'one'
        >>> default_cardinal(0)
        'other'
    """
    return PluralCategory.ONE if n == 1 else PluralCategory.OTHER


def default_ordinal(n: Number) -> str:  # noqa: ARG001
    """Ordinal category when no rule is registered: always "other"."""
    return PluralCategory.OTHER


def english_ordinal(n: Number) -> str:
    """English ordinal rule: 1st, 2nd, 3rd, 4th, 11th, 12th, 13th, 21st.

    Examples:
        >>> english_ordinal(1), english_ordinal(2), english_ordinal(3)
        ('one', 'two', 'few')
        >>> english_ordinal(11), english_ordinal(22), english_ordinal(104)
        ('other', 'two', 'other')
    """
    mod10 = n % 10
    mod100 = n % 100
    if mod10 == 1 and mod100 != 11:
        return PluralCategory.ONE
    if mod10 == 2 and mod100 != 12:
        return PluralCategory.TWO
    if mod10 == 3 and mod100 != 13:
        return PluralCategory.FEW
    return PluralCategory.OTHER


# Bundled ordinal rules keyed by language
ORDINAL_RULES: Mapping[str, PluralRule] = MappingProxyType({"en": english_ordinal})


class PluralRules:
    """Per-locale registry of cardinal and ordinal rules.

    Rules are stored under the normalized locale code ("en-US" → "en_US").
    Lookup tries the exact locale first, then its language, so a rule
    registered for "en" also serves "en_GB".

    Thread-safe: registration is guarded by a lock; lookups read a dict.

    Example:
        >>> rules = PluralRules()
        >>> rules.select_ordinal(2, "en")
        'other'
        >>> rules.register_ordinal("en", english_ordinal)
        >>> rules.select_ordinal(2, "en-US")
        'two'
    """

    __slots__ = ("_cardinal", "_lock", "_ordinal")

    def __init__(self) -> None:
        self._cardinal: dict[str, PluralRule] = {}
        self._ordinal: dict[str, PluralRule] = {}
        self._lock = RLock()

    def register_cardinal(self, locale: str, rule: PluralRule) -> None:
        """Register the cardinal rule for locale, replacing any previous one."""
        with self._lock:
            self._cardinal[normalize_locale(locale)] = rule
        logger.debug("Registered cardinal rule for %s", locale)

    def register_ordinal(self, locale: str, rule: PluralRule) -> None:
        """Register the ordinal rule for locale, replacing any previous one."""
        with self._lock:
            self._ordinal[normalize_locale(locale)] = rule
        logger.debug("Registered ordinal rule for %s", locale)

    def cardinal_rule(self, locale: str) -> PluralRule | None:
        """Registered cardinal rule for locale, or None."""
        return self._lookup(self._cardinal, locale)

    def ordinal_rule(self, locale: str) -> PluralRule | None:
        """Registered ordinal rule for locale, or None."""
        return self._lookup(self._ordinal, locale)

    def select_cardinal(self, n: Number, locale: str) -> str:
        """Cardinal category of n in locale.

        Args:
            n: Number to categorize (already offset-adjusted)
            locale: Locale code

        Returns:
            Category tag from the registered rule, or the default rule
        """
        rule = self.cardinal_rule(locale)
        if rule is None:
            return default_cardinal(n)
        return str(rule(n))

    def select_ordinal(self, n: Number, locale: str) -> str:
        """Ordinal category of n in locale ("other" when no rule is registered)."""
        rule = self.ordinal_rule(locale)
        if rule is None:
            return default_ordinal(n)
        return str(rule(n))

    def clear(self) -> None:
        """Remove every registered rule."""
        with self._lock:
            self._cardinal.clear()
            self._ordinal.clear()

    @staticmethod
    def _lookup(table: dict[str, PluralRule], locale: str) -> PluralRule | None:
        rule = table.get(normalize_locale(locale))
        if rule is None:
            rule = table.get(language_of(locale))
        return rule


def install_ordinal_rules(rules: PluralRules, locale: str) -> bool:
    """Register the bundled ordinal rule for locale's language.

    Args:
        rules: Registry to install into
        locale: Locale code; only its language selects the bundled rule

    Returns:
        True if a bundled rule exists and was installed, False otherwise
    """
    rule = ORDINAL_RULES.get(language_of(locale))
    if rule is None:
        logger.warning("No bundled ordinal rule for locale %s", locale)
        return False
    rules.register_ordinal(locale, rule)
    return True


def install_all_ordinal_rules(rules: PluralRules) -> None:
    """Register every bundled ordinal rule."""
    for language in ORDINAL_RULES:
        install_ordinal_rules(rules, language)


def install_cldr_rules(rules: PluralRules, locale: str) -> bool:
    """Register Babel's CLDR cardinal and ordinal rules for locale.

    Examples:
        >>> rules = PluralRules()
        >>> install_cldr_rules(rules, "ru")
        True
        >>> rules.select_cardinal(5, "ru")
        'many'

    Returns:
        True if Babel knows the locale, False otherwise

    Performance:
        Uses cached locale parsing via get_babel_locale() to avoid
        repeated Locale.parse() overhead.
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        logger.warning("Babel has no CLDR data for locale %s", locale)
        return False

    rules.register_cardinal(locale, locale_obj.plural_form)
    rules.register_ordinal(locale, locale_obj.ordinal_form)
    return True
