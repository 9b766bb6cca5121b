"""Enumerations for icumessageformat type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a PluralCategory can be used
directly as a branch key lookup.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """CLDR plural category tag.

    StrEnum provides automatic string conversion: str(PluralCategory.ONE) == "one"
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


class LocalizeKind(StrEnum):
    """Kind of locale-aware rendering requested from a Localizer."""

    NUMBER = "number"
    """Typed argument: { count, number }"""

    DATE = "date"
    """Typed argument: { due, date, short }"""

    TIME = "time"
    """Typed argument: { due, time, short }"""


class ArgumentKind(StrEnum):
    """How an argument is consumed by a pattern.

    StrEnum provides automatic string conversion: str(ArgumentKind.PLURAL) == "plural"
    """

    PLAIN = "plain"
    """Bare argument: { name }"""

    NUMBER = "number"
    """Number argument: { count, number }"""

    DATE = "date"
    """Date argument: { due, date }"""

    TIME = "time"
    """Time argument: { due, time }"""

    PLURAL = "plural"
    """Plural selector: { count, plural, ... }"""

    SELECT = "select"
    """Select selector: { gender, select, ... }"""

    SELECTORDINAL = "selectordinal"
    """Ordinal selector: { place, selectordinal, ... }"""


__all__ = [
    "ArgumentKind",
    "LocalizeKind",
    "PluralCategory",
]
