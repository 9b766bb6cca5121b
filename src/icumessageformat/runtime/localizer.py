"""Locale-aware rendering of number, date and time arguments.

The renderer does not format numbers or dates itself. It hands the value to
a Localizer, so applications can plug in their own formatting data. The
default BabelLocalizer uses Babel's CLDR data.

Error contract:
    A Localizer raises LocalizationDataError when it has no formatting
    data for the locale/kind/style combination. The renderer recovers from
    that error for numbers (falling back to str(value)) and lets it
    propagate for dates and times.

Python 3.13+. Depends on Babel for CLDR data.
"""

from datetime import date, datetime, time
from decimal import InvalidOperation
from typing import Protocol

from babel import dates as babel_dates
from babel import numbers as babel_numbers
from babel.core import Locale, UnknownLocaleError

from icumessageformat.diagnostics import ErrorTemplate, LocalizationDataError
from icumessageformat.enums import LocalizeKind
from icumessageformat.locale_utils import get_babel_locale

__all__ = ["BabelLocalizer", "Localizer"]

# Number styles understood by BabelLocalizer, mapped to CLDR patterns.
# No style means the locale's default decimal format.
_NUMBER_PATTERNS: dict[str, str] = {
    "integer": "#,##0",
}

# Date/time styles understood by BabelLocalizer (CLDR format lengths)
_DATETIME_STYLES: frozenset[str] = frozenset({"short", "medium", "long", "full"})

_DEFAULT_DATETIME_STYLE = "medium"


class Localizer(Protocol):
    """Renders a number, date or time argument for a locale."""

    def localize(
        self,
        value: object,
        locale: str,
        kind: LocalizeKind,
        style: str | None = None,
    ) -> str:
        """Render value.

        Raises:
            LocalizationDataError: No formatting data for locale/kind/style
        """
        ...


class BabelLocalizer:
    """Localizer backed by Babel's CLDR data.

    Numbers:
        No style → locale decimal format; "integer" → grouped, no fraction
        digits. Values Babel cannot format as numbers raise
        LocalizationDataError.

    Dates and times:
        Styles short, medium, long, full (default medium). Accepts date,
        datetime and time objects, or ISO 8601 strings which are converted
        via datetime.fromisoformat().

    Examples:
        >>> localizer = BabelLocalizer()
        >>> localizer.localize(1234.5, "en", LocalizeKind.NUMBER)
        '1,234.5'
        >>> localizer.localize(1234.5, "de", LocalizeKind.NUMBER)
        '1.234,5'
        >>> localizer.localize(date(2026, 1, 15), "de", LocalizeKind.DATE, "short")
        '15.01.26'
    """

    __slots__ = ()

    def localize(
        self,
        value: object,
        locale: str,
        kind: LocalizeKind,
        style: str | None = None,
    ) -> str:
        """Render value for locale.

        Raises:
            LocalizationDataError: Unknown locale, unknown style, or a number
                value Babel cannot format
            ValueError: Date/time string that is not ISO 8601
        """
        match kind:
            case LocalizeKind.NUMBER:
                return self._format_number(value, locale, style)
            case LocalizeKind.DATE | LocalizeKind.TIME:
                return self._format_datetime(value, locale, kind, style)

    @staticmethod
    def _no_data(
        kind: LocalizeKind, locale: str, style: str | None, reason: str
    ) -> LocalizationDataError:
        diagnostic = ErrorTemplate.localization_data_missing(kind, locale, style, reason)
        return LocalizationDataError(diagnostic, kind=kind, locale_code=locale, style=style)

    def _babel_locale(self, locale: str, kind: LocalizeKind, style: str | None) -> Locale:
        try:
            return get_babel_locale(locale)
        except (UnknownLocaleError, ValueError) as e:
            raise self._no_data(kind, locale, style, "unknown locale") from e

    def _format_number(self, value: object, locale: str, style: str | None) -> str:
        kind = LocalizeKind.NUMBER
        if style is not None and style not in _NUMBER_PATTERNS:
            raise self._no_data(kind, locale, style, "unsupported style")

        babel_locale = self._babel_locale(locale, kind, style)
        pattern = _NUMBER_PATTERNS.get(style) if style is not None else None

        try:
            return str(babel_numbers.format_decimal(value, format=pattern, locale=babel_locale))
        except (ValueError, TypeError, InvalidOperation, AttributeError) as e:
            raise self._no_data(kind, locale, style, f"cannot format {value!r}") from e

    def _format_datetime(
        self, value: object, locale: str, kind: LocalizeKind, style: str | None
    ) -> str:
        format_style = style if style is not None else _DEFAULT_DATETIME_STYLE
        if format_style not in _DATETIME_STYLES:
            raise self._no_data(kind, locale, style, "unsupported style")

        babel_locale = self._babel_locale(locale, kind, style)

        dt_value = datetime.fromisoformat(value) if isinstance(value, str) else value

        if kind == LocalizeKind.DATE and isinstance(dt_value, date):
            return str(babel_dates.format_date(dt_value, format=format_style, locale=babel_locale))
        if kind == LocalizeKind.TIME and isinstance(dt_value, datetime | time):
            return str(babel_dates.format_time(dt_value, format=format_style, locale=babel_locale))

        msg = f"Cannot render {type(value).__name__} as {kind} (expected {kind} or ISO 8601 string)"
        raise TypeError(msg)
