"""Primitive parsing utilities for the MessageFormat parser.

This module provides low-level parsers for identifiers, integers and
single expected characters. Every primitive either returns a ParseResult
or raises ParseError positioned at the offending character.
"""

from icumessageformat.diagnostics import Diagnostic, ErrorTemplate, ParseError
from icumessageformat.syntax.cursor import Cursor, ParseResult

# ASCII digits only. str.isdigit() accepts Unicode digits like ² or ³,
# which int() then rejects.
_ASCII_DIGITS: str = "0123456789"

# Identifier characters: argument names, style names and branch keys.
_IDENTIFIER_CHARS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ" + _ASCII_DIGITS + "_"
)


def syntax_error(diagnostic: Diagnostic, cursor: Cursor) -> ParseError:
    """Build a ParseError for the cursor position.

    Example:
        >>> cursor = Cursor("a } b", 2)
        >>> err = syntax_error(ErrorTemplate.unexpected_close_brace(cursor.span()), cursor)
        >>> err.position
        2
    """
    return ParseError(diagnostic, cursor.pos, cursor.source)


def is_identifier_char(ch: str) -> bool:
    """Check if character can appear in an identifier."""
    return ch in _IDENTIFIER_CHARS


def parse_identifier(cursor: Cursor) -> ParseResult[str]:
    """Parse identifier: [A-Za-z0-9_]+

    Names keep their case; "Count" and "count" are different arguments.

    Examples:
        count → "count"
        user_name → "user_name"
        0 → "0"

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(identifier, new_cursor)

    Raises:
        ParseError: If no identifier character is at the cursor
    """
    start = cursor
    while not cursor.is_eof and cursor.current in _IDENTIFIER_CHARS:
        cursor = cursor.advance()

    if cursor.pos == start.pos:
        raise syntax_error(ErrorTemplate.expected_identifier(start.span()), start)

    return ParseResult(start.slice_to(cursor.pos), cursor)


def parse_integer(cursor: Cursor) -> ParseResult[int]:
    """Parse integer literal: -?[0-9]+

    Used for offset values and exact-match keys.

    Raises:
        ParseError: If no digit follows the optional sign
    """
    start = cursor
    if cursor.at("-"):
        cursor = cursor.advance()

    digits_start = cursor.pos
    while not cursor.is_eof and cursor.current in _ASCII_DIGITS:
        cursor = cursor.advance()

    if cursor.pos == digits_start:
        raise syntax_error(ErrorTemplate.expected_integer(start.span()), start)

    return ParseResult(int(start.slice_to(cursor.pos)), cursor)


def expect_char(cursor: Cursor, char: str) -> Cursor:
    """Consume char at the cursor.

    Raises:
        ParseError: If the cursor is at a different character or at EOF
    """
    new_cursor = cursor.expect(char)
    if new_cursor is None:
        raise syntax_error(ErrorTemplate.expected_character(char, cursor.span()), cursor)
    return new_cursor
