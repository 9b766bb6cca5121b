"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (only for errors)

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from icumessageformat.diagnostics import SourceSpan

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable pattern position tracker.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Use this in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns None ONLY when peeking beyond EOF.
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF).

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.advance(2).pos
            2
            >>> cursor.advance(99).pos
            5
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def at(self, chars: str) -> bool:
        """Check whether the current character is one of chars (False at EOF)."""
        return not self.is_eof and self.source[self.pos] in chars

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Store the start cursor, advance, then slice:

            >>> cursor = Cursor("hello world", 0)
            >>> start_cursor = cursor
            >>> while not cursor.is_eof and cursor.current != ' ':
            ...     cursor = cursor.advance()
            >>> start_cursor.slice_to(cursor.pos)
            'hello'
        """
        return self.source[self.pos : end_pos]

    def startswith(self, literal: str) -> bool:
        """Bounded lookahead: does the remaining input start with literal?

        Example:
            >>> Cursor("{n, plural, offset:1 other {#}}", 12).startswith("offset:")
            True
        """
        return self.source.startswith(literal, self.pos)

    def skip_whitespace(self) -> "Cursor":
        """Skip Unicode whitespace characters.

        Example:
            >>> cursor = Cursor("  \\n\\t hello", 0)
            >>> cursor.skip_whitespace().current
            'h'
        """
        c = self
        while not c.is_eof and c.current.isspace():
            c = c.advance()
        return c

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor("}", 0).expect("}").pos
            1
            >>> Cursor("x", 0).expect("}") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Example:
            >>> Cursor("ab\\ncd", 4).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def span(self, length: int = 1) -> SourceSpan:
        """Source span starting at the current position.

        The end is clamped to the source length, so an EOF cursor yields an
        empty span.
        """
        line, col = self.compute_line_col()
        end = min(self.pos + length, len(self.source))
        return SourceSpan(start=self.pos, end=max(end, self.pos), line=line, column=col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every grammar rule has signature:
            def parse_foo(cursor: Cursor, ...) -> ParseResult[Foo]
        and raises ParseError when the input does not match.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult('h', cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
