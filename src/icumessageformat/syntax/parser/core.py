"""Core MessageFormat parser implementation.

This module provides the MessageFormatParser class that turns a pattern
string into the node tuple defined in :mod:`icumessageformat.syntax.ast`.

Architecture:
    The parser uses an immutable cursor pattern (:class:`~icumessageformat.syntax.cursor.Cursor`)
    to traverse the pattern in a single forward pass. Each grammar rule (in
    :mod:`~icumessageformat.syntax.parser.rules` and
    :mod:`~icumessageformat.syntax.parser.primitives`) returns a
    :class:`~icumessageformat.syntax.cursor.ParseResult` with the parsed
    value and the advanced cursor, or raises
    :class:`~icumessageformat.diagnostics.ParseError`.

Security:
    Includes configurable input size limit to prevent DoS attacks via
    unbounded memory allocation from extremely large patterns.
"""

import logging

from icumessageformat.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from icumessageformat.syntax.ast import MessageNodes
from icumessageformat.syntax.cursor import Cursor
from icumessageformat.syntax.parser.rules import ParseContext, parse_message

__all__ = ["MessageFormatParser"]

logger = logging.getLogger(__name__)


class MessageFormatParser:
    """MessageFormat pattern parser using immutable cursor pattern.

    The parser holds configuration only, so a single instance can be shared
    across threads.

    Attributes:
        max_source_size: Maximum allowed pattern length in characters (default: 1 MiB)
        max_nesting_depth: Maximum allowed argument nesting depth (default: 100)
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum pattern length (default: 1 MiB).
                            Set to 0 to disable the size limit.
            max_nesting_depth: Maximum argument nesting depth (default: 100).
                              Must be positive; there is no unlimited setting.

        Raises:
            ValueError: If max_nesting_depth is zero or negative
        """
        if max_nesting_depth is not None and max_nesting_depth <= 0:
            msg = "max_nesting_depth must be positive"
            raise ValueError(msg)
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = (
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed pattern length."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed argument nesting depth."""
        return self._max_nesting_depth

    def parse(self, pattern: str) -> MessageNodes:
        """Parse a pattern into its node tuple.

        Args:
            pattern: MessageFormat pattern

        Returns:
            Tuple of nodes; empty for an empty pattern

        Raises:
            ValueError: If pattern exceeds max_source_size (DoS prevention)
            ParseError: On malformed input, positioned at the offending character

        Example:
            >>> parser = MessageFormatParser()
            >>> parser.parse("Hello, {name}!")
            (TextNode(value='Hello, '), ArgumentNode(name='name'), TextNode(value='!'))
        """
        if self._max_source_size > 0 and len(pattern) > self._max_source_size:
            msg = (
                f"Pattern size ({len(pattern):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in MessageFormatParser constructor to increase limit."
            )
            raise ValueError(msg)

        context = ParseContext(max_nesting_depth=self._max_nesting_depth)
        result = parse_message(Cursor(pattern, 0), context)

        logger.debug(
            "Parsed pattern of %d characters into %d nodes", len(pattern), len(result.value)
        )
        return result.value
