"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Argument errors (missing arguments)
        2000-2999: Resolution errors (branch selection, argument types)
        3000-3999: Syntax errors (parser failures)
        4000-4999: Localization errors (locale data unavailable)
    """

    # Argument errors (1000-1999)
    MISSING_ARGUMENT = 1001

    # Resolution errors (2000-2999)
    BRANCH_NOT_FOUND = 2001
    ARGUMENT_TYPE_MISMATCH = 2002
    UNKNOWN_NODE = 2003

    # Syntax errors (3000-3999)
    UNKNOWN_ARGUMENT_TYPE = 3001
    EXPECTED_IDENTIFIER = 3002
    EXPECTED_INTEGER = 3003
    UNTERMINATED_ARGUMENT = 3004
    UNEXPECTED_CLOSE_BRACE = 3005
    EXPECTED_CHARACTER = 3006
    EMPTY_BRANCH_LIST = 3007
    NESTING_DEPTH_EXCEEDED = 3008

    # Localization errors (4000-4999)
    LOCALIZATION_DATA_MISSING = 4001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Pattern location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line/column
                is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Pattern location (None for non-syntax errors)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        argument_name: Argument that caused the error (render errors)
        expected_type: Expected type for the argument (render errors)
        received_type: Actual type received (render errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNKNOWN_ARGUMENT_TYPE]: Unknown argument type 'unknown'
              --> position 4 (line 1, column 5)
              = help: Use one of: number, date, time, plural, select, selectordinal

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
