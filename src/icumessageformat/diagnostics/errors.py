"""MessageFormat exception hierarchy with structured diagnostics.

All exceptions can store Diagnostic objects for rich error information.
Nothing here is retryable: parsing and rendering are deterministic, so an
error always points at a pattern defect or a caller data defect.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class MessageFormatError(Exception):
    """Base exception for all MessageFormat errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MessageFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ParseError(MessageFormatError):
    """Pattern syntax defect.

    Always carries the 0-based character position of the offending
    character. Deterministic for a given pattern, so never retried.

    Attributes:
        position: 0-based character index into the pattern
        pattern: The pattern being parsed (empty if unknown)
    """

    def __init__(self, message: str | Diagnostic, position: int, pattern: str = "") -> None:
        super().__init__(message)
        self.position = position
        self.pattern = pattern

    @property
    def line(self) -> int:
        """1-based line of the error position."""
        return self.pattern.count("\n", 0, self.position) + 1

    @property
    def column(self) -> int:
        """1-based column of the error position."""
        last_newline = self.pattern.rfind("\n", 0, self.position)
        return self.position - last_newline

    def format_with_context(self) -> str:
        """Format error with the offending pattern line and a caret.

        Example:
            >>> err = ParseError("Unexpected }", 6, "Hello } world")
            >>> print(err.format_with_context())
            1:7: Unexpected }
            <BLANKLINE>
               1 | Hello } world
                 |       ^
        """
        message = self.diagnostic.message if self.diagnostic else str(self)
        lines = self.pattern.split("\n")
        line_text = lines[self.line - 1] if self.line <= len(lines) else ""
        prefix = f"{self.line:4} | "
        return "\n".join(
            [
                f"{self.line}:{self.column}: {message}",
                "",
                prefix + line_text,
                " " * (len(prefix) - 2) + "| " + " " * (self.column - 1) + "^",
            ]
        )


class MessageFormatResolutionError(MessageFormatError):
    """Runtime error while rendering a parsed pattern.

    Attributes:
        argument_name: Argument involved in the failure
    """

    def __init__(self, message: str | Diagnostic, argument_name: str = "") -> None:
        super().__init__(message)
        self.argument_name = argument_name


class MissingArgumentError(MessageFormatResolutionError):
    """A rendered placeholder has no corresponding entry in the arguments.

    Raised only for nodes that are actually rendered; a name referenced in
    an unselected branch is never looked up.
    """


class BranchError(MessageFormatResolutionError):
    """Selected plural/select/selectordinal has neither the key nor 'other'.

    Attributes:
        key: The category or selector value that was looked up
    """

    def __init__(self, message: str | Diagnostic, argument_name: str = "", key: str = "") -> None:
        super().__init__(message, argument_name)
        self.key = key


class ArgumentTypeError(MessageFormatResolutionError):
    """Plural or selectordinal argument is not a number."""


class LocalizationDataError(MessageFormatError):
    """Localizer has no formatting data for a locale/kind/style combination.

    Recovered by the formatter for numbers (naive string fallback);
    propagated for dates and times.

    Attributes:
        kind: number, date or time
        locale_code: Locale that was requested
        style: Requested style (None when unset)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        kind: str = "",
        locale_code: str = "",
        style: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.locale_code = locale_code
        self.style = style
