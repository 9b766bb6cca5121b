"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

_ARGUMENT_TYPES = "number, date, time, plural, select, selectordinal"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps every message testable and documents all error cases in one
    place.
    """

    # Base documentation URL
    _DOCS_BASE = "https://unicode-org.github.io/icu/userguide/format_parse/messages"

    # ------------------------------------------------------------------
    # Syntax
    # ------------------------------------------------------------------

    @staticmethod
    def unknown_argument_type(type_name: str, span: SourceSpan) -> Diagnostic:
        """Typed argument uses a keyword the grammar does not know.

        Args:
            type_name: The keyword found after the first comma
            span: Location of the keyword

        Returns:
            Diagnostic for UNKNOWN_ARGUMENT_TYPE
        """
        msg = f"Unknown argument type '{type_name}' at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_ARGUMENT_TYPE,
            message=msg,
            span=span,
            hint=f"Use one of: {_ARGUMENT_TYPES}",
            help_url=f"{ErrorTemplate._DOCS_BASE}/",
        )

    @staticmethod
    def expected_identifier(span: SourceSpan) -> Diagnostic:
        """Identifier required but absent."""
        msg = f"Expected identifier at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_IDENTIFIER,
            message=msg,
            span=span,
            hint="Identifiers consist of letters, digits and underscores",
        )

    @staticmethod
    def expected_integer(span: SourceSpan) -> Diagnostic:
        """Integer literal required but absent."""
        msg = f"Expected number at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_INTEGER,
            message=msg,
            span=span,
            hint="Offsets and exact-match keys take an integer such as 1 or =0",
        )

    @staticmethod
    def unterminated_argument(span: SourceSpan) -> Diagnostic:
        """End of pattern reached inside an argument or branch body.

        Args:
            span: Location of the opening brace that was never closed

        Returns:
            Diagnostic for UNTERMINATED_ARGUMENT
        """
        msg = f"Unclosed argument starting at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_ARGUMENT,
            message=msg,
            span=span,
            hint="Add the missing '}' or escape the brace as '{'",
        )

    @staticmethod
    def unexpected_close_brace(span: SourceSpan) -> Diagnostic:
        """Bare '}' outside any argument."""
        msg = f"Unexpected }} at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CLOSE_BRACE,
            message=msg,
            span=span,
            hint="Escape a literal brace as '}'",
        )

    @staticmethod
    def expected_character(expected: str, span: SourceSpan) -> Diagnostic:
        """Specific character required at the cursor."""
        msg = f"Expected '{expected}' at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_CHARACTER,
            message=msg,
            span=span,
        )

    @staticmethod
    def empty_branch_list(type_name: str, span: SourceSpan) -> Diagnostic:
        """plural/select/selectordinal without any branch."""
        msg = f"Argument of type '{type_name}' has no branches at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_BRANCH_LIST,
            message=msg,
            span=span,
            hint="Add at least an 'other {...}' branch",
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int, span: SourceSpan) -> Diagnostic:
        """Branch nesting deeper than the parser allows."""
        msg = f"Maximum nesting depth ({max_depth}) exceeded at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            span=span,
            hint="Flatten nested plural/select constructs",
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @staticmethod
    def missing_argument(argument_name: str) -> Diagnostic:
        """Rendered placeholder has no argument.

        Args:
            argument_name: The argument name as written in the pattern

        Returns:
            Diagnostic for MISSING_ARGUMENT
        """
        msg = f"Missing argument: {argument_name}"
        return Diagnostic(
            code=DiagnosticCode.MISSING_ARGUMENT,
            message=msg,
            hint=f"Pass '{argument_name}' in the arguments mapping",
            argument_name=argument_name,
        )

    @staticmethod
    def branch_not_found(type_name: str, argument_name: str, key: str) -> Diagnostic:
        """Neither the selected key nor 'other' exists.

        Args:
            type_name: plural, select or selectordinal
            argument_name: The selector argument
            key: The category or selector value that was looked up

        Returns:
            Diagnostic for BRANCH_NOT_FOUND
        """
        msg = f"No matching {type_name} branch for '{key}'"
        return Diagnostic(
            code=DiagnosticCode.BRANCH_NOT_FOUND,
            message=msg,
            hint="Every plural, select and selectordinal should define 'other'",
            help_url=f"{ErrorTemplate._DOCS_BASE}/",
            argument_name=argument_name,
        )

    @staticmethod
    def argument_type_mismatch(
        type_name: str, argument_name: str, value: object
    ) -> Diagnostic:
        """Plural/ordinal selector received a non-numeric value."""
        received = type(value).__name__
        msg = f"Argument '{argument_name}' of {type_name} must be a number, got {received}"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_TYPE_MISMATCH,
            message=msg,
            hint="Pass an int, float or Decimal",
            argument_name=argument_name,
            expected_type="Number",
            received_type=received,
        )

    @staticmethod
    def unknown_node(node_type: str) -> Diagnostic:
        """Renderer received an object that is not a Node."""
        msg = f"Unknown node type: {node_type}"
        return Diagnostic(code=DiagnosticCode.UNKNOWN_NODE, message=msg)

    # ------------------------------------------------------------------
    # Localization
    # ------------------------------------------------------------------

    @staticmethod
    def localization_data_missing(
        kind: str, locale_code: str, style: str | None, reason: str
    ) -> Diagnostic:
        """Localizer has no data for a locale/kind/style combination."""
        style_part = f" style '{style}'" if style else ""
        msg = f"No {kind} formatting data for locale '{locale_code}'{style_part}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALIZATION_DATA_MISSING,
            message=msg,
            hint="Check the locale code and that the style is supported",
        )
