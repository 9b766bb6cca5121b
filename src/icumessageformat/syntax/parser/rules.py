"""Grammar rules for the MessageFormat parser.

This module provides all parsing rules for MessageFormat grammar constructs:
- Message parsing (literal runs, apostrophe quoting, arguments)
- Argument parsing (simple, number/date/time, plural/select/selectordinal)
- Branch list parsing (category keys, exact =N keys, branch bodies)

All grammar rules are co-located in a single module because messages,
arguments and branch bodies are mutually recursive.

Lookahead Patterns:
    The parser decides on the current character only:
    - `{` starts an argument
    - `}` ends a branch body (or is an error at top level)
    - `'` starts a quote escape
    - `=` starts an exact-match branch key
    The one multi-character lookahead is the `offset:` keyword of plural
    and selectordinal, checked with cursor.startswith().

Security:
    Includes configurable nesting depth limit to prevent DoS attacks via
    deeply nested arguments (e.g., {a, select, x {{b, select, x {...}}}}).
"""

from dataclasses import dataclass

from icumessageformat.constants import MAX_DEPTH, OFFSET_KEYWORD
from icumessageformat.diagnostics import ErrorTemplate, ParseError
from icumessageformat.syntax.ast import (
    ArgumentNode,
    BranchKey,
    Branches,
    DateFormatNode,
    ExactKey,
    MessageNodes,
    Node,
    NumberFormatNode,
    PluralNode,
    SelectNode,
    SelectOrdinalNode,
    TextNode,
    TimeFormatNode,
)
from icumessageformat.syntax.cursor import Cursor, ParseResult
from icumessageformat.syntax.parser.primitives import (
    expect_char,
    parse_identifier,
    parse_integer,
    syntax_error,
)

__all__ = [
    "ParseContext",
    "parse_argument",
    "parse_branches",
    "parse_message",
]

# Characters that end a literal run
_SPECIAL_CHARS: str = "{}'"

# Characters that open a quoted raw span after an apostrophe
_QUOTABLE_CHARS: str = "{}"


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Explicit context for parsing operations.

    Passed down the recursion instead of kept in module state, so one
    parser instance can serve concurrent callers.

    Attributes:
        max_nesting_depth: Maximum allowed argument nesting depth
        current_depth: Current nesting depth (0 = top level)
    """

    max_nesting_depth: int = MAX_DEPTH
    current_depth: int = 0

    def is_depth_exceeded(self) -> bool:
        """Check if maximum nesting depth has been reached."""
        return self.current_depth >= self.max_nesting_depth

    def enter_argument(self) -> "ParseContext":
        """Create new context with incremented depth for entering an argument."""
        return ParseContext(
            max_nesting_depth=self.max_nesting_depth,
            current_depth=self.current_depth + 1,
        )


# =============================================================================
# Message Parsing
# =============================================================================


def _merge_text(nodes: list[Node]) -> MessageNodes:
    """Build the final node tuple, joining adjacent text and dropping empty text."""
    merged: list[Node] = []
    for node in nodes:
        if TextNode.guard(node):
            if not node.value:
                continue
            if merged and TextNode.guard(previous := merged[-1]):
                merged[-1] = TextNode(previous.value + node.value)
                continue
        merged.append(node)
    return tuple(merged)


def _parse_quote(cursor: Cursor) -> ParseResult[TextNode]:
    """Parse an apostrophe escape.

    - '' → '
    - '{...' or '}...' → raw text up to the next ' (or EOF), closing quote consumed
    - any other ' → literal '

    Examples:
        >>> _parse_quote(Cursor("''s", 0)).value
        TextNode(value="'")
        >>> _parse_quote(Cursor("'{x}' y", 0)).value
        TextNode(value='{x}')
    """
    next_char = cursor.peek(1)

    if next_char == "'":
        return ParseResult(TextNode("'"), cursor.advance(2))

    if next_char is not None and next_char in _QUOTABLE_CHARS:
        start = cursor.advance()
        end = cursor.source.find("'", start.pos)
        if end == -1:
            end_cursor = start.advance(len(cursor.source))
            return ParseResult(TextNode(start.slice_to(end_cursor.pos)), end_cursor)
        return ParseResult(TextNode(start.slice_to(end)), Cursor(cursor.source, end + 1))

    return ParseResult(TextNode("'"), cursor.advance())


def _parse_literal(cursor: Cursor) -> ParseResult[TextNode]:
    """Parse the longest run of characters that are not {, } or '."""
    start = cursor
    while not cursor.is_eof and cursor.current not in _SPECIAL_CHARS:
        cursor = cursor.advance()
    return ParseResult(TextNode(start.slice_to(cursor.pos)), cursor)


def parse_message(
    cursor: Cursor, context: ParseContext, *, in_branch: bool = False
) -> ParseResult[MessageNodes]:
    """Parse a message: text, quote escapes and arguments.

    At top level the message runs to end of input and a bare `}` is an
    error. Inside a branch body the message stops in front of the `}`
    that closes the body (the caller consumes it).

    Args:
        cursor: Current position in source
        context: Nesting depth tracking
        in_branch: True when parsing a branch body

    Returns:
        ParseResult(nodes, cursor) with adjacent text merged

    Raises:
        ParseError: On any syntax error inside the message
    """
    nodes: list[Node] = []

    while not cursor.is_eof:
        match cursor.current:
            case "}":
                if in_branch:
                    break
                raise syntax_error(ErrorTemplate.unexpected_close_brace(cursor.span()), cursor)
            case "{":
                argument = parse_argument(cursor, context)
                nodes.append(argument.value)
                cursor = argument.cursor
            case "'":
                quoted = _parse_quote(cursor)
                nodes.append(quoted.value)
                cursor = quoted.cursor
            case _:
                literal = _parse_literal(cursor)
                nodes.append(literal.value)
                cursor = literal.cursor

    return ParseResult(_merge_text(nodes), cursor)


# =============================================================================
# Argument Parsing
# =============================================================================


def _unterminated(open_cursor: Cursor) -> ParseError:
    """ParseError for an argument or body whose `{` is never closed."""
    return syntax_error(ErrorTemplate.unterminated_argument(open_cursor.span()), open_cursor)


def _skip_ws_not_eof(cursor: Cursor, open_cursor: Cursor) -> Cursor:
    """Skip whitespace and fail if that reaches end of input."""
    cursor = cursor.skip_whitespace()
    if cursor.is_eof:
        raise _unterminated(open_cursor)
    return cursor


def _close_argument(cursor: Cursor, open_cursor: Cursor) -> Cursor:
    """Consume the `}` that closes the argument opened at open_cursor."""
    if cursor.is_eof:
        raise _unterminated(open_cursor)
    return expect_char(cursor, "}")


def _parse_style(cursor: Cursor, open_cursor: Cursor) -> ParseResult[str | None]:
    """Parse optional `, style` of a number/date/time argument."""
    cursor = _skip_ws_not_eof(cursor, open_cursor)
    if cursor.current != ",":
        return ParseResult(None, cursor)

    cursor = _skip_ws_not_eof(cursor.advance(), open_cursor)
    style = parse_identifier(cursor)
    return ParseResult(style.value, _skip_ws_not_eof(style.cursor, open_cursor))


def _parse_offset(cursor: Cursor, open_cursor: Cursor) -> ParseResult[int]:
    """Parse optional `offset:N` in front of a plural branch list."""
    if not cursor.startswith(OFFSET_KEYWORD):
        return ParseResult(0, cursor)

    cursor = _skip_ws_not_eof(cursor.advance(len(OFFSET_KEYWORD)), open_cursor)
    offset = parse_integer(cursor)
    return ParseResult(offset.value, _skip_ws_not_eof(offset.cursor, open_cursor))


def _parse_branch_key(cursor: Cursor) -> ParseResult[BranchKey]:
    """Parse branch key: identifier or =integer."""
    if cursor.current == "=":
        exact = parse_integer(cursor.advance())
        return ParseResult(ExactKey(exact.value), exact.cursor)
    identifier = parse_identifier(cursor)
    return ParseResult(identifier.value, identifier.cursor)


def parse_branches(
    cursor: Cursor, context: ParseContext, open_cursor: Cursor, type_name: str
) -> ParseResult[Branches]:
    """Parse a branch list: one or more `key {message}` up to the closing `}`.

    The returned cursor sits on the closing `}` of the enclosing argument.

    Args:
        cursor: Position of the first key (whitespace allowed)
        context: Nesting depth of the enclosing argument
        open_cursor: The `{` of the enclosing argument (for error positions)
        type_name: plural, select or selectordinal (for error messages)

    Raises:
        ParseError: On a malformed key or body, an unterminated body, or an
            empty branch list
    """
    pairs: list[tuple[BranchKey, MessageNodes]] = []

    while True:
        cursor = _skip_ws_not_eof(cursor, open_cursor)
        if cursor.current == "}":
            break

        key = _parse_branch_key(cursor)
        body_open = _skip_ws_not_eof(key.cursor, open_cursor)
        cursor = expect_char(body_open, "{")

        body = parse_message(cursor, context, in_branch=True)
        if body.cursor.is_eof:
            raise _unterminated(body_open)

        pairs.append((key.value, body.value))
        cursor = body.cursor.advance()

    if not pairs:
        raise syntax_error(ErrorTemplate.empty_branch_list(type_name, cursor.span()), cursor)

    return ParseResult(Branches.from_pairs(pairs), cursor)


def parse_argument(cursor: Cursor, context: ParseContext) -> ParseResult[Node]:
    """Parse an argument starting at `{`.

    Grammar:
        { name }
        { name , number|date|time [, style] }
        { name , plural|selectordinal , [offset:N] branches }
        { name , select , branches }

    Examples:
        {name} → ArgumentNode("name")
        {n, number, integer} → NumberFormatNode("n", "integer")
        {g, select, other {x}} → SelectNode("g", Branches(...))

    Raises:
        ParseError: Unknown type keyword (positioned at the keyword),
            unterminated argument (positioned at the `{`), or any other
            syntax error inside the argument
    """
    open_cursor = cursor
    if context.is_depth_exceeded():
        raise syntax_error(
            ErrorTemplate.nesting_depth_exceeded(context.max_nesting_depth, cursor.span()),
            cursor,
        )
    context = context.enter_argument()

    cursor = _skip_ws_not_eof(cursor.advance(), open_cursor)
    name_result = parse_identifier(cursor)
    name = name_result.value
    cursor = _skip_ws_not_eof(name_result.cursor, open_cursor)

    if cursor.current != ",":
        return ParseResult(ArgumentNode(name), _close_argument(cursor, open_cursor))

    keyword_cursor = _skip_ws_not_eof(cursor.advance(), open_cursor)
    keyword_result = parse_identifier(keyword_cursor)
    keyword = keyword_result.value
    cursor = keyword_result.cursor

    node: Node
    match keyword:
        case "number" | "date" | "time":
            style = _parse_style(cursor, open_cursor)
            cursor = style.cursor
            match keyword:
                case "number":
                    node = NumberFormatNode(name, style.value)
                case "date":
                    node = DateFormatNode(name, style.value)
                case _:
                    node = TimeFormatNode(name, style.value)

        case "plural" | "selectordinal":
            cursor = expect_char(_skip_ws_not_eof(cursor, open_cursor), ",")
            offset = _parse_offset(_skip_ws_not_eof(cursor, open_cursor), open_cursor)
            branches = parse_branches(offset.cursor, context, open_cursor, keyword)
            cursor = branches.cursor
            if keyword == "plural":
                node = PluralNode(name, branches.value, offset.value)
            else:
                node = SelectOrdinalNode(name, branches.value, offset.value)

        case "select":
            cursor = expect_char(_skip_ws_not_eof(cursor, open_cursor), ",")
            branches = parse_branches(cursor, context, open_cursor, keyword)
            cursor = branches.cursor
            node = SelectNode(name, branches.value)

        case _:
            raise syntax_error(
                ErrorTemplate.unknown_argument_type(keyword, keyword_cursor.span(len(keyword))),
                keyword_cursor,
            )

    return ParseResult(node, _close_argument(cursor, open_cursor))
