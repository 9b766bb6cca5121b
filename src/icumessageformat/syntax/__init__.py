"""MessageFormat syntax package.

Provides parser, AST definitions and visitor pattern.
Separate from runtime so tooling can inspect patterns without rendering them.

Python 3.13+.
"""

from .ast import (
    ArgumentNode,
    BranchingNode,
    BranchKey,
    Branches,
    DateFormatNode,
    ExactKey,
    FormattedNode,
    MessageNodes,
    Node,
    NumberFormatNode,
    PluralNode,
    SelectNode,
    SelectOrdinalNode,
    TextNode,
    TimeFormatNode,
)
from .cursor import Cursor, ParseResult
from .parser import MessageFormatParser
from .visitor import NodeVisitor

__all__ = [
    "ArgumentNode",
    "BranchKey",
    "Branches",
    "BranchingNode",
    "Cursor",
    "DateFormatNode",
    "ExactKey",
    "FormattedNode",
    "MessageFormatParser",
    "MessageNodes",
    "Node",
    "NodeVisitor",
    "NumberFormatNode",
    "ParseResult",
    "PluralNode",
    "SelectNode",
    "SelectOrdinalNode",
    "TextNode",
    "TimeFormatNode",
    "parse",
]


def parse(pattern: str) -> MessageNodes:
    """Parse a MessageFormat pattern into its node tuple.

    Convenience function for MessageFormatParser.parse().

    Args:
        pattern: MessageFormat pattern

    Returns:
        Tuple of nodes

    Raises:
        ParseError: On malformed input

    Example:
        >>> from icumessageformat.syntax import parse
        >>> parse("{count, plural, other {# items}}")[0].name
        'count'
    """
    parser = MessageFormatParser()
    return parser.parse(pattern)
