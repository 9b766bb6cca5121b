"""Pattern introspection: which arguments a pattern uses, and how.

Walks every branch of a parsed pattern, selected or not, so the result
lists every argument a caller might need to supply.

Key features:
- Memory-efficient frozen dataclasses with slots
- Visitor-based traversal (see icumessageformat.syntax.visitor)

Python 3.13+.
"""

from dataclasses import dataclass

from icumessageformat.enums import ArgumentKind
from icumessageformat.syntax import parse
from icumessageformat.syntax.ast import (
    ArgumentNode,
    DateFormatNode,
    MessageNodes,
    NumberFormatNode,
    PluralNode,
    SelectNode,
    SelectOrdinalNode,
    TimeFormatNode,
)
from icumessageformat.syntax.visitor import NodeVisitor

__all__ = [
    "ArgumentInfo",
    "IntrospectionVisitor",
    "PatternIntrospection",
    "extract_arguments",
    "introspect_pattern",
]


@dataclass(frozen=True, slots=True)
class ArgumentInfo:
    """Immutable metadata about one use of an argument."""

    name: str
    """Argument name as written in the pattern."""

    kind: ArgumentKind
    """How the argument is consumed at this use."""


@dataclass(frozen=True, slots=True)
class PatternIntrospection:
    """Complete introspection result for a pattern."""

    arguments: frozenset[ArgumentInfo]
    """Every argument use; one name may appear with several kinds."""

    has_selectors: bool
    """Whether the pattern contains plural, select or selectordinal."""

    _argument_names: frozenset[str]
    """Cached argument names for O(1) lookup."""

    def get_argument_names(self) -> frozenset[str]:
        """Get set of argument names."""
        return self._argument_names

    def requires_argument(self, name: str) -> bool:
        """Check if any branch of the pattern uses argument name."""
        return name in self._argument_names


class IntrospectionVisitor(NodeVisitor):
    """Collects an ArgumentInfo for every placeholder and selector."""

    __slots__ = ("arguments", "has_selectors")

    def __init__(self) -> None:
        super().__init__()
        self.arguments: set[ArgumentInfo] = set()
        self.has_selectors = False

    def visit_ArgumentNode(self, node: ArgumentNode) -> None:
        self.arguments.add(ArgumentInfo(node.name, ArgumentKind.PLAIN))

    def visit_NumberFormatNode(self, node: NumberFormatNode) -> None:
        self.arguments.add(ArgumentInfo(node.name, ArgumentKind.NUMBER))

    def visit_DateFormatNode(self, node: DateFormatNode) -> None:
        self.arguments.add(ArgumentInfo(node.name, ArgumentKind.DATE))

    def visit_TimeFormatNode(self, node: TimeFormatNode) -> None:
        self.arguments.add(ArgumentInfo(node.name, ArgumentKind.TIME))

    def visit_PluralNode(self, node: PluralNode) -> None:
        self._selector(node, ArgumentKind.PLURAL)

    def visit_SelectNode(self, node: SelectNode) -> None:
        self._selector(node, ArgumentKind.SELECT)

    def visit_SelectOrdinalNode(self, node: SelectOrdinalNode) -> None:
        self._selector(node, ArgumentKind.SELECTORDINAL)

    def _selector(
        self, node: PluralNode | SelectNode | SelectOrdinalNode, kind: ArgumentKind
    ) -> None:
        self.has_selectors = True
        self.arguments.add(ArgumentInfo(node.name, kind))
        self.generic_visit(node)


def introspect_pattern(pattern: str | MessageNodes) -> PatternIntrospection:
    """Introspect a pattern and list the arguments it uses.

    Args:
        pattern: Pattern text (parsed here) or an already parsed node tuple

    Returns:
        Introspection result covering every branch

    Raises:
        ParseError: If pattern is text and malformed

    Example:
        >>> info = introspect_pattern("{n, plural, one {{who} has one} other {# left}}")
        >>> sorted(info.get_argument_names())
        ['n', 'who']
    """
    nodes = parse(pattern) if isinstance(pattern, str) else pattern

    visitor = IntrospectionVisitor()
    visitor.visit_all(nodes)

    arguments = frozenset(visitor.arguments)
    return PatternIntrospection(
        arguments=arguments,
        has_selectors=visitor.has_selectors,
        _argument_names=frozenset(info.name for info in arguments),
    )


def extract_arguments(nodes: MessageNodes) -> frozenset[str]:
    """Extract argument names from a parsed pattern (simplified API).

    Example:
        >>> sorted(extract_arguments(parse("{a} {b, number} {c, select, other {{d}}}")))
        ['a', 'b', 'c', 'd']
    """
    return introspect_pattern(nodes).get_argument_names()
