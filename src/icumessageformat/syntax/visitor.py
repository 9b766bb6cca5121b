"""Visitor pattern for MessageFormat AST traversal.

Enables tools to walk a parsed pattern without modifying node classes.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeName (PascalCase) rather than visit_node_name
(snake_case). See: https://docs.python.org/3/library/ast.html#ast.NodeVisitor

Python 3.13+.
"""

from collections.abc import Callable, Iterable
from typing import ClassVar

from .ast import Branches, Node, PluralNode, SelectNode, SelectOrdinalNode

__all__ = ["NodeVisitor"]

# visit_* helpers that are not per-node handlers
_TRAVERSAL_METHODS = frozenset({"visit_all", "visit_branches"})


class NodeVisitor:
    """Base visitor for traversing a MessageFormat node tuple.

    generic_visit() descends into every branch body of plural, select and
    selectordinal nodes. Override visit_NodeType methods to add behavior,
    and call generic_visit(node) from them to keep descending.

    Dispatch table is built once per class definition via __init_subclass__.

    Example:
        >>> class CountArguments(NodeVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_ArgumentNode(self, node):
        ...         self.count += 1
        ...
        >>> visitor = CountArguments()
        >>> visitor.visit_all(parse("{a} and {b}"))
        >>> visitor.count
        2
    """

    __slots__ = ("_instance_dispatch_cache",)

    # Method names only, not bound methods
    _class_visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_") and name not in _TRAVERSAL_METHODS:
                cls._class_visit_methods[name[6:]] = name

    def __init__(self) -> None:
        self._instance_dispatch_cache: dict[type, Callable[[Node], object]] = {}

    def visit(self, node: Node) -> None:
        """Visit a single node through the dispatch table."""
        node_type = type(node)

        if node_type in self._instance_dispatch_cache:
            self._instance_dispatch_cache[node_type](node)
            return

        method_name = self._class_visit_methods.get(node_type.__name__)
        method = getattr(self, method_name) if method_name else self.generic_visit

        self._instance_dispatch_cache[node_type] = method
        method(node)

    def visit_all(self, nodes: Iterable[Node]) -> None:
        """Visit every node of a message in order."""
        for node in nodes:
            self.visit(node)

    def visit_branches(self, branches: Branches) -> None:
        """Visit every branch body in key order."""
        for body in branches.values():
            self.visit_all(body)

    def generic_visit(self, node: Node) -> None:
        """Default visitor: descend into branch bodies, ignore leaves."""
        match node:
            case PluralNode() | SelectNode() | SelectOrdinalNode():
                self.visit_branches(node.branches)
            case _:
                pass
