"""MessageFormat AST (Abstract Syntax Tree) node definitions.

Every node is a frozen, slotted dataclass built bottom-up by the parser.
Sequences are tuples and branch tables are read-only mappings, so a parsed
pattern can be shared by any number of concurrent renders.

Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import TypeIs

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Leaf nodes
    "TextNode",
    "ArgumentNode",
    "NumberFormatNode",
    "DateFormatNode",
    "TimeFormatNode",
    # Branching nodes
    "PluralNode",
    "SelectNode",
    "SelectOrdinalNode",
    # Branch tables
    "ExactKey",
    "Branches",
    # Type aliases
    "BranchKey",
    "Node",
    "MessageNodes",
    "BranchingNode",
    "FormattedNode",
]


# ============================================================================
# LEAF NODES
# ============================================================================


@dataclass(frozen=True, slots=True)
class TextNode:
    """Literal text segment, escapes already applied."""

    value: str

    @staticmethod
    def guard(node: object) -> TypeIs["TextNode"]:
        """Type guard for TextNode.

        Example:
            if TextNode.guard(node):
                node.value  # Type-safe! mypy knows node is TextNode
        """
        return isinstance(node, TextNode)


@dataclass(frozen=True, slots=True)
class ArgumentNode:
    """Simple placeholder: {name}"""

    name: str


@dataclass(frozen=True, slots=True)
class NumberFormatNode:
    """Number placeholder: {count, number} or {count, number, integer}"""

    name: str
    style: str | None = None


@dataclass(frozen=True, slots=True)
class DateFormatNode:
    """Date placeholder: {due, date} or {due, date, short}"""

    name: str
    style: str | None = None


@dataclass(frozen=True, slots=True)
class TimeFormatNode:
    """Time placeholder: {due, time} or {due, time, short}"""

    name: str
    style: str | None = None


# ============================================================================
# BRANCH TABLES
# ============================================================================


@dataclass(frozen=True, slots=True)
class ExactKey:
    """Exact-match branch key: =0, =1, =-3

    Never equal to a category key, even one spelled "=0".
    """

    value: int

    def __str__(self) -> str:
        return f"={self.value}"

    @staticmethod
    def guard(key: object) -> TypeIs["ExactKey"]:
        """Type guard for ExactKey."""
        return isinstance(key, ExactKey)


type BranchKey = str | ExactKey


@dataclass(frozen=True, slots=True)
class Branches(Mapping["BranchKey", "MessageNodes"]):
    """Immutable branch table of a plural, select or selectordinal.

    Keys keep their insertion order, but lookup is always by key. A repeated
    key replaces the earlier body and keeps the first position. The table is
    not required to contain "other"; its absence only matters when that
    branch would actually be selected.

    Example:
        >>> branches = Branches.from_pairs([("one", (TextNode("# item"),))])
        >>> branches["one"]
        (TextNode(value='# item'),)
        >>> "other" in branches
        False
    """

    entries: tuple[tuple["BranchKey", "MessageNodes"], ...] = ()
    _index: dict["BranchKey", "MessageNodes"] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        # Frozen dataclass: index is derived state, set once
        object.__setattr__(self, "_index", dict(self.entries))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple["BranchKey", "MessageNodes"]]) -> "Branches":
        """Build a table from (key, body) pairs, last duplicate wins."""
        merged: dict[BranchKey, MessageNodes] = {}
        for key, body in pairs:
            merged[key] = body
        return cls(entries=tuple(merged.items()))

    def __getitem__(self, key: "BranchKey") -> "MessageNodes":
        return self._index[key]

    def __iter__(self) -> Iterator["BranchKey"]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __hash__(self) -> int:
        return hash(self.entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Branches):
            return self.entries == other.entries
        return NotImplemented


# ============================================================================
# BRANCHING NODES
# ============================================================================


@dataclass(frozen=True, slots=True)
class PluralNode:
    """Cardinal plural: {count, plural, offset:1 =0 {...} one {...} other {...}}"""

    name: str
    branches: Branches
    offset: int = 0

    @staticmethod
    def guard(node: object) -> TypeIs["PluralNode"]:
        """Type guard for PluralNode."""
        return isinstance(node, PluralNode)


@dataclass(frozen=True, slots=True)
class SelectNode:
    """Keyword select: {gender, select, male {...} other {...}}"""

    name: str
    branches: Branches

    @staticmethod
    def guard(node: object) -> TypeIs["SelectNode"]:
        """Type guard for SelectNode."""
        return isinstance(node, SelectNode)


@dataclass(frozen=True, slots=True)
class SelectOrdinalNode:
    """Ordinal plural: {place, selectordinal, one {#st} two {#nd} other {#th}}"""

    name: str
    branches: Branches
    offset: int = 0

    @staticmethod
    def guard(node: object) -> TypeIs["SelectOrdinalNode"]:
        """Type guard for SelectOrdinalNode."""
        return isinstance(node, SelectOrdinalNode)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type FormattedNode = NumberFormatNode | DateFormatNode | TimeFormatNode
type BranchingNode = PluralNode | SelectNode | SelectOrdinalNode
type Node = TextNode | ArgumentNode | FormattedNode | BranchingNode

# One parsed message: the whole AST, or the body of one branch
type MessageNodes = tuple[Node, ...]
