"""MessageFormat renderer - converts a parsed pattern to a string.

Walks the node tuple, interpolating arguments, selecting plural, select and
selectordinal branches, and delegating number/date/time rendering to a
Localizer. Python 3.13+. Indirect dependency: Babel (via the default
Localizer and CLDR plural rules).

Branches are rendered lazily: only the selected branch is visited, so an
argument that appears only in unselected branches is never looked up.

Thread Safety:
    Render state is passed explicitly via RenderContext, making the
    renderer fully reentrant. Each render creates its own context.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from decimal import Decimal

from icumessageformat.constants import OTHER_KEY
from icumessageformat.diagnostics import (
    ArgumentTypeError,
    BranchError,
    ErrorTemplate,
    LocalizationDataError,
    MessageFormatResolutionError,
    MissingArgumentError,
)
from icumessageformat.enums import LocalizeKind
from icumessageformat.runtime.localizer import BabelLocalizer, Localizer
from icumessageformat.runtime.plural_rules import PluralRules
from icumessageformat.syntax.ast import (
    ArgumentNode,
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

__all__ = ["MessageRenderer", "RenderContext", "render"]

logger = logging.getLogger(__name__)

type Number = int | float | Decimal

# Character replaced by the offset-adjusted number inside plural branches
_POUND: str = "#"


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Explicit context for one render.

    Attributes:
        arguments: Argument values by name
        locale: Locale for categorization and localization
        pound: Replacement for '#' in text, None outside plural branches
            and inside select branches
    """

    arguments: Mapping[str, object]
    locale: str
    pound: str | None = None

    def with_pound(self, number: Number) -> "RenderContext":
        """Context for a selected plural/selectordinal branch."""
        return replace(self, pound=str(number))

    def without_pound(self) -> "RenderContext":
        """Context for a select branch, where '#' is literal."""
        return replace(self, pound=None)


def _exact_key(value: Number) -> ExactKey | None:
    """ExactKey matching value, or None if value is not integral."""
    try:
        integral = int(value)
    except (OverflowError, ValueError):
        return None
    return ExactKey(integral) if integral == value else None


class MessageRenderer:
    """Renders parsed patterns to strings.

    Holds only its collaborators, so one renderer can serve any number of
    concurrent renders.

    Example:
        >>> renderer = MessageRenderer()
        >>> renderer.render(parse("{n, plural, one {# item} other {# items}}"), {"n": 5}, "en")
        '5 items'
    """

    __slots__ = ("_localizer", "_plural_rules")

    def __init__(
        self,
        plural_rules: PluralRules | None = None,
        localizer: Localizer | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            plural_rules: Category registry (default: empty registry, so the
                built-in one/other and always-other defaults apply)
            localizer: Number/date/time renderer (default: BabelLocalizer)
        """
        self._plural_rules = plural_rules if plural_rules is not None else PluralRules()
        self._localizer = localizer if localizer is not None else BabelLocalizer()

    @property
    def plural_rules(self) -> PluralRules:
        """Category registry used for plural and selectordinal."""
        return self._plural_rules

    @property
    def localizer(self) -> Localizer:
        """Localizer used for number, date and time arguments."""
        return self._localizer

    def render(self, nodes: MessageNodes, arguments: Mapping[str, object], locale: str) -> str:
        """Render a parsed pattern.

        Simple arguments render with str(). A key bound to None is present,
        so it renders as 'None' rather than failing as missing.

        Args:
            nodes: Parsed pattern
            arguments: Argument values by name
            locale: Locale code

        Returns:
            Rendered string

        Raises:
            MissingArgumentError: A rendered placeholder has no argument
            BranchError: Neither the selected key nor 'other' exists
            ArgumentTypeError: Plural/selectordinal argument is not a number
        """
        return self._render_nodes(nodes, RenderContext(arguments, locale))

    def _render_nodes(self, nodes: MessageNodes, context: RenderContext) -> str:
        return "".join(self._render_node(node, context) for node in nodes)

    def _render_node(self, node: Node, context: RenderContext) -> str:
        match node:
            case TextNode(value=value):
                if context.pound is None:
                    return value
                return value.replace(_POUND, context.pound)
            case ArgumentNode(name=name):
                return str(self._argument(name, context))
            case NumberFormatNode():
                return self._render_number(node, context)
            case DateFormatNode(name=name, style=style):
                value = self._argument(name, context)
                return self._localizer.localize(value, context.locale, LocalizeKind.DATE, style)
            case TimeFormatNode(name=name, style=style):
                value = self._argument(name, context)
                return self._localizer.localize(value, context.locale, LocalizeKind.TIME, style)
            case PluralNode():
                return self._render_plural(
                    node, context, "plural", self._plural_rules.select_cardinal
                )
            case SelectOrdinalNode():
                return self._render_plural(
                    node, context, "selectordinal", self._plural_rules.select_ordinal
                )
            case SelectNode():
                return self._render_select(node, context)
            case _:
                raise MessageFormatResolutionError(
                    ErrorTemplate.unknown_node(type(node).__name__)
                )

    @staticmethod
    def _argument(name: str, context: RenderContext) -> object:
        if name not in context.arguments:
            raise MissingArgumentError(ErrorTemplate.missing_argument(name), argument_name=name)
        return context.arguments[name]

    def _render_number(self, node: NumberFormatNode, context: RenderContext) -> str:
        value = self._argument(node.name, context)
        try:
            return self._localizer.localize(value, context.locale, LocalizeKind.NUMBER, node.style)
        except LocalizationDataError as e:
            logger.debug("Number fallback for '%s': %s", node.name, e.diagnostic or e)
            return str(value)

    def _render_plural(
        self,
        node: PluralNode | SelectOrdinalNode,
        context: RenderContext,
        type_name: str,
        select: Callable[[Number, str], str],
    ) -> str:
        value = self._argument(node.name, context)
        if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
            raise ArgumentTypeError(
                ErrorTemplate.argument_type_mismatch(type_name, node.name, value),
                argument_name=node.name,
            )

        effective = value - node.offset

        # Exact match uses the value before the offset is applied
        exact = _exact_key(value)
        if exact is not None and exact in node.branches:
            body = node.branches[exact]
        else:
            category = select(effective, context.locale)
            body = self._select_branch(node.branches, category, type_name, node.name)

        return self._render_nodes(body, context.with_pound(effective))

    def _render_select(self, node: SelectNode, context: RenderContext) -> str:
        key = str(self._argument(node.name, context))
        body = self._select_branch(node.branches, key, "select", node.name)
        return self._render_nodes(body, context.without_pound())

    @staticmethod
    def _select_branch(
        branches: Branches, key: str, type_name: str, argument_name: str
    ) -> MessageNodes:
        if key in branches:
            return branches[key]
        if OTHER_KEY in branches:
            return branches[OTHER_KEY]
        raise BranchError(
            ErrorTemplate.branch_not_found(type_name, argument_name, key),
            argument_name=argument_name,
            key=key,
        )


def render(
    nodes: MessageNodes,
    arguments: Mapping[str, object],
    locale: str,
    plural_rules: PluralRules | None = None,
    localizer: Localizer | None = None,
) -> str:
    """Render a parsed pattern with a one-off renderer.

    Convenience function for MessageRenderer.render().

    Example:
        >>> render(parse("Hello, {name}!"), {"name": "world"}, "en")
        'Hello, world!'
    """
    return MessageRenderer(plural_rules, localizer).render(nodes, arguments, locale)
