"""MessageFormat runtime package.

Provides the pattern cache, plural rules, localizers, the renderer and the
MessageFormat engine. Depends on syntax package for parsing.

Python 3.13+.
"""

from .cache import PatternCache
from .cache_config import CacheConfig
from .engine import MessageFormat
from .formatter import MessageRenderer, RenderContext, render
from .localizer import BabelLocalizer, Localizer
from .plural_rules import (
    ORDINAL_RULES,
    PluralRule,
    PluralRules,
    default_cardinal,
    default_ordinal,
    english_ordinal,
    install_all_ordinal_rules,
    install_cldr_rules,
    install_ordinal_rules,
)

__all__ = [
    "ORDINAL_RULES",
    "BabelLocalizer",
    "CacheConfig",
    "Localizer",
    "MessageFormat",
    "MessageRenderer",
    "PatternCache",
    "PluralRule",
    "PluralRules",
    "RenderContext",
    "default_cardinal",
    "default_ordinal",
    "english_ordinal",
    "install_all_ordinal_rules",
    "install_cldr_rules",
    "install_ordinal_rules",
    "render",
]
