"""Shared constants for icumessageformat.

This module provides centralized configuration constants used across
syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for parsing and rendering
- Cache limits: Memory bounds for caching subsystems
- Input limits: DoS prevention via size constraints
- Locale defaults: Locale used when a caller supplies none

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Cache limits
    "DEFAULT_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Locale defaults
    "DEFAULT_LOCALE",
    # Grammar
    "OTHER_KEY",
    "OFFSET_KEYWORD",
    "KEY_SEPARATOR",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of plural/select/selectordinal branches.
# Enforced by the parser while descending into branch bodies.
# Real catalogs nest two or three levels; 100 is clearly malformed input.
MAX_DEPTH: int = 100

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Default maximum entries in the parsed-pattern cache.
DEFAULT_CACHE_SIZE: int = 1000

# Maximum cached Babel Locale objects (see locale_utils.get_babel_locale).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum pattern length in characters (1 MiB).
# A single translation pattern beyond this size is not a message.
MAX_SOURCE_SIZE: int = 1024 * 1024

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used by MessageFormat when neither the engine nor the call names one.
DEFAULT_LOCALE: str = "en"

# ============================================================================
# GRAMMAR
# ============================================================================

# Fallback branch key for plural, select and selectordinal.
OTHER_KEY: str = "other"

# Literal clause introducing a plural/selectordinal offset.
OFFSET_KEYWORD: str = "offset:"

# Separator used when flattening nested translation documents.
KEY_SEPARATOR: str = "."
