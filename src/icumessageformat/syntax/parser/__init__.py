"""MessageFormat parser module.

This module provides the MessageFormatParser class and related parsing
utilities organized into focused submodules.

Module Organization:
- core.py: Main MessageFormatParser class
- primitives.py: Basic parsers (identifiers, integers, expected characters)
- rules.py: All grammar rules (messages, arguments, branch lists)

Public API:
    MessageFormatParser: Main parser class
    ParseContext: Parse context for depth tracking (advanced usage)
"""

from icumessageformat.syntax.parser.core import MessageFormatParser
from icumessageformat.syntax.parser.rules import ParseContext

__all__ = ["MessageFormatParser", "ParseContext"]
