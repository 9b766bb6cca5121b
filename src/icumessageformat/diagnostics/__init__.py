"""Diagnostic system for MessageFormat errors.

Provides structured error diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    ArgumentTypeError,
    BranchError,
    LocalizationDataError,
    MessageFormatError,
    MessageFormatResolutionError,
    MissingArgumentError,
    ParseError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ArgumentTypeError",
    "BranchError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "LocalizationDataError",
    "MessageFormatError",
    "MessageFormatResolutionError",
    "MissingArgumentError",
    "OutputFormat",
    "ParseError",
    "SourceSpan",
]
