"""Diagnostic system for lexcursor errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    EmptyQueueError,
    GrammarError,
    HandlerFailure,
    LexCursorError,
    LexError,
    ParseError,
    PredicateMismatchError,
    RuleDefinitionError,
    SourceTooLargeError,
    UnmatchedInputError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EmptyQueueError",
    "ErrorTemplate",
    "GrammarError",
    "HandlerFailure",
    "LexCursorError",
    "LexError",
    "OutputFormat",
    "ParseError",
    "PredicateMismatchError",
    "RuleDefinitionError",
    "SourceSpan",
    "SourceTooLargeError",
    "UnmatchedInputError",
]
