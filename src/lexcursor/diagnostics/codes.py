"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Setup errors (rule authoring mistakes)
        2000-2999: Lex errors (input the rules cannot tokenize)
        3000-3999: Parse errors (token cursor and grammar failures)
    """

    # Setup errors (1000-1999)
    RULE_PATTERN_INVALID = 1001
    RULE_HANDLER_INVALID = 1002

    # Lex errors (2000-2999)
    HANDLER_FAILURE = 2001
    UNMATCHED_INPUT = 2002
    SOURCE_TOO_LARGE = 2003

    # Parse errors (3000-3999)
    EMPTY_QUEUE = 3001
    NO_PREVIOUS_TOKEN = 3002
    PREDICATE_MISMATCH = 3003
    TOKEN_NOT_EQUAL = 3004
    GRAMMAR_ERROR = 3005

    @property
    def category(self) -> str:
        """Failure stage: "setup", "lex" or "parse"."""
        if self.value < 2000:
            return "setup"
        if self.value < 3000:
            return "lex"
        return "parse"


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is less than 1
                (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Lex errors carry a source span;
    parse errors carry the token index where the cursor stood.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (lex errors only)
        hint: Suggestion for fixing the error
        token_index: Cursor position at the time of the error (parse errors only)
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    token_index: int | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNMATCHED_INPUT]: Unmatched input at position 2
              --> line 1, column 3
              = help: Add a rule that matches this input, or a catch-all rule

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
