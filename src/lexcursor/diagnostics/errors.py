"""lexcursor exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic for rich error information.

Hierarchy:
    LexCursorError
    ├── RuleDefinitionError
    ├── LexError
    │   ├── HandlerFailure
    │   ├── UnmatchedInputError
    │   └── SourceTooLargeError
    └── ParseError
        ├── EmptyQueueError
        ├── PredicateMismatchError
        └── GrammarError

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "EmptyQueueError",
    "GrammarError",
    "HandlerFailure",
    "LexCursorError",
    "LexError",
    "ParseError",
    "PredicateMismatchError",
    "RuleDefinitionError",
    "SourceTooLargeError",
    "UnmatchedInputError",
]


class LexCursorError(Exception):
    """Base exception for all lexcursor errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LexCursorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class RuleDefinitionError(LexCursorError):
    """A lexer rule is malformed.

    Raised by PatternLexer.add_rule() at setup time, never by lex().
    Signals a mistake by the rule author, not an input problem.
    """


class LexError(LexCursorError):
    """Lexing of a particular input failed.

    The whole lex() call is aborted; there is no partial result.
    """


class HandlerFailure(LexError):
    """A rule handler rejected its match.

    Attributes:
        position: Start offset of the rejected match
        text: The matched text
        cause: Whatever the handler returned in its Failure
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        position: int,
        text: str,
        cause: object = None,
    ) -> None:
        """Initialize HandlerFailure.

        Args:
            message: Error message string OR Diagnostic object
            position: Start offset of the rejected match
            text: The matched text
            cause: The handler's failure cause
        """
        super().__init__(message)
        self.position = position
        self.text = text
        self.cause = cause


class UnmatchedInputError(LexError):
    """No rule claims some offset of the input.

    Attributes:
        position: The first unclaimed offset
    """

    def __init__(self, message: str | Diagnostic, *, position: int) -> None:
        super().__init__(message)
        self.position = position


class SourceTooLargeError(LexError):
    """Input exceeds the configured maximum source size.

    Attributes:
        size: Length of the rejected input
        limit: Configured maximum
    """

    def __init__(self, message: str | Diagnostic, *, size: int, limit: int) -> None:
        super().__init__(message)
        self.size = size
        self.limit = limit


class ParseError(LexCursorError):
    """Base exception for token cursor and grammar failures.

    TokenCursor.parse() leaves the caller's position untouched whenever
    a sub-parser raises.
    """


class EmptyQueueError(ParseError):
    """A token was requested from an exhausted cursor.

    Also raised by TokenCursor.prev() before anything has been consumed.
    """


class PredicateMismatchError(ParseError):
    """The front token was rejected by a predicate or equality check."""


class GrammarError(ParseError):
    """Free-form syntax error raised by grammar code.

    Use for grammar-specific violations, e.g. an operator where a number
    was required.

    Example:
        >>> raise GrammarError("Expected a number")
        Traceback (most recent call last):
        ...
        lexcursor.diagnostics.errors.GrammarError: Expected a number
    """
