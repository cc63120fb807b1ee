"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from lexcursor.constants import MAX_MATCH_PREVIEW

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


def _preview(text: str) -> str:
    """Quote text for a message, truncated to MAX_MATCH_PREVIEW characters."""
    if len(text) > MAX_MATCH_PREVIEW:
        return repr(text[:MAX_MATCH_PREVIEW]) + "..."
    return repr(text)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # ------------------------------------------------------------------
    # Setup errors
    # ------------------------------------------------------------------

    @staticmethod
    def rule_pattern_invalid(pattern: str, reason: str) -> Diagnostic:
        """Rule pattern failed to compile.

        Args:
            pattern: The pattern source as registered
            reason: The regex engine's error message

        Returns:
            Diagnostic for RULE_PATTERN_INVALID
        """
        msg = f"Invalid pattern {pattern!r} passed to add_rule: {reason}"
        return Diagnostic(
            code=DiagnosticCode.RULE_PATTERN_INVALID,
            message=msg,
            hint="Check the pattern against Python's re syntax",
        )

    @staticmethod
    def rule_handler_invalid(handler: object) -> Diagnostic:
        """Rule handler is not callable.

        Args:
            handler: The object passed as handler

        Returns:
            Diagnostic for RULE_HANDLER_INVALID
        """
        msg = f"Rule handler must be callable, got {type(handler).__name__}"
        return Diagnostic(
            code=DiagnosticCode.RULE_HANDLER_INVALID,
            message=msg,
            hint="Pass a function taking a re.Match and returning Token, Ignore or Failure",
        )

    # ------------------------------------------------------------------
    # Lex errors
    # ------------------------------------------------------------------

    @staticmethod
    def handler_failure(text: str, cause: object, span: SourceSpan) -> Diagnostic:
        """Rule handler returned Failure for its match.

        Args:
            text: The matched text
            cause: The failure cause supplied by the handler
            span: Location of the match

        Returns:
            Diagnostic for HANDLER_FAILURE
        """
        msg = f"Rule handler rejected {_preview(text)} at position {span.start}"
        if cause is not None:
            msg += f": {cause}"
        return Diagnostic(
            code=DiagnosticCode.HANDLER_FAILURE,
            message=msg,
            span=span,
        )

    @staticmethod
    def unmatched_input(span: SourceSpan) -> Diagnostic:
        """No rule claims an input offset.

        Args:
            span: Location of the first unclaimed character

        Returns:
            Diagnostic for UNMATCHED_INPUT
        """
        msg = f"Unmatched input at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode.UNMATCHED_INPUT,
            message=msg,
            span=span,
            hint="Add a rule that matches this input, or a catch-all rule",
        )

    @staticmethod
    def source_too_large(size: int, limit: int) -> Diagnostic:
        """Input exceeds LexerConfig.max_source_size.

        Args:
            size: Length of the input
            limit: Configured maximum

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size ({size:,} characters) exceeds maximum ({limit:,} characters)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Configure max_source_size in LexerConfig to increase the limit",
        )

    # ------------------------------------------------------------------
    # Parse errors
    # ------------------------------------------------------------------

    @staticmethod
    def empty_queue(index: int) -> Diagnostic:
        """Token requested from an exhausted cursor.

        Args:
            index: Cursor position (equal to the token count)

        Returns:
            Diagnostic for EMPTY_QUEUE
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_QUEUE,
            message="Couldn't get token from empty TokenCursor",
            token_index=index,
        )

    @staticmethod
    def no_previous_token() -> Diagnostic:
        """prev() called before any token was consumed."""
        return Diagnostic(
            code=DiagnosticCode.NO_PREVIOUS_TOKEN,
            message="Couldn't read previous token: nothing has been consumed",
            token_index=0,
        )

    @staticmethod
    def predicate_mismatch(token: object, index: int) -> Diagnostic:
        """Predicate rejected the front token.

        Args:
            token: The rejected token
            index: Cursor position of the token

        Returns:
            Diagnostic for PREDICATE_MISMATCH
        """
        msg = f"Token {token!r} didn't match required format"
        return Diagnostic(
            code=DiagnosticCode.PREDICATE_MISMATCH,
            message=msg,
            token_index=index,
        )

    @staticmethod
    def token_not_equal(expected: object, found: object, index: int) -> Diagnostic:
        """Front token differs from the required token.

        Args:
            expected: The token the grammar required
            found: The token actually at the front
            index: Cursor position of the token

        Returns:
            Diagnostic for TOKEN_NOT_EQUAL
        """
        msg = f"Expected {expected!r}, found {found!r}"
        return Diagnostic(
            code=DiagnosticCode.TOKEN_NOT_EQUAL,
            message=msg,
            token_index=index,
        )

    @staticmethod
    def grammar_error(message: str, index: int | None = None) -> Diagnostic:
        """Grammar-specific syntax error.

        Args:
            message: Description supplied by grammar code
            index: Cursor position where the rule failed (optional)

        Returns:
            Diagnostic for GRAMMAR_ERROR
        """
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_ERROR,
            message=message,
            token_index=index,
        )
