"""lexcursor - rule-driven lexing and backtracking token cursors.

A small toolkit for hand-written parsers of domain-specific languages:
a pattern lexer that resolves overlapping rule matches by maximal munch
with a first-registered tie-break, and a token cursor whose speculative
parses only move the caller's position when they succeed.

Public API:
    PatternLexer - Ordered (pattern, handler) rules; lex(text) -> tokens
    LexerConfig - Size limit and full-coverage check
    Token, IGNORE, Failure - Handler outcomes
    TokenCursor - Position over a shared token tuple; parse()/parse_with()
    ParseResult - (value, pos) returned by grammar rule functions

Exceptions:
    LexCursorError - Base exception class
    RuleDefinitionError - Malformed rule (setup time)
    LexError - HandlerFailure, UnmatchedInputError, SourceTooLargeError
    ParseError - EmptyQueueError, PredicateMismatchError, GrammarError

Submodules:
    lexcursor.lexer.handlers - Stock handlers (emit, convert, locale_decimal)
    lexcursor.diagnostics - Error codes, templates and formatting
"""

from .cursor import ParseFn, ParseResult, ParseWithFn, TokenCursor
from .diagnostics import (
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
from .lexer import IGNORE, Failure, Ignore, Lexeme, LexerConfig, PatternLexer, Token

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("lexcursor")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "IGNORE",
    "EmptyQueueError",
    "Failure",
    "GrammarError",
    "HandlerFailure",
    "Ignore",
    "LexCursorError",
    "LexError",
    "Lexeme",
    "LexerConfig",
    "ParseError",
    "ParseFn",
    "ParseResult",
    "ParseWithFn",
    "PatternLexer",
    "PredicateMismatchError",
    "RuleDefinitionError",
    "SourceTooLargeError",
    "Token",
    "TokenCursor",
    "UnmatchedInputError",
    "__version__",
]
