"""Rule-driven lexing.

Provides PatternLexer, its rule and result types, configuration, and stock
handlers.

Python 3.13+.
"""

from .config import LexerConfig
from .core import PatternLexer
from .handlers import convert, emit, emit_text, ignore, locale_decimal
from .position import LineOffsetCache
from .rules import IGNORE, Failure, Ignore, LexResult, Lexeme, MatchHandler, Rule, Token

__all__ = [
    "IGNORE",
    "Failure",
    "Ignore",
    "LexResult",
    "Lexeme",
    "LexerConfig",
    "LineOffsetCache",
    "MatchHandler",
    "PatternLexer",
    "Rule",
    "Token",
    "convert",
    "emit",
    "emit_text",
    "ignore",
    "locale_decimal",
]
