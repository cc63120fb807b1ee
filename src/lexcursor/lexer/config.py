"""Lexer configuration.

Provides a single frozen dataclass that encapsulates the tunable
parameters of PatternLexer.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from lexcursor.constants import MAX_SOURCE_SIZE

__all__ = ["LexerConfig"]


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable configuration for PatternLexer.

    All fields have sensible defaults; constructing ``LexerConfig()`` with
    no arguments produces the canonical behavior.

    Attributes:
        max_source_size: Maximum input length in characters (default: 10 Mi).
            Set to 0 to disable the limit (not recommended for untrusted input).
        require_full_coverage: If True (default), lex() raises
            UnmatchedInputError when any input character is claimed by no
            rule. If False, unclaimed input is silently dropped.

    Example:
        >>> config = LexerConfig(max_source_size=4096)
        >>> lexer = PatternLexer(config)
        >>> lexer.config.max_source_size
        4096
    """

    max_source_size: int = MAX_SOURCE_SIZE
    require_full_coverage: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_source_size is negative.
        """
        if self.max_source_size < 0:
            msg = "max_source_size must be >= 0 (0 disables the limit)"
            raise ValueError(msg)
