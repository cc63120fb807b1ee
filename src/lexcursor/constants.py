"""Shared constants for lexcursor.

This module provides centralized configuration constants used across the
lexer and cursor packages. Placing constants here avoids circular imports
and provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Display limits: Bounded debug output

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Display limits
    "CURSOR_REPR_WINDOW",
    "MAX_MATCH_PREVIEW",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 Mi).
# The coverage record holds one slot per input character, so lexing memory
# grows linearly with input size. Set LexerConfig.max_source_size=0 to disable.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# DISPLAY LIMITS
# ============================================================================

# Number of upcoming tokens shown by repr(TokenCursor).
CURSOR_REPR_WINDOW: int = 20

# Maximum characters of matched text quoted in lexer diagnostics.
MAX_MATCH_PREVIEW: int = 40
