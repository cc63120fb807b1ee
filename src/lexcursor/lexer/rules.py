"""Lexer rule data types.

A rule is data: a compiled pattern plus a handler function. Handlers map
a match to one of three outcomes:

    Token(value)    - emit a token
    IGNORE          - claim the text without emitting anything (whitespace)
    Failure(cause)  - abort the whole lex() call

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

__all__ = [
    "IGNORE",
    "Failure",
    "Ignore",
    "LexResult",
    "Lexeme",
    "MatchHandler",
    "Rule",
    "Token",
]


@dataclass(frozen=True, slots=True)
class Token[T]:
    """Handler outcome: emit ``value`` as a token."""

    value: T


@dataclass(frozen=True, slots=True)
class Ignore:
    """Handler outcome: claim the matched text without emitting a token.

    The range stays claimed, so a later, lower-priority rule cannot match it.
    Use the IGNORE singleton.
    """


IGNORE = Ignore()


@dataclass(frozen=True, slots=True)
class Failure:
    """Handler outcome: reject the match and abort lexing.

    Attributes:
        cause: Exception or message explaining the rejection. Exceptions
            become the ``__cause__`` of the resulting HandlerFailure.
    """

    cause: BaseException | str | None = None


type LexResult[T] = Token[T] | Ignore | Failure

type MatchHandler[T] = Callable[[re.Match[str]], LexResult[T]]


@dataclass(frozen=True, slots=True)
class Rule[T]:
    """An immutable (pattern, handler) pair.

    Attributes:
        pattern: Compiled pattern matched against the whole input
        handler: Maps each accepted match to a LexResult
    """

    pattern: re.Pattern[str]
    handler: MatchHandler[T]

    def handle(self, match: re.Match[str]) -> LexResult[T]:
        """Invoke the handler on an accepted match."""
        return self.handler(match)


@dataclass(frozen=True, slots=True)
class Lexeme[T]:
    """A token together with the source span it was produced from.

    Attributes:
        value: The token returned by the rule handler
        start: Start offset in the source (inclusive)
        end: End offset in the source (exclusive)
        text: The matched source text
    """

    value: T
    start: int
    end: int
    text: str

    @property
    def length(self) -> int:
        """Number of characters covered."""
        return self.end - self.start
