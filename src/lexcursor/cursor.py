"""Token cursor infrastructure for backtracking recursive-descent parsers.

A TokenCursor is a position over an immutable token tuple. The tuple is
shared by every cursor cloned from it, so a clone costs one object and one
integer, which is what makes speculative parsing affordable.

Design Philosophy:
    - Tokens are immutable (tuple), shared, never copied
    - A cursor is just (tokens, pos); pos in [0, len(tokens)]
    - Every failure is a typed exception (EmptyQueueError,
      PredicateMismatchError, GrammarError), never a None return
    - Speculation happens on a private clone; commit is a single
      position assignment gated on success

Parse Function Contract:
    Every grammar rule is a function taking a cursor and returning
    ParseResult(value, pos), raising ParseError on failure:

        def parse_number(cursor: TokenCursor[Tok]) -> ParseResult[float]:
            token = cursor.consume_matching(Tok.is_number)
            return cursor.result(token.value)

        value = cursor.parse(parse_number)

    The function receives a fresh clone, may consume freely from it, and
    reports how far it got through the returned position. The caller's
    cursor moves only if the function returns.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Self

from lexcursor.constants import CURSOR_REPR_WINDOW
from lexcursor.diagnostics import (
    EmptyQueueError,
    ErrorTemplate,
    ParseError,
    PredicateMismatchError,
)

__all__ = ["ParseFn", "ParseResult", "ParseWithFn", "TokenCursor"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and resulting position.

    Type Parameters:
        T: The type of the parsed value

    Example:
        >>> cursor = TokenCursor(["a", "b"])
        >>> cursor.consume()
        'a'
        >>> result = cursor.result("A")
        >>> result.value, result.pos
        ('A', 1)
    """

    value: T
    pos: int


type ParseFn[L, T] = Callable[[TokenCursor[L]], ParseResult[T]]

type ParseWithFn[L, C, T] = Callable[[TokenCursor[L], C], ParseResult[T]]


class TokenCursor[L]:
    """Movable position over a shared, immutable token sequence.

    Two observable states: "has remaining input" and "exhausted"
    (``is_consumed``). Consumption moves forward only; the position moves
    backwards solely through an explicit go_to().

    Example:
        >>> cursor = TokenCursor([1, "+", 2])
        >>> cursor.consume()
        1
        >>> cursor.peek()
        '+'
        >>> cursor.pos
        1
        >>> cursor.is_consumed
        False
    """

    __slots__ = ("_pos", "_tokens")

    def __init__(self, tokens: Iterable[L], pos: int = 0) -> None:
        """Create a cursor over tokens.

        Args:
            tokens: Token sequence. A tuple is shared as-is; any other
                iterable is frozen into a new tuple.
            pos: Starting position (default: 0)

        Raises:
            ValueError: If pos is outside [0, len(tokens)]
        """
        self._tokens: tuple[L, ...] = tokens if isinstance(tokens, tuple) else tuple(tokens)
        self._pos = 0
        self.go_to(pos)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def tokens(self) -> tuple[L, ...]:
        """The shared token tuple."""
        return self._tokens

    @property
    def pos(self) -> int:
        """Index of the next token to be consumed."""
        return self._pos

    @property
    def is_consumed(self) -> bool:
        """True exactly when every token has been consumed."""
        return self._pos == len(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        upcoming = self._tokens[self._pos : self._pos + CURSOR_REPR_WINDOW]
        more = ", ..." if self._pos + CURSOR_REPR_WINDOW < len(self._tokens) else ""
        items = ", ".join(repr(token) for token in upcoming)
        return f"TokenCursor(pos={self._pos}/{len(self._tokens)}, upcoming=[{items}{more}])"

    def clone(self) -> Self:
        """Return an independent cursor at the same position.

        O(1): only the position is duplicated; the token tuple is shared.
        """
        clone = object.__new__(type(self))
        clone._tokens = self._tokens
        clone._pos = self._pos
        return clone

    __copy__ = clone

    def go_to(self, index: int) -> None:
        """Set the position directly.

        Used to commit a speculative parse, or by the cursor's owner to
        rewind and try an alternative production.

        Raises:
            ValueError: If index is outside [0, len(tokens)]
        """
        if not 0 <= index <= len(self._tokens):
            msg = f"Cursor position must be in [0, {len(self._tokens)}], got {index}"
            raise ValueError(msg)
        self._pos = index

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def peek(self) -> L:
        """Return the front token without consuming it.

        Raises:
            EmptyQueueError: If the cursor is exhausted
        """
        if self._pos >= len(self._tokens):
            raise EmptyQueueError(ErrorTemplate.empty_queue(self._pos))
        return self._tokens[self._pos]

    def consume(self) -> L:
        """Return the front token and advance past it.

        Raises:
            EmptyQueueError: If the cursor is exhausted (position unchanged)
        """
        token = self.peek()
        self._pos += 1
        return token

    def peek_matching(self, predicate: Callable[[L], bool]) -> L:
        """Return the front token if ``predicate`` accepts it.

        Raises:
            EmptyQueueError: If the cursor is exhausted
            PredicateMismatchError: If the predicate rejects the token
        """
        token = self.peek()
        if not predicate(token):
            raise PredicateMismatchError(ErrorTemplate.predicate_mismatch(token, self._pos))
        return token

    def consume_matching(self, predicate: Callable[[L], bool]) -> L:
        """Consume the front token if ``predicate`` accepts it.

        Does not advance on rejection.

        Raises:
            EmptyQueueError: If the cursor is exhausted
            PredicateMismatchError: If the predicate rejects the token
        """
        token = self.peek_matching(predicate)
        self._pos += 1
        return token

    def consume_if_equals(self, token: L) -> L:
        """Consume the front token if it equals ``token``.

        Raises:
            EmptyQueueError: If the cursor is exhausted
            PredicateMismatchError: If the front token differs
        """
        found = self.peek()
        if found != token:
            raise PredicateMismatchError(ErrorTemplate.token_not_equal(token, found, self._pos))
        self._pos += 1
        return found

    def prev(self) -> L:
        """Return the most recently consumed token.

        Raises:
            EmptyQueueError: If nothing has been consumed yet
        """
        if self._pos == 0:
            raise EmptyQueueError(ErrorTemplate.no_previous_token())
        return self._tokens[self._pos - 1]

    # ------------------------------------------------------------------
    # Speculative parsing
    # ------------------------------------------------------------------

    def result[T](self, value: T) -> ParseResult[T]:
        """Package ``value`` with this cursor's position for returning from a parse function."""
        return ParseResult(value, self._pos)

    def parse[T](self, parse_fn: ParseFn[L, T]) -> T:
        """Run a sub-parser speculatively and commit its position on success.

        ``parse_fn`` receives a private clone of this cursor. If it returns,
        this cursor moves to the returned position and the value is
        returned. If it raises, this cursor is left exactly where it was
        and the exception propagates, however far the sub-parser got.

        Raises:
            ParseError: Whatever the sub-parser raised
            ValueError: If the sub-parser reported an out-of-range position
        """
        outcome = parse_fn(self.clone())
        self._commit(outcome)
        return outcome.value

    def parse_with[T, C](self, parse_fn: ParseWithFn[L, C, T], context: C) -> T:
        """Like parse(), also passing a read-only ``context`` to the sub-parser.

        Use for grammars whose rules depend on external, slowly-changing
        state such as a symbol table.
        """
        outcome = parse_fn(self.clone(), context)
        self._commit(outcome)
        return outcome.value

    def try_parse[T](self, parse_fn: ParseFn[L, T]) -> T | None:
        """Like parse(), but return None instead of raising ParseError.

        Convenient for optional productions and alternation:

            call = cursor.try_parse(parse_call)
            if call is None:
                atom = cursor.parse(parse_atom)

        Only ParseError is converted; other exceptions propagate.
        """
        try:
            return self.parse(parse_fn)
        except ParseError as e:
            logger.debug("Speculative parse failed at token %d: %s", self._pos, e)
            return None

    def _commit(self, outcome: ParseResult[object]) -> None:
        self.go_to(outcome.pos)
        logger.debug("Committed speculative parse: token %d", self._pos)
