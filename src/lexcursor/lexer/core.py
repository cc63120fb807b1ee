"""Rule-driven pattern lexer.

This module provides PatternLexer, which converts text into tokens under a
maximal-munch-with-first-registered-tiebreak policy.

Algorithm:
    Every rule's pattern is run over the *entire* input (``finditer``), rule
    by rule in registration order. Each candidate match is checked against a
    coverage record holding, per input offset, the (start, length) of the
    match that currently claims it:

    - if any covered offset is claimed by a match at least as long as the
      candidate, the candidate is rejected and nothing changes;
    - otherwise every overlapped claim is displaced (its whole range is
      cleared and its token, if any, dropped) and the candidate claims its
      range, then its handler runs.

    Longer matches therefore always win, and among equal lengths the match
    seen first (earlier rule, or earlier in the same rule's scan) wins.
    A zero-length candidate covers no offsets, so it is always accepted and
    its handler always runs; a token it produces sits at its start offset.
    Once all rules have run, every offset must be claimed (configurable),
    and accepted tokens are returned sorted by start offset.

Example:
    >>> lexer = PatternLexer()
    >>> lexer.add_rule(r"\\s+", lambda m: IGNORE)
    >>> lexer.add_rule(r"[0-9]+", lambda m: Token(int(m.group())))
    >>> lexer.add_rule(r"\\+", lambda m: Token("+"))
    >>> lexer.lex("1 + 22")
    (1, '+', 22)
"""

import logging
import re
from collections.abc import Callable

from lexcursor.diagnostics import (
    ErrorTemplate,
    HandlerFailure,
    RuleDefinitionError,
    SourceTooLargeError,
    UnmatchedInputError,
)

from .config import LexerConfig
from .position import LineOffsetCache
from .rules import Failure, Ignore, Lexeme, MatchHandler, Rule, Token

__all__ = ["PatternLexer"]

logger = logging.getLogger(__name__)

# (start, length) of the match owning an offset
type _Claim = tuple[int, int]


class PatternLexer[T]:
    """Ordered list of (pattern, handler) rules applied to whole inputs.

    Rule order only breaks ties between equal-length overlapping matches;
    there is no explicit priority field. A keyword rule coexists with a
    generic identifier rule by being registered first, since the keyword
    and the identifier match of the same word have equal length.

    Attributes:
        config: Lexer configuration (size limit, coverage check)
    """

    __slots__ = ("_config", "_rules")

    def __init__(self, config: LexerConfig | None = None) -> None:
        """Initialize an empty lexer.

        Args:
            config: Lexer configuration (default: LexerConfig())
        """
        self._config = config if config is not None else LexerConfig()
        self._rules: list[Rule[T]] = []

    @property
    def config(self) -> LexerConfig:
        """Lexer configuration."""
        return self._config

    @property
    def rules(self) -> tuple[Rule[T], ...]:
        """Registered rules in registration order."""
        return tuple(self._rules)

    def add_rule(
        self,
        pattern: str | re.Pattern[str],
        handler: MatchHandler[T],
        *,
        flags: int | re.RegexFlag = 0,
    ) -> None:
        """Register a rule at the end of the rule list.

        Args:
            pattern: Pattern source, or an already compiled pattern
            handler: Function mapping a re.Match to Token, Ignore or Failure
            flags: re flags used when compiling a pattern source

        Raises:
            RuleDefinitionError: If the pattern is malformed or the handler
                is not callable. This is a rule authoring mistake, not an
                input-dependent failure.
        """
        if not callable(handler):
            raise RuleDefinitionError(ErrorTemplate.rule_handler_invalid(handler))

        if isinstance(pattern, re.Pattern):
            compiled = pattern
        else:
            try:
                compiled = re.compile(pattern, flags)
            except re.error as e:
                raise RuleDefinitionError(
                    ErrorTemplate.rule_pattern_invalid(pattern, str(e))
                ) from e

        self._rules.append(Rule(compiled, handler))
        logger.debug("Registered rule #%d: %r", len(self._rules) - 1, compiled.pattern)

    def rule(
        self,
        pattern: str | re.Pattern[str],
        *,
        flags: int | re.RegexFlag = 0,
    ) -> Callable[[MatchHandler[T]], MatchHandler[T]]:
        """Decorator form of add_rule().

        Example:
            >>> lexer = PatternLexer()
            >>> @lexer.rule(r"[a-z]+")
            ... def word(match):
            ...     return Token(match.group())
        """

        def decorator(handler: MatchHandler[T]) -> MatchHandler[T]:
            self.add_rule(pattern, handler, flags=flags)
            return handler

        return decorator

    def lex(self, text: str) -> tuple[T, ...]:
        """Convert text into tokens ordered by source position.

        Args:
            text: Complete input

        Returns:
            Tuple of tokens produced by the winning matches

        Raises:
            SourceTooLargeError: If text exceeds config.max_source_size
            HandlerFailure: If a handler returned Failure for an accepted match
            UnmatchedInputError: If some character is claimed by no rule
                (only when config.require_full_coverage is set)
        """
        return tuple(lexeme.value for lexeme in self.tokenize(text))

    def tokenize(self, text: str) -> tuple[Lexeme[T], ...]:
        """Like lex(), but keep each token's source span.

        Args:
            text: Complete input

        Returns:
            Tuple of Lexeme objects ordered by start offset

        Raises:
            Same as lex()
        """
        limit = self._config.max_source_size
        if limit > 0 and len(text) > limit:
            raise SourceTooLargeError(
                ErrorTemplate.source_too_large(len(text), limit),
                size=len(text),
                limit=limit,
            )

        coverage: list[_Claim | None] = [None] * len(text)
        accepted: dict[_Claim, Lexeme[T]] = {}
        # Empty matches claim no offsets, so nothing can displace them
        empty: list[Lexeme[T]] = []

        for rule in self._rules:
            for candidate in rule.pattern.finditer(text):
                start, end = candidate.span()
                if not self._claim(coverage, accepted, start, end):
                    continue

                result = rule.handle(candidate)
                match result:
                    case Token(value=value):
                        lexeme = Lexeme(value, start, end, candidate.group())
                        if start == end:
                            empty.append(lexeme)
                        else:
                            accepted[(start, end - start)] = lexeme
                    case Ignore():
                        pass
                    case Failure(cause=cause):
                        raise self._handler_failure(text, candidate, cause)
                    case _:
                        msg = (
                            f"Rule handler for {rule.pattern.pattern!r} returned "
                            f"{type(result).__name__}, expected Token, Ignore or Failure"
                        )
                        raise TypeError(msg)

        if self._config.require_full_coverage:
            for pos, claim in enumerate(coverage):
                if claim is None:
                    span = LineOffsetCache(text).span(pos, pos + 1)
                    raise UnmatchedInputError(ErrorTemplate.unmatched_input(span), position=pos)

        lexemes = tuple(
            sorted([*accepted.values(), *empty], key=lambda lexeme: (lexeme.start, lexeme.end))
        )
        logger.debug(
            "Lexed %d characters into %d tokens with %d rules",
            len(text),
            len(lexemes),
            len(self._rules),
        )
        return lexemes

    @staticmethod
    def _claim(
        coverage: list[_Claim | None],
        accepted: dict[_Claim, Lexeme[T]],
        start: int,
        end: int,
    ) -> bool:
        """Try to claim [start, end) for a candidate match.

        Returns:
            True if the candidate took priority and now owns its range,
            False if an existing claim of equal or greater length kept it.
        """
        length = end - start
        overlapped: set[_Claim] = set()
        for pos in range(start, end):
            claim = coverage[pos]
            if claim is None:
                continue
            if claim[1] >= length:
                return False
            overlapped.add(claim)

        for claim_start, claim_length in overlapped:
            for pos in range(claim_start, claim_start + claim_length):
                coverage[pos] = None
            # Ignored claims never produced a token
            accepted.pop((claim_start, claim_length), None)

        owner = (start, length)
        for pos in range(start, end):
            coverage[pos] = owner
        return True

    @staticmethod
    def _handler_failure(text: str, match: re.Match[str], cause: object) -> HandlerFailure:
        """Build the HandlerFailure for a rejected match."""
        start, end = match.span()
        span = LineOffsetCache(text).span(start, end)
        error = HandlerFailure(
            ErrorTemplate.handler_failure(match.group(), cause, span),
            position=start,
            text=match.group(),
            cause=cause,
        )
        if isinstance(cause, BaseException):
            error.__cause__ = cause
        return error
