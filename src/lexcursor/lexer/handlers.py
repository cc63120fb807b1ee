"""Stock rule handlers.

Small factories for the handlers most grammars need, so rule tables stay
declarative:

    lexer.add_rule(r"\\s+", ignore)
    lexer.add_rule(r"\\+", emit(Op.ADD))
    lexer.add_rule(r"[a-z]+", emit_text(Ident))
    lexer.add_rule(r"-?[0-9]+", convert(int))
    lexer.add_rule(r"[0-9][0-9 ,.]*", locale_decimal("lv_LV"))

Babel Dependency:
    locale_decimal() requires Babel. Import is deferred to handler creation
    time so that core installations never import Babel.
"""

import re
from collections.abc import Callable
from decimal import Decimal, InvalidOperation

from lexcursor.core.babel_compat import (
    get_locale_class,
    get_number_format_error_class,
    get_parse_decimal_func,
    get_unknown_locale_error_class,
    require_babel,
)

from .rules import IGNORE, Failure, Ignore, LexResult, MatchHandler, Token

__all__ = ["convert", "emit", "emit_text", "ignore", "locale_decimal"]


def ignore(match: re.Match[str]) -> Ignore:  # noqa: ARG001 - handler signature
    """Claim the match without emitting a token (whitespace, comments)."""
    return IGNORE


def emit[T](value: T) -> MatchHandler[T]:
    """Handler emitting the same token for every match.

    Example:
        >>> lexer.add_rule(r"\\(", emit(Punct.LPAREN))
    """

    def handler(match: re.Match[str]) -> LexResult[T]:  # noqa: ARG001
        return Token(value)

    return handler


def emit_text[T](factory: Callable[[str], T] = str) -> MatchHandler[T]:  # type: ignore[assignment]
    """Handler emitting ``factory(matched_text)``.

    Use for tokens that carry their text, e.g. identifiers.
    """

    def handler(match: re.Match[str]) -> LexResult[T]:
        return Token(factory(match.group()))

    return handler


def convert[T](
    func: Callable[[str], T],
    *,
    errors: tuple[type[Exception], ...] = (ValueError,),
) -> MatchHandler[T]:
    """Handler converting the matched text, failing on conversion errors.

    Exceptions listed in ``errors`` become ``Failure(exc)``, which aborts
    lexing with a HandlerFailure chained to the original exception. Other
    exceptions propagate unchanged.

    Args:
        func: Conversion applied to the matched text (e.g. int, float)
        errors: Exception types treated as a rejected match

    Example:
        >>> lexer.add_rule(r"-?[0-9]+(?:\\.[0-9]+)?", convert(float))
    """

    def handler(match: re.Match[str]) -> LexResult[T]:
        try:
            return Token(func(match.group()))
        except errors as e:
            return Failure(e)

    return handler


def locale_decimal(locale_code: str) -> MatchHandler[Decimal]:
    """Handler parsing locale-formatted numbers into Decimal.

    Uses Babel's CLDR data, so "1 234,56" lexes to Decimal("1234.56") for
    lv_LV and "1,234.56" does for en_US.

    Args:
        locale_code: Locale identifier ("en_US" or BCP 47 "en-US")

    Returns:
        Handler emitting Token(Decimal) or Failure(NumberFormatError)

    Raises:
        BabelImportError: If Babel is not installed
        ValueError: If the locale is unknown. Raised here, at rule setup,
            rather than on every match.
    """
    require_babel("locale_decimal")
    locale_class = get_locale_class()
    unknown_locale_error_class = get_unknown_locale_error_class()
    number_format_error_class = get_number_format_error_class()
    babel_parse_decimal = get_parse_decimal_func()

    try:
        locale = locale_class.parse(locale_code.replace("-", "_"))
    except (unknown_locale_error_class, ValueError) as e:
        msg = f"Unknown locale {locale_code!r} for locale_decimal"
        raise ValueError(msg) from e

    def handler(match: re.Match[str]) -> LexResult[Decimal]:
        try:
            return Token(babel_parse_decimal(match.group(), locale=locale))
        except (number_format_error_class, InvalidOperation) as e:
            return Failure(e)

    return handler
