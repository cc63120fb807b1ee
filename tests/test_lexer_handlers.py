"""Tests for stock rule handlers and the Babel compatibility layer."""

from __future__ import annotations

import re
from decimal import Decimal

import pytest

from lexcursor import IGNORE, Failure, HandlerFailure, PatternLexer, Token
from lexcursor.core import BabelImportError, is_babel_available, require_babel
from lexcursor.lexer.handlers import convert, emit, emit_text, ignore, locale_decimal


def _match(pattern: str, text: str) -> re.Match[str]:
    match = re.fullmatch(pattern, text)
    assert match is not None
    return match


# ============================================================================
# GENERIC HANDLERS
# ============================================================================


class TestGenericHandlers:
    """Test ignore, emit, emit_text and convert."""

    def test_ignore(self) -> None:
        """ignore returns the IGNORE singleton."""
        assert ignore(_match(r"\s+", "  ")) is IGNORE

    def test_emit_constant(self) -> None:
        """emit() returns the same token for every match."""
        handler = emit("PLUS")

        assert handler(_match(r"\+", "+")) == Token("PLUS")

    def test_emit_text(self) -> None:
        """emit_text() applies the factory to the matched text."""
        handler = emit_text(str.upper)

        assert handler(_match(r"[a-z]+", "abc")) == Token("ABC")

    def test_emit_text_defaults_to_str(self) -> None:
        """Without a factory the matched text itself is the token."""
        assert emit_text()(_match(r"[a-z]+", "abc")) == Token("abc")

    def test_convert_success(self) -> None:
        """convert() wraps the converted value in Token."""
        assert convert(int)(_match(r"-?[0-9]+", "-42")) == Token(-42)

    def test_convert_listed_error_becomes_failure(self) -> None:
        """Listed exceptions become Failure carrying the exception."""
        result = convert(int)(_match(r"[0-9a-z]+", "12ab"))

        assert isinstance(result, Failure)
        assert isinstance(result.cause, ValueError)

    def test_convert_custom_error_types(self) -> None:
        """errors= selects which exceptions count as a rejected match."""
        handler = convert(lambda text: {"one": 1}[text], errors=(KeyError,))

        assert handler(_match(r"[a-z]+", "one")) == Token(1)
        assert isinstance(handler(_match(r"[a-z]+", "two")), Failure)

    def test_convert_unlisted_error_propagates(self) -> None:
        """Exceptions outside errors= are not swallowed."""
        handler = convert(lambda text: {"one": 1}[text])

        with pytest.raises(KeyError):
            handler(_match(r"[a-z]+", "two"))

    def test_convert_failure_aborts_lex(self) -> None:
        """A convert() failure inside lex() raises HandlerFailure."""
        lexer: PatternLexer[float] = PatternLexer()
        lexer.add_rule(r"[0-9.]+", convert(float))

        with pytest.raises(HandlerFailure, match="1.2.3"):
            lexer.lex("1.2.3")


# ============================================================================
# BABEL COMPATIBILITY
# ============================================================================


class TestBabelCompat:
    """Test the optional Babel layer (Babel is part of the test extra)."""

    def test_babel_available(self) -> None:
        """Babel is detected when installed."""
        assert is_babel_available() is True

    def test_require_babel_passes_when_installed(self) -> None:
        """require_babel() is a no-op with Babel installed."""
        require_babel("test feature")

    def test_babel_import_error_message(self) -> None:
        """BabelImportError names the feature and the install command."""
        error = BabelImportError("locale_decimal")

        assert "locale_decimal" in str(error)
        assert "pip install lexcursor[babel]" in str(error)
        assert error.feature == "locale_decimal"
        assert isinstance(error, ImportError)


# ============================================================================
# LOCALE-AWARE NUMBERS
# ============================================================================


class TestLocaleDecimal:
    """Test locale_decimal() with Babel's CLDR data."""

    @pytest.mark.parametrize(
        ("locale_code", "text", "expected"),
        [
            ("en_US", "1,234.56", Decimal("1234.56")),
            ("en-US", "1,234.56", Decimal("1234.56")),
            ("de_DE", "1.234,56", Decimal("1234.56")),
            ("en_US", "42", Decimal(42)),
        ],
    )
    def test_parses_locale_formatted_number(
        self, locale_code: str, text: str, expected: Decimal
    ) -> None:
        """Group and decimal separators follow the locale."""
        handler = locale_decimal(locale_code)

        assert handler(_match(r"[0-9][0-9,.]*", text)) == Token(expected)

    def test_malformed_number_is_failure(self) -> None:
        """Text Babel cannot parse yields Failure, not an exception."""
        handler = locale_decimal("en_US")
        result = handler(_match(r"[0-9][0-9,.]*", "1.2.3"))

        assert isinstance(result, Failure)
        assert isinstance(result.cause, Exception)

    def test_unknown_locale_rejected_at_setup(self) -> None:
        """An unknown locale fails when the handler is created."""
        with pytest.raises(ValueError, match="Unknown locale"):
            locale_decimal("xx_XX")

    def test_in_lexer(self) -> None:
        """locale_decimal works as a lexer rule."""
        lexer: PatternLexer[Decimal | str] = PatternLexer()
        lexer.add_rule(r"\s+", ignore)
        lexer.add_rule(r"[0-9][0-9,.]*", locale_decimal("en_US"))
        lexer.add_rule(r"[A-Z]{3}", emit_text(str))

        assert lexer.lex("1,000.50 EUR") == (Decimal("1000.50"), "EUR")
