"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel so that the
locale-aware number handler gives a consistent error when Babel is missing.

Design Rationale:
    lexcursor supports two installation modes:
    - Core only: `pip install lexcursor` (no external dependencies)
    - Locale-aware handlers: `pip install lexcursor[babel]`

    This module ensures that:
    1. Core installations never trigger Babel imports
    2. Babel-backed handlers fail fast with a helpful message when Babel is missing

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from babel import Locale


# pylint: disable=unnecessary-ellipsis
class BabelParseDecimalProtocol(Protocol):
    """Protocol for babel.numbers.parse_decimal."""

    def __call__(
        self,
        string: str,
        locale: Locale | str | None = None,
        strict: bool = False,
    ) -> Decimal:
        """Parse a locale-formatted number string."""
        ...
# pylint: enable=unnecessary-ellipsis


__all__ = [
    "BabelImportError",
    "BabelParseDecimalProtocol",
    "get_locale_class",
    "get_number_format_error_class",
    "get_parse_decimal_func",
    "get_unknown_locale_error_class",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install lexcursor[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed (cached)."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Use at the entry point of functions that require Babel.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """Get the Babel Locale class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error_class() -> type[Exception]:
    """Get the Babel UnknownLocaleError exception class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error_class")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def get_number_format_error_class() -> type[Exception]:
    """Get the Babel NumberFormatError exception class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_number_format_error_class")
    from babel.numbers import NumberFormatError  # noqa: PLC0415

    return NumberFormatError


def get_parse_decimal_func() -> BabelParseDecimalProtocol:
    """Get babel.numbers.parse_decimal.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_parse_decimal_func")
    from babel.numbers import parse_decimal  # noqa: PLC0415

    return parse_decimal
