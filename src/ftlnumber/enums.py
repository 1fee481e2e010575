"""Enumerations for ftlnumber formatting styles.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Parsing is lenient: unknown strings fall back to the enum's default member
instead of raising, so FTL sources written for newer option values keep
formatting with the nearest supported behavior.

Python 3.13+.
"""

from __future__ import annotations

from enum import StrEnum

__all__ = [
    "CurrencyDisplayStyle",
    "FormatStyle",
]


class FormatStyle(StrEnum):
    """Number formatting style.

    StrEnum provides automatic string conversion: str(FormatStyle.PERCENT) == "percent"
    """

    DECIMAL = "decimal"
    """Plain decimal number: 1234.5"""

    CURRENCY = "currency"
    """Monetary amount, paired with FormatOptions.currency"""

    PERCENT = "percent"
    """Percentage"""

    @classmethod
    def default(cls) -> FormatStyle:
        """Return the default style (DECIMAL)."""
        return cls.DECIMAL

    @classmethod
    def from_str(cls, value: str) -> FormatStyle:
        """Parse a style name, falling back to DECIMAL for unknown input.

        Example:
            >>> FormatStyle.from_str("percent")
            <FormatStyle.PERCENT: 'percent'>
            >>> FormatStyle.from_str("scientific")
            <FormatStyle.DECIMAL: 'decimal'>
        """
        try:
            return cls(value)
        except ValueError:
            return cls.default()


class CurrencyDisplayStyle(StrEnum):
    """How a currency is displayed next to a monetary amount.

    StrEnum provides automatic string conversion: str(CurrencyDisplayStyle.CODE) == "code"
    """

    SYMBOL = "symbol"
    """Currency symbol: $"""

    CODE = "code"
    """ISO 4217 code: USD"""

    NAME = "name"
    """Localized currency name: US dollars"""

    @classmethod
    def default(cls) -> CurrencyDisplayStyle:
        """Return the default display style (SYMBOL)."""
        return cls.SYMBOL

    @classmethod
    def from_str(cls, value: str) -> CurrencyDisplayStyle:
        """Parse a display style name, falling back to SYMBOL for unknown input."""
        try:
            return cls(value)
        except ValueError:
            return cls.default()
