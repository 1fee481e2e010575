"""Hypothesis strategies for ftlnumber property-based testing.

Usage:
    from tests.strategies import decimal_numerals, finite_doubles
    from tests.strategies.numbers import fraction_digit_counts
"""

from .numbers import (
    decimal_numerals,
    finite_doubles,
    fraction_digit_counts,
    named_option_args,
    numeric_kind_names,
)

__all__ = [
    "decimal_numerals",
    "finite_doubles",
    "fraction_digit_counts",
    "named_option_args",
    "numeric_kind_names",
]
