"""Fluent NUMBER() built-in.

NUMBER() re-exposes a number to FTL with additional formatting options:

    price = { NUMBER($amount, minimumFractionDigits: 2) }

The named arguments are merged into a copy of the number's options, so the
caller's FluentNumber is never mutated by a message that formats it.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType

from ftlnumber.diagnostics import FluentResolutionError
from ftlnumber.diagnostics.templates import ErrorTemplate
from ftlnumber.runtime.number import FluentNumber
from ftlnumber.runtime.value_types import FluentArgs, FluentValue

__all__ = ["BUILTIN_FUNCTIONS", "number_format"]

logger = logging.getLogger(__name__)


def number_format(value: FluentValue, named: FluentArgs | None = None) -> FluentNumber:
    """Apply NUMBER() to a value.

    Args:
        value: FluentNumber, raw int/float/Decimal, or numeric text
        named: FTL named arguments (camelCase keys)

    Returns:
        New FluentNumber with merged options

    Raises:
        FluentParseError: If value is text that is not a decimal numeral
        FluentResolutionError: If value is of any other type

    Examples:
        >>> str(number_format(5, {"minimumFractionDigits": 2}))
        '5.00'
        >>> str(number_format("3.14159", {"maximumFractionDigits": 2}))
        '3.14000'

    Note:
        Text inherits minimumFractionDigits from its written digits, which
        wins over a smaller maximumFractionDigits (padding happens last).
    """
    match value:
        case FluentNumber():
            number = value
        case bool():
            raise _type_mismatch(value)
        case int() | float() | Decimal():
            number = FluentNumber.from_primitive(value)
        case str():
            number = FluentNumber.parse(value)
        case _:
            raise _type_mismatch(value)

    if named:
        logger.debug("NUMBER(%r) merging options: %s", number.value, sorted(named))
    return number.with_args(named or {})


def _type_mismatch(value: object) -> FluentResolutionError:
    diagnostic = ErrorTemplate.type_mismatch(
        "NUMBER", "value", "Number", type(value).__name__
    )
    return FluentResolutionError(diagnostic)


BUILTIN_FUNCTIONS: Mapping[str, object] = MappingProxyType({"NUMBER": number_format})
