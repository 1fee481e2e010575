"""Fluent number runtime package.

Provides FluentNumber, its formatting options, primitive conversions,
plural operand derivation, and the NUMBER() built-in.

Python 3.13+.
"""

from .conversion import NUMERIC_KINDS, NumericKind
from .functions import BUILTIN_FUNCTIONS, number_format
from .number import FluentNumber
from .operands import PluralOperands, operands_from_str, plural_operands
from .options import FormatOptions, default_format_options
from .plural_rules import select_plural_category
from .value_types import FluentArgs, FluentValue, into_value, try_number

__all__ = [
    "BUILTIN_FUNCTIONS",
    "NUMERIC_KINDS",
    "FluentArgs",
    "FluentNumber",
    "FluentValue",
    "FormatOptions",
    "NumericKind",
    "PluralOperands",
    "default_format_options",
    "into_value",
    "number_format",
    "operands_from_str",
    "plural_operands",
    "select_plural_category",
    "try_number",
]
