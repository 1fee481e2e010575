"""ftlnumber - Fluent number values, canonical formatting and plural operands.

Converts numbers plus FTL formatting options (minimumFractionDigits,
maximumFractionDigits, ...) into the canonical decimal text interpolated
into messages, and into the CLDR plural operands used by select
expressions.

Public API:
    FluentNumber - Number with formatting options (as_string, parse, plural_operands)
    FormatOptions - Formatting knobs, patched from FTL named arguments via merge()
    FormatStyle, CurrencyDisplayStyle - Lenient style enumerations
    PluralOperands - CLDR operand tuple (n, i, v, w, f, t)
    number_format - NUMBER() built-in
    select_plural_category - CLDR plural category via Babel

Exceptions:
    FluentError - Base exception class
    FluentParseError - Decimal text is not a numeral
    FluentResolutionError - NUMBER() argument of the wrong type
    NumberInvariantError - Internal formatting fault (not user-recoverable)
"""

from .diagnostics import FluentError, FluentParseError, FluentResolutionError
from .enums import CurrencyDisplayStyle, FormatStyle
from .integrity import NumberInvariantError
from .runtime import (
    FluentArgs,
    FluentNumber,
    FluentValue,
    FormatOptions,
    PluralOperands,
    default_format_options,
    number_format,
    plural_operands,
    select_plural_category,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("ftlnumber")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CurrencyDisplayStyle",
    "FluentArgs",
    "FluentError",
    "FluentNumber",
    "FluentParseError",
    "FluentResolutionError",
    "FluentValue",
    "FormatOptions",
    "FormatStyle",
    "NumberInvariantError",
    "PluralOperands",
    "__version__",
    "default_format_options",
    "number_format",
    "plural_operands",
    "select_plural_category",
]
