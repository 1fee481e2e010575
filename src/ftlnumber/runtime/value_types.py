"""Value types exchanged with the message resolver.

Defines:
    - FluentValue: Union of all values a resolver passes around
    - FluentArgs: Named-argument mapping (FTL call arguments or message variables)
    - into_value(): Lift raw Python numbers into FluentNumber
    - try_number(): Parse numeric text into FluentNumber, keep other text

The runtime type is the tag: ``str`` is the text variant and FluentNumber
is the number variant.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from decimal import Decimal

from ftlnumber.diagnostics import FluentParseError
from ftlnumber.runtime.number import FluentNumber

__all__ = [
    "FluentArgs",
    "FluentValue",
    "into_value",
    "try_number",
]

# Type alias for Fluent-compatible values.
# Raw int/float/Decimal are accepted wherever a number is expected and are
# lifted with into_value().
type FluentValue = (
    str
    | int
    | float
    | bool
    | Decimal
    | datetime
    | date
    | FluentNumber
    | None
    | Sequence["FluentValue"]
    | Mapping[str, "FluentValue"]
)

# Named arguments: unique text keys mapped to values.
type FluentArgs = Mapping[str, FluentValue]


def into_value(value: FluentValue) -> FluentValue:
    """Lift a raw Python number into a FluentNumber with default options.

    bool is left as-is even though it is an int subclass.

    Example:
        >>> into_value(3)
        FluentNumber(value=3.0, options=FormatOptions(...))
        >>> into_value("3")
        '3'
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float | Decimal):
        return FluentNumber.from_primitive(value)
    return value


def try_number(text: str) -> FluentValue:
    """Return a FluentNumber if text is a decimal numeral, else the text.

    Example:
        >>> str(try_number("1.50"))
        '1.50'
        >>> try_number("many")
        'many'
    """
    try:
        return FluentNumber.parse(text)
    except FluentParseError:
        return text
