"""FluentNumber: a numeric value carrying its formatting options.

A FluentNumber pairs a 64-bit float with a FormatOptions record. It is the
number variant of FluentValue: NUMBER() returns one, select expressions
derive plural operands from one, and message interpolation renders one
through as_string().

Canonical formatting:
    1. Render in fixed point with maximum_fraction_digits (default 15,
       capped at 1074 where every double is exact, and clamped to 9 on
       platforms with a native word narrower than 64 bits)
    2. Strip trailing fraction zeros
    3. Pad back up to minimum_fraction_digits
    4. Drop a dangling decimal point

No grouping, currency symbols, integer padding or significant-digit
rounding is applied here; those options are carried for richer formatters.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from ftlnumber.constants import (
    DEFAULT_MAXIMUM_FRACTION_DIGITS,
    MAX_EXACT_FRACTION_DIGITS,
    NARROW_MAXIMUM_FRACTION_DIGITS,
    NATIVE_WORD_BITS,
    WIDE_WORD_BITS,
)
from ftlnumber.diagnostics import FluentParseError
from ftlnumber.diagnostics.templates import ErrorTemplate
from ftlnumber.integrity import IntegrityContext, NumberInvariantError
from ftlnumber.runtime.conversion import NumericKind, cast_float, narrow, to_f64
from ftlnumber.runtime.options import FormatOptions, default_format_options

if TYPE_CHECKING:
    from ftlnumber.runtime.operands import PluralOperands
    from ftlnumber.runtime.value_types import FluentValue

__all__ = ["FluentNumber"]

logger = logging.getLogger(__name__)

# Decimal numeral accepted by FluentNumber.parse(). ASCII digits only,
# no surrounding whitespace, no digit separators.
_DECIMAL_NUMERAL = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_FRACTION_DIGITS = re.compile(r"[0-9]*")


def _working_precision(options: FormatOptions) -> int:
    precision = options.maximum_fraction_digits
    if precision is None:
        precision = DEFAULT_MAXIMUM_FRACTION_DIGITS
    precision = min(precision, MAX_EXACT_FRACTION_DIGITS)
    if NATIVE_WORD_BITS < WIDE_WORD_BITS:
        precision = min(precision, NARROW_MAXIMUM_FRACTION_DIGITS)
    return precision


@dataclass(frozen=True, slots=True)
class FluentNumber:
    """Numeric value with formatting options.

    Attributes:
        value: The number, stored as a 64-bit float
        options: Formatting options (defaults from default_format_options())

    Example:
        >>> FluentNumber(1234.5).as_string()
        '1234.5'
        >>> FluentNumber.parse("1.50").as_string()
        '1.50'
        >>> n = FluentNumber(5)
        >>> n.options.merge({"minimumFractionDigits": 2})
        >>> str(n)
        '5.00'

    Thread Safety:
        The value binding is frozen. The options record is patched at most
        once, through merge(), by the owner before the number is shared.
        Use with_args() to obtain a merged copy without touching a shared
        instance. After that, formatting and conversion are safe from any
        thread.
    """

    value: float
    options: FormatOptions = field(default_factory=default_format_options)

    def __post_init__(self) -> None:
        """Normalize value to a 64-bit float."""
        object.__setattr__(self, "value", to_f64(self.value))

    def __str__(self) -> str:
        """Return the canonical decimal string."""
        return self.as_string()

    def __float__(self) -> float:
        """Return the raw value."""
        return self.value

    def __int__(self) -> int:
        """Return the raw value truncated into the i64 range."""
        return int(self.to_primitive("i64"))

    def as_string(self) -> str:
        """Render the canonical decimal string.

        Only maximum_fraction_digits and minimum_fraction_digits are
        consulted. Non-finite values render as 'inf', '-inf' or 'nan'.

        Returns:
            Fixed-point text without exponent or grouping

        Raises:
            NumberInvariantError: If fixed-point rendering of a finite value
                with a positive precision lacks a decimal point
        """
        precision = _working_precision(self.options)
        text = format(self.value, f".{precision}f")
        if "." in text:
            text = text.rstrip("0")

        minimum = self.options.minimum_fraction_digits
        if minimum is not None and precision > 0 and math.isfinite(self.value):
            point = text.find(".")
            if point < 0:
                msg = f"Fixed-point rendering of {self.value!r} has no decimal point"
                raise NumberInvariantError(
                    msg,
                    IntegrityContext(
                        component="number",
                        operation="as_string",
                        key=repr(self.value),
                        expected="text containing '.'",
                        actual=text,
                    ),
                )
            visible = len(text) - point - 1
            text += "0" * max(0, minimum - visible)

        return text.removesuffix(".")

    def to_primitive(self, kind: str | NumericKind) -> int | float:
        """Convert the raw value into a primitive kind (i8 ... u128, f32, f64).

        Truncates toward zero and saturates for integer kinds; options are
        ignored. Never raises for a supported kind.

        Example:
            >>> FluentNumber(-7.9).to_primitive("i32")
            -7
            >>> FluentNumber(1e10).to_primitive("u16")
            65535
        """
        return cast_float(self.value, kind)

    def plural_operands(self) -> PluralOperands:
        """Derive CLDR plural operands. See runtime.operands.plural_operands."""
        from ftlnumber.runtime.operands import plural_operands  # noqa: PLC0415 - circular

        return plural_operands(self)

    def with_args(self, args: Mapping[str, FluentValue]) -> FluentNumber:
        """Return a copy whose options are merged with FTL named arguments.

        The receiver is left untouched, so shared instances stay frozen.
        """
        options = self.options.copy()
        options.merge(args)
        return FluentNumber(self.value, options)

    @classmethod
    def from_primitive(
        cls,
        value: int | float | Decimal,
        kind: str | NumericKind | None = None,
    ) -> FluentNumber:
        """Create a FluentNumber with default options from a primitive.

        Args:
            value: The number
            kind: Primitive kind the value is narrowed into first (wrapping
                for integers, saturating truncation for floats, single
                precision rounding for f32). None stores float(value).

        Raises:
            TypeError: If value is a bool or not a number
            KeyError: If kind is not a supported kind name

        Example:
            >>> FluentNumber.from_primitive(300, "u8").value
            44.0
            >>> FluentNumber.from_primitive(0.1, "f32").value
            0.10000000149011612
        """
        if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
            msg = f"Expected int, float or Decimal, got {type(value).__name__}"
            raise TypeError(msg)
        raw = to_f64(value) if kind is None else narrow(value, kind)
        return cls(to_f64(raw), default_format_options())

    @classmethod
    def parse(cls, text: str) -> FluentNumber:
        """Parse a decimal numeral, keeping its written fraction digits.

        minimum_fraction_digits is set to the number of digits written after
        the first '.', so "1.50" renders back as "1.50". Text without '.'
        leaves it unset.

        Args:
            text: Decimal numeral such as "3.140", "-2", ".5" or "1e3"

        Returns:
            FluentNumber with inferred minimum_fraction_digits

        Raises:
            FluentParseError: If text is not a valid decimal numeral

        Example:
            >>> FluentNumber.parse("3.140").options.minimum_fraction_digits
            3
            >>> str(FluentNumber.parse("10"))
            '10'
        """
        if not _DECIMAL_NUMERAL.fullmatch(text):
            logger.debug("Rejected decimal numeral: %r", text)
            diagnostic = ErrorTemplate.parse_decimal_failed(text)
            raise FluentParseError(diagnostic, input_value=text, parse_type="number")

        options = default_format_options()
        point = text.find(".")
        if point >= 0:
            digits = _FRACTION_DIGITS.match(text, point + 1)
            options.minimum_fraction_digits = len(digits.group()) if digits else 0
        return cls(float(text), options)

    from_str = parse
