"""CLDR plural operands derived from FluentNumber.

Plural rules do not look at a number's value alone; they look at how it is
written. "1" and "1.0" select different categories in English. The operand
tuple captures the written form:

    n: absolute value
    i: integer digits of n
    v: number of visible fraction digits, with trailing zeros
    w: number of visible fraction digits, without trailing zeros
    f: visible fraction digits as an integer, with trailing zeros
    t: visible fraction digits as an integer, without trailing zeros

Reference: https://unicode.org/reports/tr35/tr35-numbers.html#Operands

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import TYPE_CHECKING

from ftlnumber.integrity import IntegrityContext, NumberInvariantError

if TYPE_CHECKING:
    from ftlnumber.runtime.number import FluentNumber

__all__ = ["PluralOperands", "operands_from_str", "plural_operands"]

_CANONICAL_NUMBER = re.compile(r"-?(?P<integer>[0-9]+)(?:\.(?P<fraction>[0-9]+))?")


@dataclass(frozen=True, slots=True)
class PluralOperands:
    """CLDR plural operand tuple.

    Attributes:
        n: Absolute value of the source number
        i: Integer digits of n
        v: Visible fraction digit count, with trailing zeros
        w: Visible fraction digit count, without trailing zeros
        f: Visible fraction digits, with trailing zeros
        t: Visible fraction digits, without trailing zeros
    """

    n: Decimal
    i: int
    v: int
    w: int
    f: int
    t: int


def operands_from_str(text: str) -> PluralOperands:
    """Decompose a plain decimal string into plural operands.

    Args:
        text: Digits with an optional leading '-' and an optional fraction,
            as produced by FluentNumber.as_string()

    Returns:
        PluralOperands for the written form

    Raises:
        ValueError: If text is not a plain decimal string

    Example:
        >>> operands_from_str("-2.50")
        PluralOperands(n=Decimal('2.50'), i=2, v=2, w=1, f=50, t=5)
    """
    match = _CANONICAL_NUMBER.fullmatch(text)
    if match is None:
        msg = f"Not a plain decimal string: {text!r}"
        raise ValueError(msg)

    fraction = match["fraction"] or ""
    trimmed = fraction.rstrip("0")
    return PluralOperands(
        n=abs(Decimal(text)),
        i=int(match["integer"]),
        v=len(fraction),
        w=len(trimmed),
        f=int(fraction or 0),
        t=int(trimmed or 0),
    )


def plural_operands(number: FluentNumber) -> PluralOperands:
    """Derive plural operands for a FluentNumber.

    Operands come from the canonical string, then v and f are raised to the
    declared minimum_fraction_digits when the string shows fewer fraction
    digits. No other option participates.

    Args:
        number: Source number

    Returns:
        Reconciled PluralOperands

    Raises:
        NumberInvariantError: If the canonical string cannot be decomposed
            (non-finite values have no operands)

    Example:
        >>> options = FormatOptions(maximum_fraction_digits=0, minimum_fraction_digits=2)
        >>> plural_operands(FluentNumber(1, options))
        PluralOperands(n=Decimal('1'), i=1, v=2, w=0, f=0, t=0)
    """
    text = number.as_string()
    try:
        operands = operands_from_str(text)
    except ValueError as e:
        raise NumberInvariantError(
            str(e),
            IntegrityContext(
                component="operands",
                operation="plural_operands",
                key=repr(number.value),
                expected="plain decimal string",
                actual=text,
            ),
        ) from e

    minimum = number.options.minimum_fraction_digits
    if minimum is not None and minimum > operands.v:
        # TODO: reconcile significant-digit options once as_string() applies them.
        operands = replace(
            operands,
            v=minimum,
            f=operands.f * 10 ** (minimum - operands.v),
        )
    return operands
