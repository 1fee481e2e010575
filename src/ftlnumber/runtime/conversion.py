"""Primitive numeric kinds and cast semantics.

FluentNumber stores a 64-bit float. Host code exchanges numbers of fixed
width (i8 ... u128, f32, f64), so conversions in both directions follow
machine cast rules rather than Python's unbounded int semantics:

    - float -> integer: truncate toward zero, saturate at the kind's bounds,
      NaN becomes 0
    - integer -> integer: wrap modulo 2**bits (two's complement)
    - any -> f32: round to single precision, overflow becomes +/-inf
    - any -> f64: float(), overflow becomes +/-inf, Decimal sNaN becomes NaN

None of these conversions raise.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType

from ftlnumber.constants import NATIVE_WORD_BITS

__all__ = [
    "NUMERIC_KINDS",
    "NumericKind",
    "cast_float",
    "get_kind",
    "narrow",
    "to_f64",
]


@dataclass(frozen=True, slots=True)
class NumericKind:
    """A fixed-width primitive numeric type.

    Attributes:
        name: Rust-style type name (i32, u64, f32, ...)
        bits: Storage width in bits
        signed: Two's complement signed integer (ignored for floats)
        is_float: IEEE 754 binary floating point
    """

    name: str
    bits: int
    signed: bool = True
    is_float: bool = False

    @property
    def min_value(self) -> int:
        """Smallest representable integer."""
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        """Largest representable integer."""
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


def _build_kinds() -> dict[str, NumericKind]:
    kinds: dict[str, NumericKind] = {}
    for bits in (8, 16, 32, 64, 128):
        kinds[f"i{bits}"] = NumericKind(f"i{bits}", bits)
        kinds[f"u{bits}"] = NumericKind(f"u{bits}", bits, signed=False)
    kinds["isize"] = NumericKind("isize", NATIVE_WORD_BITS)
    kinds["usize"] = NumericKind("usize", NATIVE_WORD_BITS, signed=False)
    kinds["f32"] = NumericKind("f32", 32, is_float=True)
    kinds["f64"] = NumericKind("f64", 64, is_float=True)
    return kinds


NUMERIC_KINDS: MappingProxyType[str, NumericKind] = MappingProxyType(_build_kinds())


def get_kind(kind: str | NumericKind) -> NumericKind:
    """Resolve a kind name to its NumericKind.

    Raises:
        KeyError: If the name is not a supported kind
    """
    if isinstance(kind, NumericKind):
        return kind
    return NUMERIC_KINDS[kind]


def to_f64(value: int | float | Decimal) -> float:
    if isinstance(value, Decimal) and value.is_snan():
        # float() refuses signaling NaN
        return math.nan
    try:
        return float(value)
    except OverflowError:
        # int too large for a double
        return math.inf if value > 0 else -math.inf


def _to_f32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _saturate(value: float, kind: NumericKind) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return kind.max_value if value > 0 else kind.min_value
    return max(kind.min_value, min(kind.max_value, math.trunc(value)))


def _wrap(value: int, kind: NumericKind) -> int:
    value &= (1 << kind.bits) - 1
    if kind.signed and value > kind.max_value:
        value -= 1 << kind.bits
    return value


def cast_float(value: float, kind: str | NumericKind) -> int | float:
    """Cast a 64-bit float into a primitive kind.

    Example:
        >>> cast_float(-3.9, "i8")
        -3
        >>> cast_float(300.0, "u8")
        255
        >>> cast_float(-1.0, "usize")
        0
    """
    target = get_kind(kind)
    if target.is_float:
        return _to_f32(value) if target.bits == 32 else value
    return _saturate(value, target)


def narrow(value: int | float | Decimal, kind: str | NumericKind) -> int | float:
    """Bring a Python number into the domain of a primitive kind.

    Integers entering an integer kind wrap; floats and Decimals entering an
    integer kind are truncated and saturated.
    """
    target = get_kind(kind)
    if target.is_float:
        as_double = to_f64(value)
        return _to_f32(as_double) if target.bits == 32 else as_double
    if isinstance(value, int):
        return _wrap(value, target)
    return _saturate(to_f64(value), target)
