"""Shared constants for ftlnumber.

This module provides centralized configuration constants used across the
runtime and diagnostics packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Precision limits: Fraction digit defaults, exactness cap and platform clamps
- Cache limits: Memory bounds for caching subsystems
- Option keys: Named-argument keys recognized by FormatOptions.merge

Python 3.13+. Zero external dependencies.
"""

import sys

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Precision limits
    "DEFAULT_MAXIMUM_FRACTION_DIGITS",
    "NARROW_MAXIMUM_FRACTION_DIGITS",
    "NATIVE_WORD_BITS",
    "WIDE_WORD_BITS",
    "MAX_EXACT_FRACTION_DIGITS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Option keys
    "OPTION_KEYS",
]

# ============================================================================
# PRECISION LIMITS
# ============================================================================
#
# PLATFORM CLAMP
#
# Plural operand arithmetic in other Fluent runtimes narrows the visible
# fraction digits into a native-width integer. On platforms whose native
# word is narrower than 64 bits, 10+ fraction digits overflow that integer,
# so the maximum working precision is clamped to 9 there. Python integers
# do not overflow, but the clamp is kept so that the same value renders
# identically to other Fluent runtimes on the same platform.
#
# ============================================================================

# Working precision used when maximum_fraction_digits is unset.
DEFAULT_MAXIMUM_FRACTION_DIGITS: int = 15

# Working precision ceiling on platforms narrower than WIDE_WORD_BITS.
NARROW_MAXIMUM_FRACTION_DIGITS: int = 9

# Native word width of the running interpreter (isize/usize width).
# sys.maxsize is 2**63 - 1 on 64-bit builds and 2**31 - 1 on 32-bit builds.
NATIVE_WORD_BITS: int = sys.maxsize.bit_length() + 1

# Word width at or above which no precision clamp applies.
WIDE_WORD_BITS: int = 64

# Fraction digits needed to render any double exactly. The smallest
# subnormal is 2**-1074; beyond this every fixed-point digit is 0 and would
# be stripped anyway. Larger requested precisions are capped here because
# format() rejects precisions that do not fit a C int.
MAX_EXACT_FRACTION_DIGITS: int = 1074

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# OPTION KEYS
# ============================================================================

# FTL named-argument keys understood by FormatOptions.merge (camelCase as
# written in FTL sources). Any other key is ignored.
OPTION_KEYS: frozenset[str] = frozenset({
    "style",
    "currency",
    "currencyDisplay",
    "useGrouping",
    "minimumIntegerDigits",
    "minimumFractionDigits",
    "maximumFractionDigits",
    "minimumSignificantDigits",
    "maximumSignificantDigits",
})
