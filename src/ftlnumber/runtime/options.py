"""Number formatting options and named-argument merging.

FormatOptions holds every formatting knob FTL sources can set on a number.
Only the two fraction-digit fields influence FluentNumber.as_string(); the
remaining fields are kept verbatim for richer formatters layered on top.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import TYPE_CHECKING

from ftlnumber.constants import OPTION_KEYS
from ftlnumber.enums import CurrencyDisplayStyle, FormatStyle
from ftlnumber.runtime.conversion import cast_float, to_f64

if TYPE_CHECKING:
    from ftlnumber.runtime.value_types import FluentValue

__all__ = ["FormatOptions", "default_format_options"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FormatOptions:
    """Formatting configuration attached to a FluentNumber.

    Attributes:
        style: Decimal, currency, or percent
        currency: ISO 4217 currency code (unused by the core formatter)
        currency_display: Symbol, code, or name
        use_grouping: Group digits with a locale separator (unused by the core formatter)
        minimum_integer_digits: Integer zero-padding (unused by the core formatter)
        minimum_fraction_digits: Pad fraction with zeros to at least this many digits
        maximum_fraction_digits: Round to at most this many fraction digits
        minimum_significant_digits: Unused by the core formatter
        maximum_significant_digits: Unused by the core formatter

    Thread Safety:
        Not thread-safe. merge() mutates the record in place; finish merging
        before sharing the owning FluentNumber across threads.
    """

    style: FormatStyle = field(default_factory=FormatStyle.default)
    currency: str | None = None
    currency_display: CurrencyDisplayStyle = field(default_factory=CurrencyDisplayStyle.default)
    use_grouping: bool = True
    minimum_integer_digits: int | None = None
    minimum_fraction_digits: int | None = None
    maximum_fraction_digits: int | None = None
    minimum_significant_digits: int | None = None
    maximum_significant_digits: int | None = None

    def merge(self, args: Mapping[str, FluentValue]) -> None:
        """Patch options from FTL named arguments.

        Keys use FTL camelCase (``minimumFractionDigits``). A key is applied
        only when its value has the expected kind: text for ``style``,
        ``currency``, ``currencyDisplay`` and ``useGrouping``, a number for
        the digit counts. Unknown keys and mismatched values are ignored
        without error; unknown keys are logged at DEBUG.

        Digit counts are converted like a native ``usize`` cast: the
        fraction is truncated, negatives and NaN (signaling included) become 0.

        Example:
            >>> options = default_format_options()
            >>> options.merge({"minimumFractionDigits": 2, "style": 5})
            >>> options.minimum_fraction_digits, options.style
            (2, <FormatStyle.DECIMAL: 'decimal'>)
        """
        for key, value in args.items():
            if key not in OPTION_KEYS:
                logger.debug("Ignoring unknown number option %r", key)
                continue
            match key, value:
                case "style", str():
                    self.style = FormatStyle.from_str(value)
                case "currency", str():
                    self.currency = str(value)
                case "currencyDisplay", str():
                    self.currency_display = CurrencyDisplayStyle.from_str(value)
                case "useGrouping", bool():
                    self.use_grouping = value
                case "useGrouping", str():
                    self.use_grouping = value != "false"
                case "minimumIntegerDigits", _ if (count := _as_count(value)) is not None:
                    self.minimum_integer_digits = count
                case "minimumFractionDigits", _ if (count := _as_count(value)) is not None:
                    self.minimum_fraction_digits = count
                case "maximumFractionDigits", _ if (count := _as_count(value)) is not None:
                    self.maximum_fraction_digits = count
                case "minimumSignificantDigits", _ if (count := _as_count(value)) is not None:
                    self.minimum_significant_digits = count
                case "maximumSignificantDigits", _ if (count := _as_count(value)) is not None:
                    self.maximum_significant_digits = count
                case _:
                    pass

    def copy(self) -> FormatOptions:
        """Return an independent copy safe to merge into."""
        return replace(self)


def default_format_options() -> FormatOptions:
    """Return a fresh FormatOptions with documented defaults.

    Defaults: decimal style, no currency, symbol display, grouping on,
    every digit count unset.
    """
    return FormatOptions()


def _as_count(value: object) -> int | None:
    """Convert a numeric FluentValue to a digit count, or None if not numeric."""
    from ftlnumber.runtime.number import FluentNumber  # noqa: PLC0415 - circular

    if isinstance(value, FluentNumber):
        return int(cast_float(value.value, "usize"))
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float | Decimal):
        return int(cast_float(to_f64(value), "usize"))
    return None
