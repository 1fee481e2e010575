"""CLDR plural rules implementation using Babel.

Selects the plural category of a FluentNumber from its reconciled plural
operands, so "1" and "1.00" (minimumFractionDigits: 2) can land in
different categories.

Babel supplies the CLDR rule for each locale. The rule is evaluated here
against PluralOperands rather than through PluralRule.__call__, because
Babel re-derives operands from a Decimal's digit tuple and loses leading
fraction zeros (v is 2 for 0.011).

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

import logging
from decimal import Decimal

from babel.core import UnknownLocaleError
from babel.plural import PluralRule

from ftlnumber.integrity import IntegrityContext, NumberInvariantError
from ftlnumber.locale_utils import get_babel_locale
from ftlnumber.runtime.number import FluentNumber
from ftlnumber.runtime.operands import PluralOperands

__all__ = ["evaluate_plural_rule", "select_plural_category"]

logger = logging.getLogger(__name__)

type _OperandValues = dict[str, Decimal | int]


def select_plural_category(number: FluentNumber | int | float | Decimal, locale: str) -> str:
    """Select CLDR plural category for a number using Babel's CLDR data.

    Args:
        number: FluentNumber, or a raw number formatted with default options
        locale: Locale code (e.g., "lv_LV", "en-US")

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Raises:
        NumberInvariantError: If number is not finite

    Examples:
        >>> select_plural_category(1, "en_US")
        'one'
        >>> select_plural_category(FluentNumber.parse("1.00"), "en_US")
        'other'
        >>> select_plural_category(0, "lv_LV")
        'zero'

    Architecture:
        Operands are derived by FluentNumber.plural_operands(), then the
        locale's Babel PluralRule is evaluated on them with
        evaluate_plural_rule().

        If locale parsing fails, falls back to a simple one/other rule.
    """
    if not isinstance(number, FluentNumber):
        number = FluentNumber.from_primitive(number)
    operands = number.plural_operands()

    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning("Unknown locale '%s' for plural rules: %s", locale, e)
        return _fallback_category(operands)

    return evaluate_plural_rule(locale_obj.plural_form, operands)


def evaluate_plural_rule(rule: PluralRule, operands: PluralOperands) -> str:
    """Evaluate a Babel PluralRule on explicit operands.

    Tags are tried in the order Babel stores them; the first whose condition
    holds wins, otherwise "other".

    Example:
        >>> rule = PluralRule({"one": "v = 0 and i = 1"})
        >>> evaluate_plural_rule(rule, operands_from_str("1.0"))
        'other'
    """
    values: _OperandValues = {
        "n": operands.n,
        "i": operands.i,
        "v": operands.v,
        "w": operands.w,
        "f": operands.f,
        "t": operands.t,
        # Compact-notation exponent operands; no exponent is ever rendered.
        "c": 0,
        "e": 0,
    }
    for tag, condition in rule.abstract:
        if _holds(condition, values):
            return tag
    return "other"


def _holds(node: tuple, values: _OperandValues) -> bool:
    op, args = node
    match op:
        case "or":
            left, right = args
            return _holds(left, values) or _holds(right, values)
        case "and":
            left, right = args
            return _holds(left, values) and _holds(right, values)
        case "not":
            return not _holds(args[0], values)
        case "is" | "isnot":
            expr, (_, (expected,)) = args
            return (_operand(expr, values) == expected) == (op == "is")
        case "relation":
            method, expr, (_, ranges) = args
            value = _operand(expr, values)
            # "in" only matches integral values; "within" accepts any value in range
            if method == "in" and value != int(value):
                return False
            return any(low <= value <= high for (_, (low,)), (_, (high,)) in ranges)
        case _:
            raise _unsupported(op)


def _operand(expr: tuple, values: _OperandValues) -> Decimal | int:
    match expr:
        case ("mod", ((name, ()), ("value", (divisor,)))):
            return values[name] % divisor
        case (name, ()) if name in values:
            return values[name]
        case _:
            raise _unsupported(expr[0])


def _unsupported(op: object) -> NumberInvariantError:
    return NumberInvariantError(
        f"Unsupported plural rule node: {op!r}",
        IntegrityContext(
            component="plural_rules",
            operation="evaluate_plural_rule",
            expected="or/and/not/is/relation/mod/operand node",
            actual=repr(op),
        ),
    )


def _fallback_category(operands: PluralOperands) -> str:
    # English-like rule: integer 1 with no visible fraction
    return "one" if operands.i == 1 and operands.v == 0 else "other"
