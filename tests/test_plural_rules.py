"""Tests for CLDR plural category selection via Babel."""

from __future__ import annotations

import logging
import math
from decimal import Decimal

import pytest
from babel.plural import PluralRule
from hypothesis import event, given
from hypothesis import strategies as st

from ftlnumber.integrity import NumberInvariantError
from ftlnumber.locale_utils import get_babel_locale
from ftlnumber.runtime.number import FluentNumber
from ftlnumber.runtime.operands import operands_from_str
from ftlnumber.runtime.options import FormatOptions
from ftlnumber.runtime.plural_rules import evaluate_plural_rule, select_plural_category
from tests.strategies import finite_doubles

CATEGORIES = {"zero", "one", "two", "few", "many", "other"}


class TestEnglish:
    """English distinguishes integer one from everything else."""

    def test_one(self) -> None:
        """1 is 'one'."""
        assert select_plural_category(1, "en_US") == "one"

    def test_other(self) -> None:
        """0, 2 and fractions are 'other'."""
        assert select_plural_category(0, "en_US") == "other"
        assert select_plural_category(2, "en_US") == "other"
        assert select_plural_category(1.5, "en_US") == "other"

    def test_visible_fraction_digits_change_category(self) -> None:
        """1.00 parsed from text is 'other' because v is 2."""
        assert select_plural_category(FluentNumber.parse("1.00"), "en_US") == "other"
        assert select_plural_category(FluentNumber.parse("1"), "en_US") == "one"

    def test_padding_changes_category(self) -> None:
        """minimumFractionDigits pads the operands too."""
        number = FluentNumber(1, FormatOptions(minimum_fraction_digits=2))
        assert select_plural_category(number, "en") == "other"

    def test_reconciled_minimum_changes_category(self) -> None:
        """The minimum counts even when the rendered text shows no fraction."""
        options = FormatOptions(maximum_fraction_digits=0, minimum_fraction_digits=2)
        number = FluentNumber(1, options)
        assert number.as_string() == "1"
        assert select_plural_category(number, "en") == "other"

    def test_bcp47_locale(self) -> None:
        """Hyphenated locale codes are accepted."""
        assert select_plural_category(1, "en-GB") == "one"

    def test_decimal_input(self) -> None:
        """Raw Decimals are lifted with default options."""
        assert select_plural_category(Decimal("1"), "en") == "one"


class TestOtherLocales:
    """Locales with richer category sets."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0, "zero"), (1, "one"), (21, "one"), (11, "zero"), (5, "other")],
    )
    def test_latvian(self, value: int, expected: str) -> None:
        """Latvian has a zero category."""
        assert select_plural_category(value, "lv_LV") == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1, "one"), (2, "few"), (22, "few"), (5, "many"), (12, "many")],
    )
    def test_polish(self, value: int, expected: str) -> None:
        """Polish separates few from many."""
        assert select_plural_category(value, "pl_PL") == expected

    def test_arabic_two(self) -> None:
        """Arabic has a dual."""
        assert select_plural_category(2, "ar_SA") == "two"

    def test_russian_many(self) -> None:
        """Russian integers ending in 5 are 'many'."""
        assert select_plural_category(5, "ru_RU") == "many"

    def test_french_integer_part(self) -> None:
        """French 'one' looks at the integer digits only."""
        assert select_plural_category(1.5, "fr_FR") == "one"

    def test_japanese_single_category(self) -> None:
        """Japanese has only 'other'."""
        assert select_plural_category(42, "ja_JP") == "other"


class TestLeadingFractionZeros:
    """Fraction digits after leading zeros keep their full count."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("0.011", "one"), ("0.0011", "one"), ("0.012", "other"), ("0.11", "zero")],
    )
    def test_latvian_fractions(self, text: str, expected: str) -> None:
        """Latvian fraction rules see v=3 for 0.011, not v=2."""
        assert select_plural_category(FluentNumber.parse(text), "lv") == expected

    def test_operands_reach_rule_unchanged(self) -> None:
        """0.05 is evaluated with v=2 and f=5."""
        rule = PluralRule({"one": "v = 2 and f = 5"})
        assert evaluate_plural_rule(rule, FluentNumber.parse("0.05").plural_operands()) == "one"


class TestEvaluatePluralRule:
    """Rule evaluation on explicit operands."""

    RULE = PluralRule({"one": "n is 1", "few": "n within 2..4", "many": "n not in 0..9"})

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("1", "one"), ("3.5", "few"), ("12", "many"), ("9.5", "many"), ("5", "other")],
    )
    def test_relations(self, text: str, expected: str) -> None:
        """is, within and negated in relations; in only matches integers."""
        assert evaluate_plural_rule(self.RULE, operands_from_str(text)) == expected

    def test_is_not(self) -> None:
        """is not negates an equality."""
        rule = PluralRule({"one": "i is not 0 and v = 0"})
        assert evaluate_plural_rule(rule, operands_from_str("2")) == "one"
        assert evaluate_plural_rule(rule, operands_from_str("0")) == "other"

    def test_modulo(self) -> None:
        """mod applies to the operand before the range test."""
        rule = PluralRule({"few": "i % 10 = 2..4 and i % 100 != 12..14"})
        assert evaluate_plural_rule(rule, operands_from_str("23")) == "few"
        assert evaluate_plural_rule(rule, operands_from_str("13")) == "other"

    def test_empty_rule(self) -> None:
        """A rule without conditions always yields other."""
        assert evaluate_plural_rule(PluralRule({}), operands_from_str("1")) == "other"

    def test_unsupported_node(self) -> None:
        """An unknown rule node is an internal fault."""
        rule = PluralRule({})
        rule.abstract = [("one", ("xor", ()))]
        with pytest.raises(NumberInvariantError, match="xor"):
            evaluate_plural_rule(rule, operands_from_str("1"))

    @given(
        st.integers(min_value=0, max_value=10**6),
        st.sampled_from(["en", "lv", "pl", "ar", "ru", "cy", "fr", "ga"]),
    )
    def test_integers_agree_with_babel(self, value: int, locale: str) -> None:
        """Property: for integers the result equals Babel's own evaluation."""
        expected = get_babel_locale(locale).plural_form(value)
        event(f"category={expected}")
        assert select_plural_category(value, locale) == expected


class TestFallback:
    """Unknown locales use a one/other rule."""

    def test_unknown_locale(self, caplog: pytest.LogCaptureFixture) -> None:
        """An unknown locale logs a warning and falls back."""
        with caplog.at_level(logging.WARNING, logger="ftlnumber.runtime.plural_rules"):
            assert select_plural_category(1, "xx_XX") == "one"
        assert any("xx_XX" in record.getMessage() for record in caplog.records)

    def test_invalid_locale_identifier(self) -> None:
        """A malformed identifier falls back too."""
        assert select_plural_category(2, "not a locale!") == "other"

    def test_fallback_respects_visible_fraction(self) -> None:
        """1.0 is not 'one' under the fallback rule."""
        assert select_plural_category(FluentNumber.parse("1.0"), "xx_XX") == "other"


class TestErrors:
    """Values without operands."""

    @pytest.mark.parametrize("value", [math.inf, math.nan])
    def test_non_finite(self, value: float) -> None:
        """Non-finite values cannot be categorized."""
        with pytest.raises(NumberInvariantError):
            select_plural_category(value, "en")


class TestProperties:
    """Property-based selection invariants."""

    @given(finite_doubles, st.sampled_from(["en", "lv", "pl", "ar", "ru", "ja", "xx"]))
    def test_always_a_cldr_category(self, value: float, locale: str) -> None:
        """Property: every finite number selects a CLDR category."""
        category = select_plural_category(value, locale)
        event(f"category={category}")
        assert category in CATEGORIES
