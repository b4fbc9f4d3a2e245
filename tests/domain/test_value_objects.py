"""Unit tests for domain value objects."""

import re

import pytest

from orderflow.domain.exceptions import ValidationError
from orderflow.domain.model.value_objects import Money, OrderId, normalize_currency


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation_uppercases_currency(self):
        m = Money(1050, "eur")
        assert m.cents == 1050
        assert m.currency == "EUR"

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(-1, "USD")

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Money(10.5, "USD")

    def test_empty_currency_rejected(self):
        with pytest.raises(ValidationError, match="Currency cannot be empty"):
            Money(100, "  ")

    def test_zero_is_allowed(self):
        assert Money(0, "USD").is_zero

    def test_discount(self):
        assert Money(10000, "EUR").discounted(10) == Money(9000, "EUR")

    def test_discount_rounds_half_up(self):
        # 5 * 0.5 = 2.5 -> 3
        assert Money(5, "USD").discounted(50) == Money(3, "USD")
        # 999 * 0.75 = 749.25 -> 749
        assert Money(999, "USD").discounted(25) == Money(749, "USD")

    def test_full_discount_is_zero(self):
        assert Money(5000, "USD").discounted(100).is_zero

    def test_discount_out_of_range_rejected(self):
        with pytest.raises(ValidationError, match="0..100"):
            Money(100, "USD").discounted(101)

    def test_comparison(self):
        assert not Money(100001, "USD") <= Money(100000, "USD")
        assert Money(100000, "USD") <= Money(100000, "USD")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot compare"):
            Money(10, "USD") <= Money(10, "EUR")

    def test_str_formatting(self):
        assert str(Money(9000, "EUR")) == "90.00 EUR"
        assert str(Money(5, "USD")) == "0.05 USD"


class TestNormalizeCurrency:

    def test_trims_and_uppercases(self):
        assert normalize_currency(" uah ") == "UAH"

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            normalize_currency("")


# ── OrderId ──────────────────────────────────────────────────────────────────

UUID4 = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


class TestOrderId:

    def test_generate_is_v4_uuid(self):
        assert UUID4.match(str(OrderId.generate()))

    def test_generated_ids_are_unique(self):
        ids = {OrderId.generate() for _ in range(500)}
        assert len(ids) == 500

    def test_value_equality(self):
        assert OrderId.parse("abc") == OrderId("abc")

    def test_parse_strips_whitespace(self):
        assert OrderId.parse("  abc ").value == "abc"

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            OrderId.parse("")

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError):
            OrderId.parse(None)
