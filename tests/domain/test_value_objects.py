"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_float_keeps_decimal_digits(self):
        assert Money.of(999.99).amount == Decimal("999.99")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten dollars")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(1.5)

    def test_zero(self):
        assert Money.zero() == Money.of("0")

    def test_addition(self):
        result = Money.of("999.99") + Money.of("199.99")
        assert result == Money.of("1199.98")

    def test_multiplication_by_int(self):
        result = Money.of("999.99") * 2
        assert result == Money.of("1999.98")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1") * 1.5

    def test_str_rounds_only_for_display(self):
        m = Money.of("0.125") * 3
        assert m.amount == Decimal("0.375")
        assert str(m) == "$0.38"

    def test_str_formatting(self):
        assert str(Money.of("249.5")) == "$249.50"
        assert str(Money.of("399")) == "$399.00"

    def test_parse_reads_display_string(self):
        assert Money.parse("$1999.98") == Money.of("1999.98")
        assert Money.parse(" $1,999.98 ") == Money.of("1999.98")

    @pytest.mark.parametrize("amount", ["Infinity", "-Infinity", "NaN", "sNaN"])
    def test_non_finite_amount_rejected(self, amount):
        with pytest.raises(ValidationError, match="finite number"):
            Money.of(amount)


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_non_int_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(1.5)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_addition(self):
        assert Quantity(2) + Quantity(3) == Quantity(5)

    def test_str(self):
        assert str(Quantity(7)) == "7"
