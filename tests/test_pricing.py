"""Tests for the discount schedule and rounding rules."""

from decimal import Decimal
from itertools import product

import pytest
from services.pricing import PricedTotal, calculate_total, discount_percentage


class TestDiscountPercentage:
    @pytest.mark.parametrize(
        "has_fries, has_soft_drink, expected",
        [
            (True, True, Decimal("0.20")),
            (False, True, Decimal("0.15")),
            (True, False, Decimal("0.10")),
            (False, False, Decimal("0")),
        ],
    )
    def test_sandwich_combos(self, has_fries, has_soft_drink, expected):
        assert discount_percentage(True, has_fries, has_soft_drink) == expected

    @pytest.mark.parametrize("has_fries, has_soft_drink", list(product([True, False], repeat=2)))
    def test_no_sandwich_means_no_discount(self, has_fries, has_soft_drink):
        assert discount_percentage(False, has_fries, has_soft_drink) == 0


class TestCalculateTotal:
    def test_twenty_percent(self):
        result = calculate_total(10, Decimal("0.20"))
        assert result.discount_amount == Decimal("2.00")
        assert result.total == Decimal("8.00")

    def test_no_discount(self):
        result = calculate_total(10, 0)
        assert result.discount_amount == 0
        assert result.total == Decimal("10.00")

    def test_float_inputs(self):
        result = calculate_total(9.5, 0.15)
        assert result == PricedTotal(Decimal("1.43"), Decimal("8.08"))

    def test_results_have_two_decimal_places(self):
        result = calculate_total(Decimal("7.333333"), Decimal("0.10"))
        assert result.discount_amount.as_tuple().exponent == -2
        assert result.total.as_tuple().exponent == -2
        assert result == PricedTotal(Decimal("0.73"), Decimal("6.60"))

    def test_roundings_are_independent(self):
        # 0.005 and 0.045 both round up, so the parts exceed the subtotal by a cent.
        result = calculate_total(Decimal("0.05"), Decimal("0.10"))
        assert result.discount_amount == Decimal("0.01")
        assert result.total == Decimal("0.05")

    def test_idempotent(self):
        assert calculate_total(12.35, 0.20) == calculate_total(12.35, 0.20)
