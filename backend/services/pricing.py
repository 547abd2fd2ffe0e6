"""Discount schedule and monetary rounding for sandwich orders.

A sandwich combined with both extras earns 20%, with a soft drink 15% and
with fries 10%. Amounts are rounded half-up to cents; the discount amount and
the total are rounded independently from the unrounded discount.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, NamedTuple, Tuple, Union

Number = Union[Decimal, float, int, str]

CENT = Decimal("0.01")
NO_DISCOUNT = Decimal("0.00")

# Keyed by (has_fries, has_soft_drink); applies only when a sandwich is present.
COMBO_DISCOUNTS: Dict[Tuple[bool, bool], Decimal] = {
    (True, True): Decimal("0.20"),
    (False, True): Decimal("0.15"),
    (True, False): Decimal("0.10"),
    (False, False): NO_DISCOUNT,
}


class PricedTotal(NamedTuple):
    discount_amount: Decimal
    total: Decimal


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(value: Number) -> Decimal:
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def discount_percentage(has_sandwich: bool, has_fries: bool, has_soft_drink: bool) -> Decimal:
    """Return the discount as a fraction of the subtotal."""
    if not has_sandwich:
        return NO_DISCOUNT
    return COMBO_DISCOUNTS[(bool(has_fries), bool(has_soft_drink))]


def calculate_total(subtotal: Number, percentage: Number) -> PricedTotal:
    subtotal = to_decimal(subtotal)
    raw_discount = subtotal * to_decimal(percentage)
    return PricedTotal(
        discount_amount=round_money(raw_discount),
        total=round_money(subtotal - raw_discount),
    )
