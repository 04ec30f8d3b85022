"""
Discount engine.

A discount calculator is any callable `(customer, billed_days) -> fraction`.
`customer` may be a Customer or a bare CustomerKind.
"""

from typing import Callable, Union

from locatecar.models.customer import Customer, CustomerKind
from locatecar.utils.constants import Discount

CustomerLike = Union[Customer, CustomerKind]
DiscountCalculator = Callable[[CustomerLike, int], float]


def _kind(customer: CustomerLike) -> CustomerKind:
    return customer if isinstance(customer, CustomerKind) else customer.kind


def standard_discount(customer: CustomerLike, days: int) -> float:
    """
    Tiered rule:
      - individual: 5% above 5 billed days
      - organization: 10% above 3 billed days
      - otherwise none
    """
    kind = _kind(customer)
    if kind is CustomerKind.INDIVIDUAL and days > Discount.INDIVIDUAL_MIN_DAYS:
        return Discount.INDIVIDUAL_RATE
    if kind is CustomerKind.ORGANIZATION and days > Discount.ORGANIZATION_MIN_DAYS:
        return Discount.ORGANIZATION_RATE
    return 0.0


def promotional_discount(customer: CustomerLike, days: int) -> float:
    """Standard rule, raised to at least 15% for rentals above 10 days."""
    base = standard_discount(customer, days)
    if days > Discount.PROMOTION_MIN_DAYS:
        return max(base, Discount.PROMOTION_RATE)
    return base


def combine_discounts(*calculators: DiscountCalculator) -> DiscountCalculator:
    """Best of the given calculators, capped at 20%. No calculators -> 0."""

    def combined(customer: CustomerLike, days: int) -> float:
        best = max((calc(customer, days) for calc in calculators), default=0.0)
        return min(best, Discount.CAP)

    return combined
