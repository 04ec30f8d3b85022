"""
Billing calculator: elapsed time -> billed hours -> billed days -> amounts.

Both roundings follow the same rule: a remainder rounds up, and a zero
result becomes one unit. An exact, non-zero count is kept as is.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from locatecar.exceptions import ValidationError
from locatecar.services.discounts import CustomerLike, DiscountCalculator, standard_discount
from locatecar.utils.filters import as_utc


@dataclass(frozen=True)
class Bill:
    billed_days: int
    base_amount: float
    discount: float
    final_amount: float


def billed_hours(rented_at: datetime, returned_at: datetime) -> int:
    """Whole hours elapsed, plus one for leftover minutes or a zero count."""
    elapsed = as_utc(returned_at) - as_utc(rented_at)
    if elapsed.total_seconds() < 0:
        raise ValidationError("Error: return time is before checkout time")
    minutes = int(elapsed.total_seconds() // 60)
    hours, leftover = divmod(minutes, 60)
    if leftover > 0 or hours == 0:
        hours += 1
    return hours


def billed_days(hours: int) -> int:
    days, leftover = divmod(hours, 24)
    if leftover > 0 or days == 0:
        days += 1
    return days


def base_amount(rented_at: datetime, returned_at: datetime, daily_rate: float) -> Tuple[int, float]:
    """(billed days, days x daily rate)"""
    days = billed_days(billed_hours(rented_at, returned_at))
    return days, days * daily_rate


def bill(
        rented_at: datetime,
        returned_at: datetime,
        daily_rate: float,
        customer: CustomerLike,
        calculator: DiscountCalculator = standard_discount,
) -> Bill:
    """Full charge for a closed rental; final = base - base x discount."""
    days, base = base_amount(rented_at, returned_at, daily_rate)
    discount = calculator(customer, days)
    return Bill(
        billed_days=days,
        base_amount=base,
        discount=discount,
        final_amount=base - base * discount,
    )
