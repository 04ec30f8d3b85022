"""
Billing calculator: hour and day round-up rules and the resulting amounts.
"""

from datetime import timedelta

import pytest

from locatecar.exceptions import ValidationError
from locatecar.models.customer import CustomerKind
from locatecar.services.billing import base_amount, bill, billed_days, billed_hours
from locatecar.services.discounts import promotional_discount

from conftest import T0


@pytest.mark.parametrize("elapsed, hours, days", [
    (timedelta(0), 1, 1),
    (timedelta(minutes=30), 1, 1),
    (timedelta(hours=1), 1, 1),
    (timedelta(hours=1, minutes=1), 2, 1),
    (timedelta(hours=1, seconds=30), 1, 1),  # seconds do not round up
    (timedelta(hours=24), 24, 1),
    (timedelta(hours=25), 25, 2),
    (timedelta(hours=24, minutes=30), 25, 2),
    (timedelta(hours=48), 48, 2),
    (timedelta(days=5, hours=1), 121, 6),
])
def test_rounding(elapsed, hours, days):
    assert billed_hours(T0, T0 + elapsed) == hours
    assert billed_days(hours) == days


def test_return_before_checkout_is_rejected():
    with pytest.raises(ValidationError):
        billed_hours(T0, T0 - timedelta(minutes=1))


def test_naive_timestamps_are_treated_as_utc():
    naive = T0.replace(tzinfo=None)
    assert billed_hours(naive, T0 + timedelta(hours=3)) == 3


def test_base_amount():
    assert base_amount(T0, T0 + timedelta(hours=25), 100.0) == (2, 200.0)


def test_bill_applies_discount():
    b = bill(T0, T0 + timedelta(days=10, hours=1), 150.0, CustomerKind.INDIVIDUAL, promotional_discount)
    assert b.billed_days == 11
    assert b.base_amount == 1650.0
    assert b.discount == 0.15
    assert b.final_amount == pytest.approx(1402.5)
