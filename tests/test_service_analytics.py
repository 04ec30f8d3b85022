"""
Reporting over the rental history: revenue by period (inclusive bounds),
top-N rankings with stable tie order, paginated history and text reports.
"""

from datetime import timedelta

import pytest

from locatecar.exceptions import ValidationError
from locatecar.models.rental import Rental
from locatecar.services.analytics_service import AnalyticsService

from conftest import T0, make_individual, make_organization, make_vehicle


def closed_rental(vehicle, customer, rented_at, amount):
    return Rental(vehicle, customer, "Airport", rented_at,
                  returned_at=rented_at + timedelta(hours=1),
                  base_amount=amount, discount=0.0, final_amount=amount)


@pytest.fixture
def analytics(store, sink):
    return AnalyticsService(store, sink=sink, timezone="UTC")


@pytest.fixture
def history(store):
    car = make_vehicle("ABC-1A23", model="Onix")
    suv = make_vehicle("SUV-2B34", model="Compass")
    ana = make_individual()
    acme = make_organization()
    store.rentals.register(closed_rental(car, ana, T0, 100.0))
    store.rentals.register(closed_rental(suv, acme, T0 + timedelta(days=1), 200.0))
    store.rentals.register(closed_rental(suv, ana, T0 + timedelta(days=2), 400.0))
    store.rentals.register(Rental(car, acme, "Downtown", T0 + timedelta(days=3)))
    return store


def test_revenue_includes_both_bounds(history, analytics):
    assert analytics.revenue_by_period(T0, T0 + timedelta(days=2)) == 700.0
    assert analytics.revenue_by_period(T0 + timedelta(days=1), T0 + timedelta(days=1)) == 200.0


def test_revenue_ignores_open_rentals(history, analytics):
    assert analytics.revenue_by_period(T0, T0 + timedelta(days=10)) == 700.0


def test_revenue_over_empty_set_is_zero(history, analytics):
    total = analytics.revenue_by_period(T0 - timedelta(days=30), T0 - timedelta(days=1))
    assert total == 0.0
    assert isinstance(total, float)


def test_revenue_rejects_inverted_period(analytics):
    with pytest.raises(ValidationError):
        analytics.revenue_by_period(T0, T0 - timedelta(seconds=1))


def test_rankings_sort_by_count_with_stable_ties(history, analytics):
    assert analytics.top_vehicles() == [("ABC-1A23 - Onix", 2), ("SUV-2B34 - Compass", 2)]
    assert analytics.top_customers(1) == [("Ana Souza (12345678901)", 2)]


def test_ranking_truncates_to_ten(store, analytics):
    ana = make_individual()
    for i in range(12):
        plate = f"AAA-{i % 10}A{i:02d}"
        store.rentals.register(closed_rental(make_vehicle(plate), ana, T0, 10.0))
    store.rentals.register(closed_rental(make_vehicle("AAA-5A05"), ana, T0, 10.0))
    top = analytics.top_vehicles()
    assert len(top) == 10
    assert top[0] == ("AAA-5A05 - Onix", 2)
    assert top[1][0].startswith("AAA-0A00")


def test_history_newest_first(history, analytics):
    first_page = analytics.history(1, 3)
    assert [r.rented_at for r in first_page] == [
        T0 + timedelta(days=3), T0 + timedelta(days=2), T0 + timedelta(days=1),
    ]
    assert [r.rented_at for r in analytics.history(2, 3)] == [T0]
    assert analytics.history(3, 3) == []


def test_summary(history, analytics):
    totals = analytics.summary()["totals"]
    assert totals["rentals"] == 4
    assert totals["open_rentals"] == 1
    assert totals["revenue"] == 700.0


def test_text_reports_are_emitted(history, analytics, sink):
    body = analytics.revenue_report(T0, T0 + timedelta(days=5))
    assert "Rentals: 3" in body
    assert "Revenue: 700.00" in body
    assert "Average ticket: 233.33" in body

    analytics.top_vehicles_report()
    analytics.top_customers_report()
    assert sink.names() == ["revenue", "top_vehicles", "top_customers"]
    assert "ABC-1A23 - Onix: 2 rental(s)" in sink.reports[1][1]
