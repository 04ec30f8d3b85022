"""
Unit tests for VehicleService queries: multi-criteria filtering, model
search, sorting, paging and fleet statistics.
"""

import pytest

from locatecar.exceptions import ValidationError
from locatecar.models.vehicle import VehicleCategory

from conftest import make_vehicle


@pytest.fixture
def fleet(vehicle_service, store):
    vehicle_service.register(make_vehicle("AAA-1A11", VehicleCategory.SMALL, "Onix", "Chevrolet"))
    vehicle_service.register(make_vehicle("BBB-2B22", VehicleCategory.MEDIUM, "Corolla", "Toyota"))
    vehicle_service.register(make_vehicle("CCC-3C33", VehicleCategory.SUV, "Compass", "Jeep"))
    vehicle_service.register(make_vehicle("DDD-4D44", VehicleCategory.SUV, "Tracker", "Chevrolet"))
    # One rented vehicle
    rented = vehicle_service.find("DDD-4D44")
    rented.available = False
    store.vehicles.update(rented)
    return vehicle_service


def plates(rows):
    return [v.plate for v in rows]


def test_filter_by_category(fleet):
    assert plates(fleet.filter_vehicles(category="suv")) == ["CCC-3C33", "DDD-4D44"]
    assert plates(fleet.filter_vehicles(category=VehicleCategory.SMALL)) == ["AAA-1A11"]


def test_filter_by_partial_manufacturer(fleet):
    assert plates(fleet.filter_vehicles(manufacturer="chev")) == ["AAA-1A11", "DDD-4D44"]


def test_filter_combines_criteria(fleet):
    rows = fleet.filter_vehicles(category="SUV", manufacturer="Chevrolet", available=False)
    assert plates(rows) == ["DDD-4D44"]
    assert fleet.filter_vehicles(category="SUV", manufacturer="Toyota") == []


def test_filter_with_no_criteria_returns_first_page(fleet):
    assert len(fleet.filter_vehicles()) == 4
    assert plates(fleet.filter_vehicles(page=2, size=3)) == ["DDD-4D44"]


def test_unknown_category_rejected(fleet):
    with pytest.raises(ValidationError):
        fleet.filter_vehicles(category="truck")


def test_search_and_sort_by_model(fleet):
    assert plates(fleet.search_by_model("CO")) == ["BBB-2B22", "CCC-3C33"]
    assert [v.model for v in fleet.list_sorted(1, 10)] == ["Compass", "Corolla", "Onix", "Tracker"]


def test_available_page(fleet):
    assert plates(fleet.available_page(1, 10)) == ["AAA-1A11", "BBB-2B22", "CCC-3C33"]


def test_statistics(fleet):
    stats = fleet.statistics()
    assert stats["total"] == 4
    assert stats["available"] == 3
    assert stats["rented"] == 1
    assert stats["by_category"] == {"SMALL": 1, "MEDIUM": 1, "SUV": 2}
    assert stats["available_models"] == ["Compass", "Corolla", "Onix"]
