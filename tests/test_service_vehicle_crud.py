"""
Unit tests for vehicle registration and updates. Focus on service-layer
behavior: new vehicles are available, plates are unique and well-formed,
only model/manufacturer can be edited.
"""

import pytest

from locatecar.exceptions import DuplicateKeyError, ValidationError, VehicleNotFoundError
from locatecar.models.vehicle import VehicleCategory

from conftest import make_vehicle


def test_register_and_find(store, vehicle_service):
    v = vehicle_service.register(make_vehicle("ABC-1A23", VehicleCategory.MEDIUM))
    assert v.available
    assert vehicle_service.find("ABC-1A23") == v
    assert vehicle_service.find("abc-1a23").daily_rate == 150.0
    assert store.vehicles.count() == 1


def test_register_forces_available(vehicle_service):
    vehicle = make_vehicle()
    vehicle.available = False
    assert vehicle_service.register(vehicle).available


def test_duplicate_plate_rejected(vehicle_service):
    vehicle_service.register(make_vehicle("ABC-1A23"))
    with pytest.raises(DuplicateKeyError):
        vehicle_service.register(make_vehicle("ABC-1A23", model="Other"))


@pytest.mark.parametrize("plate", ["ABCD-123", "abc-1a23", "ABC1A23"])
def test_bad_plate_rejected(vehicle_service, plate):
    with pytest.raises(ValidationError):
        vehicle_service.register(make_vehicle(plate))


def test_missing_model_rejected(vehicle_service):
    with pytest.raises(ValidationError):
        vehicle_service.register(make_vehicle(model="  "))


def test_update_model_and_manufacturer(vehicle_service):
    vehicle_service.register(make_vehicle("ABC-1A23"))
    v = vehicle_service.update("ABC-1A23", model="Tracker", manufacturer=" ")
    assert v.model == "Tracker"
    assert v.manufacturer == "Chevrolet"
    assert vehicle_service.find("ABC-1A23").model == "Tracker"


def test_find_unknown_raises(vehicle_service):
    with pytest.raises(VehicleNotFoundError):
        vehicle_service.find("ZZZ-0Z00")
    with pytest.raises(VehicleNotFoundError):
        vehicle_service.update("ZZZ-0Z00", model="X")


def test_update_accepts_non_string_values(vehicle_service):
    vehicle_service.register(make_vehicle("ABC-1A23"))
    v = vehicle_service.update("ABC-1A23", model=2024, manufacturer=None)
    assert v.model == "2024"
    assert v.manufacturer == "Chevrolet"
