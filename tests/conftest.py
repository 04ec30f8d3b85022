import sys, pathlib
from datetime import datetime, timedelta, timezone

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from locatecar import create_app
from locatecar.models.customer import Customer
from locatecar.models.store import Store
from locatecar.models.vehicle import Vehicle, VehicleCategory
from locatecar.services.customer_service import CustomerService
from locatecar.services.rental_service import RentalService
from locatecar.services.vehicle_service import VehicleService

T0 = datetime(2030, 1, 10, 9, 0, tzinfo=timezone.utc)

INDIVIDUAL_DOC = "12345678901"
ORGANIZATION_DOC = "12345678000155"


class FixedClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime = T0):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


class RecordingSink:
    """Report sink that keeps (name, body) pairs instead of writing files."""

    def __init__(self):
        self.reports = []

    def emit(self, report_name, body):
        self.reports.append((report_name, body))
        return None

    def names(self):
        return [name for name, _ in self.reports]


def make_vehicle(plate="ABC-1A23", category=VehicleCategory.SMALL, model="Onix", manufacturer="Chevrolet"):
    return Vehicle(plate=plate, model=model, manufacturer=manufacturer, category=category)


def make_individual(document=INDIVIDUAL_DOC, name="Ana Souza", email="ana@mail.com"):
    return Customer.individual(name, email, "11999999999", document)


def make_organization(document=ORGANIZATION_DOC, name="Acme Ltda", email="fleet@acme.com.br"):
    return Customer.organization(name, email, "1133334444", document)


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def store():
    """Fresh in-memory store for each test."""
    return Store()


@pytest.fixture
def vehicle_service(store):
    return VehicleService(store)


@pytest.fixture
def customer_service(store):
    return CustomerService(store)


@pytest.fixture
def rental_service(store, sink, clock):
    return RentalService(store, sink=sink, clock=clock)


@pytest.fixture
def seeded(store, vehicle_service, customer_service):
    """Two vehicles, one individual and one organization."""
    vehicle_service.register(make_vehicle("ABC-1A23", VehicleCategory.SMALL))
    vehicle_service.register(make_vehicle("SUV-2B34", VehicleCategory.SUV, model="Compass", manufacturer="Jeep"))
    customer_service.register(make_individual())
    customer_service.register(make_organization())
    return store


@pytest.fixture
def client(store, clock, tmp_path):
    """Flask test client bound to the in-memory store and fixed clock."""
    app = create_app(
        config={"TESTING": True, "REPORTS_DIR": str(tmp_path / "reports")},
        store=store,
        clock=clock,
    )
    with app.test_client() as c:
        yield c
