"""Wires one Store into the service objects the controllers use."""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from flask import current_app

from locatecar.models.store import Store
from locatecar.services.analytics_service import AnalyticsService
from locatecar.services.customer_service import CustomerService
from locatecar.services.rental_service import RentalService
from locatecar.services.vehicle_service import VehicleService
from locatecar.utils.constants import DEFAULT_TIMEZONE
from locatecar.utils.filters import utcnow

EXTENSION_KEY = "locatecar"


@dataclass
class Services:
    store: Store
    vehicles: VehicleService
    customers: CustomerService
    rentals: RentalService
    analytics: AnalyticsService


def build_services(store: Store, sink=None, timezone: str = DEFAULT_TIMEZONE,
                   clock: Callable[[], datetime] = utcnow) -> Services:
    return Services(
        store=store,
        vehicles=VehicleService(store),
        customers=CustomerService(store),
        rentals=RentalService(store, sink=sink, clock=clock, timezone=timezone),
        analytics=AnalyticsService(store, sink=sink, timezone=timezone),
    )


def current_services() -> Services:
    """Services bound to the running Flask app."""
    return current_app.extensions[EXTENSION_KEY]
