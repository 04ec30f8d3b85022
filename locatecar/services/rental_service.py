"""Rental checkout/return and rental listings."""

from __future__ import annotations

import threading
from dataclasses import replace
from datetime import datetime
from typing import Callable, List, Optional

from locatecar.exceptions import (
    CustomerNotFoundError,
    RentalNotFoundError,
    VehicleNotFoundError,
    VehicleUnavailableError,
)
from locatecar.logging_config import get_logger
from locatecar.models.rental import Rental
from locatecar.models.repository import paginate
from locatecar.models.store import Store
from locatecar.services.billing import billed_days, billed_hours, bill
from locatecar.services.common import norm_plate, round2
from locatecar.services.discounts import DiscountCalculator, standard_discount
from locatecar.utils.constants import DEFAULT_PAGE_SIZE, DEFAULT_TIMEZONE
from locatecar.utils.filters import fmt_local, utcnow
from locatecar.utils.report_sink import NullReportSink


class RentalService:
    """
    Checkout and return of vehicles.

    Per vehicle: available --checkout--> rented --return--> available.
    Both transitions run under one service-wide lock, so the availability
    flip and the rental record write are never observed half done and a
    vehicle can never hold two open rentals, even with concurrent callers.

    The discount applied on return is `calculator` (the standard tiered rule
    unless another one is injected).
    """

    def __init__(
            self,
            store: Store,
            sink=None,
            clock: Callable[[], datetime] = utcnow,
            calculator: DiscountCalculator = standard_discount,
            timezone: str = DEFAULT_TIMEZONE,
    ):
        self.store = store
        self.sink = sink or NullReportSink()
        self.calculator = calculator
        self.timezone = timezone
        self._clock = clock
        self._lock = threading.RLock()
        self._logger = get_logger(self.__class__.__name__)

    # --------------- Commands ---------------
    def checkout(self, plate: str, document: str, location: str) -> Rental:
        """
        Rent an available vehicle to an existing customer.

        Raises:
            VehicleNotFoundError: unknown plate
            VehicleUnavailableError: vehicle already rented
            CustomerNotFoundError: unknown document
        """
        key = norm_plate(plate)
        with self._lock:
            vehicle = self.store.vehicles.find_by_id(key)
            if vehicle is None:
                raise VehicleNotFoundError(f"Error: vehicle with plate '{plate}' not found")
            if not vehicle.available or self.store.rentals.find_by_id(key) is not None:
                raise VehicleUnavailableError(f"Error: vehicle {vehicle.plate} is already rented")

            customer = self.store.customers.find_by_id((document or "").strip())
            if customer is None:
                raise CustomerNotFoundError(f"Error: customer with document '{document}' not found")

            rented = self.store.vehicles.modify(key, lambda v: replace(v, available=False))

            rental = Rental(
                vehicle=rented,
                customer=customer,
                location=(location or "").strip(),
                rented_at=self._clock(),
            )
            self.store.rentals.register(rental)

        self._logger.info("Vehicle %s rented to %s", rented.plate, customer.document)
        self.sink.emit(f"rental_receipt_{rented.plate}", self.checkout_receipt(rental))
        return rental

    def return_vehicle(self, plate: str) -> Rental:
        """
        Close the open rental of `plate`, bill it and free the vehicle.

        Raises:
            RentalNotFoundError: no open rental for this plate
        """
        key = norm_plate(plate)
        with self._lock:
            rental = self.store.rentals.find_by_id(key)
            if rental is None:
                raise RentalNotFoundError(f"Error: no active rental for vehicle '{plate}'")

            returned_at = self._clock()
            vehicle = self.store.vehicles.find_by_id(key) or rental.vehicle
            charge = bill(rental.rented_at, returned_at, vehicle.daily_rate,
                          rental.customer, self.calculator)

            closed = replace(
                rental,
                returned_at=returned_at,
                base_amount=round2(charge.base_amount),
                discount=charge.discount,
                final_amount=round2(charge.final_amount),
            )

            self.store.vehicles.modify(key, lambda v: replace(v, available=True))
            self.store.rentals.update(closed)

        self._logger.info("Vehicle %s returned: %d day(s), total %.2f",
                          closed.plate, charge.billed_days, closed.final_amount)
        self.sink.emit(f"return_receipt_{closed.plate}", self.return_receipt(closed))
        return closed

    # --------------- Queries ---------------
    def find_open(self, plate: str) -> Optional[Rental]:
        return self.store.rentals.find_by_id(norm_plate(plate))

    def active_rentals(self, page: int = 1, size: int = DEFAULT_PAGE_SIZE) -> List[Rental]:
        return paginate(self.store.rentals.open_rentals(), page, size)

    def history(self, page: int = 1, size: int = DEFAULT_PAGE_SIZE) -> List[Rental]:
        """All rentals, newest checkout first."""
        return self.store.rentals.sorted_by_date(page, size)

    def customer_rentals(self, document: str) -> List[Rental]:
        customer = self.store.customers.find_by_id((document or "").strip())
        if customer is None:
            raise CustomerNotFoundError(f"Error: customer with document '{document}' not found")
        return self.store.rentals.for_customer(customer)

    def vehicle_rentals(self, plate: str) -> List[Rental]:
        vehicle = self.store.vehicles.find_by_id(norm_plate(plate))
        if vehicle is None:
            raise VehicleNotFoundError(f"Error: vehicle with plate '{plate}' not found")
        return self.store.rentals.for_vehicle(vehicle)

    # --------------- Receipts ---------------
    def checkout_receipt(self, rental: Rental) -> str:
        return (
            "RENTAL RECEIPT\n"
            f"Date: {fmt_local(rental.rented_at, self.timezone)}\n"
            f"Vehicle: {rental.vehicle.model} ({rental.vehicle.plate})\n"
            f"Customer: {rental.customer.name}\n"
            f"Location: {rental.location}\n"
        )

    def return_receipt(self, rental: Rental) -> str:
        if rental.is_open:
            return ""
        days = billed_days(billed_hours(rental.rented_at, rental.returned_at))
        lines = [
            "RETURN RECEIPT",
            f"Vehicle: {rental.vehicle.model} ({rental.vehicle.plate})",
            f"Customer: {rental.customer.name}",
            f"Rented at: {fmt_local(rental.rented_at, self.timezone)}",
            f"Returned at: {fmt_local(rental.returned_at, self.timezone)}",
            f"Billed days: {days}",
            f"Base amount: {rental.base_amount:.2f}",
        ]
        if rental.discount:
            lines.append(f"Discount ({rental.discount * 100:.1f}%): "
                         f"{rental.base_amount * rental.discount:.2f}")
        lines.append(f"Final amount: {rental.final_amount:.2f}")
        return "\n".join(lines) + "\n"
