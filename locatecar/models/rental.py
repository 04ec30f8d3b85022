from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from locatecar.models.customer import Customer
from locatecar.models.vehicle import Vehicle
from locatecar.utils.filters import fmt_iso


@dataclass
class Rental:
    """
    One checkout-to-return cycle.

    `vehicle` and `customer` are snapshots of the entities at checkout time;
    the repositories own the canonical records. The return timestamp and the
    three amounts stay None while the rental is open.
    """
    vehicle: Vehicle
    customer: Customer
    location: str
    rented_at: datetime
    returned_at: Optional[datetime] = None
    base_amount: Optional[float] = None
    discount: Optional[float] = None
    final_amount: Optional[float] = None

    @property
    def plate(self) -> str:
        return self.vehicle.plate

    @property
    def is_open(self) -> bool:
        return self.returned_at is None

    def to_dict(self) -> dict:
        return {
            "plate": self.vehicle.plate,
            "model": self.vehicle.model,
            "customer": self.customer.name,
            "document": self.customer.document,
            "location": self.location,
            "rented_at": fmt_iso(self.rented_at),
            "returned_at": fmt_iso(self.returned_at),
            "base_amount": self.base_amount,
            "discount": self.discount,
            "final_amount": self.final_amount,
            "status": "open" if self.is_open else "returned",
        }
