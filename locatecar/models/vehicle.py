from dataclasses import dataclass
from enum import Enum


class VehicleCategory(Enum):
    """
    Fleet category. Each category carries the fixed daily rate used in billing.
    """
    SMALL = "SMALL", 100.0
    MEDIUM = "MEDIUM", 150.0
    SUV = "SUV", 200.0

    def __new__(cls, code: str, daily_rate: float):
        obj = object.__new__(cls)
        obj._value_ = code
        obj.daily_rate = daily_rate
        return obj

    @classmethod
    def parse(cls, value) -> "VehicleCategory":
        """Accept a member or its name in any case; raise ValueError otherwise."""
        if isinstance(value, cls):
            return value
        return cls(str(value or "").strip().upper())


@dataclass
class Vehicle:
    """
    A fleet vehicle, identified by its plate (format AAA-9A99).
    Only model, manufacturer and availability change after registration.
    """
    plate: str
    model: str
    manufacturer: str
    category: VehicleCategory
    available: bool = True

    @property
    def daily_rate(self) -> float:
        return self.category.daily_rate

    @property
    def label(self) -> str:
        return f"{self.plate} - {self.model}"

    def to_dict(self) -> dict:
        return {
            "plate": self.plate,
            "model": self.model,
            "manufacturer": self.manufacturer,
            "category": self.category.value,
            "daily_rate": self.daily_rate,
            "available": self.available,
        }
