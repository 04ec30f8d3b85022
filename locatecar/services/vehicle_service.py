from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from locatecar.exceptions import ValidationError, VehicleNotFoundError
from locatecar.logging_config import get_logger
from locatecar.models.repository import paginate
from locatecar.models.store import Store
from locatecar.models.vehicle import Vehicle, VehicleCategory
from locatecar.services.common import _lc, clean_text, norm_plate
from locatecar.utils.constants import DEFAULT_PAGE_SIZE


class VehicleService:
    """Fleet catalogue: register, update, look up, filter and summarise."""

    def __init__(self, store: Store):
        self.store = store
        self._logger = get_logger(self.__class__.__name__)

    @property
    def repo(self):
        return self.store.vehicles

    def register(self, vehicle: Vehicle) -> Vehicle:
        """Add a vehicle; it always enters the fleet as available."""
        model = clean_text(vehicle.model)
        manufacturer = clean_text(vehicle.manufacturer)
        if not model or not manufacturer:
            raise ValidationError("Error: model and manufacturer are required")
        v = replace(vehicle, plate=(vehicle.plate or "").strip(), model=model,
                    manufacturer=manufacturer, available=True)
        self.repo.register(v)
        self._logger.info("Vehicle %s registered (%s)", v.plate, v.category.value)
        return v

    def find(self, plate: str) -> Vehicle:
        """Return a vehicle by plate or raise VehicleNotFoundError."""
        v = self.repo.find_by_id(norm_plate(plate))
        if v is None:
            raise VehicleNotFoundError(f"Error: vehicle with plate '{plate}' not found")
        return v

    def update(self, plate: str, model: Optional[str] = None,
               manufacturer: Optional[str] = None) -> Vehicle:
        """
        Change model and/or manufacturer. Blank values are ignored;
        availability is owned by the rental flow and never changed here.
        """
        current = self.find(plate)
        changes = {}
        if clean_text(model):
            changes["model"] = clean_text(model)
        if clean_text(manufacturer):
            changes["manufacturer"] = clean_text(manufacturer)
        if not changes:
            return current
        # Merged into the live record so a concurrent checkout/return keeps its flag
        updated = self.repo.modify(current.plate, lambda v: replace(v, **changes))
        if updated is None:
            raise VehicleNotFoundError(f"Error: vehicle with plate '{plate}' not found")
        return updated

    # --------------- Queries ---------------
    def list_page(self, page: int = 1, size: int = DEFAULT_PAGE_SIZE) -> List[Vehicle]:
        return self.repo.paginate(page, size)

    def list_sorted(self, page: int = 1, size: int = DEFAULT_PAGE_SIZE) -> List[Vehicle]:
        """Ordered by model name."""
        return self.repo.sorted_by_model(page, size)

    def search_by_model(self, text: str) -> List[Vehicle]:
        return self.repo.search_by_model(text)

    def available_page(self, page: int = 1, size: int = DEFAULT_PAGE_SIZE) -> List[Vehicle]:
        return paginate(self.repo.available(), page, size)

    def filter_vehicles(self, category=None, manufacturer=None, available=None,
                        page: int = 1, size: int = DEFAULT_PAGE_SIZE) -> List[Vehicle]:
        """
        AND-combination of the criteria that are given:
        - category: exact match (member or name)
        - manufacturer: case-insensitive partial match
        - available: exact match
        Paging is applied after filtering.
        """
        checks = []
        if category:
            try:
                cat = VehicleCategory.parse(category)
            except ValueError as e:
                raise ValidationError(f"Error: unknown category: {category}") from e
            checks.append(lambda v: v.category is cat)

        kw = _lc(manufacturer).strip()
        if kw:
            checks.append(lambda v: kw in _lc(v.manufacturer))

        if available is not None:
            checks.append(lambda v: v.available is bool(available))

        matches = (v for v in self.repo.stream_all() if all(check(v) for check in checks))
        return paginate(matches, page, size)

    def statistics(self) -> dict:
        total = self.repo.count()
        available = len(self.repo.available())
        by_category = {cat.value: n for cat, n in self.repo.count_by_category().items()}
        return {
            "total": total,
            "available": available,
            "rented": total - available,
            "by_category": by_category,
            "available_models": self.repo.available_models(),
        }
