import os
from pathlib import Path

from locatecar.logging_config import get_logger
from locatecar.models.repository import CustomerRepository, RentalRepository, VehicleRepository
from locatecar.models.storage import MemoryStorage, PickleStorage
from locatecar.utils.constants import CUSTOMERS_FILE, RENTALS_FILE, VEHICLES_FILE


class Store:
    """
    Owns the three repositories. Build one explicitly and hand it to the
    services; nothing here is global.

    With `data_dir` each repository persists to its own pickle file in that
    directory; without it everything lives in memory.
    """

    def __init__(self, data_dir: str | os.PathLike | None = None):
        self.data_dir = Path(data_dir) if data_dir else None
        self._logger = get_logger(self.__class__.__name__)

        self.vehicles = VehicleRepository(self._storage(VEHICLES_FILE))
        self.customers = CustomerRepository(self._storage(CUSTOMERS_FILE))
        self.rentals = RentalRepository(self._storage(RENTALS_FILE))

        where = str(self.data_dir) if self.data_dir else "memory"
        self._logger.info(
            "Using %s: vehicles=%d, customers=%d, rentals=%d",
            where, self.vehicles.count(), self.customers.count(), self.rentals.count(),
        )

    def _storage(self, filename: str):
        if self.data_dir is None:
            return MemoryStorage()
        return PickleStorage(self.data_dir / filename)

    @property
    def is_empty(self) -> bool:
        return not (self.vehicles.count() or self.customers.count() or self.rentals.count())

    def clear(self) -> None:
        for repo in (self.vehicles, self.customers, self.rentals):
            repo.clear()
