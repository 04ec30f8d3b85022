"""
Generic in-memory repository with a pluggable persistence port.

One `Repository` implementation serves vehicles, customers and rentals; the
entity-specific classes below only plug in the key, the registration rules
and a few domain queries.
"""

from __future__ import annotations

import threading
from collections import Counter
from datetime import datetime
from itertools import islice
from typing import Callable, Dict, Generic, Hashable, Iterable, Iterator, List, Optional, TypeVar

from locatecar.exceptions import DuplicateKeyError, IOFailure, ValidationError
from locatecar.logging_config import get_logger
from locatecar.models.customer import Customer, CustomerKind
from locatecar.models.rental import Rental
from locatecar.models.vehicle import Vehicle, VehicleCategory
from locatecar.utils.filters import as_utc
from locatecar.utils.validation import (
    is_valid_email,
    is_valid_individual_document,
    is_valid_organization_document,
    is_valid_plate,
)

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def paginate(items: Iterable[T], page: int, size: int) -> List[T]:
    """
    Slice page `page` (1-based) of `size` items out of any iterable.
    Past the end this returns a short or empty list, never an error.
    """
    if page < 1:
        raise ValidationError(f"Error: page must be >= 1 (got {page})")
    if size <= 0:
        raise ValidationError(f"Error: page size must be > 0 (got {size})")
    start = (page - 1) * size
    return list(islice(items, start, start + size))


def _same_key(a: str, b: str) -> bool:
    return a.upper() == b.upper()


class Repository(Generic[T]):
    """
    Insertion-ordered collection keyed by `key_fn`.

    - `validate(entity)` may raise ValidationError before registration.
    - `unique=False` allows several entities with the same key; lookups and
      updates then only consider entities for which `is_current` is true.
    - Every mutation saves the whole collection through `storage`. A failed
      save is logged and kept in `last_io_error`; the in-memory change stays.
    """

    def __init__(
            self,
            name: str,
            storage,
            key_fn: Callable[[T], str],
            *,
            validate: Optional[Callable[[T], None]] = None,
            unique: bool = True,
            is_current: Optional[Callable[[T], bool]] = None,
            key_eq: Callable[[str, str], bool] = _same_key,
    ):
        self.name = name
        self.storage = storage
        self.last_io_error: Optional[IOFailure] = None
        self._key_fn = key_fn
        self._validate = validate
        self._unique = unique
        self._is_current = is_current or (lambda _e: True)
        self._key_eq = key_eq
        self._items: List[T] = []
        self._rw = threading.RLock()
        self._logger = get_logger(self.__class__.__name__)
        self.load()

    # ---------- CRUD ----------
    def key_of(self, entity: T) -> str:
        return self._key_fn(entity)

    def register(self, entity: T) -> T:
        """Validate, enforce key uniqueness, append and persist."""
        with self._rw:
            if self._validate is not None:
                self._validate(entity)
            key = self.key_of(entity)
            if self._unique and any(self._key_eq(self.key_of(e), key) for e in self._items):
                raise DuplicateKeyError(f"Error: {self.name} with key {key} already exists.")
            self._items.append(entity)
            self.persist()
            return entity

    def _index_of(self, key: str) -> Optional[int]:
        for i, e in enumerate(self._items):
            if self._key_eq(self.key_of(e), key) and self._is_current(e):
                return i
        return None

    def update(self, entity: T) -> bool:
        """Replace the current entity with the same key; False (no-op) if absent."""
        with self._rw:
            i = self._index_of(self.key_of(entity))
            if i is None:
                return False
            self._items[i] = entity
            self.persist()
            return True

    def modify(self, key: str, fn: Callable[[T], T]) -> Optional[T]:
        """
        Atomically replace the current entity with `fn(current)`.

        `fn` sees the live record, so fields it does not touch keep the value
        written by the latest mutation. Returns the new entity, or None (no-op)
        if `key` is absent.
        """
        with self._rw:
            i = self._index_of(key)
            if i is None:
                return None
            entity = fn(self._items[i])
            self._items[i] = entity
            self.persist()
            return entity

    def find_by_id(self, key: str) -> Optional[T]:
        with self._rw:
            i = self._index_of(key)
            return None if i is None else self._items[i]

    # ---------- Queries ----------
    def stream_all(self) -> Iterator[T]:
        """Lazy pass over the live collection in insertion order."""
        for entity in self._items:
            yield entity

    def __iter__(self) -> Iterator[T]:
        return self.stream_all()

    def __len__(self) -> int:
        return len(self._items)

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [e for e in self.stream_all() if predicate(e)]

    def sort(self, key: Callable[[T], object], reverse: bool = False) -> List[T]:
        """Stable sort of the whole collection."""
        return sorted(self.stream_all(), key=key, reverse=reverse)

    def paginate(self, page: int, size: int) -> List[T]:
        return paginate(self.stream_all(), page, size)

    def count(self) -> int:
        return len(self._items)

    def group_count(self, key_fn: Callable[[T], K]) -> Dict[K, int]:
        """Occurrences per derived key, in first-encounter order."""
        return dict(Counter(key_fn(e) for e in self.stream_all()))

    # ---------- Persistence ----------
    def persist(self) -> bool:
        """Save the full collection. Returns False (and logs) on IOFailure."""
        with self._rw:
            try:
                self.storage.save(list(self._items))
            except IOFailure as e:
                self.last_io_error = e
                self._logger.warning("Could not save %s: %s", self.name, e.message)
                return False
            self.last_io_error = None
            return True

    def load(self) -> bool:
        """Replace the collection with the stored one; tolerate missing data."""
        with self._rw:
            try:
                items = self.storage.load()
            except IOFailure as e:
                self.last_io_error = e
                self._logger.warning("Could not load %s, starting empty: %s", self.name, e.message)
                return False
            self._items = list(items or [])
            self._logger.debug("Loaded %d %s", len(self._items), self.name)
            return True

    def clear(self) -> None:
        """Drop everything and persist the empty collection."""
        with self._rw:
            self._items = []
            self.persist()


# ====================== Vehicles ======================
def _validate_vehicle(v: Vehicle) -> None:
    if not is_valid_plate(v.plate):
        raise ValidationError(f"Error: invalid plate: {v.plate}")


class VehicleRepository(Repository[Vehicle]):
    """Fleet keyed by plate (case-insensitive lookups)."""

    def __init__(self, storage):
        super().__init__("vehicle", storage, lambda v: v.plate, validate=_validate_vehicle)

    def search_by_model(self, text: str) -> List[Vehicle]:
        kw = (text or "").lower()
        return self.filter(lambda v: kw in v.model.lower())

    def by_manufacturer(self, text: str) -> List[Vehicle]:
        kw = (text or "").lower()
        return self.filter(lambda v: kw in v.manufacturer.lower())

    def by_category(self, category: VehicleCategory) -> List[Vehicle]:
        return self.filter(lambda v: v.category is category)

    def available(self) -> List[Vehicle]:
        return self.filter(lambda v: v.available)

    def available_models(self) -> List[str]:
        return sorted({v.model for v in self.stream_all() if v.available})

    def count_by_category(self) -> Dict[VehicleCategory, int]:
        return self.group_count(lambda v: v.category)

    def sorted_by_model(self, page: int, size: int) -> List[Vehicle]:
        return paginate(self.sort(key=lambda v: v.model), page, size)


# ====================== Customers ======================
def _validate_customer(c: Customer) -> None:
    if c.kind is CustomerKind.INDIVIDUAL:
        doc_ok = is_valid_individual_document(c.document)
    else:
        doc_ok = is_valid_organization_document(c.document)
    if not doc_ok:
        raise ValidationError(f"Error: invalid document: {c.document}")
    if not is_valid_email(c.email):
        raise ValidationError(f"Error: invalid email: {c.email}")


class CustomerRepository(Repository[Customer]):
    """Customers keyed by document, unique across both variants."""

    def __init__(self, storage):
        super().__init__(
            "customer", storage, lambda c: c.document,
            validate=_validate_customer, key_eq=lambda a, b: a == b,
        )

    def search_by_name(self, text: str) -> List[Customer]:
        kw = (text or "").lower()
        return self.filter(lambda c: kw in c.name.lower())

    def find_by_email(self, email: str) -> Optional[Customer]:
        target = (email or "").lower()
        return next((c for c in self.stream_all() if (c.email or "").lower() == target), None)

    def individuals(self) -> List[Customer]:
        return self.filter(lambda c: c.kind is CustomerKind.INDIVIDUAL)

    def organizations(self) -> List[Customer]:
        return self.filter(lambda c: c.kind is CustomerKind.ORGANIZATION)

    def email_domains(self) -> Dict[str, int]:
        return dict(Counter(c.email_domain for c in self.stream_all() if c.email_domain))

    def count_by_kind(self) -> Dict[str, int]:
        return self.group_count(lambda c: c.display_category)

    def sorted_by_name(self, page: int, size: int) -> List[Customer]:
        return paginate(self.sort(key=lambda c: c.name), page, size)


# ====================== Rentals ======================
class RentalRepository(Repository[Rental]):
    """
    Rental history. Keyed by vehicle plate for lookup, but only the open
    rental of a plate is visible to `find_by_id` and `update`; any number of
    closed rentals may share the plate.
    """

    def __init__(self, storage):
        super().__init__(
            "rental", storage, lambda r: r.vehicle.plate,
            unique=False, is_current=lambda r: r.is_open,
        )

    def open_rentals(self) -> List[Rental]:
        return self.filter(lambda r: r.is_open)

    def closed_rentals(self) -> List[Rental]:
        return self.filter(lambda r: not r.is_open)

    def for_customer(self, customer: Customer) -> List[Rental]:
        return self.filter(lambda r: r.customer.document == customer.document)

    def for_vehicle(self, vehicle: Vehicle) -> List[Rental]:
        return self.filter(lambda r: _same_key(r.vehicle.plate, vehicle.plate))

    def in_period(self, start: datetime, end: datetime) -> List[Rental]:
        """Rentals whose checkout falls in [start, end], both ends inclusive."""
        lo, hi = as_utc(start), as_utc(end)
        return self.filter(lambda r: lo <= as_utc(r.rented_at) <= hi)

    def sorted_by_date(self, page: int, size: int) -> List[Rental]:
        """Newest checkout first."""
        return paginate(self.sort(key=lambda r: as_utc(r.rented_at), reverse=True), page, size)

    def vehicle_ranking(self) -> Dict[str, int]:
        return self.group_count(lambda r: r.vehicle.label)

    def customer_ranking(self) -> Dict[str, int]:
        return self.group_count(lambda r: r.customer.label)

    def total_revenue(self) -> float:
        return sum((r.final_amount for r in self.stream_all() if r.final_amount is not None), 0.0)

    def revenue_in_period(self, start: datetime, end: datetime) -> float:
        return sum(
            (r.final_amount for r in self.in_period(start, end) if r.final_amount is not None),
            0.0,
        )
