"""Persistence ports: full-collection load/save of one entity type."""

import os
import pickle
from typing import Any, List

from locatecar.exceptions import IOFailure


class PickleStorage:
    """
    Stores one list of entities in a pickle file.
    `save` overwrites the whole file through an atomic replace.
    """

    def __init__(self, path: str | os.PathLike):
        self.path = str(path)

    def load(self) -> List[Any]:
        """Return the stored list, or [] when nothing was saved yet."""
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, "rb") as f:
                data = pickle.load(f)
        except (OSError, pickle.UnpicklingError, EOFError, AttributeError, ImportError) as e:
            raise IOFailure(f"Error: could not load {self.path}: {e}") from e
        if not isinstance(data, list):
            raise IOFailure(f"Error: incompatible data in {self.path} ({type(data).__name__})")
        return data

    def save(self, items: List[Any]) -> None:
        tmp = self.path + ".tmp"
        try:
            os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
            with open(tmp, "wb") as f:
                pickle.dump(list(items), f, protocol=pickle.HIGHEST_PROTOCOL)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except (OSError, pickle.PicklingError) as e:
            raise IOFailure(f"Error: could not save {self.path}: {e}") from e


class MemoryStorage:
    """Keeps the last saved list in memory; `saves` counts writes."""

    def __init__(self, items: List[Any] | None = None):
        self.items: List[Any] = list(items or [])
        self.saves = 0

    def load(self) -> List[Any]:
        return list(self.items)

    def save(self, items: List[Any]) -> None:
        self.items = list(items)
        self.saves += 1
