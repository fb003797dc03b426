import threading
from abc import ABC, abstractmethod
from typing import Mapping

from stockdash.core.constants import COLLECTIONS
from stockdash.core.errors import StorageError


class CollectionStore(ABC):
    """Whole-collection persistence: every read returns the full list and
    every write replaces it.

    ``lock`` is held by the services for the duration of a read-modify-write
    cycle so two requests in the same process cannot interleave.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()

    @staticmethod
    def check_name(name: str) -> str:
        if name not in COLLECTIONS:
            raise StorageError(f"Unknown collection: {name}")
        return name

    @abstractmethod
    def load_collection(self, name: str) -> list[dict]:
        ...

    @abstractmethod
    def save_collection(self, name: str, records: list[dict]) -> None:
        ...

    def commit(self, changes: Mapping[str, list[dict]]) -> None:
        """Write several collections as one unit.

        The default writes them one after another; stores that can stage
        writes override this.
        """
        for name, records in changes.items():
            self.save_collection(name, records)


__all__ = ["CollectionStore"]
