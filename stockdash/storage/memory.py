import copy
import json
from typing import Mapping, Optional

from stockdash.core.errors import StorageError
from stockdash.storage.base import CollectionStore


class MemoryStore(CollectionStore):
    """In-process store used by tests and scripts.

    Records are deep-copied in and out so callers cannot mutate stored state
    without saving it.
    """

    def __init__(self, initial: Optional[Mapping[str, list[dict]]] = None) -> None:
        super().__init__()
        self._collections: dict[str, list[dict]] = {}
        self.writes: list[str] = []
        for name, records in (initial or {}).items():
            self._collections[self.check_name(name)] = copy.deepcopy(list(records))

    def load_collection(self, name: str) -> list[dict]:
        return copy.deepcopy(self._collections.get(self.check_name(name), []))

    def save_collection(self, name: str, records: list[dict]) -> None:
        self.commit({name: records})

    def commit(self, changes: Mapping[str, list[dict]]) -> None:
        staged = {}
        for name, records in changes.items():
            try:
                # Same serialisability rules as the file store.
                json.dumps(records)
            except (TypeError, ValueError) as exc:
                raise StorageError(f"Failed to write data to {name}") from exc
            staged[self.check_name(name)] = copy.deepcopy(list(records))
        self._collections.update(staged)
        self.writes.extend(staged)


__all__ = ["MemoryStore"]
