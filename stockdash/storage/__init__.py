from stockdash.storage.base import CollectionStore
from stockdash.storage.json_store import JsonFileStore
from stockdash.storage.memory import MemoryStore
from stockdash.storage.session import get_store

__all__ = ["CollectionStore", "JsonFileStore", "MemoryStore", "get_store"]
