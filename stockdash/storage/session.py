from functools import lru_cache

from stockdash.config import get_settings
from stockdash.storage.json_store import JsonFileStore


@lru_cache
def get_store() -> JsonFileStore:
    """Process-wide store; one instance so its lock is shared by all requests."""
    return JsonFileStore(get_settings().DATA_DIR)


__all__ = ["get_store"]
