from stockdash.storage.base import CollectionStore
from stockdash.storage.session import get_store


def store_dependency() -> CollectionStore:
    # Routers depend on this rather than get_store so tests can override one name.
    return get_store()


__all__ = ["get_store", "store_dependency"]
