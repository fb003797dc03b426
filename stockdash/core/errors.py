"""Error taxonomy shared by the services and the HTTP layer.

Services raise these; ``stockdash.main`` maps them onto status codes so the
routers never have to.
"""


class InventoryError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(InventoryError):
    """Bad input. Raised before anything is mutated."""

    status_code = 400


class NotFoundError(InventoryError):
    status_code = 404


class StorageError(InventoryError):
    """A collection could not be read or written.

    The message may name the file; the HTTP layer replaces it with a generic one.
    """

    status_code = 500


__all__ = ["InventoryError", "NotFoundError", "StorageError", "ValidationError"]
