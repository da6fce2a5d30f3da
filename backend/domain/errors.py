"""
Error taxonomy for inventory operations.

Each error carries the HTTP status the API layer maps it to, so the
service never has to know about HTTP.
"""


class InventoryError(Exception):
    status_code = 500

    def __init__(self, message: str = "Inventory error"):
        super().__init__(message)
        self.message = message


class ValidationError(InventoryError):
    """A required field is missing, empty or malformed."""
    status_code = 400


class NotFoundError(InventoryError):
    """Unknown item id, item without photo, or blob missing from the medium."""
    status_code = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class StorageError(InventoryError):
    """The database or the blob medium failed."""
    status_code = 500

    def __init__(self, message: str = "Storage error"):
        super().__init__(message)
