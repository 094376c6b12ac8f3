# clothing_catalog/errors.py
from typing import Optional


class CatalogError(Exception):
    """Base class for everything the catalog client raises."""


class ValidationError(CatalogError):
    # one user-facing reason per rejected draft
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class TransportError(CatalogError):
    """A call to the collection service failed or returned an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SessionStateError(CatalogError):
    pass


class SessionBusyError(SessionStateError):
    pass


class SessionClosedError(SessionStateError):
    pass
