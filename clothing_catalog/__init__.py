# clothing_catalog/__init__.py
from .models import Product, Category, DraftFields, NewDraft, ExistingDraft
from .errors import CatalogError, ValidationError, TransportError, SessionBusyError, SessionClosedError
from .validation import validate, ValidationResult
from .filters import filter_products
from .store import CatalogStore
from .session import EditSession, SessionState, SubmitOutcome

__all__ = [
    "Product", "Category", "DraftFields", "NewDraft", "ExistingDraft",
    "CatalogError", "ValidationError", "TransportError", "SessionBusyError", "SessionClosedError",
    "validate", "ValidationResult", "filter_products",
    "CatalogStore", "EditSession", "SessionState", "SubmitOutcome",
]
