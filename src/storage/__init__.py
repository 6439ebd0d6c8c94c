"""
Record Store Module
"""
from .errors import CatalogError, NotFoundError, SourceUnavailableError, ValidationFailedError
from .models import ContactSubmission, RawProductRecord, SeedDocument
from .store import RecordStore

__all__ = [
    "CatalogError",
    "NotFoundError",
    "SourceUnavailableError",
    "ValidationFailedError",
    "ContactSubmission",
    "RawProductRecord",
    "SeedDocument",
    "RecordStore",
]
