"""
Catalog Error Taxonomy

NotFound and ValidationFailed are normal outcomes the serving layer maps to
responses; SourceUnavailable is reported to the operator at load time.
"""

from pathlib import Path
from typing import Any, List, Optional, Union


class CatalogError(Exception):
    """Base class for catalog errors"""


class NotFoundError(CatalogError):
    """Requested record id is not present in the store"""

    def __init__(self, record_id: Any):
        self.record_id = record_id
        super().__init__(f"Product {record_id!r} not found")


class ValidationFailedError(CatalogError):
    """Contact payload failed one or more field rules"""

    def __init__(self, errors: List[Any]):
        self.errors = list(errors)
        fields = ", ".join(sorted({e.field for e in self.errors}))
        super().__init__(f"Validation failed for: {fields}")


class SourceUnavailableError(CatalogError):
    """Seed content could not be read or did not validate"""

    def __init__(self, path: Union[str, Path, None], cause: Optional[BaseException] = None):
        self.path = str(path) if path is not None else None
        self.cause = cause
        super().__init__(f"Seed source unavailable: {self.path} ({cause})")
