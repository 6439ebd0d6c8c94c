"""
Serving Module
"""
from .catalog import CatalogService, SubmissionResult

__all__ = [
    "CatalogService",
    "SubmissionResult",
]
