"""
API Dependencies
"""

from fastapi import Request

from src.serving.catalog import CatalogService


def get_catalog(request: Request) -> CatalogService:
    """Catalog service bound to the running application"""
    return request.app.state.catalog
