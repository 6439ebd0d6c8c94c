"""
Landing Content Endpoint
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from src.serving.api.deps import get_catalog
from src.serving.catalog import CatalogService

router = APIRouter()


@router.get("/landing")
async def get_landing(
    catalog: CatalogService = Depends(get_catalog),
) -> Dict[str, Any]:
    """Landing page content, passed through as stored."""
    return catalog.get_landing()
