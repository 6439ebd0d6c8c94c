"""
Health Check Endpoints
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.serving.api.deps import get_catalog
from src.serving.catalog import CatalogService

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    timestamp: datetime
    seed_loaded: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(
    catalog: CatalogService = Depends(get_catalog),
) -> HealthResponse:
    """Liveness plus whether the seed data made it into the store."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc),
        seed_loaded=catalog.store.is_loaded,
    )
