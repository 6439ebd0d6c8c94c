"""
FastAPI Application Factory

Creates and configures the catalog API application.
"""

from typing import Any, Callable, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from src.config import get_settings
from src.serving.api.errors import register_error_handlers
from src.serving.api.middleware import RequestLoggingMiddleware
from src.serving.api.routes import (
    contact_router,
    health_router,
    landing_router,
    products_router,
)
from src.serving.catalog import CatalogService
from src.storage import RecordStore

ENDPOINTS = {
    "health": "/api/health",
    "landing": "/api/landing",
    "products": "/api/products",
    "productDetail": "/api/products/{id}",
    "contact": "POST /api/contact",
}


def create_api_app(
    store: Optional[RecordStore] = None,
    lifespan: Optional[Callable] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    Args:
        store: Record store to serve; a store for the configured seed
            path is created when omitted (and loaded by the lifespan)
        lifespan: Optional lifespan context manager
    
    Returns:
        Configured FastAPI app instance
    """
    settings = get_settings()
    
    app = FastAPI(
        title="Storefront Catalog API",
        description="Product catalog and contact form API",
        version=settings.version,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )
    
    app.state.catalog = CatalogService(
        store or RecordStore(settings.data.seed_path),
        settings.pricing,
    )
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.security.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(RequestLoggingMiddleware)
    
    register_error_handlers(app)
    
    app.include_router(health_router, prefix="/api", tags=["Health"])
    app.include_router(landing_router, prefix="/api", tags=["Landing"])
    app.include_router(products_router, prefix="/api/products", tags=["Products"])
    app.include_router(contact_router, prefix="/api", tags=["Contact"])
    
    @app.get("/")
    async def root() -> Dict[str, Any]:
        """API information endpoint."""
        return {
            "message": "Storefront Catalog API",
            "version": settings.version,
            "endpoints": ENDPOINTS,
        }
    
    return app
