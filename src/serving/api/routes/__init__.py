"""
API Routes Module
"""
from .health import router as health_router
from .landing import router as landing_router
from .products import router as products_router
from .contact import router as contact_router

__all__ = [
    "health_router",
    "landing_router",
    "products_router",
    "contact_router",
]
