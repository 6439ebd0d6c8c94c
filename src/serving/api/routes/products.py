"""
Products API Endpoints

Read-only product catalog. Query parameters arrive as raw text and are
coerced by the catalog's own parsing rules (``featured``/``tax`` only
accept ``true``; an unusable ``limit`` means no limit).
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from src.serving.api.deps import get_catalog
from src.serving.catalog import CatalogService

router = APIRouter()


@router.get("")
async def list_products(
    limit: Optional[str] = Query(None, description="Maximum number of products"),
    featured: Optional[str] = Query(None, description="Only featured (true) or non-featured products"),
    q: Optional[str] = Query(None, description="Search name, description, category and tags"),
    tax: Optional[str] = Query(None, description="Include priceWithTax when 'true'"),
    catalog: CatalogService = Depends(get_catalog),
) -> List[Dict[str, Any]]:
    """
    List products with filtering and search.
    """
    criteria = {"limit": limit, "featured": featured, "q": q, "tax": tax}
    return catalog.list_products(criteria)


@router.get("/{product_id}")
async def get_product(
    product_id: str,
    tax: Optional[str] = Query(None, description="Include priceWithTax when 'true'"),
    catalog: CatalogService = Depends(get_catalog),
) -> Dict[str, Any]:
    """Get product details."""
    product = catalog.get_product(product_id, {"tax": tax})
    
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    
    return product
