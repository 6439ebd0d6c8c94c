"""
Product Assembly Module

Maps a raw stored record into the canonical client-facing product shape:
id, name, description, price, category, variants, stock, featured,
imageUrl, rating, tags. Optional fields that are missing or null on the
raw record get fixed defaults.
"""

import copy
from typing import Any, Dict, List, Mapping, Optional

from src.storage.models import RawProduct

Product = Dict[str, Any]

BASE_FIELDS = ("id", "name", "description", "price", "category")

METADATA_DEFAULTS: Dict[str, Any] = {
    "stock": 0,
    "featured": False,
    "imageUrl": "",
    "rating": 0,
}


def _or_default(value: Any, default: Any) -> Any:
    return default if value is None else value


class ProductBuilder:
    """
    Step-by-step assembler for a single product.

    Example:
        product = (
            ProductBuilder()
            .with_base_info(raw)
            .with_variants(raw.get("variants"))
            .with_metadata(raw)
            .with_tags(raw.get("tags"))
            .build()
        )
    """

    def __init__(self):
        self._product: Product = {}

    def with_base_info(self, data: Mapping[str, Any]) -> "ProductBuilder":
        """Copy id, name, description, price and category verbatim"""
        for field in BASE_FIELDS:
            self._product[field] = data.get(field)
        return self

    def with_variants(self, variants: Optional[List[Any]]) -> "ProductBuilder":
        self._product["variants"] = copy.deepcopy(_or_default(variants, []))
        return self

    def with_metadata(self, meta: Mapping[str, Any]) -> "ProductBuilder":
        """Stock, featured flag, image URL and rating"""
        for field, default in METADATA_DEFAULTS.items():
            self._product[field] = _or_default(meta.get(field), default)
        return self

    def with_tags(self, tags: Optional[List[str]]) -> "ProductBuilder":
        self._product["tags"] = list(_or_default(tags, []))
        return self

    def build(self) -> Product:
        """Return an independent copy of the assembled product."""
        return copy.deepcopy(self._product)

    @classmethod
    def from_data(cls, raw: RawProduct) -> Product:
        """Assemble a product from a complete raw record in one call."""
        return (
            cls()
            .with_base_info(raw)
            .with_variants(raw.get("variants"))
            .with_metadata(raw)
            .with_tags(raw.get("tags"))
            .build()
        )


def assemble(raw: RawProduct) -> Product:
    """
    Build the canonical product for a raw record.

    Args:
        raw: Raw product record from the store

    Returns:
        New product dict that shares no mutable state with ``raw``
    """
    return ProductBuilder.from_data(raw)
