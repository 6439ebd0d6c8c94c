"""
Product Transformation Module
"""
from .builders import ProductBuilder, assemble
from .decorators import (
    ENHANCEMENT_ORDER,
    EnhanceConfig,
    apply_promo,
    apply_tax,
    compose,
    discount,
    enhance,
    price_with_tax,
    promo_label,
    round2,
    stock_status,
)
from .filters import FilterCriteria, filter_products, parse_flag, parse_int, parse_limit

__all__ = [
    "ProductBuilder",
    "assemble",
    "ENHANCEMENT_ORDER",
    "EnhanceConfig",
    "apply_promo",
    "apply_tax",
    "compose",
    "discount",
    "enhance",
    "price_with_tax",
    "promo_label",
    "round2",
    "stock_status",
    "FilterCriteria",
    "filter_products",
    "parse_flag",
    "parse_int",
    "parse_limit",
]
