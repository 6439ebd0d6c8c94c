"""
Product Enhancement Module

Composable decorators that add derived fields to an assembled product.
Each decorator takes a product and returns a NEW dict; the input is never
modified. Decorators read the product's current ``price``, so the order
they are applied in changes the result.

Decorators:
- price_with_tax: priceWithTax, taxRate
- promo_label: promoLabel
- discount: originalPrice, discountPercent, discountAmount, price
- stock_status: stockStatus
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from functools import partial
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from .builders import Product

Decorator = Callable[[Product], Product]

DEFAULT_TAX_RATE = 0.15
DEFAULT_PROMO_LABEL = "Special Offer"
DEFAULT_DISCOUNT_PERCENT = 10
FEATURED_PROMO_LABEL = "⭐ Featured"
HOT_DEAL_PROMO_LABEL = "🔥 Hot Deal!"

# (lower bound exclusive, label), first match wins
STOCK_BANDS: Tuple[Tuple[int, str], ...] = (
    (50, "In Stock"),
    (10, "Limited Stock"),
    (0, "Low Stock"),
)
OUT_OF_STOCK = "Out of Stock"

# Order in which enhance() applies its steps: tax is computed on the
# pre-discount price and the discount always comes last.
ENHANCEMENT_ORDER: Tuple[str, ...] = ("tax", "promo", "stock_status", "discount")


def round2(value: float) -> float:
    """Round to 2 decimal places, halves away from zero."""
    return float(Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def price_with_tax(product: Product, tax_rate: float = DEFAULT_TAX_RATE) -> Product:
    return {
        **product,
        "priceWithTax": round2(product["price"] * (1 + tax_rate)),
        "taxRate": tax_rate,
    }


def promo_label(product: Product, label: str = DEFAULT_PROMO_LABEL) -> Product:
    return {**product, "promoLabel": label}


def discount(product: Product, discount_percent: float = DEFAULT_DISCOUNT_PERCENT) -> Product:
    """Apply a percentage discount, keeping the pre-discount price."""
    price = product["price"]
    discount_amount = round2(price * (discount_percent / 100))

    return {
        **product,
        "originalPrice": price,
        "discountPercent": discount_percent,
        "discountAmount": discount_amount,
        "price": round2(price - discount_amount),
    }


def stock_status_label(stock: Any) -> str:
    stock = stock or 0
    for lower_bound, label in STOCK_BANDS:
        if stock > lower_bound:
            return label
    return OUT_OF_STOCK


def stock_status(product: Product) -> Product:
    return {**product, "stockStatus": stock_status_label(product.get("stock"))}


def compose(product: Product, *decorators: Decorator) -> Product:
    """
    Apply decorators left to right, feeding each result into the next.

    With no decorators the product is returned unchanged.
    """
    enhanced = product
    for decorator in decorators:
        enhanced = decorator(enhanced)
    return enhanced


def apply_tax(product: Product) -> Product:
    return price_with_tax(product, DEFAULT_TAX_RATE)


def apply_promo(product: Product) -> Product:
    return promo_label(product, HOT_DEAL_PROMO_LABEL)


@dataclass(frozen=True)
class EnhanceConfig:
    """Options for the fixed-order enhancement policy"""
    include_tax: bool = False
    include_promo: bool = False
    include_stock_status: bool = False
    discount: Optional[float] = None
    tax_rate: float = DEFAULT_TAX_RATE
    promo_label: str = FEATURED_PROMO_LABEL

    _OPTION_KEYS = {
        "includeTax": "include_tax",
        "includePromo": "include_promo",
        "includeStockStatus": "include_stock_status",
        "discount": "discount",
        "taxRate": "tax_rate",
        "promoLabel": "promo_label",
    }

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "EnhanceConfig":
        """Build from camelCase or snake_case option keys; unknown keys are ignored."""
        kwargs: Dict[str, Any] = {}
        for key, value in options.items():
            name = cls._OPTION_KEYS.get(key, key)
            if name in cls.__dataclass_fields__:
                kwargs[name] = value
        return cls(**kwargs)


def plan_enhancements(product: Product, config: EnhanceConfig) -> List[Tuple[str, Decorator]]:
    """
    Resolve which steps ``enhance`` will run for this product, in order.

    Returns:
        (step name, decorator) pairs following ENHANCEMENT_ORDER
    """
    selected = {
        "tax": (config.include_tax, partial(price_with_tax, tax_rate=config.tax_rate)),
        "promo": (
            config.include_promo and bool(product.get("featured")),
            partial(promo_label, label=config.promo_label),
        ),
        "stock_status": (config.include_stock_status, stock_status),
        "discount": (
            bool(config.discount),
            partial(discount, discount_percent=config.discount),
        ),
    }

    return [
        (name, selected[name][1])
        for name in ENHANCEMENT_ORDER
        if selected[name][0]
    ]


def enhance(
    product: Product,
    config: Union[EnhanceConfig, Mapping[str, Any], None] = None,
) -> Product:
    """
    Apply the fixed-order enhancement policy.

    Args:
        product: Assembled product
        config: EnhanceConfig or a mapping of its options

    Returns:
        New enhanced product
    """
    if config is None:
        config = EnhanceConfig()
    elif not isinstance(config, EnhanceConfig):
        config = EnhanceConfig.from_options(config)

    steps = [decorator for _, decorator in plan_enhancements(product, config)]
    return compose(dict(product), *steps)
