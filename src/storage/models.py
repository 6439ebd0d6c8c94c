"""
Record Store Models

Pydantic schemas that gate the seed document at load time, plus the
immutable contact submission record kept by the store.

Raw product records are held as plain dicts keyed by their wire names
(``imageUrl`` and friends) once they pass validation; fields missing from
the seed stay missing so the assembler can default them.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# Raw records as handed to the filter and assembler
RawProduct = Mapping[str, Any]
LandingContent = Dict[str, Any]


class ProductVariant(BaseModel):
    """A purchasable variant; anything beyond id and label is passed through."""

    model_config = ConfigDict(extra="allow", frozen=True)

    id: Union[int, str]
    label: str


class RawProductRecord(BaseModel):
    """Seed-time schema for a stored product"""

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    id: int
    name: str
    description: str
    category: str
    price: float = Field(ge=0)
    stock: Optional[int] = Field(default=None, ge=0)
    featured: Optional[bool] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    tags: Optional[List[str]] = None
    variants: Optional[List[ProductVariant]] = None

    def to_record(self) -> Dict[str, Any]:
        """Dump to the stored dict form, keeping absent fields absent."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class SeedDocument(BaseModel):
    """Top-level seed layout: opaque landing blob plus the product list"""

    landing: LandingContent = Field(default_factory=dict)
    products: List[RawProductRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_ids(self) -> "SeedDocument":
        seen = set()
        for product in self.products:
            if product.id in seen:
                raise ValueError(f"Duplicate product id: {product.id}")
            seen.add(product.id)
        return self


@dataclass(frozen=True)
class ContactSubmission:
    """An accepted contact form submission"""
    id: int
    name: str
    email: str
    message: str
    source: str
    timestamp: str  # ISO-8601, UTC
    status: str = "received"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
