"""
Catalog Service

Read and write operations the HTTP layer calls into. Reads run the
product pipeline: filter raw records, assemble each one, then apply the
enhancement steps. Writes validate a contact payload before appending it
to the store.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

import structlog

from src.config import get_settings
from src.config.settings import PricingSettings
from src.quality.validators import FieldError, ValidationResult, create_contact_validator
from src.storage import ContactSubmission, NotFoundError, RecordStore, ValidationFailedError
from src.storage.models import LandingContent
from src.transformation.builders import Product, assemble
from src.transformation.decorators import EnhanceConfig, compose, enhance, price_with_tax, stock_status
from src.transformation.filters import filter_products, parse_flag, parse_int

logger = structlog.get_logger(__name__)


@dataclass
class SubmissionResult:
    """Outcome of a contact submission"""
    accepted: bool
    id: Optional[int] = None
    status: Optional[str] = None
    errors: List[FieldError] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        if self.accepted:
            return {"accepted": True, "id": self.id, "status": self.status}
        return {"accepted": False, "errors": [e.to_dict() for e in self.errors]}


class CatalogService:
    """
    Product pipeline and contact intake over a RecordStore.

    Example:
        service = CatalogService(store)
        products = service.list_products({"featured": "true", "tax": "true"})
    """

    def __init__(
        self,
        store: RecordStore,
        pricing: Optional[PricingSettings] = None,
    ):
        self.store = store
        self.pricing = pricing or get_settings().pricing
        self.validator = create_contact_validator()

    def list_products(self, criteria: Optional[Mapping[str, Any]] = None) -> List[Product]:
        """
        Filtered, assembled products with stock status, plus tax on request.

        Args:
            criteria: featured, q, limit and tax options as query text or values
        """
        criteria = criteria or {}
        raw_products = filter_products(self.store.get_raw_products(), criteria)

        steps = []
        if parse_flag(criteria.get("tax")):
            steps.append(lambda p: price_with_tax(p, self.pricing.tax_rate))
        steps.append(stock_status)

        return [compose(assemble(raw), *steps) for raw in raw_products]

    def require_product(self, product_id: Union[int, str], tax: Any = None) -> Product:
        """
        Assembled and enhanced product for an id.

        Raises:
            NotFoundError: If the id does not parse or is not in the store
        """
        parsed_id = parse_int(product_id)
        raw = self.store.get_raw_product_by_id(parsed_id) if parsed_id is not None else None
        if raw is None:
            raise NotFoundError(product_id)

        config = EnhanceConfig(
            include_tax=parse_flag(tax),
            include_promo=bool(raw.get("featured")),
            include_stock_status=True,
            tax_rate=self.pricing.tax_rate,
            promo_label=self.pricing.featured_label,
        )
        return enhance(assemble(raw), config)

    def get_product(
        self,
        product_id: Union[int, str],
        options: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Product]:
        """Like ``require_product`` but returns None for an unknown id."""
        options = options or {}
        try:
            return self.require_product(product_id, tax=options.get("tax"))
        except NotFoundError as e:
            logger.info("Product not found", product_id=e.record_id)
            return None

    def get_landing(self) -> LandingContent:
        return self.store.get_landing_content()

    def accept_contact(self, payload: Any) -> ContactSubmission:
        """
        Validate and store a contact payload.

        Raises:
            ValidationFailedError: With every failed field rule
        """
        result: ValidationResult = self.validator.validate(payload)
        if not result.valid:
            raise ValidationFailedError(result.errors)

        contact = self.store.append_contact(result.data)
        logger.info("Contact accepted", contact_id=contact.id, source=contact.source)
        return contact

    def submit_contact(self, payload: Any) -> SubmissionResult:
        """Validate and store a contact payload, reporting failures as a result."""
        try:
            contact = self.accept_contact(payload)
        except ValidationFailedError as e:
            return SubmissionResult(accepted=False, errors=e.errors)

        return SubmissionResult(accepted=True, id=contact.id, status=contact.status)
