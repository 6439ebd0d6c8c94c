"""
In-Memory Record Store

Holds the landing content, the raw product records and the accepted
contact submissions for the lifetime of the process. Products and landing
content are loaded once from the seed document and are read-only after
that; contacts only ever grow through ``append_contact``.

Each worker process owns its own store. Mutation is a synchronous append
inside one request, so no locking is needed under a single-writer model.
"""

import copy
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import structlog
from pydantic import ValidationError

from src.config import get_settings
from .errors import SourceUnavailableError
from .models import ContactSubmission, LandingContent, RawProduct, SeedDocument

logger = structlog.get_logger(__name__)

DEFAULT_SOURCE = "website"


def _utc_timestamp() -> str:
    """Current instant as ISO-8601 text with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RecordStore:
    """
    Process-local store for catalog records.

    Example:
        store = RecordStore("data/seed.json")
        store.load_once()
        products = store.get_raw_products()
    """

    def __init__(self, seed_path: Optional[Union[str, Path]] = None):
        self.seed_path = Path(seed_path or get_settings().data.seed_path)
        self._landing: LandingContent = {}
        self._products: List[Dict[str, Any]] = []
        self._products_by_id: Dict[int, Dict[str, Any]] = {}
        self._contacts: List[ContactSubmission] = []
        self._loaded = False

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "RecordStore":
        """Build a loaded store straight from an in-memory seed document."""
        store = cls(seed_path="<memory>")
        store._apply(store._validate(document))
        return store

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def _read_seed(self) -> SeedDocument:
        """Read and validate the seed file, raising SourceUnavailableError."""
        try:
            with self.seed_path.open("r", encoding="utf-8") as fh:
                raw = json.load(fh)
        # ValueError covers bad JSON and bad UTF-8; deep nesting overflows the decoder
        except (OSError, ValueError, RecursionError) as e:
            raise SourceUnavailableError(self.seed_path, e) from e

        return self._validate(raw)

    def _validate(self, raw: Any) -> SeedDocument:
        try:
            return SeedDocument.model_validate(raw)
        except ValidationError as e:
            raise SourceUnavailableError(self.seed_path, e) from e

    def _apply(self, document: SeedDocument) -> None:
        # Swap state in one step so a failed load leaves the old state intact
        products = [p.to_record() for p in document.products]
        self._landing = dict(document.landing)
        self._products = products
        self._products_by_id = {p["id"]: p for p in products}
        self._loaded = True

    def load_once(self) -> bool:
        """
        Load the seed document if it has not been loaded yet.

        Failures are logged and leave the store in its previous state.

        Returns:
            True if the store holds seed data after the call
        """
        if self._loaded:
            logger.warning("Seed data already loaded", path=str(self.seed_path))
            return True

        try:
            document = self._read_seed()
        except SourceUnavailableError as e:
            logger.error(
                "Failed to load seed data",
                path=e.path,
                error=str(e.cause),
            )
            return False

        self._apply(document)
        logger.info(
            "Seed data loaded",
            path=str(self.seed_path),
            products=len(self._products),
        )
        return True

    def get_landing_content(self) -> LandingContent:
        return copy.deepcopy(self._landing)

    def get_raw_products(self) -> List[RawProduct]:
        """All raw product records in seed order."""
        return list(self._products)

    def get_raw_product_by_id(self, product_id: int) -> Optional[RawProduct]:
        return self._products_by_id.get(product_id)

    def append_contact(self, record: Mapping[str, Any]) -> ContactSubmission:
        """
        Store an already validated contact payload.

        Assigns the next sequential id, the accept timestamp and the
        ``received`` status; ``source`` defaults to ``website``.
        """
        contact = ContactSubmission(
            id=self.count_contacts() + 1,
            name=record["name"],
            email=record["email"],
            message=record["message"],
            source=record.get("source") or DEFAULT_SOURCE,
            timestamp=_utc_timestamp(),
        )
        self._contacts.append(contact)
        return contact

    def count_contacts(self) -> int:
        return len(self._contacts)

    def get_all_contacts(self) -> List[ContactSubmission]:
        return list(self._contacts)

    def snapshot(self) -> Dict[str, Any]:
        """Debug view of everything the store holds."""
        return {
            "landing": self.get_landing_content(),
            "products": copy.deepcopy(self._products),
            "contacts": [c.to_dict() for c in self._contacts],
        }
