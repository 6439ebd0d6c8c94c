"""
Product Query Filters

Selects which raw records enter the transformation pipeline. Criteria are
applied by sequential narrowing in a fixed order: featured, then search,
then limit.
"""

import re
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence

import structlog

from src.storage.models import RawProduct

logger = structlog.get_logger(__name__)

SEARCH_FIELDS = ("name", "description", "category")

# Optional sign then ASCII digits, after leading whitespace
LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_flag(value: Any) -> bool:
    """
    Coerce a query flag to a boolean.

    Only ``True`` and the text ``"true"`` are true; anything else,
    including ``"TRUE"`` and ``"1"``, is false rather than rejected.
    """
    return value is True or value == "true"


def parse_int(value: Any) -> Optional[int]:
    """
    Parse an integer from query text, honouring leading digits only
    (``"3abc"`` -> 3). Returns None when no digits lead the text.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value

    match = LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def parse_limit(value: Any) -> Optional[int]:
    """
    Parse a result cap from query text.

    Unparsable, zero or negative values mean "no limit" and return None.
    """
    limit = parse_int(value)
    if limit is None or limit <= 0:
        logger.debug("Ignoring unusable limit", limit=value)
        return None
    return limit


@dataclass(frozen=True)
class FilterCriteria:
    """Optional selection parameters; None means the criterion is absent"""
    featured: Any = None
    q: Optional[str] = None
    limit: Any = None

    @classmethod
    def from_mapping(cls, criteria: Optional[Mapping[str, Any]]) -> "FilterCriteria":
        criteria = criteria or {}
        return cls(
            featured=criteria.get("featured"),
            q=criteria.get("q"),
            limit=criteria.get("limit"),
        )


def _matches_query(record: RawProduct, query: str) -> bool:
    for field in SEARCH_FIELDS:
        if query in (record.get(field) or "").casefold():
            return True
    return any(query in (tag or "").casefold() for tag in record.get("tags") or [])


def filter_featured(records: Iterable[RawProduct], featured: Any) -> List[RawProduct]:
    wanted = parse_flag(featured)
    return [r for r in records if bool(r.get("featured")) == wanted]


def filter_search(records: Iterable[RawProduct], q: str) -> List[RawProduct]:
    """Case-insensitive substring match on name, description, category or any tag"""
    query = q.casefold()
    return [r for r in records if _matches_query(r, query)]


def apply_limit(records: Sequence[RawProduct], limit: Any) -> List[RawProduct]:
    cap = parse_limit(limit)
    if cap is None:
        return list(records)
    return list(records[:cap])


def filter_products(
    records: Iterable[RawProduct],
    criteria: Optional[Mapping[str, Any]] = None,
) -> List[RawProduct]:
    """
    Select raw records matching the criteria, preserving their order.

    Args:
        records: Raw product records
        criteria: FilterCriteria or mapping with optional featured, q, limit

    Returns:
        New list of the selected records
    """
    if not isinstance(criteria, FilterCriteria):
        criteria = FilterCriteria.from_mapping(criteria)

    selected = list(records)

    if criteria.featured is not None:
        selected = filter_featured(selected, criteria.featured)

    if criteria.q:
        selected = filter_search(selected, criteria.q)

    if criteria.limit is not None:
        selected = apply_limit(selected, criteria.limit)

    return selected
