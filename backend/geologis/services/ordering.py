"""
Sort order shared by the list endpoints.

`order=desc` sorts Z→A; every other value (missing, misspelled) means A→Z.
Sorting always returns a new list, the dataset tables are never reordered.
"""

from typing import Any, Dict, List, Optional, Sequence

ASCENDING = "asc"
DESCENDING = "desc"


def resolve_order(order: Optional[str]) -> str:
    return DESCENDING if order == DESCENDING else ASCENDING


def sort_records(
    records: Sequence[Dict[str, Any]],
    order: Optional[str],
    key: str = "code",
) -> List[Dict[str, Any]]:
    return sorted(
        records,
        key=lambda record: str(record.get(key) or ""),
        reverse=resolve_order(order) == DESCENDING,
    )
