from __future__ import annotations

from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Union


# PUBLIC_INTERFACE
def evaluation_envelope(
    items: Union[Sequence[Mapping[str, Any]], Iterable[Mapping[str, Any]]],
    today: date,
) -> Dict[str, Any]:
    """
    Build the standard envelope for batch evaluation responses.

    Args:
        items: Per-item results; each must carry an 'overdue' flag.
        today: The date all items were evaluated against.

    Returns:
        Dict with keys: items, total, overdue, today.
    """
    # Ensure items is materialized as a list (in case an iterator is passed)
    materialized: List[Mapping[str, Any]] = list(items) if not isinstance(items, list) else items
    return {
        "items": materialized,
        "total": len(materialized),
        "overdue": sum(1 for it in materialized if it["overdue"]),
        "today": today,
    }
