from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..dates import due_day, is_overdue, today_in
from ..schemas import OverdueBatchIn, OverdueBatchOut, OverdueIn, OverdueOut
from ..settings import Settings, get_settings
from ..utils import evaluation_envelope

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/overdue",
    tags=["overdue"],
)


# PUBLIC_INTERFACE
def get_today(settings: Settings = Depends(get_settings)) -> date:
    """
    Dependency returning the evaluation date in the configured timezone.
    Override it through app.dependency_overrides to pin "today".
    """
    return today_in(settings.timezone)


def _evaluate(item: OverdueIn, today: date) -> Dict[str, Any]:
    return {
        "id": item.id,
        "due_date": item.due_date,
        "completed": item.completed,
        "overdue": is_overdue(item.due_date, item.completed, today=today),
        "due_on": due_day(item.due_date),
        "today": today,
    }


# PUBLIC_INTERFACE
@router.get(
    "/",
    response_model=OverdueOut,
    summary="Evaluate Item",
    description=(
        "Decide whether a single item is overdue.\n\n"
        "Query parameters:\n"
        "- due_date: ISO8601 date or datetime text; missing or unreadable dates are never overdue\n"
        "- completed: completion flag; completed items are never overdue\n\n"
        "Only the calendar day of the due date is compared against today."
    ),
    responses={
        200: {"description": "Item evaluated"},
        422: {"description": "Invalid query parameters"},
    },
)
def evaluate_item(
    due_date: Optional[str] = Query(None, description="Due date as ISO8601 date or datetime"),
    completed: bool = Query(False, description="Completion status flag"),
    today: date = Depends(get_today),
) -> OverdueOut:
    """
    Evaluate one item passed through query parameters.
    """
    item = OverdueIn(due_date=due_date, completed=completed)
    return OverdueOut(**_evaluate(item, today))


# PUBLIC_INTERFACE
@router.post(
    "/batch",
    response_model=OverdueBatchOut,
    summary="Evaluate Items",
    description=(
        "Decide overdue status for a list of items against the same evaluation date.\n\n"
        "Results are returned in request order together with the total and overdue counts."
    ),
    responses={
        200: {"description": "Items evaluated"},
        413: {"description": "Too many items in one request"},
        422: {"description": "Validation error"},
    },
)
def evaluate_batch(
    payload: OverdueBatchIn,
    today: date = Depends(get_today),
    settings: Settings = Depends(get_settings),
) -> OverdueBatchOut:
    """
    Evaluate a batch of items.
    """
    if len(payload.items) > settings.max_batch_size:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"batch exceeds maximum size of {settings.max_batch_size} items",
        )

    envelope = evaluation_envelope([_evaluate(it, today) for it in payload.items], today)
    logger.debug("Evaluated %d items, %d overdue", envelope["total"], envelope["overdue"])
    return OverdueBatchOut(**envelope)
