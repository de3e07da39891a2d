from __future__ import annotations

from datetime import date
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Item identifiers are opaque to the service; clients may use numeric or string ids
ItemId = Union[int, str]


# PUBLIC_INTERFACE
class OverdueIn(BaseModel):
    """
    A single item to evaluate. The due date is kept as raw text: malformed values are
    not rejected, they are simply never overdue.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 17,
                "due_date": "2025-02-01",
                "completed": False,
            }
        }
    )

    id: Optional[ItemId] = Field(default=None, description="Optional client identifier, echoed back")
    due_date: Optional[str] = Field(
        default=None,
        description="Due date as ISO8601 date or datetime text (e.g., '2025-01-31' or '2025-01-31T13:45:00Z')",
    )
    completed: bool = Field(default=False, description="Completion status flag")


# PUBLIC_INTERFACE
class OverdueOut(BaseModel):
    """
    Evaluation result for one item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 17,
                "due_date": "2025-02-01",
                "completed": False,
                "overdue": True,
                "due_on": "2025-02-01",
                "today": "2025-02-03",
            }
        }
    )

    id: Optional[ItemId] = Field(default=None, description="Client identifier, if one was sent")
    due_date: Optional[str] = Field(default=None, description="Due date as received")
    completed: bool = Field(..., description="Completion status flag as received")
    overdue: bool = Field(..., description="True if the due day is before today and the item is not completed")
    due_on: Optional[date] = Field(
        default=None, description="Calendar day of the due date, or null when missing or unreadable"
    )
    today: date = Field(..., description="Date the evaluation was made against")


# PUBLIC_INTERFACE
class OverdueBatchIn(BaseModel):
    """
    Batch evaluation request.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "items": [
                    {"id": 1, "due_date": "2020-01-01", "completed": False},
                    {"id": 2, "due_date": "2099-12-31T23:59:59Z", "completed": False},
                    {"id": 3, "due_date": None, "completed": True},
                ]
            }
        }
    )

    items: List[OverdueIn] = Field(..., description="Items to evaluate")


# PUBLIC_INTERFACE
class OverdueBatchOut(BaseModel):
    """
    Envelope for batch evaluation responses.
    """

    items: List[OverdueOut] = Field(..., description="Per-item results, in request order")
    total: int = Field(..., description="Number of items evaluated")
    overdue: int = Field(..., description="Number of items found overdue")
    today: date = Field(..., description="Date the evaluation was made against")
