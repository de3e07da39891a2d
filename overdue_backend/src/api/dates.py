from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import Optional, Union

logger = logging.getLogger(__name__)

# Shared type for incoming due dates: ISO8601 text, or an already-parsed date/datetime
DueDateInput = Union[date, datetime, str]


# PUBLIC_INTERFACE
def parse_due_date(value: Optional[DueDateInput]) -> Optional[datetime]:
    """
    Normalize a due date into a datetime, or None when it cannot be read.

    - If value is a string, parse it as ISO8601 ('2025-01-31' or '2025-01-31T13:45:00Z');
      a date without time is set to 00:00.
    - If value is a date (not datetime), convert to datetime at 00:00.
    - If value is a datetime, return as-is.
    - Anything else, including out-of-range dates such as '2025-13-45', yields None.
    """
    if not value:
        return None

    if isinstance(value, datetime):
        return value

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, 0, 0, 0)

    if not isinstance(value, str):
        logger.debug("Ignoring due date of unsupported type %s", type(value).__name__)
        return None

    s = value.strip()
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(s)
    except ValueError:
        pass
    try:
        d = date.fromisoformat(s)
    except ValueError:
        logger.debug("Ignoring unparseable due date %r", value)
        return None
    return datetime(d.year, d.month, d.day, 0, 0, 0)


# PUBLIC_INTERFACE
def today_in(tz: Optional[tzinfo] = None) -> date:
    """Return the current calendar date in tz, or the system local date when tz is None."""
    if tz is None:
        return date.today()
    return datetime.now(tz).date()


# PUBLIC_INTERFACE
def due_day(value: Optional[DueDateInput]) -> Optional[date]:
    """Calendar day a due date falls on, as written; time of day and offset are dropped."""
    parsed = parse_due_date(value)
    return parsed.date() if parsed is not None else None


# PUBLIC_INTERFACE
def is_overdue(
    due_date: Optional[DueDateInput],
    completed: bool,
    today: Optional[date] = None,
) -> bool:
    """
    Decide whether a task is overdue.

    An item is overdue if it is not completed, has a readable due date, and that
    due date's calendar day is strictly before today. Time of day is ignored, so a
    task due at any time today is not overdue yet.

    Args:
        due_date: ISO8601 date/datetime text (or date/datetime), may be missing or malformed.
        completed: Completion flag; a completed task is never overdue.
        today: Evaluation date. Defaults to the system local date.

    Returns:
        True if overdue, False otherwise. Never raises for bad due dates.
    """
    if completed:
        return False

    if not due_date:
        return False

    day = due_day(due_date)
    if day is None:
        return False

    if today is None:
        today = today_in()
    return day < today
