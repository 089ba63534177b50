"""Recurrence expansion for monthly recurring payments"""

from datetime import date, datetime
from typing import List
from budget_timeline.domain.models import EventPrototype, TimelineEvent
from budget_timeline.domain.normalizer import validate_due_day
from budget_timeline.utils.date_utils import clamped_date, shift_month, to_day


def occurrence_id(source_id: str, occurrence: date) -> str:
    return f"recurring-{source_id}-{occurrence.isoformat()}"


def next_due_date(due_day: int, now: date | datetime) -> date:
    """
    First occurrence of `due_day` on or after today.

    Example:
        now=2024-02-15, due_day=20 → 2024-02-20
        now=2024-02-25, due_day=20 → 2024-03-20
    """
    due_day = validate_due_day(due_day)
    today = to_day(now)

    candidate = clamped_date(today.year, today.month, due_day)
    if candidate < today:
        year, month = shift_month(today.year, today.month, 1)
        candidate = clamped_date(year, month, due_day)
    return candidate


def expand(
    prototype: EventPrototype,
    due_day: int,
    now: date | datetime,
    horizon_end: date,
) -> List[TimelineEvent]:
    """
    Project a recurring payment onto every month up to horizon_end.

    Rules:
    - Start from the current month; skip the candidate if it is before today
    - Days past month end clamp to the last day (31 → Apr 30, Feb 29 in 2024)
    - Clamping never carries over: each month starts again from due_day
    - Occurrences after horizon_end are not emitted

    Returns:
        Zero or more unclassified events, one per month, ascending by date
    """
    due_day = validate_due_day(due_day, prototype.source_id)
    today = to_day(now)

    events = []
    offset = 0
    while True:
        year, month = shift_month(today.year, today.month, offset)
        offset += 1
        candidate = clamped_date(year, month, due_day)

        if candidate < today:
            continue
        if candidate > horizon_end:
            break

        events.append(
            TimelineEvent(
                id=occurrence_id(prototype.source_id, candidate),
                title=prototype.title,
                date=candidate,
                amount=prototype.amount,
                type=prototype.type,
                color=prototype.color,
                stored_status=prototype.stored_status,
                category=prototype.category,
            )
        )

    return events
