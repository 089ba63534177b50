"""Timeline engine - windowing, status classification and batch assembly"""

from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Sequence
from budget_timeline.domain.models import (
    EventPrototype,
    EventStatus,
    EventType,
    Installment,
    RecordDiagnostic,
    RecurringPayment,
    TimelineEvent,
    TimelineResult,
)
from budget_timeline.domain.exceptions import InvalidWindowError, RecordValidationError
from budget_timeline.domain.normalizer import (
    DEFAULT_RECURRING_COLOR,
    INSTALLMENT_COLOR,
    normalize_installment,
    normalize_recurring_payment,
)
from budget_timeline.domain.recurrence import expand
from budget_timeline.utils.date_utils import add_months, to_day

DEFAULT_HORIZON_DAYS = 30
DEFAULT_CALENDAR_MONTHS = 3


def installment_event(prototype: EventPrototype) -> TimelineEvent:
    """Installments carry one concrete due date, so they map to exactly one event"""
    return TimelineEvent(
        id=f"installment-{prototype.source_id}",
        title=prototype.title,
        date=prototype.due_date,
        amount=prototype.amount,
        type=prototype.type,
        color=prototype.color,
        stored_status=prototype.stored_status,
        category=prototype.category,
        remaining_amount=prototype.remaining_amount,
        completion_percentage=prototype.completion_percentage,
    )


def filter_and_sort(
    events: Iterable[TimelineEvent],
    window_start: date,
    window_end: date,
) -> List[TimelineEvent]:
    """Keep events with window_start <= date <= window_end, stable-sorted by date"""
    in_window = [e for e in events if window_start <= e.date <= window_end]
    # sorted() is stable: equal dates keep production order
    return sorted(in_window, key=lambda e: e.date)


def classify(event: TimelineEvent, now: date | datetime) -> EventStatus:
    """
    Compute the status of an event at day granularity.

    Rules:
    - date < today → overdue
    - date == today → due_today
    - date > today → upcoming

    A stored "paid" status wins over the date comparison. Installments always
    honour it; a recurring payment's stored status describes its current
    billing cycle only, so it is honoured for occurrences in the current month.
    Any other stored status is ignored since it may be stale.
    """
    today = to_day(now)

    if event.stored_status == EventStatus.PAID.value:
        if event.type == EventType.INSTALLMENT:
            return EventStatus.PAID
        if (event.date.year, event.date.month) == (today.year, today.month):
            return EventStatus.PAID

    if event.date < today:
        return EventStatus.OVERDUE
    if event.date == today:
        return EventStatus.DUE_TODAY
    return EventStatus.UPCOMING


def _diagnostic(error: RecordValidationError) -> RecordDiagnostic:
    return RecordDiagnostic(source_type=error.source_type, source_id=error.source_id, reason=str(error))


def build_timeline(
    recurring_payments: Sequence[RecurringPayment],
    installments: Sequence[Installment],
    now: date | datetime,
    window_start: Optional[date] = None,
    window_end: Optional[date] = None,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    recurring_color: str = DEFAULT_RECURRING_COLOR,
    installment_color: str = INSTALLMENT_COLOR,
) -> TimelineResult:
    """
    Main entry point: turn raw records into a classified, windowed timeline.

    Flow:
    1. Normalize each record (malformed ones are skipped and reported)
    2. Expand recurring payments up to window_end
    3. Filter to [window_start, window_end] and sort by date
    4. Classify each event against today

    Window defaults to today .. today + horizon_days. Inactive recurring
    payments are left out.
    """
    today = to_day(now)
    window_start = window_start or today
    window_end = window_end or today + timedelta(days=horizon_days)
    if window_end < window_start:
        raise InvalidWindowError(
            f"Window end {window_end.isoformat()} is before start {window_start.isoformat()}"
        )

    skipped: List[RecordDiagnostic] = []
    events: List[TimelineEvent] = []

    for payment in recurring_payments:
        if not payment.is_active:
            continue
        try:
            prototype = normalize_recurring_payment(payment, default_color=recurring_color)
            events.extend(expand(prototype, prototype.due_day, today, window_end))
        except RecordValidationError as e:
            skipped.append(_diagnostic(e))

    for installment in installments:
        try:
            prototype = normalize_installment(installment, color=installment_color)
        except RecordValidationError as e:
            skipped.append(_diagnostic(e))
            continue
        events.append(installment_event(prototype))

    windowed = filter_and_sort(events, window_start, window_end)
    classified = [replace(e, status=classify(e, today)) for e in windowed]

    return TimelineResult(
        events=classified,
        window_start=window_start,
        window_end=window_end,
        skipped=skipped,
    )


def build_calendar(
    recurring_payments: Sequence[RecurringPayment],
    installments: Sequence[Installment],
    now: date | datetime,
    months: int = DEFAULT_CALENDAR_MONTHS,
    recurring_color: str = DEFAULT_RECURRING_COLOR,
    installment_color: str = INSTALLMENT_COLOR,
) -> TimelineResult:
    """Multi-month calendar view: today .. same day `months` later"""
    today = to_day(now)
    return build_timeline(
        recurring_payments,
        installments,
        today,
        window_start=today,
        window_end=add_months(today, months),
        recurring_color=recurring_color,
        installment_color=installment_color,
    )
