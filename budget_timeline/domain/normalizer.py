"""Normalize recurring payments and installments into one event shape"""

from datetime import date
from typing import Any, List, Sequence
from budget_timeline.domain.models import EventPrototype, EventType, Installment, RecurringPayment
from budget_timeline.domain.exceptions import RecordValidationError
from budget_timeline.utils.date_utils import to_day

DEFAULT_RECURRING_COLOR = "#007acc"
INSTALLMENT_COLOR = "#10b981"

MIN_DUE_DAY = 1
MAX_DUE_DAY = 31


def validate_due_day(due_day: Any, source_id: str | None = None) -> int:
    """Reject due days outside 1..31 instead of defaulting them"""
    if isinstance(due_day, bool) or not isinstance(due_day, int):
        raise RecordValidationError(
            f"due_day must be an integer, got {due_day!r}",
            source_type=EventType.RECURRING.value,
            source_id=source_id,
        )
    if not MIN_DUE_DAY <= due_day <= MAX_DUE_DAY:
        raise RecordValidationError(
            f"due_day {due_day} outside {MIN_DUE_DAY}..{MAX_DUE_DAY}",
            source_type=EventType.RECURRING.value,
            source_id=source_id,
        )
    return due_day


def validate_due_date(due_date: Any, source_id: str | None = None) -> date:
    """Accept dates, truncate datetimes to the day, reject everything else"""
    if due_date is None:
        raise RecordValidationError(
            "due_date is required",
            source_type=EventType.INSTALLMENT.value,
            source_id=source_id,
        )
    if not isinstance(due_date, date):
        raise RecordValidationError(
            f"due_date must be a date, got {due_date!r}",
            source_type=EventType.INSTALLMENT.value,
            source_id=source_id,
        )
    return to_day(due_date)


def _require_text(value: Any, field_name: str, source_type: EventType, source_id: str | None) -> str:
    if value is None or not str(value).strip():
        raise RecordValidationError(
            f"{field_name} is required",
            source_type=source_type.value,
            source_id=source_id,
        )
    return str(value)


def _require_amount(value: Any, field_name: str, source_type: EventType, source_id: str | None) -> float:
    if value is None or isinstance(value, bool):
        raise RecordValidationError(
            f"{field_name} is required",
            source_type=source_type.value,
            source_id=source_id,
        )
    try:
        amount = float(value)
    except (TypeError, ValueError) as e:
        raise RecordValidationError(
            f"{field_name} is not a number: {value!r}",
            source_type=source_type.value,
            source_id=source_id,
        ) from e
    if amount < 0:
        raise RecordValidationError(
            f"{field_name} must be non-negative, got {amount}",
            source_type=source_type.value,
            source_id=source_id,
        )
    return amount


def normalize_recurring_payment(
    payment: RecurringPayment,
    default_color: str = DEFAULT_RECURRING_COLOR,
) -> EventPrototype:
    """Map a recurring payment to a prototype carrying its due day for expansion"""
    kind = EventType.RECURRING
    source_id = _require_text(payment.payment_id, "payment_id", kind, None)
    title = _require_text(payment.payment_type, "payment_type", kind, source_id)
    amount = _require_amount(payment.amount, "amount", kind, source_id)
    due_day = validate_due_day(payment.due_day, source_id)

    return EventPrototype(
        type=kind,
        source_id=source_id,
        title=title,
        amount=amount,
        color=payment.category_color or default_color,
        stored_status=payment.payment_status,
        category=payment.category_name or None,
        due_day=due_day,
    )


def normalize_installment(
    installment: Installment,
    color: str = INSTALLMENT_COLOR,
) -> EventPrototype:
    """Map an installment to a prototype dated on its current due date"""
    kind = EventType.INSTALLMENT
    source_id = _require_text(installment.installment_id, "installment_id", kind, None)
    title = _require_text(installment.item_name, "item_name", kind, source_id)
    amount = _require_amount(installment.monthly_payment, "monthly_payment", kind, source_id)
    due_date = validate_due_date(installment.due_date, source_id)

    return EventPrototype(
        type=kind,
        source_id=source_id,
        title=title,
        amount=amount,
        color=color,
        stored_status=installment.payment_status,
        due_date=due_date,
        remaining_amount=installment.remaining_amount,
        completion_percentage=installment.completion_percentage,
    )


def normalize(
    recurring_payments: Sequence[RecurringPayment],
    installments: Sequence[Installment],
) -> List[EventPrototype]:
    """
    Convert both record types into prototypes.

    Recurring payments come first, then installments, each in input order.
    No filtering or sorting happens here. Raises RecordValidationError on the
    first malformed record; use the per-record functions to skip instead.
    """
    prototypes = [normalize_recurring_payment(p) for p in recurring_payments]
    prototypes.extend(normalize_installment(i) for i in installments)
    return prototypes
