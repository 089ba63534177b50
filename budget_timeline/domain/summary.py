"""Commitment totals for the recurring payments & installments section"""

from datetime import date, datetime
from typing import Sequence
from budget_timeline.domain.models import (
    CommitmentSummary,
    EventStatus,
    Installment,
    RecurringPayment,
)
from budget_timeline.domain.exceptions import RecordValidationError
from budget_timeline.domain.normalizer import normalize_installment
from budget_timeline.domain.timeline import classify, installment_event
from budget_timeline.utils.date_utils import to_day


def summarize_commitments(
    recurring_payments: Sequence[RecurringPayment],
    installments: Sequence[Installment],
    now: date | datetime,
) -> CommitmentSummary:
    """
    Aggregate monthly commitments and overdue counts.

    Recurring overdue counts come from the stored status: projections only
    look forward, so a missed cycle is only visible there. Installment overdue
    counts are recomputed from their due date. Records that fail validation
    are left out of the overdue count but their amounts still add up.
    """
    today = to_day(now)
    active = [p for p in recurring_payments if p.is_active]

    overdue_installments = 0
    for installment in installments:
        try:
            event = installment_event(normalize_installment(installment))
        except RecordValidationError:
            continue
        if classify(event, today) == EventStatus.OVERDUE:
            overdue_installments += 1

    return CommitmentSummary(
        total_recurring_amount=round(sum(p.amount or 0 for p in active), 2),
        total_installment_remaining=round(sum(i.remaining_amount or 0 for i in installments), 2),
        total_monthly_installments=round(sum(i.monthly_payment or 0 for i in installments), 2),
        overdue_recurring=sum(1 for p in active if p.payment_status == EventStatus.OVERDUE.value),
        overdue_installments=overdue_installments,
    )
