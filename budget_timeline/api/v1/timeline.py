"""Timeline and calendar endpoints"""

import time
import logging
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from budget_timeline.api.v1.schemas import TimelineRequest, TimelineResponse
from budget_timeline.api.dependencies import get_payment_repository, get_request_id, get_today
from budget_timeline.config import settings
from budget_timeline.infrastructure.database.repositories import PaymentRepository
from budget_timeline.domain.timeline import build_calendar, build_timeline
from budget_timeline.domain.exceptions import DataStoreError, InvalidWindowError
from budget_timeline.infrastructure.observability.metrics import (
    record_timeline,
    data_store_failures_counter,
    timeline_build_duration_histogram,
)
from budget_timeline.infrastructure.observability.logging import log_skipped_records, log_timeline_built

router = APIRouter()

COLORS = {
    "recurring_color": settings.recurring_default_color,
    "installment_color": settings.installment_color,
}


def observe_build(request_id: str, user_id: Optional[str], view: str, result, start_time: float) -> None:
    duration = time.time() - start_time
    timeline_build_duration_histogram.observe(duration)
    record_timeline(view, result)
    log_skipped_records(request_id, result.skipped)
    log_timeline_built(request_id, user_id, view, len(result.events), len(result.skipped), duration * 1000)


@router.post("/timeline", response_model=TimelineResponse)
def compute_timeline(
    request_body: TimelineRequest,
    request: Request,
    today: date = Depends(get_today),
):
    """
    Build a timeline from records supplied in the request body.

    Nothing is loaded or stored; the result depends only on the body and the
    reference date.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    as_of = request_body.as_of or today

    try:
        result = build_timeline(
            [p.to_domain() for p in request_body.recurring_payments],
            [i.to_domain() for i in request_body.installments],
            as_of,
            window_start=request_body.window_start,
            window_end=request_body.window_end,
            horizon_days=(
                request_body.horizon_days
                if request_body.horizon_days is not None
                else settings.timeline_horizon_days
            ),
            **COLORS,
        )
    except InvalidWindowError as e:
        logging.warning(f"Invalid window: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    observe_build(request_id, None, "adhoc", result, start_time)
    return TimelineResponse.from_result(as_of, result)


@router.get("/timeline", response_model=TimelineResponse)
def get_timeline(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    days: int = Query(settings.timeline_horizon_days, ge=0, le=366, description="Days ahead to include"),
    as_of: Optional[date] = Query(None, description="Reference date; defaults to today"),
    repository: PaymentRepository = Depends(get_payment_repository),
    today: date = Depends(get_today),
):
    """
    Upcoming payments for a user: today through today + days.

    Returns:
        Classified events sorted by date, plus any skipped records
    """
    start_time = time.time()
    request_id = get_request_id(request)
    as_of = as_of or today

    try:
        recurring_payments = repository.get_recurring_payments(user_id)
        installments = repository.get_installments(user_id)
    except DataStoreError as e:
        data_store_failures_counter.inc()
        logging.error(f"Data store error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Payment data unavailable")

    result = build_timeline(recurring_payments, installments, as_of, horizon_days=days, **COLORS)

    observe_build(request_id, user_id, "timeline", result, start_time)
    return TimelineResponse.from_result(as_of, result)


@router.get("/calendar", response_model=TimelineResponse)
def get_calendar(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    months: int = Query(settings.calendar_months, ge=1, le=12, description="Months ahead to include"),
    as_of: Optional[date] = Query(None, description="Reference date; defaults to today"),
    repository: PaymentRepository = Depends(get_payment_repository),
    today: date = Depends(get_today),
):
    """Payment calendar: every recurring occurrence and installment over the next months"""
    start_time = time.time()
    request_id = get_request_id(request)
    as_of = as_of or today

    try:
        recurring_payments = repository.get_recurring_payments(user_id)
        installments = repository.get_installments(user_id)
    except DataStoreError as e:
        data_store_failures_counter.inc()
        logging.error(f"Data store error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Payment data unavailable")

    result = build_calendar(recurring_payments, installments, as_of, months=months, **COLORS)

    observe_build(request_id, user_id, "calendar", result, start_time)
    return TimelineResponse.from_result(as_of, result)
