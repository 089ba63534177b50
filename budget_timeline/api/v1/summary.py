"""GET /v1/commitments/summary - Recurring and installment totals for a user"""

import logging
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from budget_timeline.api.v1.schemas import CommitmentSummaryResponse
from budget_timeline.api.dependencies import get_payment_repository, get_request_id, get_today
from budget_timeline.infrastructure.database.repositories import PaymentRepository
from budget_timeline.domain.summary import summarize_commitments
from budget_timeline.domain.exceptions import DataStoreError
from budget_timeline.infrastructure.observability.metrics import data_store_failures_counter

router = APIRouter()


@router.get("/commitments/summary", response_model=CommitmentSummaryResponse)
def get_commitment_summary(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    as_of: Optional[date] = Query(None, description="Reference date; defaults to today"),
    repository: PaymentRepository = Depends(get_payment_repository),
    today: date = Depends(get_today),
):
    """
    Monthly recurring total, installment balances and overdue counts.
    """
    as_of = as_of or today

    try:
        recurring_payments = repository.get_recurring_payments(user_id)
        installments = repository.get_installments(user_id)
    except DataStoreError as e:
        data_store_failures_counter.inc()
        logging.error(f"Data store error: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=503, detail="Payment data unavailable")

    summary = summarize_commitments(recurring_payments, installments, as_of)
    return CommitmentSummaryResponse.from_summary(user_id, as_of, summary)
