"""GET /v1/export/{dataset} - CSV downloads for the analytics page"""

import time
import logging
from datetime import date
from typing import Literal, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import StreamingResponse

from budget_timeline.api.dependencies import get_payment_repository, get_request_id, get_today
from budget_timeline.config import settings
from budget_timeline.infrastructure.database.repositories import PaymentRepository
from budget_timeline.domain.timeline import build_timeline
from budget_timeline.domain.exceptions import DataStoreError
from budget_timeline.infrastructure.observability.metrics import data_store_failures_counter
from budget_timeline.api.v1.timeline import COLORS, observe_build
from budget_timeline.utils.csv_export import (
    export_installments_csv,
    export_recurring_payments_csv,
    export_timeline_csv,
)

router = APIRouter()


@router.get("/export/{dataset}")
def export_dataset(
    dataset: Literal["timeline", "recurring-payments", "installments"],
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    days: int = Query(settings.timeline_horizon_days, ge=0, le=366),
    as_of: Optional[date] = Query(None, description="Reference date; defaults to today"),
    repository: PaymentRepository = Depends(get_payment_repository),
    today: date = Depends(get_today),
):
    """
    Download a dataset as CSV.

    Datasets:
    - timeline: classified events for today .. today + days
    - recurring-payments: stored recurring payments
    - installments: stored installment plans
    """
    start_time = time.time()
    request_id = get_request_id(request)
    as_of = as_of or today

    try:
        if dataset == "installments":
            csv_text = export_installments_csv(repository.get_installments(user_id))
        elif dataset == "recurring-payments":
            csv_text = export_recurring_payments_csv(repository.get_recurring_payments(user_id))
        else:
            result = build_timeline(
                repository.get_recurring_payments(user_id),
                repository.get_installments(user_id),
                as_of,
                horizon_days=days,
                **COLORS,
            )
            observe_build(request_id, user_id, "export", result, start_time)
            csv_text = export_timeline_csv(result.events)
    except DataStoreError as e:
        data_store_failures_counter.inc()
        logging.error(f"Data store error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Payment data unavailable")

    filename = f"{dataset}_{as_of.isoformat()}.csv"
    return StreamingResponse(
        iter([csv_text]),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
