"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import List, Literal, Optional

from budget_timeline.domain.models import (
    CommitmentSummary,
    Installment,
    RecurringPayment,
    TimelineResult,
)

StatusLiteral = Literal["overdue", "due_today", "upcoming", "paid"]


class RecurringPaymentSchema(BaseModel):
    """Recurring payment as supplied by the caller"""

    payment_id: str = Field(..., description="Recurring payment identifier")
    payment_type: str = Field(..., description="Display label, e.g. Rent")
    amount: float
    due_day: int = Field(..., description="Day of month the payment recurs on (1-31)")
    payment_status: StatusLiteral = "upcoming"
    category_name: Optional[str] = None
    category_color: Optional[str] = None
    frequency: str = "monthly"
    is_active: bool = True
    auto_pay: bool = False

    def to_domain(self) -> RecurringPayment:
        return RecurringPayment(**self.model_dump())


class InstallmentInputSchema(BaseModel):
    """Installment as supplied by the caller"""

    installment_id: str
    item_name: str
    monthly_payment: float
    due_date: date
    remaining_amount: float = 0.0
    payment_status: StatusLiteral = "upcoming"
    completion_percentage: float = 0.0
    total_amount: float = 0.0
    total_installments: int = 0
    paid_installments: int = 0

    def to_domain(self) -> Installment:
        return Installment(**self.model_dump())


class TimelineRequest(BaseModel):
    """Request body for POST /v1/timeline"""

    recurring_payments: List[RecurringPaymentSchema] = Field(default_factory=list)
    installments: List[InstallmentInputSchema] = Field(default_factory=list)
    as_of: Optional[date] = Field(None, description="Reference date; defaults to today")
    window_start: Optional[date] = None
    window_end: Optional[date] = None
    horizon_days: Optional[int] = Field(None, ge=0, le=366)


class TimelineEventSchema(BaseModel):
    """Single classified event on the timeline"""

    id: str
    title: str
    date: date
    amount: float
    type: Literal["recurring", "installment"]
    status: StatusLiteral
    category: Optional[str] = None
    color: str
    remaining_amount: Optional[float] = None
    completion_percentage: Optional[float] = None


class SkippedRecordSchema(BaseModel):
    """Record left out of the timeline and why"""

    source_type: str
    source_id: Optional[str] = None
    reason: str


class TimelineResponse(BaseModel):
    """Response for timeline and calendar endpoints"""

    as_of: date
    window_start: date
    window_end: date
    events: List[TimelineEventSchema]
    skipped: List[SkippedRecordSchema]

    @classmethod
    def from_result(cls, as_of: date, result: TimelineResult) -> "TimelineResponse":
        return cls(
            as_of=as_of,
            window_start=result.window_start,
            window_end=result.window_end,
            events=[
                TimelineEventSchema(
                    id=e.id,
                    title=e.title,
                    date=e.date,
                    amount=e.amount,
                    type=e.type.value,
                    status=e.status.value,
                    category=e.category,
                    color=e.color,
                    remaining_amount=e.remaining_amount,
                    completion_percentage=e.completion_percentage,
                )
                for e in result.events
            ],
            skipped=[
                SkippedRecordSchema(source_type=d.source_type, source_id=d.source_id, reason=d.reason)
                for d in result.skipped
            ],
        )


class CommitmentSummaryResponse(BaseModel):
    """Response for GET /v1/commitments/summary"""

    user_id: str
    as_of: date
    total_recurring_amount: float
    total_installment_remaining: float
    total_monthly_installments: float
    overdue_recurring: int
    overdue_installments: int

    @classmethod
    def from_summary(cls, user_id: str, as_of: date, summary: CommitmentSummary) -> "CommitmentSummaryResponse":
        return cls(
            user_id=user_id,
            as_of=as_of,
            total_recurring_amount=summary.total_recurring_amount,
            total_installment_remaining=summary.total_installment_remaining,
            total_monthly_installments=summary.total_monthly_installments,
            overdue_recurring=summary.overdue_recurring,
            overdue_installments=summary.overdue_installments,
        )
