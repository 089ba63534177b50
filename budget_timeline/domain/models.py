"""Domain models - pure Python dataclasses representing payment records and timeline events"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional


class EventType(str, Enum):
    """Source of a timeline event"""

    RECURRING = "recurring"
    INSTALLMENT = "installment"


class EventStatus(str, Enum):
    """Payment status, stored or recomputed"""

    OVERDUE = "overdue"
    DUE_TODAY = "due_today"
    UPCOMING = "upcoming"
    PAID = "paid"


@dataclass
class RecurringPayment:
    """Monthly commitment due on a fixed day of the month"""

    payment_id: str
    payment_type: str
    amount: float
    due_day: int
    payment_status: str = EventStatus.UPCOMING.value
    category_name: Optional[str] = None
    category_color: Optional[str] = None
    frequency: str = "monthly"
    is_active: bool = True
    auto_pay: bool = False


@dataclass
class Installment:
    """Purchase being paid off in fixed periodic amounts"""

    installment_id: str
    item_name: str
    monthly_payment: float
    due_date: date
    remaining_amount: float = 0.0
    payment_status: str = EventStatus.UPCOMING.value
    completion_percentage: float = 0.0
    total_amount: float = 0.0
    total_installments: int = 0
    paid_installments: int = 0


@dataclass
class EventPrototype:
    """Normalized source record, before recurrence expansion and classification"""

    type: EventType
    source_id: str
    title: str
    amount: float
    color: str
    stored_status: str
    category: Optional[str] = None
    due_day: Optional[int] = None  # recurring only
    due_date: Optional[date] = None  # installment only
    remaining_amount: Optional[float] = None
    completion_percentage: Optional[float] = None


@dataclass
class TimelineEvent:
    """Single dated payment occurrence shown on the timeline or calendar"""

    id: str
    title: str
    date: date
    amount: float
    type: EventType
    color: str
    stored_status: str
    category: Optional[str] = None
    status: Optional[EventStatus] = None
    remaining_amount: Optional[float] = None
    completion_percentage: Optional[float] = None


@dataclass
class RecordDiagnostic:
    """Why a source record was left out of a timeline"""

    source_type: str
    source_id: Optional[str]
    reason: str


@dataclass
class TimelineResult:
    """Output of a timeline build: classified events plus skipped records"""

    events: List[TimelineEvent]
    window_start: date
    window_end: date
    skipped: List[RecordDiagnostic] = field(default_factory=list)


@dataclass
class CommitmentSummary:
    """Totals shown above the recurring payments and installments section"""

    total_recurring_amount: float
    total_installment_remaining: float
    total_monthly_installments: float
    overdue_recurring: int
    overdue_installments: int
