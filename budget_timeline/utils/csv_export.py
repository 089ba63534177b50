"""CSV export of timeline events, recurring payments and installments"""

import csv
import io
from datetime import date
from typing import Any, Dict, List, Sequence
from budget_timeline.domain.models import Installment, RecurringPayment, TimelineEvent

TIMELINE_HEADERS = ["Date", "Title", "Type", "Category", "Amount", "Status"]
RECURRING_HEADERS = ["Payment Type", "Amount", "Due Day", "Frequency", "Status", "Category", "Auto Pay"]
INSTALLMENT_HEADERS = [
    "Item Name",
    "Total Amount",
    "Remaining Amount",
    "Monthly Payment",
    "Progress",
    "Completion %",
    "Status",
]


def format_currency(amount: float | None) -> str:
    return f"{(amount or 0):.2f}"


def format_percentage(percentage: float | None) -> str:
    return f"{(percentage or 0):.1f}%"


def format_date(value: date) -> str:
    return value.strftime("%m/%d/%Y")


def format_status(status: Any) -> str:
    """'due_today' → 'DUE TODAY'"""
    if status is None:
        return ""
    return str(getattr(status, "value", status)).replace("_", " ").upper()


def convert_to_csv(rows: List[Dict[str, Any]], headers: Sequence[str]) -> str:
    """Serialize rows keyed by header; empty input yields an empty string"""
    if not rows:
        return ""

    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(headers), lineterminator="\n", extrasaction="ignore")
    writer.writeheader()
    for row in rows:
        writer.writerow({h: "" if row.get(h) is None else row.get(h) for h in headers})
    return buffer.getvalue()


def export_timeline_csv(events: Sequence[TimelineEvent]) -> str:
    rows = [
        {
            "Date": format_date(e.date),
            "Title": e.title,
            "Type": "Recurring Payment" if e.type.value == "recurring" else "Installment",
            "Category": e.category,
            "Amount": format_currency(e.amount),
            "Status": format_status(e.status),
        }
        for e in events
    ]
    return convert_to_csv(rows, TIMELINE_HEADERS)


def export_recurring_payments_csv(payments: Sequence[RecurringPayment]) -> str:
    rows = [
        {
            "Payment Type": p.payment_type,
            "Amount": format_currency(p.amount),
            "Due Day": p.due_day,
            "Frequency": p.frequency,
            "Status": format_status(p.payment_status),
            "Category": p.category_name,
            "Auto Pay": "Yes" if p.auto_pay else "No",
        }
        for p in payments
    ]
    return convert_to_csv(rows, RECURRING_HEADERS)


def export_installments_csv(installments: Sequence[Installment]) -> str:
    rows = [
        {
            "Item Name": i.item_name,
            "Total Amount": format_currency(i.total_amount),
            "Remaining Amount": format_currency(i.remaining_amount),
            "Monthly Payment": format_currency(i.monthly_payment),
            "Progress": f"{i.paid_installments}/{i.total_installments}",
            "Completion %": format_percentage(i.completion_percentage),
            "Status": format_status(i.payment_status),
        }
        for i in installments
    ]
    return convert_to_csv(rows, INSTALLMENT_HEADERS)
