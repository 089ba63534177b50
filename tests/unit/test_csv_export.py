"""Unit tests for CSV export"""

from budget_timeline.domain.models import RecurringPayment
from budget_timeline.domain.timeline import build_timeline
from budget_timeline.utils.csv_export import (
    convert_to_csv,
    export_installments_csv,
    export_recurring_payments_csv,
    export_timeline_csv,
    format_status,
)


def test_empty_export_has_no_header():
    assert export_recurring_payments_csv([]) == ""
    assert export_installments_csv([]) == ""
    assert export_timeline_csv([]) == ""


def test_recurring_payments_export(sample_recurring_payments):
    lines = export_recurring_payments_csv(sample_recurring_payments).splitlines()

    assert lines[0] == "Payment Type,Amount,Due Day,Frequency,Status,Category,Auto Pay"
    assert lines[1] == "Rent,1200.00,1,monthly,UPCOMING,Housing,No"
    assert lines[3] == "Gym,30.00,15,monthly,OVERDUE,,No"


def test_installments_export(sample_installments):
    lines = export_installments_csv(sample_installments).splitlines()

    assert lines[0] == "Item Name,Total Amount,Remaining Amount,Monthly Payment,Progress,Completion %,Status"
    assert lines[1] == "Laptop,1500.00,900.00,150.00,4/10,40.0%,UPCOMING"


def test_timeline_export(sample_recurring_payments, sample_installments, today):
    events = build_timeline(sample_recurring_payments, sample_installments, today).events
    lines = export_timeline_csv(events).splitlines()

    assert lines[0] == "Date,Title,Type,Category,Amount,Status"
    assert lines[1] == "02/15/2024,Gym,Recurring Payment,,30.00,DUE TODAY"
    assert lines[4] == "03/05/2024,Sofa,Installment,,80.00,UPCOMING"


def test_values_with_commas_and_quotes_are_quoted():
    payment = RecurringPayment(
        payment_id="p1",
        payment_type='Rent, "Main St"',
        amount=10.0,
        due_day=1,
    )

    row = export_recurring_payments_csv([payment]).splitlines()[1]

    assert row.startswith('"Rent, ""Main St""",10.00')


def test_convert_to_csv_blanks_missing_values():
    assert convert_to_csv([{"a": 1, "b": None}], ["a", "b"]) == "a,b\n1,\n"


def test_format_status():
    assert format_status("due_today") == "DUE TODAY"
    assert format_status(None) == ""
