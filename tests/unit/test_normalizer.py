"""Unit tests for record normalization"""

import pytest
from datetime import date, datetime
from budget_timeline.domain.models import RecurringPayment, Installment, EventType
from budget_timeline.domain.normalizer import (
    normalize,
    normalize_installment,
    normalize_recurring_payment,
    DEFAULT_RECURRING_COLOR,
    INSTALLMENT_COLOR,
)
from budget_timeline.domain.exceptions import RecordValidationError


def test_normalize_keeps_input_order(sample_recurring_payments, sample_installments):
    prototypes = normalize(sample_recurring_payments, sample_installments)

    assert [p.source_id for p in prototypes] == ["rent", "phone", "gym", "laptop", "sofa"]
    assert [p.type for p in prototypes] == [EventType.RECURRING] * 3 + [EventType.INSTALLMENT] * 2


def test_normalize_empty_input():
    assert normalize([], []) == []


def test_recurring_defaults_for_missing_display_fields():
    prototype = normalize_recurring_payment(
        RecurringPayment(payment_id="p1", payment_type="Gym", amount=30.0, due_day=15)
    )

    assert prototype.color == DEFAULT_RECURRING_COLOR
    assert prototype.category is None
    assert prototype.due_day == 15
    assert prototype.due_date is None


def test_recurring_passes_through_category():
    prototype = normalize_recurring_payment(
        RecurringPayment(
            payment_id="p1",
            payment_type="Rent",
            amount=1200.0,
            due_day=1,
            category_name="Housing",
            category_color="#ff5733",
        )
    )

    assert prototype.category == "Housing"
    assert prototype.color == "#ff5733"


def test_installment_uses_fixed_color_and_due_date():
    prototype = normalize_installment(
        Installment(
            installment_id="i1",
            item_name="Laptop",
            monthly_payment=150.0,
            due_date=date(2024, 2, 10),
            remaining_amount=900.0,
            completion_percentage=40.0,
        )
    )

    assert prototype.color == INSTALLMENT_COLOR
    assert prototype.due_date == date(2024, 2, 10)
    assert prototype.amount == 150.0
    assert prototype.remaining_amount == 900.0
    assert prototype.completion_percentage == 40.0


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"payment_id": None}, "payment_id"),
        ({"payment_type": "  "}, "payment_type"),
        ({"amount": None}, "amount"),
        ({"amount": -5.0}, "non-negative"),
        ({"due_day": 0}, "due_day"),
        ({"due_day": 32}, "due_day"),
        ({"due_day": "15"}, "integer"),
        ({"due_day": True}, "integer"),
    ],
)
def test_recurring_validation_errors(overrides, message):
    fields = {"payment_id": "p1", "payment_type": "Rent", "amount": 10.0, "due_day": 10}
    fields.update(overrides)

    with pytest.raises(RecordValidationError, match=message) as exc_info:
        normalize_recurring_payment(RecurringPayment(**fields))

    assert exc_info.value.source_type == "recurring"


def test_installment_missing_due_date():
    with pytest.raises(RecordValidationError, match="due_date") as exc_info:
        normalize_installment(
            Installment(installment_id="i1", item_name="Sofa", monthly_payment=80.0, due_date=None)
        )

    assert exc_info.value.source_type == "installment"
    assert exc_info.value.source_id == "i1"


def test_normalize_fails_on_first_malformed_record(sample_installments):
    bad = RecurringPayment(payment_id="bad", payment_type="Rent", amount=10.0, due_day=40)

    with pytest.raises(RecordValidationError):
        normalize([bad], sample_installments)


def test_installment_datetime_due_date_truncated():
    prototype = normalize_installment(
        Installment(installment_id="tv", item_name="TV", monthly_payment=60.0, due_date=datetime(2024, 2, 20, 9, 0))
    )

    assert prototype.due_date == date(2024, 2, 20)
    assert not isinstance(prototype.due_date, datetime)


def test_installment_string_due_date_rejected():
    with pytest.raises(RecordValidationError, match="must be a date") as exc_info:
        normalize_installment(
            Installment(installment_id="tv", item_name="TV", monthly_payment=60.0, due_date="2024-02-20")
        )

    assert exc_info.value.source_id == "tv"
