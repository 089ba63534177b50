"""Data access layer for recurring payments and installments"""

from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from budget_timeline.infrastructure.database.models import RecurringPaymentRow, InstallmentRow
from budget_timeline.domain.models import RecurringPayment, Installment
from budget_timeline.domain.exceptions import DataStoreError


class PaymentRepository:
    """Read-only repository for a user's payment commitments"""

    def __init__(self, db: Session):
        self.db = db

    def get_recurring_payments(self, user_id: str) -> List[RecurringPayment]:
        """
        Fetch a user's recurring payments ordered by due day.

        Raises:
            DataStoreError: On any database failure
        """
        try:
            rows = (
                self.db.query(RecurringPaymentRow)
                .filter(RecurringPaymentRow.user_id == user_id)
                .order_by(RecurringPaymentRow.due_day.asc(), RecurringPaymentRow.payment_id.asc())
                .all()
            )
        except SQLAlchemyError as e:
            raise DataStoreError(f"Failed to load recurring payments: {e}") from e

        return [
            RecurringPayment(
                payment_id=row.payment_id,
                payment_type=row.payment_type,
                amount=row.amount,
                due_day=row.due_day,
                payment_status=row.payment_status,
                category_name=row.category_name,
                category_color=row.category_color,
                frequency=row.frequency,
                is_active=row.is_active,
                auto_pay=row.auto_pay,
            )
            for row in rows
        ]

    def get_installments(self, user_id: str) -> List[Installment]:
        """
        Fetch a user's installments ordered by due date.

        Raises:
            DataStoreError: On any database failure
        """
        try:
            rows = (
                self.db.query(InstallmentRow)
                .filter(InstallmentRow.user_id == user_id)
                .order_by(InstallmentRow.due_date.asc(), InstallmentRow.installment_id.asc())
                .all()
            )
        except SQLAlchemyError as e:
            raise DataStoreError(f"Failed to load installments: {e}") from e

        return [
            Installment(
                installment_id=row.installment_id,
                item_name=row.item_name,
                monthly_payment=row.monthly_payment,
                due_date=row.due_date,
                remaining_amount=row.remaining_amount,
                payment_status=row.payment_status,
                completion_percentage=row.completion_percentage,
                total_amount=row.total_amount,
                total_installments=row.total_installments,
                paid_installments=row.paid_installments,
            )
            for row in rows
        ]
