"""SQLAlchemy ORM models for the analytics payment relations"""

from sqlalchemy import Column, String, Boolean, Float, Date, Integer, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class RecurringPaymentRow(Base):
    """Active recurring payment with its category display data"""

    __tablename__ = "analytics_recurring_payments"

    payment_id = Column(Text, primary_key=True)
    user_id = Column(Text, nullable=False, index=True)
    payment_type = Column(Text, nullable=False)
    amount = Column(Float, nullable=False)
    due_day = Column(Integer, nullable=False)
    frequency = Column(String(32), nullable=False, default="monthly")
    payment_status = Column(String(16), nullable=False, default="upcoming")
    category_name = Column(Text, nullable=True)
    category_color = Column(String(16), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    auto_pay = Column(Boolean, nullable=False, default=False)


class InstallmentRow(Base):
    """Installment plan with progress and current due date"""

    __tablename__ = "analytics_installments"

    installment_id = Column(Text, primary_key=True)
    user_id = Column(Text, nullable=False, index=True)
    item_name = Column(Text, nullable=False)
    total_amount = Column(Float, nullable=False, default=0.0)
    remaining_amount = Column(Float, nullable=False, default=0.0)
    monthly_payment = Column(Float, nullable=False)
    total_installments = Column(Integer, nullable=False, default=0)
    paid_installments = Column(Integer, nullable=False, default=0)
    completion_percentage = Column(Float, nullable=False, default=0.0)
    payment_status = Column(String(16), nullable=False, default="upcoming")
    due_date = Column(Date, nullable=True)
