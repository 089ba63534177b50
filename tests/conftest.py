"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from budget_timeline.api.main import create_app
from budget_timeline.api.dependencies import get_today
from budget_timeline.infrastructure.database.models import Base, RecurringPaymentRow, InstallmentRow
from budget_timeline.infrastructure.database.session import get_db
from budget_timeline.domain.models import RecurringPayment, Installment


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Frozen clock for every test
TODAY = date(2024, 2, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database and frozen clock"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    return TestClient(app)


@pytest.fixture
def sample_recurring_payments() -> list[RecurringPayment]:
    """Rent, phone and gym with different due days"""
    return [
        RecurringPayment(
            payment_id="rent",
            payment_type="Rent",
            amount=1200.0,
            due_day=1,
            payment_status="upcoming",
            category_name="Housing",
            category_color="#ff5733",
        ),
        RecurringPayment(
            payment_id="phone",
            payment_type="Phone",
            amount=45.5,
            due_day=20,
            payment_status="upcoming",
            category_name="Utilities",
        ),
        RecurringPayment(
            payment_id="gym",
            payment_type="Gym",
            amount=30.0,
            due_day=15,
            payment_status="overdue",
        ),
    ]


@pytest.fixture
def sample_installments() -> list[Installment]:
    """One overdue laptop plan and one upcoming phone plan"""
    return [
        Installment(
            installment_id="laptop",
            item_name="Laptop",
            monthly_payment=150.0,
            due_date=date(2024, 2, 10),
            remaining_amount=900.0,
            payment_status="upcoming",
            completion_percentage=40.0,
            total_amount=1500.0,
            total_installments=10,
            paid_installments=4,
        ),
        Installment(
            installment_id="sofa",
            item_name="Sofa",
            monthly_payment=80.0,
            due_date=date(2024, 3, 5),
            remaining_amount=320.0,
            payment_status="upcoming",
            completion_percentage=60.0,
            total_amount=800.0,
            total_installments=10,
            paid_installments=6,
        ),
    ]


@pytest.fixture
def seeded_db(db: Session) -> Session:
    """Store rows for two users so user filtering can be checked"""
    db.add_all(
        [
            RecurringPaymentRow(
                payment_id="rent",
                user_id="user_1",
                payment_type="Rent",
                amount=1200.0,
                due_day=1,
                payment_status="upcoming",
                category_name="Housing",
                category_color="#ff5733",
            ),
            RecurringPaymentRow(
                payment_id="phone",
                user_id="user_1",
                payment_type="Phone",
                amount=45.5,
                due_day=20,
                payment_status="overdue",
                category_name="Utilities",
                auto_pay=True,
            ),
            RecurringPaymentRow(
                payment_id="other_user_rent",
                user_id="user_2",
                payment_type="Rent",
                amount=900.0,
                due_day=5,
            ),
            InstallmentRow(
                installment_id="laptop",
                user_id="user_1",
                item_name="Laptop",
                total_amount=1500.0,
                remaining_amount=900.0,
                monthly_payment=150.0,
                total_installments=10,
                paid_installments=4,
                completion_percentage=40.0,
                payment_status="upcoming",
                due_date=date(2024, 2, 20),
            ),
        ]
    )
    db.commit()
    return db
