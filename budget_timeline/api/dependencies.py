"""Dependency injection for FastAPI endpoints"""

from datetime import date
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from budget_timeline.infrastructure.database.session import get_db
from budget_timeline.infrastructure.database.repositories import PaymentRepository


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_today() -> date:
    """Clock reading for endpoints; overridden in tests to freeze time"""
    return date.today()


def get_payment_repository(db: Session = Depends(get_db)) -> PaymentRepository:
    """Provide payment repository bound to the request's session"""
    return PaymentRepository(db)
