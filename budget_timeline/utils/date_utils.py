"""Date manipulation utilities"""

import calendar
from datetime import date, datetime, timedelta


def to_day(value: date | datetime) -> date:
    """Truncate a datetime to its calendar date; dates pass through unchanged"""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    """Move a (year, month) pair forward or back by whole months"""
    index = year * 12 + (month - 1) + months
    return index // 12, index % 12 + 1


def clamped_date(year: int, month: int, day: int) -> date:
    """
    Build a date, clamping day to the last day of the month.

    Day 31 in April gives April 30; day 30 in February 2024 gives February 29.
    """
    return date(year, month, min(day, days_in_month(year, month)))


def add_months(from_date: date, months: int) -> date:
    """Same day-of-month `months` later, clamped to month end"""
    year, month = shift_month(from_date.year, from_date.month, months)
    return clamped_date(year, month, from_date.day)


def add_days(from_date: date, days: int) -> date:
    return from_date + timedelta(days=days)
