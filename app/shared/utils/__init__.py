"""Shared utilities: UTC datetime and calendar helpers."""

from app.shared.utils.datetime import (
    add_months,
    at_midnight,
    days_in_month,
    ensure_utc,
    first_of_month,
    first_of_quarter,
    monday_of_week,
    utc_now,
)

__all__ = [
    "utc_now",
    "ensure_utc",
    "at_midnight",
    "days_in_month",
    "add_months",
    "first_of_month",
    "first_of_quarter",
    "monday_of_week",
]
