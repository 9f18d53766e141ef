"""Date windows and the hire/termination eligibility predicate."""

from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from synthetic_org.generators.registry import Employee


def employed_during(employee: "Employee", start: date, end: date) -> bool:
    """True if the employee overlaps the window [start, end].

    Hired on or before the window closes, and, when terminated, not gone
    before the window opens.
    """
    if employee.hire_date > end:
        return False
    if employee.status == "terminated" and employee.termination_date is not None:
        if employee.termination_date < start:
            return False
    return True


def active_on(employee: "Employee", day: date) -> bool:
    """True if the employee was on the books on a specific date."""
    return employed_during(employee, day, day)


def days_before(day: date, days: int) -> date:
    return day - timedelta(days=days)


def days_after(day: date, days: int) -> date:
    return day + timedelta(days=days)


def iso(day: Optional[date]) -> Optional[str]:
    """ISO-8601 string for a date, passing None through."""
    return day.isoformat() if day is not None else None


def parse_iso(value: Optional[str]) -> Optional[date]:
    return date.fromisoformat(value) if value else None
