"""Date and calendar utilities."""

import calendar
from datetime import date, timedelta
from typing import Optional


MONTH_NAMES = {
    'es': [
        'enero', 'febrero', 'marzo', 'abril', 'mayo', 'junio',
        'julio', 'agosto', 'septiembre', 'octubre', 'noviembre', 'diciembre',
    ],
    'en': [
        'January', 'February', 'March', 'April', 'May', 'June',
        'July', 'August', 'September', 'October', 'November', 'December',
    ],
}


def days_between(start: date, end: date) -> int:
    """Whole days from start to end (negative when end precedes start)."""
    return (end - start).days


def add_days(value: date, days: int) -> date:
    """Shift a date by a number of days."""
    return value + timedelta(days=days)


def first_of_month(value: date) -> date:
    """Return the first day of the month containing value."""
    return value.replace(day=1)


def next_month(value: date) -> date:
    """Return the first day of the month after value."""
    if value.month == 12:
        return date(value.year + 1, 1, 1)
    return date(value.year, value.month + 1, 1)


def days_in_month(year: int, month: int) -> int:
    """Number of days in a calendar month."""
    return calendar.monthrange(year, month)[1]


def month_label(value: date, locale: str = 'es') -> str:
    """Localized month name followed by a two-digit year, e.g. "octubre '24"."""
    names = MONTH_NAMES.get(locale, MONTH_NAMES['es'])
    return f"{names[value.month - 1]} '{value.year % 100:02d}"


def parse_iso_date(value) -> Optional[date]:
    """Parse a YYYY-MM-DD string; return None when it is not a valid date."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None
