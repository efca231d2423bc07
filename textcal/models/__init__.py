"""Data models for the text calendar."""

from textcal.models.calendar_models import (
    BLANK,
    EMPTY_WEEK,
    MAX_WEEKS_PER_MONTH,
    MONTH_NAMES,
    CalendarDate,
    CalendarError,
    Month,
    RangeError,
    StructuralError,
    Week,
    Weekday,
    Year,
    check_month,
    check_width,
    check_year,
    days_in_month,
    is_leap,
)

__all__ = [
    'BLANK',
    'EMPTY_WEEK',
    'MAX_WEEKS_PER_MONTH',
    'MONTH_NAMES',
    'CalendarDate',
    'CalendarError',
    'Month',
    'RangeError',
    'StructuralError',
    'Week',
    'Weekday',
    'Year',
    'check_month',
    'check_width',
    'check_year',
    'days_in_month',
    'is_leap',
]
