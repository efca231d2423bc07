#!/usr/bin/env python3
"""
Calendar Builder
Builds validated calendar models and turns them into lines of text.
"""

import logging
from datetime import date
from typing import Iterable, List, Optional

from textcal.models.calendar_models import (
    MONTHS_PER_YEAR,
    CalendarDate,
    Month,
    RangeError,
    Year,
    check_month,
    check_width,
    check_year,
    days_in_month,
)
from textcal.services.calendar_formatter import CalendarFormatter

logger = logging.getLogger(__name__)


def validate_year(year: int) -> int:
    return check_year(year)


def validate_month(month: int) -> int:
    return check_month(month)


def validate_width(width: int) -> int:
    return check_width(width)


def validate_date(day: CalendarDate) -> CalendarDate:
    """Return day if it names a real date, else raise RangeError."""
    check_year(day.year)
    check_month(day.month)
    last_day = days_in_month(day.month, day.year)
    if not 1 <= day.day <= last_day:
        raise RangeError(f"day must be between 1 & {last_day}. Got {day.day!r}.")
    return day


def build_year(year: int) -> Year:
    """Build all twelve months of a year."""
    return Year(validate_year(year))


def build_month(year: int, month: int) -> Month:
    """Build a single month of a year."""
    return Month(validate_year(year), validate_month(month))


def today_date(today: Optional[date] = None) -> CalendarDate:
    """Return today (or the given date) as a CalendarDate."""
    today = today or date.today()
    return CalendarDate(today.year, today.month, today.day)


def parse_highlight(text: str, year: int, month: Optional[int] = None,
                    today: Optional[date] = None) -> CalendarDate:
    """
    Parse a date to highlight from 'MM-dd' or 'dd'.

    Args:
        text: Date string, e.g. "02-14" or "14"
        year: Year the date belongs to
        month: Month used for the bare 'dd' form (default: current month)
        today: Overrides the current date, mainly for tests

    Returns:
        CalendarDate for the parsed day

    Raises:
        ValueError: if text is not in either form or names a day that does not exist
    """
    parts = text.strip().split('-') if text else []

    try:
        if len(parts) == 1:
            month_value = month or (today or date.today()).month
            day_value = int(parts[0])
        elif len(parts) == 2:
            month_value = int(parts[0])
            day_value = int(parts[1])
        else:
            raise ValueError(text)
    except ValueError:
        raise ValueError(f"Invalid date format. Got '{text}'. Expected MM-dd or dd.")

    if not 1 <= month_value <= MONTHS_PER_YEAR:
        raise ValueError(f"Invalid date format. Got '{text}'. Month must be between 1 & 12.")

    last_day = days_in_month(month_value, year)
    if not 1 <= day_value <= last_day:
        raise ValueError(f"Invalid date format. Got '{text}'. Day must be between 1 & {last_day}.")

    return CalendarDate(year, month_value, day_value)


def generate_calendar(year: int, month: Optional[int] = None, width: Optional[int] = None,
                      highlight: Iterable[CalendarDate] = ()) -> List[str]:
    """
    Generate the lines of a month or year calendar.

    Args:
        year: Year to print
        month: 1-12 to print only that month; None prints the whole year
        width: Months per row for a whole year (default 4)
        highlight: Dates to render in inverse video

    Returns:
        Lines of text, without line terminators

    Raises:
        RangeError: if year, month or width is out of range
    """
    validate_year(year)
    if month is not None:
        validate_month(month)
    if width is not None:
        validate_width(width)

    formatter = CalendarFormatter(highlight)

    if month is not None:
        logger.debug("Generating calendar for %d-%02d", year, month)
        return formatter.month_lines(build_month(year, month))

    logger.debug("Generating calendar for %d", year)
    return formatter.year_lines(build_year(year), width or CalendarFormatter.DEFAULT_WIDTH)
