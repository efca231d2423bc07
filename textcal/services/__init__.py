"""Business logic services for calendar operations."""

__all__ = [
    'build_year',
    'build_month',
    'parse_highlight',
    'generate_calendar',
    'CalendarFormatter',
    'center_text'
]

from textcal.services.calendar_formatter import CalendarFormatter, center_text
from textcal.services.calendar_builder import (
    build_month,
    build_year,
    generate_calendar,
    parse_highlight,
)
