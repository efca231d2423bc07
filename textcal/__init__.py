"""Text-mode calendar: date model, week layout and fixed-width rendering."""

from textcal.models.calendar_models import (
    BLANK,
    EMPTY_WEEK,
    CalendarDate,
    CalendarError,
    Month,
    RangeError,
    StructuralError,
    Week,
    Weekday,
    Year,
    days_in_month,
    is_leap,
)
from textcal.services.calendar_builder import generate_calendar, parse_highlight
from textcal.services.calendar_formatter import CalendarFormatter, center_text

__version__ = "1.0.0"
