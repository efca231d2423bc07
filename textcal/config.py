# config.py
import os
from dotenv import load_dotenv

# Load environment variables from .env file
# so CALENDAR_WIDTH and friends can be set per checkout
load_dotenv()

DEFAULT_WIDTH = 4
DEFAULT_LOG_LEVEL = 'WARNING'


def get_default_width() -> int:
    """Months per row for year calendars, from CALENDAR_WIDTH."""
    raw = os.environ.get('CALENDAR_WIDTH')
    if not raw:
        return DEFAULT_WIDTH

    try:
        width = int(raw)
    except ValueError:
        raise EnvironmentError(
            f"CALENDAR_WIDTH must be a positive integer, got '{raw}'.\n"
            "Please fix it in .env file or with: export CALENDAR_WIDTH=4"
        )
    if width < 1:
        raise EnvironmentError(
            f"CALENDAR_WIDTH must be a positive integer, got '{raw}'.\n"
            "Please fix it in .env file or with: export CALENDAR_WIDTH=4"
        )
    return width


def highlight_today_enabled() -> bool:
    """Whether today's date is highlighted by default, from CALENDAR_HIGHLIGHT_TODAY."""
    value = os.environ.get('CALENDAR_HIGHLIGHT_TODAY', '').lower()
    return value in ('true', '1', 'yes')


def get_log_level() -> str:
    return os.environ.get('CALENDAR_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
