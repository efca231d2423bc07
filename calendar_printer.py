#!/usr/bin/env python3
"""
Calendar Printer
Prints a month or a whole year as a text calendar.
"""

import argparse
import logging
import sys
from datetime import date
from typing import List, Optional

from textcal.config import get_default_width, get_log_level, highlight_today_enabled
from textcal.models.calendar_models import RangeError
from textcal.services.calendar_builder import (
    generate_calendar,
    parse_highlight,
    today_date,
    validate_month,
    validate_width,
    validate_year,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Print a text calendar for a month or a year')
    parser.add_argument('--year', '-y', type=int,
                        help='Year to print calendar for (default is current year)')
    parser.add_argument('--month', '-m', type=int,
                        help='1-12. Limits the calendar to just this month')
    parser.add_argument('--width', '-w', type=int,
                        help='How many months wide the calendar is (default is 4, or CALENDAR_WIDTH)')
    parser.add_argument('--date', '-d',
                        help='MM-dd. Date to highlight. The month part is optional (default is current month)')
    parser.add_argument('--today', action='store_true',
                        help="Highlight today's date")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level(), format='%(levelname)s %(name)s: %(message)s')

    today = date.today()
    year = args.year if args.year is not None else today.year

    try:
        validate_year(year)
        if args.month is not None:
            validate_month(args.month)
        width = args.width if args.width is not None else get_default_width()
        validate_width(width)

        highlight = []
        if args.today or highlight_today_enabled():
            highlight.append(today_date(today))
        if args.date:
            highlight.append(parse_highlight(args.date, year, month=args.month, today=today))

        lines = generate_calendar(year, month=args.month, width=width, highlight=highlight)
    except RangeError as e:
        logger.warning("Invalid argument: %s", e)
        print(f"Error: {e}")
        return 1
    except ValueError as e:
        print(f"Error: {e} See --help for usage.")
        return 1
    except EnvironmentError as e:
        print(f"Error: {e}")
        return 1

    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
