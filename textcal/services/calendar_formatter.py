#!/usr/bin/env python3
"""
Calendar Formatter
Formats dates, weeks, months and years as fixed-width text blocks.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from textcal.models.calendar_models import (
    MAX_WEEKS_PER_MONTH,
    CalendarDate,
    Month,
    Week,
    Year,
    check_width,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


def center_text(text: str, width: int) -> str:
    """
    Center text in a field of the given width.

    The odd space, if any, goes on the right. Text already as wide as the
    field (or wider) is returned unchanged.
    """
    pad = width - len(text)
    if pad <= 0:
        return text
    left = pad // 2
    return f"{' ' * left}{text}{' ' * (pad - left)}"


def chunk(items: Sequence[T], size: int) -> Iterator[Tuple[T, ...]]:
    """Split items into consecutive groups of ``size``; the last may be short."""
    for start in range(0, len(items), size):
        yield tuple(items[start:start + size])


class CalendarFormatter:
    """Formats calendar models as text, optionally highlighting some dates."""

    DAY_WIDTH = 2
    WEEK_HEADER = " S  M  T  W  T  F  S"
    MONTH_WIDTH = len(WEEK_HEADER)
    INTER_MONTH_SPACE = 2
    DEFAULT_WIDTH = 4

    # Swaps the terminal's foreground and background colours
    HIGHLIGHT_START = "\x1b[7m"
    HIGHLIGHT_END = "\x1b[0m"

    def __init__(self, highlight: Optional[Iterable[CalendarDate]] = None):
        """
        Initialize CalendarFormatter.

        Args:
            highlight: Dates to render in inverse video. BLANK entries are ignored.
        """
        self.highlight = frozenset(
            date for date in (highlight or ()) if not date.is_blank
        )

    def format_date(self, date: CalendarDate) -> str:
        """Two-character day number, or two spaces for BLANK."""
        if date.is_blank:
            return ' ' * self.DAY_WIDTH

        text = str(date.day).rjust(self.DAY_WIDTH)
        if date in self.highlight:
            text = f"{self.HIGHLIGHT_START}{text}{self.HIGHLIGHT_END}"
        return text

    def format_week(self, week: Week) -> str:
        return ' '.join(self.format_date(date) for date in week)

    def month_lines(self, month: Month, weeks: int = 0) -> List[str]:
        """
        Format a month as a list of lines.

        Args:
            month: Month to format
            weeks: Minimum number of week rows; short months are padded with blank rows

        Returns:
            Centered month name, divider, weekday header, then one line per week
        """
        lines = [
            center_text(month.name, self.MONTH_WIDTH),
            '-' * self.MONTH_WIDTH,
            self.WEEK_HEADER,
        ]
        lines.extend(self.format_week(week) for week in month.as_weeks(weeks))
        return lines

    def format_month(self, month: Month) -> str:
        return '\n'.join(self.month_lines(month))

    def group_width(self, months: int) -> int:
        """Total character width of ``months`` months printed side by side."""
        return months * self.MONTH_WIDTH + (months - 1) * self.INTER_MONTH_SPACE

    def year_lines(self, year: Year, width: int = DEFAULT_WIDTH) -> List[str]:
        """
        Format a whole year as a list of lines.

        Args:
            year: Year to format
            width: Number of months printed side by side

        Returns:
            Banner with the year number, then one block of lines per row of months

        Raises:
            RangeError: if width is less than 1
        """
        check_width(width)

        groups = list(chunk(year.months, width))
        banner_width = self.group_width(len(groups[0]))

        lines = [
            '=' * banner_width,
            '',
            center_text(str(year.value), banner_width),
            '',
            '=' * banner_width,
        ]

        for group in groups:
            lines.extend(self._group_lines(group))

        logger.debug("Formatted year %d at width %d (%d lines)", year.value, width, len(lines))
        return lines

    def _group_lines(self, group: Sequence[Month]) -> List[str]:
        gap = ' ' * self.INTER_MONTH_SPACE
        total_width = self.group_width(len(group))

        lines = [
            gap.join(center_text(month.name, self.MONTH_WIDTH) for month in group),
            '-' * total_width,
            gap.join([self.WEEK_HEADER] * len(group)),
        ]

        # Every month is padded to the same row count so rows line up across the group
        columns = [list(month.as_weeks(MAX_WEEKS_PER_MONTH)) for month in group]
        for row in zip(*columns):
            lines.append(gap.join(self.format_week(week) for week in row))

        lines.append(' ' * total_width)
        return lines

    def format_year(self, year: Year, width: int = DEFAULT_WIDTH) -> str:
        return '\n'.join(self.year_lines(year, width))
