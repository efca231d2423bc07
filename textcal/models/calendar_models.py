#!/usr/bin/env python3
"""
Calendar Data Models
Data classes for dates, weeks, months and years of a text-mode calendar.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Deque, Dict, Iterator, List, Sequence, Tuple

logger = logging.getLogger(__name__)

FILLER_VALUE = -1
DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12

# Most rows any Gregorian month can span (31 days starting on a Friday or Saturday)
MAX_WEEKS_PER_MONTH = 6

DAYS_PER_MONTH = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
FEBRUARY = 2

MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December'
]


class CalendarError(ValueError):
    """Base class for calendar construction failures."""


class RangeError(CalendarError):
    """Raised when a year, month, day or display width is out of range."""


class StructuralError(CalendarError):
    """Raised when a week cannot be formed from the days it was given."""


class Weekday(IntEnum):
    """Day of the week, Sunday first."""
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


def is_leap(year: int) -> bool:
    """Gregorian leap year rule."""
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def days_in_month(month: int, year: int) -> int:
    """Number of days in a 1-based month of the given year."""
    days = DAYS_PER_MONTH[month - 1]
    if month == FEBRUARY and is_leap(year):
        days += 1
    return days


@dataclass(frozen=True)
class CalendarDate:
    """A single calendar day. ``BLANK`` stands in for an unfilled grid cell."""
    year: int
    month: int
    day: int

    @property
    def is_blank(self) -> bool:
        return self.day == FILLER_VALUE

    @property
    def weekday(self) -> Weekday:
        """
        Day of the week this date falls on, using Zeller's congruence.

        January and February count as months 13 and 14 of the previous year.
        Zeller's result has Saturday at 0 and is shifted so Sunday is 0.
        """
        month = self.month + 12 if self.month < 3 else self.month
        year = self.year - 1 if month > 12 else self.year

        century, year_of_century = divmod(year, 100)

        h = (
            self.day
            + (13 * (month + 1)) // 5
            + year_of_century
            + year_of_century // 4
            + century // 4
            - 2 * century
        ) % 7

        return Weekday((h + 6) % 7)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'year': self.year,
            'month': self.month,
            'day': self.day
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CalendarDate':
        """Create from dictionary."""
        return cls(
            year=int(data['year']),
            month=int(data['month']),
            day=int(data['day'])
        )


BLANK = CalendarDate(FILLER_VALUE, FILLER_VALUE, FILLER_VALUE)


def _filler_sections(days: Sequence[CalendarDate]) -> List[Tuple[int, int]]:
    """Return (start, stop) index pairs of each run of BLANK entries."""
    sections = []
    start = None
    for index, day in enumerate(days):
        if day.is_blank:
            if start is None:
                start = index
        elif start is not None:
            sections.append((start, index))
            start = None
    if start is not None:
        sections.append((start, len(days)))
    return sections


@dataclass(frozen=True)
class Week:
    """
    One printed row of a month: seven slots, Sunday through Saturday.

    Unfilled slots hold ``BLANK``. Blank slots must form a single run that
    touches the start or the end of the week; a fully blank week is allowed.
    """
    days: Tuple[CalendarDate, ...]

    def __post_init__(self):
        if self.days is None:
            raise StructuralError("days can't be None")

        days = tuple(self.days)
        if len(days) != DAYS_PER_WEEK:
            raise StructuralError(
                f"Invalid days. Should be length {DAYS_PER_WEEK}, got {len(days)}."
            )
        if any(day is None for day in days):
            raise StructuralError("days can't contain None")

        sections = _filler_sections(days)
        if len(sections) > 1:
            raise StructuralError(
                f"Only 1 section of date fillers is allowed, got {len(sections)}."
            )
        if sections:
            start, stop = sections[0]
            if start != 0 and stop != DAYS_PER_WEEK:
                raise StructuralError("Filler sections must be at start or end.")

        object.__setattr__(self, 'days', days)

    def __getitem__(self, index: int) -> CalendarDate:
        return self.days[index]

    def __iter__(self) -> Iterator[CalendarDate]:
        return iter(self.days)

    def __len__(self) -> int:
        return DAYS_PER_WEEK

    @property
    def is_empty(self) -> bool:
        return all(day.is_blank for day in self.days)

    @classmethod
    def generate(cls, days: Deque[CalendarDate]) -> 'Week':
        """
        Build the next week from the front of ``days``, consuming what it places.

        Days are taken while each one falls later in the week than the day
        placed before it, so the row ends at Saturday or when ``days`` runs out.

        Args:
            days: Remaining days of a month, in order

        Returns:
            Week with every unplaced slot set to BLANK

        Raises:
            StructuralError: if ``days`` is empty or the placed days leave
                blank slots anywhere other than one end of the week
        """
        if days is None:
            raise StructuralError("days can't be None")
        if not days:
            raise StructuralError("No days to form week.")

        slots = [BLANK] * DAYS_PER_WEEK
        last_index = -1

        while days and days[0].weekday > last_index:
            day = days.popleft()
            last_index = int(day.weekday)
            slots[last_index] = day

        return cls(tuple(slots))


EMPTY_WEEK = Week((BLANK,) * DAYS_PER_WEEK)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_year(year: int) -> int:
    """Return year if it is a positive integer, else raise RangeError."""
    if not _is_int(year) or year < 1:
        raise RangeError(f"year must be greater than 0. Got {year!r}.")
    return year


def check_month(month: int) -> int:
    """Return month if it is in 1-12, else raise RangeError."""
    if not _is_int(month) or not 1 <= month <= MONTHS_PER_YEAR:
        raise RangeError(f"month must be between 1 & 12. Got {month!r}.")
    return month


def check_width(width: int) -> int:
    """Return width if it is at least one month, else raise RangeError."""
    if not _is_int(width) or width < 1:
        raise RangeError(f"width must be greater than 0. Got {width!r}.")
    return width


@dataclass(frozen=True)
class Month:
    """All days of one month of one year, in order from day 1."""
    year: int
    value: int
    days: Tuple[CalendarDate, ...] = field(init=False, repr=False)

    def __post_init__(self):
        check_year(self.year)
        check_month(self.value)

        days = tuple(
            CalendarDate(self.year, self.value, day)
            for day in range(1, days_in_month(self.value, self.year) + 1)
        )
        object.__setattr__(self, 'days', days)

    def __len__(self) -> int:
        return len(self.days)

    def __getitem__(self, day: int) -> CalendarDate:
        """Return the date for a 1-based day of the month."""
        if not 1 <= day <= len(self.days):
            raise IndexError(f"day must be between 1 & {len(self.days)}. Got {day}.")
        return self.days[day - 1]

    def __iter__(self) -> Iterator[CalendarDate]:
        return iter(self.days)

    @property
    def name(self) -> str:
        return MONTH_NAMES[self.value - 1]

    def as_weeks(self, count: int = 0) -> Iterator[Week]:
        """
        Yield the month as weeks, padding with ``EMPTY_WEEK`` up to ``count``.

        Every call starts again from day 1. Real weeks are never dropped, so
        more than ``count`` weeks are produced when the month needs them.
        """
        remaining = deque(self.days)
        produced = 0

        while remaining:
            yield Week.generate(remaining)
            produced += 1

        while produced < count:
            yield EMPTY_WEEK
            produced += 1


@dataclass(frozen=True)
class Year:
    """The twelve months of one year, January through December."""
    value: int
    months: Tuple[Month, ...] = field(init=False, repr=False)

    def __post_init__(self):
        check_year(self.value)

        months = tuple(Month(self.value, month) for month in range(1, MONTHS_PER_YEAR + 1))
        object.__setattr__(self, 'months', months)
        logger.debug("Built year %d", self.value)

    def __len__(self) -> int:
        return len(self.months)

    def __getitem__(self, month: int) -> Month:
        """Return the 1-based month of this year."""
        if not 1 <= month <= MONTHS_PER_YEAR:
            raise IndexError(f"month must be between 1 & 12. Got {month}.")
        return self.months[month - 1]

    def __iter__(self) -> Iterator[Month]:
        return iter(self.months)

    @property
    def is_leap(self) -> bool:
        return is_leap(self.value)

