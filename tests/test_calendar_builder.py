#!/usr/bin/env python3
"""
Tests for calendar building, highlight parsing and configuration.
"""

from datetime import date

import pytest

from textcal.config import get_default_width, get_log_level, highlight_today_enabled
from textcal.models.calendar_models import CalendarDate, RangeError
from textcal.services.calendar_builder import (
    build_month,
    build_year,
    generate_calendar,
    parse_highlight,
    today_date,
    validate_date,
)


class TestBuild:

    @pytest.mark.parametrize("year", [0, -5])
    def test_build_year_rejects_non_positive(self, year):
        with pytest.raises(RangeError, match=r"^year must be greater than 0\."):
            build_year(year)

    def test_build_month(self):
        month = build_month(2024, 2)
        assert len(month) == 29

    @pytest.mark.parametrize("month", [0, 13])
    def test_build_month_rejects_bad_month(self, month):
        with pytest.raises(RangeError, match=r"^month must be between 1 & 12\."):
            build_month(2024, month)

    def test_today_date(self):
        assert today_date(date(2024, 3, 9)) == CalendarDate(2024, 3, 9)

    def test_validate_date(self):
        assert validate_date(CalendarDate(2024, 2, 29)) == CalendarDate(2024, 2, 29)

    @pytest.mark.parametrize("day, message", [
        (CalendarDate(2023, 2, 29), r"^day must be between 1 & 28\."),
        (CalendarDate(2023, 13, 1), r"^month must be between 1 & 12\."),
        (CalendarDate(0, 1, 1), r"^year must be greater than 0\."),
    ])
    def test_validate_date_rejects(self, day, message):
        with pytest.raises(RangeError, match=message):
            validate_date(day)


class TestParseHighlight:

    def test_month_and_day(self):
        assert parse_highlight("02-14", 2024) == CalendarDate(2024, 2, 14)

    def test_day_uses_given_month(self):
        assert parse_highlight("14", 2024, month=7) == CalendarDate(2024, 7, 14)

    def test_day_defaults_to_current_month(self):
        parsed = parse_highlight("3", 2024, today=date(2030, 11, 20))
        assert parsed == CalendarDate(2024, 11, 3)

    @pytest.mark.parametrize("text", ["", "abc", "1-2-3", "02-xx", "13-01", "02-30", "0"])
    def test_invalid_formats(self, text):
        with pytest.raises(ValueError, match=r"^Invalid date format"):
            parse_highlight(text, 2023, month=2)


class TestGenerateCalendar:

    def test_single_month(self):
        lines = generate_calendar(1998, month=2)

        assert lines[0] == "      February      "
        assert lines[1] == "-" * 20
        assert lines[2] == " S  M  T  W  T  F  S"
        assert lines[3:] == [
            " 1  2  3  4  5  6  7",
            " 8  9 10 11 12 13 14",
            "15 16 17 18 19 20 21",
            "22 23 24 25 26 27 28",
        ]

    def test_year_uses_default_width(self):
        assert generate_calendar(2000) == generate_calendar(2000, width=4)

    def test_zero_width_raises_before_layout(self):
        with pytest.raises(RangeError, match=r"^width must be greater than 0\."):
            generate_calendar(2000, width=0)

    def test_zero_width_rejected_even_for_month(self):
        with pytest.raises(RangeError):
            generate_calendar(2000, month=1, width=0)

    @pytest.mark.parametrize("year", [0, -5])
    def test_bad_year_raises(self, year):
        with pytest.raises(RangeError, match=r"^year must be greater than 0\."):
            generate_calendar(year)

    def test_highlight(self):
        lines = generate_calendar(1998, month=2, highlight=[CalendarDate(1998, 2, 1)])
        assert lines[3] == "\x1b[7m 1\x1b[0m  2  3  4  5  6  7"


class TestConfig:

    @pytest.fixture(autouse=True)
    def clean_environment(self, monkeypatch):
        for name in ('CALENDAR_WIDTH', 'CALENDAR_HIGHLIGHT_TODAY', 'CALENDAR_LOG_LEVEL'):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        assert get_default_width() == 4
        assert highlight_today_enabled() is False
        assert get_log_level() == 'WARNING'

    def test_width_from_environment(self, monkeypatch):
        monkeypatch.setenv('CALENDAR_WIDTH', '3')
        assert get_default_width() == 3

    @pytest.mark.parametrize("value", ["abc", "0", "-2"])
    def test_invalid_width_from_environment(self, monkeypatch, value):
        monkeypatch.setenv('CALENDAR_WIDTH', value)
        with pytest.raises(EnvironmentError, match="CALENDAR_WIDTH"):
            get_default_width()

    @pytest.mark.parametrize("value, expected", [
        ("true", True), ("1", True), ("YES", True), ("no", False), ("", False),
    ])
    def test_highlight_today(self, monkeypatch, value, expected):
        monkeypatch.setenv('CALENDAR_HIGHLIGHT_TODAY', value)
        assert highlight_today_enabled() is expected

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv('CALENDAR_LOG_LEVEL', 'debug')
        assert get_log_level() == 'DEBUG'
