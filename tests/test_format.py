"""Tests for canonical ISO 8601 formatting."""

from __future__ import annotations

import pytest

from isospan import Date, Time
from isospan.format import format_day, format_iso8601, parse_iso8601


class TestCanonicalForms:
    """Parsed values render in extended form at their own granularity."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("20", "20"),
            ("202", "202"),
            ("2021", "2021"),
            ("2021-06", "2021-06"),
            ("20210615", "2021-06-15"),
            ("2021166", "2021-166"),
            ("2021005", "2021-005"),
            ("2021W23", "2021-W23"),
            ("2021W237", "2021-W23-7"),
            ("2021-34", "2021-34"),
            ("T10", "T10"),
            ("T1030", "T10:30"),
            ("T103045", "T10:30:45"),
            ("10:30", "T10:30"),
            ("T10,5", "T10.5"),
            ("T1030,5-0500", "T10:30.5-05:00"),
            ("T10:30:45,250Z", "T10:30:45.250Z"),
            ("T10+00:00", "T10Z"),
            ("T10−05", "T10-05:00"),
            ("2021-06-15T10:30", "2021-06-15T10:30:00.0000000"),
            ("20210615T103045Z", "2021-06-15T10:30:45.0000000Z"),
            ("2021-06-15T10:30+02:00", "2021-06-15T08:30:00.0000000Z"),
            ("2021-06-15T10:30:15.12345678", "2021-06-15T10:30:15.1234567"),
        ],
    )
    def test_canonical(self, text, expected):
        assert format_iso8601(parse_iso8601(text)) == expected

    @pytest.mark.parametrize(
        "text",
        ["19", "199", "1999", "1999-12", "1999-12-31", "1999-365", "1999-W52",
         "1999-W52-5", "1999-40", "T23", "T23:59", "T23:59:60", "T23:59:59.5-03:30",
         "1999-12-31T23:59:59.9999999Z"],
    )
    def test_canonical_is_stable(self, text):
        assert format_iso8601(parse_iso8601(text)) == text

    def test_canonical_reparses_to_equal_value(self):
        for text in ["2009W011", "T1030+0100", "2021166T10"]:
            value = parse_iso8601(text)
            assert parse_iso8601(format_iso8601(value)) == value

    def test_rejects_other_types(self):
        with pytest.raises(TypeError, match="expected Date, Time, or DateTime"):
            format_iso8601("2021")


class TestFormatDay:
    """Tests for rendering absolute day numbers."""

    def test_epoch(self):
        assert format_day(1) == "0001-01-01"

    def test_range_bounds(self):
        week = parse_iso8601("2009-W01")
        assert format_day(week.inclusive_start) == "2008-12-29"
        assert format_day(week.exclusive_end) == "2009-01-05"

    def test_matches_date_constructor(self):
        assert format_day(Date(2021, 6, 15).inclusive_start) == "2021-06-15"


class TestValueStrings:
    """str() of each value type is its canonical form."""

    def test_date_str(self):
        assert str(Date(2021, 6)) == format_iso8601(Date(2021, 6))

    def test_time_str(self):
        assert str(Time(10, 30)) == format_iso8601(Time(10, 30))
