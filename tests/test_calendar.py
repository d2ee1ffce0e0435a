"""Tests for calendar arithmetic."""

from __future__ import annotations

from datetime import date

import pytest

from isospan._internal.calendar import (
    add_months,
    century_range,
    days_in_month,
    days_in_year,
    decade_range,
    is_leap_year,
    iso_week_one_start,
    iso_weekday,
    month_range,
    ordinal_day_range,
    ordinal_to_ymd,
    sub_year_range,
    week_day_range,
    week_range,
    year_range,
    ymd_to_ordinal,
)
from isospan._internal.constants import (
    MAX_SUB_YEAR_CODE,
    MIN_SUB_YEAR_CODE,
    SUB_YEAR_GROUPINGS,
    UNSUPPORTED_SUB_YEAR_CODES,
)
from isospan.errors import RangeError, UnsupportedError


class TestLeapYears:
    """Tests for leap year rules."""

    def test_divisible_by_four(self):
        assert is_leap_year(2024) is True
        assert is_leap_year(2023) is False

    def test_century_rule(self):
        """Centuries are leap years only when divisible by 400."""
        assert is_leap_year(1900) is False
        assert is_leap_year(2000) is True
        assert is_leap_year(0) is True

    def test_days_in_month(self):
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2021, 4) == 30
        assert days_in_month(2021, 12) == 31

    def test_days_in_month_rejects_bad_month(self):
        with pytest.raises(RangeError, match="month must be between 1 and 12"):
            days_in_month(2021, 13)

    def test_days_in_year(self):
        assert days_in_year(2020) == 366
        assert days_in_year(2021) == 365


class TestOrdinals:
    """Tests for absolute day numbers."""

    def test_epoch(self):
        assert ymd_to_ordinal(1, 1, 1) == 1
        assert ordinal_to_ymd(1) == (1, 1, 1)

    def test_year_zero(self):
        assert ymd_to_ordinal(0, 12, 31) == 0
        assert ordinal_to_ymd(0) == (0, 12, 31)
        assert ymd_to_ordinal(0, 1, 1) == -365
        assert ordinal_to_ymd(-365) == (0, 1, 1)

    @pytest.mark.parametrize(
        "ymd",
        [(1, 12, 31), (4, 2, 29), (100, 3, 1), (400, 12, 31), (1970, 1, 1),
         (2000, 2, 29), (2021, 6, 15), (9999, 12, 31)],
    )
    def test_matches_proleptic_gregorian(self, ymd):
        ordinal = date(*ymd).toordinal()
        assert ymd_to_ordinal(*ymd) == ordinal
        assert ordinal_to_ymd(ordinal) == ymd

    def test_iso_weekday(self):
        assert iso_weekday(1) == 1  # 0001-01-01 was a Monday
        assert iso_weekday(ymd_to_ordinal(2021, 6, 15)) == 2
        assert iso_weekday(ymd_to_ordinal(2021, 6, 20)) == 7

    def test_add_months(self):
        assert add_months(2021, 1, 1) == (2021, 2)
        assert add_months(2021, 12, 1) == (2022, 1)
        assert add_months(2021, 3, -3) == (2020, 12)


class TestIsoWeeks:
    """Tests for ISO week numbering."""

    def test_week_one_starts_in_previous_year(self):
        assert ordinal_to_ymd(iso_week_one_start(2009)) == (2008, 12, 29)
        assert ordinal_to_ymd(iso_week_one_start(2015)) == (2014, 12, 29)

    def test_week_one_starts_after_new_year(self):
        assert ordinal_to_ymd(iso_week_one_start(2021)) == (2021, 1, 4)

    def test_week_range_is_seven_days(self):
        start, end = week_range(2021, 23)
        assert ordinal_to_ymd(start) == (2021, 6, 7)
        assert end - start == 7

    def test_week_53_in_long_year(self):
        start, _ = week_range(2020, 53)
        assert ordinal_to_ymd(start) == (2020, 12, 28)

    def test_week_53_starting_next_year(self):
        with pytest.raises(RangeError, match="week 53 does not exist in 2021"):
            week_range(2021, 53)

    @pytest.mark.parametrize("week", [0, 54])
    def test_week_out_of_range(self, week):
        with pytest.raises(RangeError, match="week must be between 1 and 53"):
            week_range(2021, week)

    def test_week_day(self):
        start, end = week_day_range(2009, 1, 1)
        assert ordinal_to_ymd(start) == (2008, 12, 29)
        assert end - start == 1

    @pytest.mark.parametrize("week_day", [0, 8])
    def test_week_day_out_of_range(self, week_day):
        with pytest.raises(RangeError, match="week_day must be between 1 and 7"):
            week_day_range(2021, 1, week_day)


class TestRanges:
    """Tests for the half-open range of each granularity."""

    def test_century(self):
        start, end = century_range(20)
        assert ordinal_to_ymd(start) == (2000, 1, 1)
        assert ordinal_to_ymd(end) == (2100, 1, 1)

    def test_decade(self):
        start, end = decade_range(202)
        assert ordinal_to_ymd(start) == (2020, 1, 1)
        assert ordinal_to_ymd(end) == (2030, 1, 1)

    def test_year(self):
        start, end = year_range(2020)
        assert end - start == 366

    def test_year_out_of_range(self):
        with pytest.raises(RangeError, match="year must be between 0 and 9999"):
            year_range(10000)

    def test_december_rolls_into_next_year(self):
        start, end = month_range(2021, 12)
        assert ordinal_to_ymd(start) == (2021, 12, 1)
        assert ordinal_to_ymd(end) == (2022, 1, 1)

    def test_ordinal_day_leap(self):
        start, _ = ordinal_day_range(2020, 366)
        assert ordinal_to_ymd(start) == (2020, 12, 31)

    def test_ordinal_day_beyond_year(self):
        with pytest.raises(RangeError, match="ordinal day must be between 1 and 365"):
            ordinal_day_range(2021, 366)


class TestSubYearRanges:
    """Tests for sub-year grouping codes."""

    @pytest.mark.parametrize(
        "code, start, end",
        [
            (25, (2021, 3, 1), (2021, 6, 1)),
            (26, (2021, 6, 1), (2021, 9, 1)),
            (27, (2021, 9, 1), (2021, 12, 1)),
            (28, (2021, 12, 1), (2022, 3, 1)),
            (29, (2020, 9, 1), (2020, 12, 1)),
            (30, (2021, 12, 1), (2022, 3, 1)),
            (31, (2021, 3, 1), (2021, 6, 1)),
            (32, (2021, 6, 1), (2021, 9, 1)),
            (33, (2021, 1, 1), (2021, 4, 1)),
            (34, (2021, 4, 1), (2021, 7, 1)),
            (35, (2021, 7, 1), (2021, 10, 1)),
            (36, (2021, 10, 1), (2022, 1, 1)),
            (37, (2021, 1, 1), (2021, 5, 1)),
            (38, (2021, 5, 1), (2021, 9, 1)),
            (39, (2021, 9, 1), (2022, 1, 1)),
            (40, (2021, 1, 1), (2021, 7, 1)),
            (41, (2021, 7, 1), (2022, 1, 1)),
        ],
    )
    def test_grouping(self, code, start, end):
        first, after = sub_year_range(2021, code)
        assert ordinal_to_ymd(first) == start
        assert ordinal_to_ymd(after) == end

    @pytest.mark.parametrize("code", [21, 22, 23, 24])
    def test_ambiguous_seasons_unsupported(self, code):
        with pytest.raises(UnsupportedError, match="hemisphere is ambiguous"):
            sub_year_range(2021, code)

    @pytest.mark.parametrize("code", [0, 20, 42, 99])
    def test_unknown_code(self, code):
        with pytest.raises(RangeError, match="sub-year grouping must be between 21 and 41"):
            sub_year_range(2021, code)

    def test_code_bounds_cover_every_grouping(self):
        codes = set(SUB_YEAR_GROUPINGS) | UNSUPPORTED_SUB_YEAR_CODES
        assert codes == set(range(MIN_SUB_YEAR_CODE, MAX_SUB_YEAR_CODE + 1))

    def test_southern_spring_before_year_0(self):
        with pytest.raises(RangeError, match="starts before year 0000"):
            sub_year_range(0, 29)
        start, _ = sub_year_range(0, 30)
        assert ordinal_to_ymd(start) == (0, 12, 1)
