"""Tests for the Time class and UtcOffset."""

from __future__ import annotations

from decimal import Decimal

import pytest

from isospan import Time, UtcOffset
from isospan.errors import FormatError, OffsetError, RangeError

HOUR = 36_000_000_000
MINUTE = 600_000_000
SECOND = 10_000_000


class TestTimeConstruction:
    """Tests for building Times."""

    def test_hour_only(self):
        t = Time(10)
        assert t.hour == 10
        assert t.minute is None
        assert t.second is None
        assert t.ticks == 10 * HOUR

    def test_hour_minute_second(self):
        t = Time(10, 30, 45)
        assert (t.hour, t.minute, t.second) == (10, 30, 45)
        assert t.ticks == 10 * HOUR + 30 * MINUTE + 45 * SECOND

    def test_fractional_hour(self):
        assert Time(Decimal("10.5")).ticks == Time(10, 30).ticks

    def test_fractional_minute(self):
        assert Time(10, Decimal("30.5")).ticks == Time(10, 30, 30).ticks

    def test_fraction_kept_as_supplied(self):
        t = Time(10, 30, Decimal("45.250"))
        assert t.second == Decimal("45.250")
        assert str(t) == "T10:30:45.250"

    def test_ticks_truncate(self):
        assert Time(0, 0, Decimal("0.12345678")).ticks == 1_234_567
        assert Time(0, 0, Decimal("0.00000009")).ticks == 0

    def test_float_and_string_fields(self):
        assert Time(10.5) == Time(10, 30)
        assert Time("10.5") == Time(10, 30)

    def test_end_of_day(self):
        assert Time(24).ticks == 24 * HOUR
        assert Time(24, 0, 0).ticks == 24 * HOUR

    def test_leap_second(self):
        assert Time(23, 59, 60).ticks == 24 * HOUR
        assert Time(23, 59, Decimal("60.5")).second == Decimal("60.5")


class TestTimeValidation:
    """Tests for out-of-range and malformed Times."""

    def test_hour_25(self):
        with pytest.raises(RangeError, match="hour must be between 0 and 24, got 25"):
            Time(25)

    def test_minute_60(self):
        with pytest.raises(RangeError, match="minute must be between 0 and 59"):
            Time(10, 60)

    def test_second_61(self):
        with pytest.raises(RangeError, match="second must be between 0 and 60"):
            Time(10, 30, 61)

    def test_hour_24_with_minutes(self):
        with pytest.raises(RangeError, match="hour 24 may only be followed by zero"):
            Time(24, 30)

    def test_fractional_hour_with_minute(self):
        with pytest.raises(RangeError, match="hour must be integral"):
            Time(Decimal("10.5"), 30)

    def test_fractional_minute_with_second(self):
        with pytest.raises(RangeError, match="minute must be integral"):
            Time(10, Decimal("30.5"), 10)

    def test_integral_decimal_accepted(self):
        assert Time(Decimal("10.0"), 30) == Time(10, 30)

    def test_second_without_minute(self):
        with pytest.raises(ValueError, match="second requires a minute"):
            Time(10, None, 5)

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            Time(True)


class TestTimeOffsets:
    """Tests for zone-aware Times."""

    def test_naive(self):
        t = Time(10)
        assert t.is_naive
        assert not t.is_aware
        assert t.offset is None
        assert t.offset_minutes is None

    def test_offset_shifts_to_utc(self):
        t = Time(10, offset=UtcOffset(60))
        assert t.is_aware
        assert t.offset_minutes == 60
        assert t.ticks == 9 * HOUR

    def test_negative_ticks_after_shift(self):
        t = Time(0, 30, offset=UtcOffset(60))
        assert t.ticks == -30 * MINUTE

    def test_naive_compares_as_utc(self):
        assert Time(10) == Time(10, offset=UtcOffset.utc())

    def test_same_instant_different_zones(self):
        assert Time(10, offset=UtcOffset(60)) == Time(4, offset=UtcOffset(-300))


class TestTimeComparison:
    """Tests for Time ordering operators."""

    def test_ordering(self):
        assert Time(10) < Time(11)
        assert Time(11) > Time(10, 59, 59)
        assert Time(10) <= Time(10, 0)
        assert Time(10) >= Time(10, 0, 0)

    def test_ordering_by_utc(self):
        assert Time(10, offset=UtcOffset(120)) < Time(9)

    def test_hash_follows_equality(self):
        assert hash(Time(10)) == hash(Time(10, 0, 0))

    def test_not_orderable_against_other_types(self):
        with pytest.raises(TypeError):
            Time(10) < 10  # noqa: B015


class TestTimeFormatting:
    """Tests for canonical Time strings."""

    @pytest.mark.parametrize(
        "time, expected",
        [
            (Time(9), "T09"),
            (Time(10, 30), "T10:30"),
            (Time(9, 5, 7), "T09:05:07"),
            (Time(Decimal("10.5")), "T10.5"),
            (Time(9, 5, Decimal("7.25")), "T09:05:07.25"),
            (Time(10, offset=UtcOffset.utc()), "T10Z"),
            (Time(10, 30, offset=UtcOffset(-330)), "T10:30-05:30"),
            (Time(10, offset=UtcOffset(60)), "T10+01:00"),
        ],
    )
    def test_to_iso_format(self, time, expected):
        assert time.to_iso_format() == expected
        assert str(time) == expected

    def test_repr(self):
        assert repr(Time(10, 30)) == "Time('T10:30')"


class TestUtcOffset:
    """Tests for UtcOffset."""

    def test_utc(self):
        off = UtcOffset.utc()
        assert off.is_utc
        assert str(off) == "Z"

    def test_from_components(self):
        off = UtcOffset.from_components(-1, 5, 30)
        assert off.total_minutes == -330
        assert off.hours == -5
        assert off.minutes == 30
        assert str(off) == "-05:30"

    def test_equality(self):
        assert UtcOffset(60) == UtcOffset.from_components(1, 1)
        assert UtcOffset(60) != UtcOffset(-60)
        assert repr(UtcOffset(60)) == "UtcOffset(60)"

    def test_hour_too_large(self):
        with pytest.raises(OffsetError, match="offset hour must be at most 24"):
            UtcOffset.from_components(1, 25)

    def test_minute_too_large(self):
        with pytest.raises(OffsetError, match="offset minute must be at most 59"):
            UtcOffset.from_components(1, 5, 60)

    def test_magnitude_over_a_day(self):
        with pytest.raises(OffsetError):
            UtcOffset.from_components(1, 24, 30)

    def test_offset_error_is_format_and_range_error(self):
        with pytest.raises(FormatError):
            UtcOffset(1441)
        with pytest.raises(RangeError):
            UtcOffset(-1441)
