"""Tests for the NMEA time and date field conversions."""

from datetime import datetime, timedelta, timezone

from nmea_codec.timefields import (
    format_date,
    format_time,
    parse_datetime,
    parse_time,
)

STAMP = datetime(2025, 7, 4, 12, 34, 56, 789000, tzinfo=timezone.utc)


def _clock_at(*args: int):
    return lambda: datetime(*args, tzinfo=timezone.utc)


class TestFormatTime:
    """Tests for format_time function."""

    def test_without_milliseconds(self):
        assert format_time(STAMP) == "123456"

    def test_with_milliseconds(self):
        assert format_time(STAMP, include_ms=True) == "123456.789"

    def test_milliseconds_zero_padded(self):
        stamp = STAMP.replace(microsecond=7000)
        assert format_time(stamp, include_ms=True) == "123456.007"

    def test_converts_to_utc(self):
        stamp = datetime(2025, 7, 4, 14, 34, 56, tzinfo=timezone(timedelta(hours=2)))
        assert format_time(stamp) == "123456"

    def test_naive_datetime_is_utc(self):
        assert format_time(datetime(2025, 7, 4, 1, 2, 3)) == "010203"


class TestFormatDate:
    """Tests for format_date function."""

    def test_day_month_two_digit_year(self):
        assert format_date(STAMP) == "040725"

    def test_year_modulo_hundred(self):
        assert format_date(datetime(2100, 1, 9, tzinfo=timezone.utc)) == "090100"

    def test_uses_utc_date(self):
        stamp = datetime(2025, 7, 5, 1, 0, tzinfo=timezone(timedelta(hours=3)))
        assert format_date(stamp) == "040725"


class TestParseTime:
    """Tests for parse_time function."""

    def test_combines_time_with_clock_date(self):
        result = parse_time("123519", clock=_clock_at(2025, 1, 2, 23, 0))
        assert result == datetime(2025, 1, 2, 12, 35, 19, tzinfo=timezone.utc)

    def test_fractional_seconds(self):
        result = parse_time("123456.789", clock=_clock_at(2025, 1, 2))
        assert result is not None
        assert result.second == 56
        assert result.microsecond == 789000

    def test_empty_field_is_none(self):
        assert parse_time("") is None

    def test_malformed_field_is_none(self):
        assert parse_time("12ab19") is None

    def test_date_depends_on_clock(self):
        before = parse_time("000001", clock=_clock_at(2025, 1, 1, 23, 59, 59))
        after = parse_time("000001", clock=_clock_at(2025, 1, 2, 0, 0, 2))
        assert before is not None and after is not None
        assert before.time() == after.time()
        assert after - before == timedelta(days=1)

    def test_default_clock_uses_today(self):
        result = parse_time("000000")
        assert result is not None
        assert result.date() == datetime.now(timezone.utc).date()


class TestParseDatetime:
    """Tests for parse_datetime function."""

    def test_combines_date_and_time(self):
        result = parse_datetime("230394", "123519")
        assert result == datetime(2094, 3, 23, 12, 35, 19, tzinfo=timezone.utc)

    def test_fractional_seconds(self):
        result = parse_datetime("040725", "123456.789")
        assert result == STAMP

    def test_two_digit_year_has_no_pivot(self):
        result = parse_datetime("010199", "000000")
        assert result is not None and result.year == 2099

    def test_empty_date_is_none(self):
        assert parse_datetime("", "123519") is None

    def test_empty_time_is_none(self):
        assert parse_datetime("230394", "") is None

    def test_invalid_calendar_date_is_none(self):
        assert parse_datetime("320194", "123519") is None
