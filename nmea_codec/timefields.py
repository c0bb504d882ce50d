"""Conversion between timestamps and the NMEA ``hhmmss[.sss]`` time and
``ddmmyy`` date fields.

All rendering and parsing happens in UTC. Two-digit years are always mapped to
2000-2099; there is no pivot year.
"""

from datetime import datetime, timedelta, timezone

from nmea_codec.clock import Clock, utc_now

__all__ = (
    "as_utc",
    "format_date",
    "format_time",
    "parse_datetime",
    "parse_time",
)


def as_utc(dt: datetime) -> datetime:
    """Returns the given datetime in UTC. Naive datetimes are assumed to be
    in UTC already.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_time(dt: datetime, include_ms: bool = False) -> str:
    """Formats the UTC time of day of a timestamp as an NMEA time field.

    Args:
        dt: the timestamp to format
        include_ms: whether to append a '.' and three digits of milliseconds

    Example:
        >>> format_time(datetime(2025, 7, 4, 12, 34, 56, 789000), True)
        '123456.789'
    """
    dt = as_utc(dt)
    result = f"{dt.hour:02}{dt.minute:02}{dt.second:02}"
    if include_ms:
        result += f".{dt.microsecond // 1000:03}"
    return result


def format_date(dt: datetime) -> str:
    """Formats the UTC date of a timestamp as an NMEA ``ddmmyy`` field."""
    dt = as_utc(dt)
    return f"{dt.day:02}{dt.month:02}{dt.year % 100:02}"


def _parse_time_of_day(value: str) -> timedelta:
    hours = int(value[0:2])
    minutes = int(value[2:4])
    seconds = float(value[4:])
    return timedelta(hours=hours, minutes=minutes, seconds=seconds)


def parse_time(value: str, *, clock: Clock = utc_now) -> datetime | None:
    """Parses an NMEA ``hhmmss[.sss]`` time field.

    The field carries no date, so the date is taken from the given clock
    (today in UTC by default). Decoding the same sentence on both sides of a
    UTC midnight therefore yields different dates for the same time of day;
    callers should only rely on the time-of-day part of the result.

    Args:
        value: the raw time field
        clock: source of the current date

    Returns:
        a timezone-aware UTC datetime, or None if the field is empty or
        malformed
    """
    if not value:
        return None

    try:
        time_of_day = _parse_time_of_day(value)
    except (ValueError, OverflowError):
        return None

    today = as_utc(clock())
    midnight = datetime(today.year, today.month, today.day, tzinfo=timezone.utc)
    return midnight + time_of_day


def parse_datetime(date_value: str, time_value: str) -> datetime | None:
    """Combines an NMEA ``ddmmyy`` date field and an ``hhmmss[.sss]`` time
    field into a single UTC timestamp.

    Args:
        date_value: the raw date field; the year is interpreted as 2000 + yy
        time_value: the raw time field

    Returns:
        a timezone-aware UTC datetime, or None if either field is empty or
        malformed
    """
    if not date_value or not time_value:
        return None

    try:
        day = int(date_value[0:2])
        month = int(date_value[2:4])
        year = int(date_value[4:]) + 2000
        date = datetime(year, month, day, tzinfo=timezone.utc)
        return date + _parse_time_of_day(time_value)
    except (ValueError, OverflowError):
        return None
