"""Conversion between decimal degrees and the NMEA degrees-and-decimal-minutes
representation.

NMEA transmits latitude as ``DDMM.MMMM`` and longitude as ``DDDMM.MMMM``, each
followed by a separate hemisphere field. In decimal degrees, North and East are
positive; South and West are negative.
"""

import math

__all__ = (
    "format_latitude",
    "format_longitude",
    "parse_latitude",
    "parse_longitude",
)


def _format_coordinate(value: float, degree_digits: int) -> str:
    # Non-finite values pass through as text (e.g. "nan")
    degrees, fraction = divmod(abs(value), 1)
    return f"{degrees:0{degree_digits}.0f}{fraction * 60:07.4f}"


def format_latitude(lat: float) -> tuple[str, str]:
    """Formats a latitude in a way that is suitable for NMEA sentences.

    Args:
        lat: the latitude, in decimal degrees

    Returns:
        the formatted coordinate and the sign (North or South)
    """
    sign = "S" if lat < 0 else "N"
    return _format_coordinate(lat, 2), sign


def format_longitude(lon: float) -> tuple[str, str]:
    """Formats a longitude in a way that is suitable for NMEA sentences.

    Args:
        lon: the longitude, in decimal degrees

    Returns:
        the formatted coordinate and the sign (East or West)
    """
    sign = "W" if lon < 0 else "E"
    return _format_coordinate(lon, 3), sign


def _parse_coordinate(
    value: str, direction: str, degree_digits: int, negative: str
) -> float:
    if not value:
        return math.nan

    try:
        degrees = int(value[:degree_digits])
        minutes = float(value[degree_digits:])
    except ValueError:
        return math.nan

    decimal_degrees = degrees + minutes / 60.0
    if direction == negative:
        return -decimal_degrees

    return decimal_degrees


def parse_latitude(value: str, direction: str) -> float:
    """Convert an NMEA latitude (DDMM.MMMM) to decimal degrees.

    The first two characters are the degrees; the remainder is the decimal
    minutes.

    Args:
        value: Latitude in DDMM.MMMM format (e.g., "4807.038")
        direction: Hemisphere indicator ("N" or "S")

    Returns:
        Decimal degrees (negative for South), or NaN if the value is empty
        or malformed

    Example:
        >>> parse_latitude("4807.038", "N")
        48.1173
    """
    return _parse_coordinate(value, direction, 2, "S")


def parse_longitude(value: str, direction: str) -> float:
    """Convert an NMEA longitude (DDDMM.MMMM) to decimal degrees.

    The first three characters are the degrees; the remainder is the decimal
    minutes.

    Args:
        value: Longitude in DDDMM.MMMM format (e.g., "01131.000")
        direction: Hemisphere indicator ("E" or "W")

    Returns:
        Decimal degrees (negative for West), or NaN if the value is empty
        or malformed

    Example:
        >>> parse_longitude("01131.000", "W")
        -11.5166667
    """
    return _parse_coordinate(value, direction, 3, "W")
