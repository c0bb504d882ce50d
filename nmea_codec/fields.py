"""NMEA field parsing utilities.

This module provides utilities for parsing individual fields from NMEA sentences.
NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). The decoder never fails because of a single bad field: floats
degrade to NaN and integers and strings degrade to None.
"""

import math

__all__ = (
    "field_at",
    "parse_float_field",
    "parse_int_field",
    "parse_string_field",
    "split_fields",
    "split_identifier",
)


def split_fields(content: str) -> list[str]:
    """Split the payload of a sentence (without '$' and checksum) into fields.

    Example:
        >>> split_fields("GPGGA,123519,,N")
        ['GPGGA', '123519', '', 'N']
    """
    return content.split(",")


def split_identifier(identifier: str) -> tuple[str, str]:
    """Split the first field of a sentence into talker ID and sentence ID.

    The talker ID is the first two characters; the sentence ID is whatever
    follows. Short identifiers are not rejected here, they simply produce an
    empty or truncated sentence ID that the dispatcher will refuse.

    Example:
        >>> split_identifier("GPRMC")
        ('GP', 'RMC')
    """
    return identifier[:2], identifier[2:]


def field_at(fields: list[str], index: int) -> str:
    """Return the field at the given index, or an empty string if the
    sentence is too short to contain it.
    """
    return fields[index] if index < len(fields) else ""


def parse_float_field(value: str) -> float:
    """Parse a string field to float, returning NaN if empty or invalid.

    Args:
        value: String value from an NMEA field

    Returns:
        Parsed float value, or NaN if the field is empty or unparseable

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("")
        nan
    """
    if not value:
        return math.nan
    try:
        return float(value)
    except ValueError:
        return math.nan


def parse_int_field(value: str) -> int | None:
    """Parse a string field to int, returning None if empty or invalid.

    Used for integer values like satellite count or fix quality indicators.

    Example:
        >>> parse_int_field("08")
        8
        >>> parse_int_field("")
        None
    """
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_string_field(value: str) -> str | None:
    """Parse a string field, returning None if empty."""
    if not value:
        return None
    return value
