"""Encoding of track positions into GGA and RMC sentences.

The encoders emit talker ID ``GP`` and a fixed set of quality fields; they
carry no void-fix representation. Inputs are not range-checked: whatever
numbers the position holds are rendered into the frame as-is.
"""

from datetime import datetime

from nmea_codec.checksum import calculate_checksum, format_checksum
from nmea_codec.clock import Clock, utc_now
from nmea_codec.coordinates import format_latitude, format_longitude
from nmea_codec.timefields import format_date, format_time
from nmea_codec.types import EncodeOptions, TrackPosition

__all__ = ("encode_gga", "encode_rmc", "KNOTS_PER_METER_PER_SECOND")


KNOTS_PER_METER_PER_SECOND = 1.94384
"""Conversion factor from meters per second to knots."""

TALKER_ID = "GP"

#: Fix quality, number of satellites and HDOP reported in encoded GGA sentences
GGA_FIX_FIELDS = ("1", "08", "0.9")

#: Geoidal separation reported in encoded GGA sentences
GGA_GEOIDAL_SEPARATION = "0.0"

#: Status and FAA mode reported in encoded RMC sentences
RMC_STATUS = "A"
RMC_FAA_MODE = "A"

_DEFAULT_OPTIONS = EncodeOptions()


def _resolve_time(
    position: TrackPosition, options: EncodeOptions, clock: Clock
) -> datetime:
    if options.timestamp is not None:
        return options.timestamp
    if position.timestamp is not None:
        return position.timestamp
    return clock()


def _frame(fields: list[str]) -> str:
    """Joins the given fields and wraps them into a checksummed sentence."""
    content = ",".join(fields)
    return f"${content}*{format_checksum(calculate_checksum(content))}"


def encode_gga(
    position: TrackPosition,
    options: EncodeOptions | None = None,
    *,
    clock: Clock = utc_now,
) -> str:
    """Encodes a position as a GGA sentence.

    Parameters:
        position: the position to encode
        options: encoding options; the timestamp in the options takes
            precedence over the one in the position
        clock: source of the current time when neither the options nor the
            position carry a timestamp

    Returns:
        the sentence, without line terminator
    """
    options = options or _DEFAULT_OPTIONS
    time = _resolve_time(position, options, clock)

    return _frame(
        [
            f"{TALKER_ID}GGA",
            format_time(time, options.include_ms),
            *format_latitude(position.latitude),
            *format_longitude(position.longitude),
            *GGA_FIX_FIELDS,
            f"{position.altitude:.1f}",
            "M",
            GGA_GEOIDAL_SEPARATION,
            "M",
            # Age of differential corrections, station ID
            "",
            "",
        ]
    )


def encode_rmc(
    position: TrackPosition,
    options: EncodeOptions | None = None,
    *,
    clock: Clock = utc_now,
) -> str:
    """Encodes a position as an RMC sentence.

    The speed of the position is converted from meters per second to knots.

    Parameters:
        position: the position to encode
        options: encoding options; the timestamp in the options takes
            precedence over the one in the position
        clock: source of the current time when neither the options nor the
            position carry a timestamp

    Returns:
        the sentence, without line terminator
    """
    options = options or _DEFAULT_OPTIONS
    time = _resolve_time(position, options, clock)
    speed_knots = position.speed * KNOTS_PER_METER_PER_SECOND

    return _frame(
        [
            f"{TALKER_ID}RMC",
            format_time(time, options.include_ms),
            RMC_STATUS,
            *format_latitude(position.latitude),
            *format_longitude(position.longitude),
            f"{speed_knots:.1f}",
            f"{position.heading:.1f}",
            format_date(time),
            # Magnetic variation and its direction
            "",
            "",
            RMC_FAA_MODE,
        ]
    )
