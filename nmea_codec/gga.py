"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) provides position fix information
including coordinates, altitude, fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
           |      |        | |         | | |  |   |     | |    | ||
           |      |        | |         | | |  |   |     | |    | |+-- DGPS station ID
           |      |        | |         | | |  |   |     | |    | +-- DGPS age (s)
           |      |        | |         | | |  |   |     | +----+-- Geoid separation
           |      |        | |         | | |  |   +-----+-- Altitude above MSL
           |      |        | |         | | |  +-- HDOP (horizontal dilution)
           |      |        | |         | | +-- Number of satellites
           |      |        | |         | +-- Fix quality (0-6)
           |      |        | +---------+-- Longitude + E/W
           |      +--------+-- Latitude + N/S
           +-- UTC time (hhmmss[.sss])
"""

from nmea_codec.clock import Clock, utc_now
from nmea_codec.coordinates import parse_latitude, parse_longitude
from nmea_codec.fields import (
    field_at,
    parse_float_field,
    parse_int_field,
    parse_string_field,
)
from nmea_codec.timefields import parse_time
from nmea_codec.types import GGAPacket

__all__ = ("parse_gga_fields",)


def _parse_optional_float(value: str) -> float | None:
    return parse_float_field(value) if value else None


def parse_gga_fields(
    fields: list[str], talker_id: str, *, clock: Clock = utc_now
) -> GGAPacket:
    """Construct a GGAPacket from the comma-separated fields of a sentence.

    Maps NMEA field indices to GGAPacket attributes:
        fields[1]  -> time (hhmmss[.sss], date taken from the clock)
        fields[2]  -> latitude (DDMM.MMMM format)
        fields[3]  -> latitude direction (N/S)
        fields[4]  -> longitude (DDDMM.MMMM format)
        fields[5]  -> longitude direction (E/W)
        fields[6]  -> fix_type (0-6)
        fields[7]  -> satellites_in_view
        fields[8]  -> horizontal_dilution
        fields[9]  -> altitude_meters
        fields[11] -> geoidal_separation
        fields[13] -> differential_age (optional)
        fields[14] -> differential_ref_station (optional)

    Fields missing from a short sentence are treated as empty.

    Args:
        fields: List of NMEA fields, starting with the identifier field
        talker_id: Two-letter talker ID taken from the identifier field
        clock: Source of the date attached to the time of day

    Returns:
        The decoded packet
    """
    return GGAPacket(
        talker_id=talker_id,
        time=parse_time(field_at(fields, 1), clock=clock),
        latitude=parse_latitude(field_at(fields, 2), field_at(fields, 3)),
        longitude=parse_longitude(field_at(fields, 4), field_at(fields, 5)),
        fix_type=parse_int_field(field_at(fields, 6)),
        satellites_in_view=parse_int_field(field_at(fields, 7)),
        horizontal_dilution=parse_float_field(field_at(fields, 8)),
        altitude_meters=parse_float_field(field_at(fields, 9)),
        geoidal_separation=parse_float_field(field_at(fields, 11)),
        differential_age=_parse_optional_float(field_at(fields, 13)),
        differential_ref_station=parse_string_field(field_at(fields, 14)),
    )
