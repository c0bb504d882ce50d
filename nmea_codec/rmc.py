"""RMC sentence decoder.

RMC (Recommended Minimum Navigation Information) carries the essentials for
navigation: date and time, position, speed and course over ground.

RMC Sentence Format:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W,A*XX
           |      | |        | |         | |     |     |      |     | |
           |      | |        | |         | |     |     |      |     | +-- FAA mode
           |      | |        | |         | |     |     |      +-----+-- Variation + E/W
           |      | |        | |         | |     |     +-- Date (ddmmyy)
           |      | |        | |         | |     +-- Track (true north, degrees)
           |      | |        | |         | +-- Speed over ground (knots)
           |      | |        | +---------+-- Longitude + E/W
           |      | +--------+-- Latitude + N/S
           |      +-- Status (A=active, V=void)
           +-- UTC time (hhmmss[.sss])

A void status does not stop the remaining fields from being decoded; receivers
without a fix usually leave them empty, which yields NaN values.
"""

from nmea_codec.coordinates import parse_latitude, parse_longitude
from nmea_codec.fields import field_at, parse_float_field
from nmea_codec.timefields import parse_datetime
from nmea_codec.types import RMCPacket

__all__ = ("parse_rmc_fields",)


def parse_rmc_fields(fields: list[str], talker_id: str) -> RMCPacket:
    """Construct an RMCPacket from the comma-separated fields of a sentence.

    Maps NMEA field indices to RMCPacket attributes:
        fields[1], fields[9] -> datetime (hhmmss[.sss] + ddmmyy)
        fields[2]  -> status (A/V)
        fields[3]  -> latitude (DDMM.MMMM format)
        fields[4]  -> latitude direction (N/S)
        fields[5]  -> longitude (DDDMM.MMMM format)
        fields[6]  -> longitude direction (E/W)
        fields[7]  -> speed_knots
        fields[8]  -> track_true
        fields[10] -> variation
        fields[11] -> variation_pole (E/W)
        fields[12] -> faa_mode (NMEA 2.3+)

    Fields missing from a short sentence are treated as empty.
    """
    return RMCPacket(
        talker_id=talker_id,
        datetime=parse_datetime(field_at(fields, 9), field_at(fields, 1)),
        status=field_at(fields, 2),
        latitude=parse_latitude(field_at(fields, 3), field_at(fields, 4)),
        longitude=parse_longitude(field_at(fields, 5), field_at(fields, 6)),
        speed_knots=parse_float_field(field_at(fields, 7)),
        track_true=parse_float_field(field_at(fields, 8)),
        variation=parse_float_field(field_at(fields, 10)),
        variation_pole=field_at(fields, 11),
        faa_mode=field_at(fields, 12),
    )
