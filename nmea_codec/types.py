"""NMEA data types for decoded sentences and encoder input.

Design Decisions:
    1. Tagged union, not a hierarchy: ``Packet`` is ``GGAPacket | RMCPacket``
       and the literal ``type`` attribute tells the two apart. The set of
       sentence types is closed; there is no base class to extend.

    2. Missing data is not an error: float fields hold NaN when the raw field
       is empty or malformed, so a void fix still produces a record. Integer
       fields use None for the same purpose since integers have no NaN.

    3. Optional fields are always present as attributes and hold None when the
       corresponding raw field is empty.

    4. All records are frozen; decoding and encoding never mutate their input.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, Union

__all__ = ("EncodeOptions", "GGAPacket", "Packet", "RMCPacket", "TrackPosition")


@dataclass(frozen=True)
class GGAPacket:
    """Decoded GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        talker_id: Two-letter source prefix (e.g., "GP").

        time: UTC time of the fix. The date part is synthesized from the
            current date because GGA carries no date. None if the field
            was empty or malformed.

        latitude: Latitude in decimal degrees, positive=North. NaN if empty.

        longitude: Longitude in decimal degrees, positive=East. NaN if empty.

        fix_type: GPS fix quality indicator (0 = invalid, 1 = GPS fix,
            2 = DGPS fix, 4 = RTK fixed, 5 = RTK float, 6 = dead reckoning).
            None if empty.

        satellites_in_view: Number of satellites used in the fix. None if
            empty.

        horizontal_dilution: Horizontal dilution of precision. NaN if empty.

        altitude_meters: Altitude above mean sea level in meters. NaN if empty.

        geoidal_separation: Height of the geoid above the WGS84 ellipsoid in
            meters. NaN if empty.

        differential_age: Age of differential corrections in seconds, or None
            if the field is empty.

        differential_ref_station: Differential reference station ID, or None
            if the field is empty.
    """

    talker_id: str
    time: datetime | None
    latitude: float
    longitude: float
    fix_type: int | None
    satellites_in_view: int | None
    horizontal_dilution: float
    altitude_meters: float
    geoidal_separation: float
    differential_age: float | None = None
    differential_ref_station: str | None = None
    sentence_id: Literal["GGA"] = field(default="GGA", init=False)
    type: Literal["GGA"] = field(default="GGA", init=False)


@dataclass(frozen=True)
class RMCPacket:
    """Decoded RMC (Recommended Minimum Navigation Information) sentence.

    Attributes:
        talker_id: Two-letter source prefix (e.g., "GP").

        datetime: UTC date and time of the fix, built from the date and time
            fields with the year read as 2000 + yy. None if either field was
            empty or malformed.

        status: "A" = active (valid), "V" = void. Does not affect whether the
            remaining fields are parsed.

        latitude: Latitude in decimal degrees, positive=North. NaN if empty.

        longitude: Longitude in decimal degrees, positive=East. NaN if empty.

        speed_knots: Speed over ground in knots. NaN if empty.

        track_true: Track angle in degrees relative to true north. NaN if empty.

        variation: Magnetic variation in degrees. NaN if empty.

        variation_pole: Direction of the magnetic variation, "E" or "W", or ""
            if empty.

        faa_mode: FAA mode indicator (A = autonomous, D = differential,
            E = estimated, N = not valid), or "" if absent.
    """

    talker_id: str
    datetime: datetime | None
    status: str
    latitude: float
    longitude: float
    speed_knots: float
    track_true: float
    variation: float
    variation_pole: str
    faa_mode: str
    sentence_id: Literal["RMC"] = field(default="RMC", init=False)
    type: Literal["RMC"] = field(default="RMC", init=False)


Packet = Union[GGAPacket, RMCPacket]
"""Any decoded sentence; discriminate on the ``type`` attribute."""


@dataclass(frozen=True)
class TrackPosition:
    """A position to be encoded as NMEA sentences.

    Attributes:
        latitude: Latitude in decimal degrees, positive=North.
        longitude: Longitude in decimal degrees, positive=East.
        altitude: Altitude above mean sea level in meters.
        speed: Ground speed in meters per second.
        heading: Track angle in degrees relative to true north.
        timestamp: Time of the position. Naive datetimes are taken as UTC.
    """

    latitude: float
    longitude: float
    altitude: float
    speed: float
    heading: float
    timestamp: datetime | None = None


@dataclass(frozen=True)
class EncodeOptions:
    """Options controlling how a ``TrackPosition`` is encoded.

    Attributes:
        timestamp: Overrides ``TrackPosition.timestamp`` when set.
        include_ms: Whether the time field carries milliseconds.
    """

    timestamp: datetime | None = None
    include_ms: bool = False
