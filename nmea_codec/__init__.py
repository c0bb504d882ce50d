"""NMEA 0183 encoder and decoder for GGA and RMC sentences."""

from nmea_codec.checksum import calculate_checksum, format_checksum, validate_checksum
from nmea_codec.clock import Clock, utc_now
from nmea_codec.decoder import decode
from nmea_codec.encoder import KNOTS_PER_METER_PER_SECOND, encode_gga, encode_rmc
from nmea_codec.errors import (
    ChecksumMismatchError,
    Error,
    FrameError,
    UnsupportedSentenceTypeError,
)
from nmea_codec.types import (
    EncodeOptions,
    GGAPacket,
    Packet,
    RMCPacket,
    TrackPosition,
)

__all__ = [
    "ChecksumMismatchError",
    "Clock",
    "EncodeOptions",
    "Error",
    "FrameError",
    "GGAPacket",
    "KNOTS_PER_METER_PER_SECOND",
    "Packet",
    "RMCPacket",
    "TrackPosition",
    "UnsupportedSentenceTypeError",
    "calculate_checksum",
    "decode",
    "encode_gga",
    "encode_rmc",
    "format_checksum",
    "utc_now",
    "validate_checksum",
]
