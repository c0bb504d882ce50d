"""Entry point for decoding NMEA 0183 sentences into packets."""

import logging

from nmea_codec.checksum import calculate_checksum, split_frame
from nmea_codec.clock import Clock, utc_now
from nmea_codec.errors import (
    ChecksumMismatchError,
    FrameError,
    UnsupportedSentenceTypeError,
)
from nmea_codec.fields import split_fields, split_identifier
from nmea_codec.gga import parse_gga_fields
from nmea_codec.rmc import parse_rmc_fields
from nmea_codec.types import Packet

__all__ = ("decode",)

log = logging.getLogger(__name__)


def _verify_checksum(content: str, provided: str) -> None:
    calculated = calculate_checksum(content)
    try:
        matches = calculated == int(provided, 16)
    except ValueError:
        matches = False

    if not matches:
        raise ChecksumMismatchError(provided, calculated)


def decode(
    sentence: str, validate_checksum: bool = False, *, clock: Clock = utc_now
) -> Packet:
    """Decode a single NMEA sentence into a GGA or RMC packet.

    The sentence is split at its last '*'; the part between '$' and that '*'
    is tokenized on commas. The first token holds the two-letter talker ID
    followed by the sentence identifier, which selects the decoder.

    Individual fields are never validated: empty or malformed numeric fields
    decode to NaN (floats) or None (integers) so that incomplete fixes still
    produce a packet.

    Args:
        sentence: One NMEA sentence without line terminator, e.g.
            ``"$GPGGA,...*47"``
        validate_checksum: whether to verify the transmitted checksum against
            the payload. Decoding works the same either way.
        clock: source of the current date, used to complete GGA times

    Returns:
        a ``GGAPacket`` or an ``RMCPacket``

    Raises:
        FrameError: if the sentence does not start with '$' or has no '*'
        ChecksumMismatchError: if validation was requested and the checksum
            does not match
        UnsupportedSentenceTypeError: if the sentence is neither GGA nor RMC
    """
    parts = split_frame(sentence)
    if parts is None:
        log.debug("Rejected malformed NMEA frame: %r", sentence)
        raise FrameError(sentence)

    content, provided = parts
    if validate_checksum:
        _verify_checksum(content, provided)

    fields = split_fields(content)
    talker_id, sentence_id = split_identifier(fields[0])

    if sentence_id == "GGA":
        return parse_gga_fields(fields, talker_id, clock=clock)
    elif sentence_id == "RMC":
        return parse_rmc_fields(fields, talker_id)

    log.debug("Unsupported NMEA sentence type: %r", sentence_id)
    raise UnsupportedSentenceTypeError(sentence_id)
