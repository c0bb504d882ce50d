"""Error classes raised by the NMEA 0183 decoder.

Only structural problems with a frame are errors. Missing or malformed values
inside an otherwise well-formed sentence degrade to NaN or ``None`` instead,
because incomplete fixes (e.g. a void RMC) are routine in real GPS streams.
"""

__all__ = (
    "ChecksumMismatchError",
    "Error",
    "FrameError",
    "UnsupportedSentenceTypeError",
)


class Error(Exception):
    """Base class for all errors raised by the NMEA codec."""


class FrameError(Error):
    """Raised when a sentence is missing its leading ``$`` or its ``*``
    checksum delimiter.
    """

    def __init__(self, sentence: str):
        super().__init__(f"Invalid NMEA sentence: {sentence!r}")
        self.sentence = sentence


class ChecksumMismatchError(Error):
    """Raised by the decoder when checksum validation was requested and the
    transmitted checksum does not match the one calculated from the payload.
    """

    def __init__(self, expected: str, calculated: int):
        """Constructor.

        Parameters:
            expected: the checksum text transmitted after the ``*``
            calculated: the checksum calculated from the payload
        """
        super().__init__(
            f"Checksum mismatch: expected {expected}, calculated {calculated:02X}"
        )
        self.expected = expected
        self.calculated = calculated


class UnsupportedSentenceTypeError(Error):
    """Raised when the sentence identifier is neither GGA nor RMC."""

    def __init__(self, sentence_id: str):
        super().__init__(f"Unsupported sentence type: {sentence_id}")
        self.sentence_id = sentence_id
