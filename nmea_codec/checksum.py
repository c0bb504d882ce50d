"""NMEA checksum calculation and validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit uppercase hexadecimal number after the '*'.

Example sentence structure:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
    ^                        checksum content                      ^^
    start                                                   checksum (0x47 = 71)

The same routine is used by the encoder to append checksums and by the decoder
to verify them.
"""

__all__ = (
    "calculate_checksum",
    "format_checksum",
    "split_frame",
    "validate_checksum",
)


def split_frame(sentence: str) -> tuple[str, str] | None:
    """Split an NMEA sentence into its payload and transmitted checksum.

    The split happens at the last '*' of the sentence, so the checksum is
    everything after it.

    Args:
        sentence: Raw NMEA sentence string (e.g., "$GPGGA,...*47")

    Returns:
        A tuple of (content, checksum_text), or None if the sentence does not
        start with '$' or has no '*' delimiter.

    Example:
        >>> split_frame("$GPGGA,123519*47")
        ('GPGGA,123519', '47')
    """
    if not sentence.startswith("$") or "*" not in sentence:
        return None

    content, _, provided = sentence[1:].rpartition("*")
    return content, provided


def calculate_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs the code point of each character in the
    content.

    Args:
        content: The string between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255 for ASCII input)

    Example:
        >>> calculate_checksum("GPGGA")
        86
    """
    result = 0
    for character in content:
        result ^= ord(character)
    return result


def format_checksum(value: int) -> str:
    """Render a checksum as exactly two uppercase hexadecimal digits."""
    return f"{value:02X}"


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.
                  May include trailing whitespace/newlines (will be stripped).

    Returns:
        True if the checksum is valid, False if:
        - Sentence is malformed (missing delimiters)
        - Checksum is non-hexadecimal
        - Calculated checksum doesn't match provided checksum
    """
    parts = split_frame(sentence.strip())
    if parts is None:
        return False

    content, provided = parts

    try:
        return calculate_checksum(content) == int(provided, 16)
    except ValueError:
        return False
