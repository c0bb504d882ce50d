"""Source of the current time for the codec.

The encoder falls back to the current time when neither the options nor the
position carry a timestamp, and the GGA decoder borrows the current date
because GGA sentences carry only a time of day. Both accept a ``clock``
argument so callers and tests can supply a deterministic one.
"""

from datetime import datetime, timezone
from typing import Callable

__all__ = ("Clock", "utc_now")


Clock = Callable[[], datetime]
"""Zero-argument callable returning a timezone-aware datetime."""


def utc_now() -> datetime:
    """Returns the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
