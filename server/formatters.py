"""JSON formatting utilities for decoded packets and codec errors."""

import json
import math
from dataclasses import asdict
from datetime import datetime
from typing import Any

from nmea_codec import Error, Packet

__all__ = ["error_detail", "format_error_message", "format_packet_message"]


def _to_json_value(value: Any) -> Any:
    # JSON has no NaN; missing fields become null
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def format_packet_message(packet: Packet) -> str:
    """Serialize a decoded packet into a JSON string."""
    return json.dumps(
        {key: _to_json_value(value) for key, value in asdict(packet).items()}
    )


def error_detail(exc: Error) -> dict[str, str]:
    """Describe a codec error as a JSON-compatible dictionary."""
    return {"error": type(exc).__name__, "message": str(exc)}


def format_error_message(exc: Error) -> str:
    """Serialize a codec error into a JSON string for WebSocket transmission."""
    return json.dumps({"type": "error", **error_detail(exc)})
