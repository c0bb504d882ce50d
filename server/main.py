"""FastAPI web service exposing the NMEA codec.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

HTTP clients POST sentences to ``/decode`` and positions to ``/encode/gga`` or
``/encode/rmc``. WebSocket clients connect to ``ws://<host>:8000/ws``, send one
sentence per text message and receive one JSON message per sentence: the
decoded packet, or a ``type="error"`` message if the sentence was rejected.
"""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.responses import Response
from pydantic import BaseModel

from nmea_codec import (
    EncodeOptions,
    Error,
    TrackPosition,
    decode,
    encode_gga,
    encode_rmc,
)
from server.formatters import (
    error_detail,
    format_error_message,
    format_packet_message,
)

log = logging.getLogger(__name__)

_IDLE_TIMEOUT = 30.0

_encoders: dict[str, Callable[[TrackPosition, EncodeOptions], str]] = {
    "gga": encode_gga,
    "rmc": encode_rmc,
}


class DecodeRequest(BaseModel):
    sentence: str
    validate_checksum: bool = False


class EncodeRequest(BaseModel):
    latitude: float
    longitude: float
    altitude: float
    speed: float
    heading: float
    timestamp: datetime | None = None
    include_ms: bool = False


app = FastAPI(title="NMEA codec")


@app.post("/decode")
def decode_sentence(request: DecodeRequest) -> Response:
    """Decode one GGA or RMC sentence.

    Surrounding whitespace, including CR/LF, is stripped before decoding.
    Rejected sentences produce a 422 response naming the error class.
    """
    try:
        packet = decode(request.sentence.strip(), request.validate_checksum)
    except Error as exc:
        log.info("Rejected NMEA sentence %r: %s", request.sentence, exc)
        raise HTTPException(status_code=422, detail=error_detail(exc)) from exc
    return Response(format_packet_message(packet), media_type="application/json")


@app.post("/encode/{sentence_type}")
def encode_position(sentence_type: str, request: EncodeRequest) -> dict[str, str]:
    """Encode a position as a GGA or RMC sentence.

    Speed is given in meters per second and heading in degrees true. When no
    timestamp is given, the current time is used.
    """
    encoder = _encoders.get(sentence_type.lower())
    if encoder is None:
        raise HTTPException(
            status_code=404, detail=f"Unknown sentence type: {sentence_type!r}"
        )

    position = TrackPosition(
        latitude=request.latitude,
        longitude=request.longitude,
        altitude=request.altitude,
        speed=request.speed,
        heading=request.heading,
    )
    options = EncodeOptions(timestamp=request.timestamp, include_ms=request.include_ms)
    return {"sentence": encoder(position, options)}


def _decode_to_message(sentence: str) -> str:
    try:
        packet = decode(sentence.strip())
    except Error as exc:
        log.info("Rejected NMEA sentence %r: %s", sentence, exc)
        return format_error_message(exc)
    return format_packet_message(packet)


async def _decode_messages_until_disconnect(websocket: WebSocket) -> None:
    try:
        while True:
            sentence = await asyncio.wait_for(
                websocket.receive_text(), timeout=_IDLE_TIMEOUT
            )
            await websocket.send_text(_decode_to_message(sentence))
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Decode NMEA sentences received over a WebSocket connection.

    Each text message is decoded independently and answered with exactly one
    JSON message. The connection closes with code 1001 if the client stays
    silent for ``_IDLE_TIMEOUT`` seconds.

    Args:
        websocket: The incoming WebSocket connection.
    """
    await websocket.accept()
    await _decode_messages_until_disconnect(websocket)
