"""Tests for decoding sentences over the WebSocket endpoint."""

import asyncio

import pytest
from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient

from server.main import _decode_messages_until_disconnect, app

RMC_SENTENCE = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"


def test_decodes_each_message() -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        websocket.send_text(RMC_SENTENCE)
        data = websocket.receive_json()
        assert data["type"] == "RMC"
        assert data["speed_knots"] == pytest.approx(22.4)
        assert data["variation_pole"] == "W"

        websocket.send_text(RMC_SENTENCE + "\r\n")
        assert websocket.receive_json()["type"] == "RMC"


def test_error_message_keeps_connection_open() -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        websocket.send_text("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B")
        data = websocket.receive_json()
        assert data["type"] == "error"
        assert data["error"] == "UnsupportedSentenceTypeError"
        assert "VTG" in data["message"]

        websocket.send_text(RMC_SENTENCE)
        assert websocket.receive_json()["type"] == "RMC"


def test_multiple_clients() -> None:
    with (
        TestClient(app) as client,
        client.websocket_connect("/ws") as socket_one,
        client.websocket_connect("/ws") as socket_two,
    ):
        socket_one.send_text(RMC_SENTENCE)
        socket_two.send_text("not a sentence")
        assert socket_one.receive_json()["type"] == "RMC"
        assert socket_two.receive_json()["error"] == "FrameError"


def test_timeout_disconnect(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("server.main._IDLE_TIMEOUT", 0.05)
    with (
        TestClient(app) as client,
        pytest.raises(WebSocketDisconnect) as exc_info,
        client.websocket_connect("/ws") as websocket,
    ):
        websocket.receive_json()
    assert exc_info.value.code == 1001


def test_client_disconnect_silent() -> None:
    class MockWebSocket:
        async def receive_text(self) -> str:
            raise WebSocketDisconnect(code=1000)

    async def _run() -> None:
        websocket = MockWebSocket()
        await _decode_messages_until_disconnect(websocket)  # type: ignore[arg-type]

    asyncio.run(_run())
