"""Web service exposing the NMEA codec over HTTP and WebSocket."""
