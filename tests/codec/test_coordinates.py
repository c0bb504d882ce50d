"""Tests for the decimal degrees <-> degrees and decimal minutes conversion."""

import math

import pytest

from nmea_codec.coordinates import (
    format_latitude,
    format_longitude,
    parse_latitude,
    parse_longitude,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (-1.8, ("0148.0000", "S")),
        (-1.75, ("0145.0000", "S")),
        (-2, ("0200.0000", "S")),
        (1.9, ("0154.0000", "N")),
        (2.025, ("0201.5000", "N")),
        (39 + 7.356 / 60, ("3907.3560", "N")),
        (40.7831, ("4046.9860", "N")),
        (0, ("0000.0000", "N")),
        (90, ("9000.0000", "N")),
        (-90, ("9000.0000", "S")),
    ],
)
def test_format_latitude(value: float, expected: tuple[str, str]):
    assert format_latitude(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (-1.8, ("00148.0000", "W")),
        (-73.9712, ("07358.2720", "W")),
        (2.025, ("00201.5000", "E")),
        (11 + 31 / 60, ("01131.0000", "E")),
        (0, ("00000.0000", "E")),
        (180, ("18000.0000", "E")),
        (-180, ("18000.0000", "W")),
    ],
)
def test_format_longitude(value: float, expected: tuple[str, str]):
    assert format_longitude(value) == expected


class TestParseLatitude:
    """Tests for parse_latitude function."""

    def test_northern_hemisphere(self):
        assert parse_latitude("4807.038", "N") == pytest.approx(48.1173, rel=1e-6)

    def test_southern_hemisphere(self):
        assert parse_latitude("3356.123", "S") == pytest.approx(-33.93538333, rel=1e-6)

    def test_high_precision_minutes(self):
        assert parse_latitude("4807.03812345", "N") == pytest.approx(
            48.11730208, rel=1e-8
        )

    def test_empty_value_is_nan(self):
        assert math.isnan(parse_latitude("", "N"))

    def test_malformed_value_is_nan(self):
        assert math.isnan(parse_latitude("ab07.038", "N"))

    def test_missing_minutes_is_nan(self):
        assert math.isnan(parse_latitude("48", "N"))

    def test_empty_direction_is_positive(self):
        assert parse_latitude("4807.038", "") == pytest.approx(48.1173, rel=1e-6)


class TestParseLongitude:
    """Tests for parse_longitude function."""

    def test_eastern_hemisphere(self):
        assert parse_longitude("01131.000", "E") == pytest.approx(11.5166667, rel=1e-6)

    def test_western_hemisphere(self):
        assert parse_longitude("15112.456", "W") == pytest.approx(-151.2076, rel=1e-6)

    def test_uses_three_degree_digits(self):
        assert parse_longitude("18000.0000", "W") == pytest.approx(-180.0)

    def test_empty_value_is_nan(self):
        assert math.isnan(parse_longitude("", "E"))


@pytest.mark.parametrize("lat", [-90, -45.5, -0.0001, 0, 12.345678, 89.99999, 90])
def test_latitude_survives_formatting(lat: float):
    assert parse_latitude(*format_latitude(lat)) == pytest.approx(lat, abs=1e-4)


@pytest.mark.parametrize("lon", [-180, -73.9712, -0.5, 0, 11.5167, 179.99999, 180])
def test_longitude_survives_formatting(lon: float):
    assert parse_longitude(*format_longitude(lon)) == pytest.approx(lon, abs=1e-4)
