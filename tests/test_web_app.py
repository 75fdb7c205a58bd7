"""Tests for the HTTP API."""

import unittest
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from metardecoder import web_app
from metardecoder.config import AppConfig
from metardecoder.metar_decoder import RawReport, decode_metar
from metardecoder.weather_sources import MetarResponse


def _response(icao, error=None):
    result = MetarResponse(icao)
    if error:
        result.error = error
    else:
        result.metar = decode_metar(RawReport(station=icao, altimeter="3001", wind_direction="180"))
    return result


class TestWebApp(unittest.TestCase):
    """Test API endpoints."""

    def setUp(self):
        self.config = AppConfig()
        self.source = AsyncMock()
        patcher_config = patch.object(web_app, "config", self.config)
        patcher_source = patch.object(web_app, "weather_source", self.source)
        patcher_config.start()
        patcher_source.start()
        self.addCleanup(patcher_config.stop)
        self.addCleanup(patcher_source.stop)
        self.client = TestClient(web_app.app)

    def test_get_metar(self):
        """Test fetching a report through the API."""
        self.source.fetch_metar.return_value = _response("KLAX")

        response = self.client.get("/api/metar/lax")

        self.assertEqual(response.status_code, 200)
        self.source.fetch_metar.assert_awaited_once_with("KLAX")
        data = response.json()
        self.assertEqual(data["altimeter"], "30.01")
        self.assertEqual(data["wind_direction_desc"], "S")

    def test_get_metar_invalid_code(self):
        """Test an invalid airport code."""
        response = self.client.get("/api/metar/klaxx")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Invalid airport code: klaxx")
        self.source.fetch_metar.assert_not_awaited()

    def test_get_metar_fetch_error(self):
        """Test a fetch failure."""
        self.source.fetch_metar.return_value = _response("KZZZ", error="Query failed: 404 Not Found")

        response = self.client.get("/api/metar/KZZZ")

        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.json()["detail"], "Query failed: 404 Not Found")

    def test_get_metar_not_initialized(self):
        """Test the API before startup."""
        with patch.object(web_app, "weather_source", None):
            response = self.client.get("/api/metar/KLAX")

        self.assertEqual(response.status_code, 503)

    def test_decode(self):
        """Test decoding a posted record."""
        body = {
            "Station": "KDEN",
            "Altimeter": "3012",
            "Temperature": "M05",
            "Dewpoint": "M10",
            "Wind-Direction": "360",
            "Other-List": ["VC-SN", "XX"],
            "Cloud-List": [["BKN", "025", "CB"], ["SKC"]],
            "Flight-Rules": "MVFR",
        }

        response = self.client.post("/api/decode", json=body)

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["temperature"], "-5.0")
        self.assertEqual(data["temperature_f"], "23.0")
        self.assertEqual(data["wind_direction_desc"], "N")
        self.assertEqual(data["flight_rules"], "MVFR")
        self.assertEqual(data["conditions_dec"], [
            {"modifier": "LIGHT", "desc": "SNOW", "other": "IN VICINITY"},
            {"modifier": "", "desc": "", "other": ""},
        ])
        self.assertEqual(data["cloud_layers_dec"], [
            {"coverage": "BROKEN", "height_ft": 2500, "type": "CUMULONIMBUS"},
            {"coverage": "SKY CLEAR", "height_ft": 0, "type": ""},
        ])
        self.source.fetch_metar.assert_not_awaited()

    def test_settings(self):
        """Test reading settings."""
        self.config.weather_source.api_token = "secret"

        response = self.client.get("/api/settings")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["weather_source"]["api_token"], "***")
        self.assertEqual(response.json()["decoding"]["icao_prefix"], "K")
