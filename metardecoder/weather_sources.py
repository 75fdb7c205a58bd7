"""Weather source abstraction and implementations."""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

import aiohttp

from metardecoder.config import WeatherSourceConfig
from metardecoder.metar_decoder import DecodedReport, RawReport, decode_metar

logger = logging.getLogger(__name__)


class MetarResponse:
    """Result of fetching one station's METAR."""

    def __init__(self, icao: str):
        self.icao = icao
        self.metar: Optional[DecodedReport] = None
        self.error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.metar is not None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "icao": self.icao,
            "metar": self.metar.to_dict() if self.metar else None,
            "error": self.error,
        }


class MetarSource(ABC):
    """Abstract base class for METAR sources."""

    @abstractmethod
    async def fetch_metar(self, station: str) -> MetarResponse:
        """
        Fetch and decode the current METAR for a station.

        Args:
            station: Normalized ICAO code

        Returns:
            MetarResponse with either a decoded report or an error message
        """
        pass


class AvwxSource(MetarSource):
    """avwx.rest METAR JSON API source."""

    def __init__(self, config: Optional[WeatherSourceConfig] = None):
        self.config = config or WeatherSourceConfig()

    def _headers(self) -> Dict[str, str]:
        if self.config.api_token:
            return {"Authorization": f"BEARER {self.config.api_token}"}
        return {}

    async def fetch_metar(self, station: str) -> MetarResponse:
        """Fetch METAR from avwx.rest and decode it."""
        metar_resp = MetarResponse(station)
        url = f"{self.config.base_url}{station}"
        params = {"options": self.config.options}

        try:
            logger.info(f"Fetching METAR for {station}")
            async with aiohttp.ClientSession(headers=self._headers()) as session:
                timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
                async with session.get(url, params=params, timeout=timeout) as response:
                    if response.status != 200:
                        metar_resp.error = f"Query failed: {response.status} {response.reason or ''}".rstrip()
                        logger.warning(f"METAR query for {station} failed: {metar_resp.error}")
                        return metar_resp
                    payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            # Log error but don't fail
            metar_resp.error = str(e) or e.__class__.__name__
            logger.error(f"Error fetching METAR for {station}: {metar_resp.error}", exc_info=True)
            return metar_resp

        return self.build_response(metar_resp, payload)

    @staticmethod
    def build_response(metar_resp: MetarResponse, payload) -> MetarResponse:
        """Decode a JSON payload into the response, recording service errors."""
        if not isinstance(payload, dict):
            metar_resp.error = "Unexpected response payload"
            logger.error(f"Unexpected METAR payload for {metar_resp.icao}: {type(payload).__name__}")
            return metar_resp

        service_error = next(
            (value for key, value in payload.items() if str(key).lower() == "error"),
            None,
        )
        if service_error:
            metar_resp.error = str(service_error)
            logger.warning(f"Service reported error for {metar_resp.icao}: {metar_resp.error}")
            return metar_resp

        try:
            raw = RawReport.from_dict(payload)
        except ValueError as e:
            metar_resp.error = "Unexpected response payload"
            logger.error(f"Unexpected METAR payload for {metar_resp.icao}: {e}")
            return metar_resp

        metar_resp.metar = decode_metar(raw)
        logger.info(f"METAR fetched for {metar_resp.icao}: {raw.raw_report[:80]}")
        return metar_resp
