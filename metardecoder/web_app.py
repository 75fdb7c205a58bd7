"""FastAPI web application."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from metardecoder.config import AppConfig
from metardecoder.metar_decoder import RawReport, decode_metar
from metardecoder.stations import InvalidAirportCode, format_icao
from metardecoder.weather_sources import AvwxSource, MetarSource

logger = logging.getLogger(__name__)

app = FastAPI(title="METAR Decoder")


# Global exception handler to ensure JSON errors
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Handle all exceptions and return JSON."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc), "error": True}
    )


# Global state
config: Optional[AppConfig] = None
weather_source: Optional[MetarSource] = None


class RawReportRequest(BaseModel):
    """Raw report body in the weather service's JSON shape."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    station: str = Field(default="", alias="Station")
    altimeter: str = Field(default="", alias="Altimeter")
    temperature: str = Field(default="", alias="Temperature")
    dewpoint: str = Field(default="", alias="Dewpoint")
    wind_direction: str = Field(default="", alias="Wind-Direction")
    conditions: List[str] = Field(default_factory=list, alias="Other-List")
    cloud_layers: List[List[str]] = Field(default_factory=list, alias="Cloud-List")


@app.on_event("startup")
async def startup():
    """Load configuration and create the weather source."""
    global config, weather_source

    config = AppConfig.load()
    weather_source = AvwxSource(config.weather_source)
    logger.info(f"METAR source ready: {config.weather_source.base_url}")


@app.get("/api/settings")
async def get_settings():
    """Get current settings."""
    if config is None:
        raise HTTPException(status_code=503, detail="Config not loaded")

    return config.public_dict()


@app.get("/api/metar/{icao}")
async def get_metar(icao: str):
    """Fetch and decode the current METAR for an airport code."""
    if config is None or weather_source is None:
        raise HTTPException(status_code=503, detail="Weather source not initialized")

    try:
        station = format_icao(icao, config.decoding.icao_prefix)
    except InvalidAirportCode as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = await weather_source.fetch_metar(station)
    if not result.ok:
        raise HTTPException(status_code=502, detail=result.error or f"No METAR for {station}")

    return result.metar.to_dict()


@app.post("/api/decode")
async def decode_report(report: RawReportRequest):
    """Decode a raw report without fetching anything."""
    payload: Dict[str, Any] = report.model_dump(by_alias=True)
    decoded = decode_metar(RawReport.from_dict(payload))
    return decoded.to_dict()
