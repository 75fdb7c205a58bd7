"""Configuration management with persistence."""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_PATH = Path.home() / ".metardecoder" / "config.json"


class WeatherSourceConfig(BaseModel):
    """Configuration for the METAR service."""
    base_url: str = "https://avwx.rest/api/metar/"
    options: str = Field(default="info", description="Value of the ?options= query parameter")
    api_token: Optional[str] = None
    timeout_seconds: float = Field(default=10.0, ge=1.0, le=60.0)

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v):
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        if not v.endswith("/"):
            v += "/"
        return v


class DecodingConfig(BaseModel):
    """Configuration for report decoding."""
    icao_prefix: str = Field(default="K", description="Prefix added to 3-letter airport codes")

    @field_validator('icao_prefix')
    @classmethod
    def validate_icao_prefix(cls, v):
        v = v.upper()
        if len(v) != 1 or not ("A" <= v <= "Z"):
            raise ValueError("icao_prefix must be a single letter")
        return v


class WebUIConfig(BaseModel):
    """Configuration for the HTTP API."""
    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1024, le=65535)


class AppConfig(BaseModel):
    """Main application configuration."""
    weather_source: WeatherSourceConfig = Field(default_factory=WeatherSourceConfig)
    decoding: DecodingConfig = Field(default_factory=DecodingConfig)
    web_ui: WebUIConfig = Field(default_factory=WebUIConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "AppConfig":
        """Load configuration from file, creating a default one if missing."""
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        if config_path.exists():
            with open(config_path, "r") as f:
                data = json.load(f)
            return cls(**data)
        else:
            config = cls()
            config.save(config_path)
            return config

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return self.model_dump()

    def public_dict(self) -> Dict[str, Any]:
        """Dictionary safe to return over the API."""
        data = self.model_dump()
        if data["weather_source"].get("api_token"):
            data["weather_source"]["api_token"] = "***"
        return data
