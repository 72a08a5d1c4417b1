"""Configuration management for flightcal."""

from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from flightcal.core.constants import API_BASE_URL, API_HOST, APIConstants, CacheLimits


class Config(BaseSettings):
    """Application configuration."""

    api_key: SecretStr | None = Field(
        default=None,
        alias="FLIGHTCAL_RAPIDAPI_KEY",
        description="RapidAPI key for the AeroDataBox API",
    )
    api_base_url: str = Field(
        default=API_BASE_URL,
        alias="FLIGHTCAL_API_BASE_URL",
        description="Base URL of the flight data API",
    )
    api_host: str = Field(
        default=API_HOST,
        alias="FLIGHTCAL_API_HOST",
        description="Value sent in the X-RapidAPI-Host header",
    )
    request_timeout: float = Field(
        default=float(APIConstants.REQUEST_TIMEOUT),
        alias="FLIGHTCAL_REQUEST_TIMEOUT",
        description="Upstream request timeout in seconds",
    )

    # Storage
    data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".flightcal",
        alias="FLIGHTCAL_DATA_DIR",
        description="Directory holding the flight cache and saved settings",
    )
    cache_ttl_hours: float = Field(
        default=float(CacheLimits.TTL_HOURS),
        alias="FLIGHTCAL_CACHE_TTL_HOURS",
        description="How long a flight lookup stays cached",
    )

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    @property
    def cache_dir(self) -> Path:
        return self.data_dir / "cache"

    @property
    def settings_dir(self) -> Path:
        return self.data_dir / "settings"


def load_config() -> Config:
    """Load configuration from environment and .env file."""
    return Config()
