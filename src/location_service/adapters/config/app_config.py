"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

POSITION_PROVIDERS = ("none", "static", "ip")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Position lookup
    position_provider: str = Field(
        default="ip", description="Position source: 'none', 'static' or 'ip'"
    )
    position_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Timeout for a position request in seconds"
    )
    static_latitude: float = Field(
        default=37.7749, description="Latitude reported by the static position provider"
    )
    static_longitude: float = Field(
        default=-122.4194, description="Longitude reported by the static position provider"
    )
    ip_geolocation_url: str = Field(
        default="https://ipapi.co/json/",
        description="IP geolocation endpoint returning JSON with 'latitude' and 'longitude'",
    )

    # Reverse geocoding stand-in
    fallback_city: str = Field(
        default="San Francisco", description="City reported for every resolved position"
    )
    fallback_country: str = Field(
        default="USA", description="Country reported for every resolved position"
    )

    # Geohash
    geohash_precision: int = Field(
        default=5, ge=1, le=12, description="Default number of geohash characters"
    )

    log_level: str = Field(default="INFO", description="Log level for the command line tool")

    @field_validator("position_provider")
    @classmethod
    def validate_position_provider(cls, v: str) -> str:
        """Validate position provider is one of 'none', 'static' or 'ip'."""
        if v.lower() not in POSITION_PROVIDERS:
            raise ValueError("position_provider must be either 'none', 'static', or 'ip'")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be a standard logging level name")
        return v.upper()
