"""Configuration management using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Open-Meteo Configuration (API key only needed for the customer endpoint)
    open_meteo_forecast_url: str = "https://api.open-meteo.com/v1/forecast"
    open_meteo_marine_url: str = "https://marine-api.open-meteo.com/v1/marine"
    open_meteo_api_key: str | None = None
    open_meteo_timezone: str = "auto"
    http_timeout: float = 10.0

    # Cache raw forecast payloads for 5 minutes
    forecast_cache_ttl: int = 300
    forecast_cache_size: int = 100

    # Days to aggregate when the feed supplies no daily axis
    daily_fallback_days: int = 7

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Rate limiting for the conditions endpoints
    rate_limit: str = "30/minute"

    @property
    def forecast_params_extra(self) -> dict[str, str]:
        """Return extra query params shared by Open-Meteo requests."""
        params = {"timezone": self.open_meteo_timezone}
        if self.open_meteo_api_key:
            params["apikey"] = self.open_meteo_api_key
        return params


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
