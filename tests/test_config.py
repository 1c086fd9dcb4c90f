"""Tests for application settings."""

from fishcast.config import Settings, get_settings


class TestSettings:
    """Tests for settings helpers."""

    def test_public_endpoint_params(self) -> None:
        """Without a key only the timezone should be sent."""
        settings = Settings(open_meteo_api_key=None)
        assert settings.forecast_params_extra == {"timezone": "auto"}

    def test_customer_endpoint_params(self) -> None:
        """A configured key should be sent as apikey."""
        settings = Settings(open_meteo_api_key="secret", open_meteo_timezone="GMT")
        assert settings.forecast_params_extra == {"timezone": "GMT", "apikey": "secret"}

    def test_settings_are_cached(self) -> None:
        """get_settings should return the same instance each time."""
        assert get_settings() is get_settings()
