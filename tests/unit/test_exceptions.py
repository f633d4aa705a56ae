"""Tests for custom exception classes."""

from weather_scene.exceptions import (
    CityNotFoundException,
    ConfigurationException,
    EffectException,
    EmptyCityException,
    ErrorCode,
    WeatherFetchException,
    WeatherNetworkException,
    WeatherParseException,
    WeatherSceneException,
)


class TestErrorCodes:
    """Tests for ErrorCode enum."""

    def test_error_code_values(self):
        """Test that error codes have correct values."""
        assert ErrorCode.EMPTY_INPUT == "EMPTY_INPUT"
        assert ErrorCode.NOT_FOUND == "NOT_FOUND"
        assert ErrorCode.NETWORK_FAILURE == "NETWORK_FAILURE"
        assert ErrorCode.PARSE_FAILURE == "PARSE_FAILURE"


class TestWeatherSceneException:
    """Tests for WeatherSceneException."""

    def test_basic(self):
        exc = WeatherSceneException(message="Test error")

        assert exc.message == "Test error"
        assert exc.code == ErrorCode.WEATHER_SCENE_ERROR
        assert exc.status_code is None
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_with_details(self):
        exc = WeatherSceneException(
            message="Test error", code=ErrorCode.WEATHER_ERROR, status_code=502, details={"key": "value"}
        )

        assert exc.code == ErrorCode.WEATHER_ERROR
        assert exc.status_code == 502
        assert exc.details["key"] == "value"


class TestFetchExceptions:
    """Tests for the four fetch failure kinds."""

    def test_empty_city(self):
        exc = EmptyCityException()

        assert exc.message == "Please enter a city name"
        assert exc.code == ErrorCode.EMPTY_INPUT
        assert isinstance(exc, WeatherFetchException)

    def test_not_found(self):
        exc = CityNotFoundException(status_code=404)

        assert exc.message == "City not found"
        assert exc.code == ErrorCode.NOT_FOUND
        assert exc.status_code == 404
        assert isinstance(exc, WeatherFetchException)

    def test_network(self):
        exc = WeatherNetworkException("Failed to fetch weather data: boom")

        assert exc.code == ErrorCode.NETWORK_FAILURE
        assert isinstance(exc, WeatherFetchException)

    def test_parse(self):
        exc = WeatherParseException("Failed to process weather data: bad")

        assert exc.code == ErrorCode.PARSE_FAILURE
        assert isinstance(exc, WeatherFetchException)


class TestOtherExceptions:
    def test_effect(self):
        exc = EffectException("Cannot attach a destroyed effect", details={"element_id": "vanta-1"})

        assert exc.code == ErrorCode.EFFECT_ERROR
        assert not isinstance(exc, WeatherFetchException)

    def test_configuration(self):
        exc = ConfigurationException("Invalid configuration")

        assert exc.code == ErrorCode.CONFIG_ERROR
        assert isinstance(exc, WeatherSceneException)
