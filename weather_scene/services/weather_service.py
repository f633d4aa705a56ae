"""Weather service for the city weather endpoint."""

import httpx

from weather_scene.config import Settings, get_settings
from weather_scene.exceptions import (
    CityNotFoundException,
    EmptyCityException,
    WeatherNetworkException,
    WeatherParseException,
)
from weather_scene.logging_config import get_logger, log_with_context
from weather_scene.models.weather import WeatherPayload, WeatherResult

logger = get_logger(__name__)


async def get_weather(client: httpx.AsyncClient, city: str, settings: Settings | None = None) -> WeatherResult:
    """Get current weather for a city.

    Issues exactly one GET and never retries.

    Args:
        client: Shared HTTP client for making requests
        city: City name as typed by the user
        settings: Settings instance (defaults to singleton)

    Returns:
        WeatherResult with the temperature converted to Celsius

    Raises:
        EmptyCityException: If city is empty (no request is made)
        CityNotFoundException: If the endpoint answers with a non-success status
        WeatherNetworkException: If the request fails at the transport level
        WeatherParseException: If the body is not a valid weather payload
    """
    if not city:
        raise EmptyCityException()

    if settings is None:
        settings = get_settings()

    url = settings.weather_url(city)

    try:
        response = await client.get(url)
        response.raise_for_status()
        data = response.json()

        payload = WeatherPayload.model_validate(data)

        return WeatherResult.from_payload(payload)

    except httpx.HTTPStatusError as e:
        log_with_context(
            logger,
            "warning",
            "Weather endpoint returned non-success status",
            city=city,
            status_code=e.response.status_code,
            event_type="weather_not_found",
        )
        raise CityNotFoundException(
            status_code=e.response.status_code,
            details={"api_response": e.response.text},
        ) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        log_with_context(
            logger,
            "error",
            "Weather request failed",
            city=city,
            error=str(e),
            error_type=type(e).__name__,
            event_type="weather_network_error",
        )
        raise WeatherNetworkException(
            f"Failed to fetch weather data: {str(e)}",
            details={"error_type": "network_error"},
        ) from e
    except Exception as e:
        # Anything past the transport is a bad body: JSON decode, validation, conversion
        log_with_context(
            logger,
            "error",
            "Weather response could not be parsed",
            city=city,
            error=str(e),
            error_type=type(e).__name__,
            event_type="weather_parse_error",
        )
        raise WeatherParseException(
            f"Failed to process weather data: {str(e)}",
            details={"error_type": "parsing_error"},
        ) from e
