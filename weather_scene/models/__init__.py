"""Pydantic models for Weather Scene."""

from weather_scene.models.weather import WeatherPayload, WeatherResult, kelvin_to_celsius

__all__ = [
    "WeatherPayload",
    "WeatherResult",
    "kelvin_to_celsius",
]
