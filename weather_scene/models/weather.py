"""Pydantic models for weather data."""

import math
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

KELVIN_OFFSET = 273.15

# 9999-12-31T00:00:00Z, the last day every local timezone can still display
MAX_TIMESTAMP_MILLIS = 253_402_214_400_000
INVALID_TIME_LABEL = "Invalid Date"


def kelvin_to_celsius(kelvin: float) -> int:
    """Convert Kelvin to whole degrees Celsius.

    Halves round up (towards positive infinity), matching how the weather
    page has always displayed temperatures.
    """
    return math.floor(kelvin - KELVIN_OFFSET + 0.5)


class WeatherPayload(BaseModel):
    """Raw weather service response body."""

    city: str
    temperature: float = Field(allow_inf_nan=False, description="Temperature in Kelvin")
    description: str
    humidity: float = Field(ge=0, le=100, allow_inf_nan=False)
    timestamp: int = Field(ge=0, le=MAX_TIMESTAMP_MILLIS, description="Observation time in epoch milliseconds")


class WeatherResult(BaseModel):
    """Normalized weather result shown in the result panel."""

    model_config = ConfigDict(frozen=True)

    city: str
    temperature_celsius: int
    description: str
    humidity: float = Field(ge=0, le=100)
    timestamp_millis: int

    @property
    def last_updated(self) -> str:
        """Observation time as local wall-clock time, or "Invalid Date" if it cannot be shown."""
        try:
            return datetime.fromtimestamp(self.timestamp_millis / 1000).strftime("%H:%M:%S")
        except (ValueError, OverflowError, OSError):
            return INVALID_TIME_LABEL

    @property
    def humidity_label(self) -> str:
        """Humidity formatted for display, without a trailing .0."""
        return f"{self.humidity:g}%"

    @classmethod
    def from_payload(cls, data: WeatherPayload) -> "WeatherResult":
        """Create WeatherResult from a weather service payload.

        Args:
            data: Validated response body

        Returns:
            WeatherResult with the temperature converted to Celsius
        """
        return cls(
            city=data.city,
            temperature_celsius=kelvin_to_celsius(data.temperature),
            description=data.description,
            humidity=data.humidity,
            timestamp_millis=data.timestamp,
        )
