"""Custom exceptions for Weather Scene with structured error codes."""

from enum import Enum
from typing import Any

EMPTY_INPUT_MESSAGE = "Please enter a city name"
NOT_FOUND_MESSAGE = "City not found"


class ErrorCode(str, Enum):
    """Error codes for structured error reporting."""

    # Generic errors
    WEATHER_SCENE_ERROR = "WEATHER_SCENE_ERROR"

    # Fetch errors
    WEATHER_ERROR = "WEATHER_ERROR"
    EMPTY_INPUT = "EMPTY_INPUT"
    NOT_FOUND = "NOT_FOUND"
    NETWORK_FAILURE = "NETWORK_FAILURE"
    PARSE_FAILURE = "PARSE_FAILURE"

    # Background effect errors
    EFFECT_ERROR = "EFFECT_ERROR"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"


class WeatherSceneException(Exception):
    """Base exception for Weather Scene errors.

    All custom exceptions should inherit from this class so callers can
    surface ``message`` to the user and log ``code``/``details``.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WEATHER_SCENE_ERROR,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        """Initialize Weather Scene exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code of the upstream response, if any
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class WeatherFetchException(WeatherSceneException):
    """Errors raised while fetching weather for a city."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WEATHER_ERROR,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class EmptyCityException(WeatherFetchException):
    """Fetch requested without a city name."""

    def __init__(self, message: str = EMPTY_INPUT_MESSAGE, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.EMPTY_INPUT, details=details)


class CityNotFoundException(WeatherFetchException):
    """Weather endpoint answered with a non-success status."""

    def __init__(
        self,
        message: str = NOT_FOUND_MESSAGE,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=ErrorCode.NOT_FOUND, status_code=status_code, details=details)


class WeatherNetworkException(WeatherFetchException):
    """Transport-level failure talking to the weather endpoint."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.NETWORK_FAILURE, details=details)


class WeatherParseException(WeatherFetchException):
    """Weather endpoint returned a body that is not a valid weather payload."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.PARSE_FAILURE, details=details)


class EffectException(WeatherSceneException):
    """Background effect lifecycle errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.EFFECT_ERROR, details=details)


class ConfigurationException(WeatherSceneException):
    """Configuration errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.CONFIG_ERROR, details=details)
