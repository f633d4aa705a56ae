from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_scene.exceptions import ConfigurationException
from weather_scene.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent  # weather-scene/


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a working default so the page runs without a .env file.
    Values can be overridden via environment variables or .env file.
    """

    # Weather endpoint
    weather_api_base_url: str = Field(
        default="https://checkweather-pzv3.onrender.com",
        pattern=r"^https?://",
        description="Base URL of the weather service (GET {base}/api/weather/{city})",
    )
    encode_city: bool = Field(
        default=True,
        description="Percent-encode the city as a single path segment; False interpolates it raw",
    )

    # HTTP client timeouts (seconds)
    http_connect_timeout: float = Field(gt=0, default=5.0, description="Connection establishment timeout")
    http_read_timeout: float = Field(gt=0, default=30.0, description="Read response timeout")

    # View behaviour
    initial_loading_seconds: float = Field(ge=0, default=1.5, description="Warm-up interval after mount")
    effect_height: int = Field(ge=100, le=2000, default=360, description="Background effect height in pixels")

    # Effect library assets
    three_js_url: str = Field(
        default="https://cdnjs.cloudflare.com/ajax/libs/three.js/r134/three.min.js",
        pattern=r"^https?://",
        description="three.js script URL",
    )
    vanta_cdn_url: str = Field(
        default="https://cdn.jsdelivr.net/npm/vanta@0.5.24/dist",
        pattern=r"^https?://",
        description="Directory URL hosting vanta.<effect>.min.js scripts",
    )

    log_dir: Path = Field(default=BASE_DIR / "logs", description="Directory for JSON log files")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("weather_api_base_url", "vanta_cdn_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalise base URLs so paths can be appended with a single slash."""
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v

    @field_validator("three_js_url", mode="after")
    @classmethod
    def validate_three_js_url(cls, v: str) -> str:
        """Ensure three_js_url points at a script."""
        v = v.strip()
        if not v.endswith(".js"):
            raise ValueError("three_js_url must point at a .js file")
        return v

    def weather_url(self, city: str) -> str:
        """Build the weather endpoint URL for a city.

        Args:
            city: City name exactly as typed by the user

        Returns:
            Absolute URL of the weather resource for ``city``
        """
        from urllib.parse import quote

        segment = quote(city, safe="") if self.encode_city else city
        return f"{self.weather_api_base_url}/api/weather/{segment}"


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance.

    Avoids re-reading the .env file on every Streamlit rerun.

    Returns:
        Cached Settings instance

    Raises:
        ConfigurationException: If the environment holds invalid values
    """
    global _settings_instance
    if _settings_instance is None:
        try:
            _settings_instance = Settings()
        except ValidationError as e:
            log_with_context(
                logger,
                "error",
                "Invalid configuration",
                error=str(e),
                event_type="config_invalid",
            )
            raise ConfigurationException(
                f"Invalid configuration: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False)},
            ) from e
    return _settings_instance
