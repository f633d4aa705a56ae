"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock

import httpx
import pytest

from weather_scene.background.scenes import SceneConfig
from weather_scene.config import Settings


class FakeSurface:
    """Render surface that records what was mounted."""

    def __init__(self):
        self.markup: str | None = None
        self.height: int | None = None
        self.mount_count = 0
        self.clear_count = 0

    def mount(self, markup: str, height: int) -> None:
        self.markup = markup
        self.height = height
        self.mount_count += 1

    def clear(self) -> None:
        self.markup = None
        self.clear_count += 1


class FakeEffect:
    """Effect instance that counts lifecycle calls."""

    def __init__(self, config: SceneConfig, surface: FakeSurface, log: list[tuple[str, "FakeEffect"]]):
        self.config = config
        self.surface = surface
        self.destroy_count = 0
        self._log = log

    def attach(self, surface: FakeSurface) -> None:
        self.surface = surface
        self._log.append(("attach", self))

    def destroy(self) -> None:
        self.destroy_count += 1
        self._log.append(("destroy", self))


class FakeLibrary:
    """Effect library that hands out FakeEffects and logs every call in order."""

    def __init__(self):
        self.created: list[FakeEffect] = []
        self.log: list[tuple[str, FakeEffect]] = []

    def create(self, config: SceneConfig, surface: FakeSurface) -> FakeEffect:
        effect = FakeEffect(config, surface, self.log)
        self.created.append(effect)
        self.log.append(("create", effect))
        return effect


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for external API calls."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def mock_settings(tmp_path):
    """Settings instance with test values."""
    return Settings(
        weather_api_base_url="https://weather.test",
        encode_city=True,
        initial_loading_seconds=0,
        effect_height=300,
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def weather_payload():
    """Weather service response body for London."""
    return {
        "city": "London",
        "temperature": 300.15,
        "description": "light rain",
        "humidity": 81,
        "timestamp": 1700000000000,
    }


@pytest.fixture
def make_response():
    """Build a mock response the way httpx.AsyncClient.get returns it."""

    def _make(status_code: int = 200, body=None, text: str = ""):
        mock_response = AsyncMock()
        mock_response.status_code = status_code
        mock_response.text = text
        if status_code >= 400:
            error = httpx.HTTPStatusError(
                f"{status_code} Error",
                request=httpx.Request("GET", "https://weather.test"),
                response=mock_response,
            )
            mock_response.raise_for_status = lambda: (_ for _ in ()).throw(error)
        else:
            mock_response.raise_for_status = lambda: None  # Regular method, not async
        mock_response.json = lambda: body  # Regular method, not async
        return mock_response

    return _make


@pytest.fixture
def fake_surface():
    return FakeSurface()


@pytest.fixture
def fake_library():
    return FakeLibrary()
