"""Session lifespan management."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx

from weather_scene import __version__
from weather_scene.background.selector import BackgroundSelector
from weather_scene.background.vanta import VantaLibrary
from weather_scene.config import Settings, get_settings
from weather_scene.core.http_client import create_http_client
from weather_scene.logging_config import get_logger, log_with_context
from weather_scene.protocols import EffectLibrary, RenderSurface
from weather_scene.state import ViewState
from weather_scene.state_managers import WeatherController

logger = get_logger(__name__)


@dataclass
class WeatherSession:
    """Controller, background selector and HTTP client of one mounted page."""

    controller: WeatherController
    selector: BackgroundSelector
    client: httpx.AsyncClient

    async def submit(self, city: str | None = None) -> ViewState:
        """Optionally set the city, then fetch weather for it."""
        if city is not None:
            self.controller.set_city(city)
        return await self.controller.fetch_weather(self.client)


def connect(controller: WeatherController, selector: BackgroundSelector) -> None:
    """Make the selector follow the controller's result."""
    controller.add_listener(lambda state: selector.sync(state.result))


@asynccontextmanager
async def weather_session(
    settings: Settings | None = None,
    library: EffectLibrary | None = None,
    surface: RenderSurface | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[WeatherSession]:
    """Mount a weather page session.

    Everything acquired on enter is released on exit, even when the body
    raises: the live background effect is destroyed, the warm-up task is
    cancelled and the HTTP client is closed.

    Args:
        settings: Settings instance (defaults to singleton)
        library: Effect library (defaults to VantaLibrary)
        surface: Rendering surface, if already available
        transport: Optional HTTP transport override

    Yields:
        The mounted WeatherSession
    """
    if settings is None:
        settings = get_settings()

    log_with_context(
        logger,
        "info",
        "Mounting weather session",
        version=__version__,
        event_type="session_startup",
    )

    client = create_http_client(settings, transport=transport)
    controller = WeatherController(settings)
    selector = BackgroundSelector(library or VantaLibrary(settings), surface)
    connect(controller, selector)

    await controller.initialize()
    await selector.initialize()

    try:
        yield WeatherSession(controller=controller, selector=selector, client=client)
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Weather session error",
            error=str(e),
            error_type=type(e).__name__,
            event_type="session_error",
        )
        raise
    finally:
        await selector.cleanup()
        await controller.cleanup()
        await client.aclose()
        log_with_context(
            logger,
            "info",
            "Weather session unmounted",
            event_type="session_shutdown",
        )
