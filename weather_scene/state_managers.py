"""State managers for the weather page.

State managers own a piece of page state for the lifetime of a session.
All state managers inherit from StateManager ABC.
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Callable

import httpx

from weather_scene.config import Settings, get_settings
from weather_scene.exceptions import EMPTY_INPUT_MESSAGE, WeatherFetchException
from weather_scene.logging_config import get_logger, log_with_context
from weather_scene.services import weather_service
from weather_scene.state import (
    CityChanged,
    Event,
    FetchFailed,
    FetchRejected,
    FetchStarted,
    FetchSucceeded,
    ViewState,
    WarmupFinished,
    reduce,
)

logger = get_logger(__name__)

StateListener = Callable[[ViewState], None]


class StateManager(ABC):
    """Base class for all state managers.

    All subclasses must implement lifecycle methods.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the state manager (called when the page mounts)."""
        pass

    @abstractmethod
    async def cleanup(self) -> None:
        """Cleanup resources (called when the page unmounts)."""
        pass


class WeatherController(StateManager):
    """Owns the city, loading flags, last result and last error.

    State lives in an immutable ViewState; every change is an event applied
    through ``reduce`` and then published to listeners.
    """

    def __init__(self, settings: Settings | None = None):
        """Initialize the weather controller."""
        self._settings = settings or get_settings()
        self._state = ViewState()
        self._listeners: list[StateListener] = []
        self._warmup_task: asyncio.Task[None] | None = None

    @property
    def state(self) -> ViewState:
        """Current state snapshot."""
        return self._state

    async def initialize(self) -> None:
        """Start the warm-up interval in the background."""
        if self._state.initial_loading and self._warmup_task is None:
            self._warmup_task = asyncio.create_task(self.warm_up())

    async def cleanup(self) -> None:
        """Cancel a pending warm-up and drop listeners."""
        if self._warmup_task is not None and not self._warmup_task.done():
            self._warmup_task.cancel()
            try:
                await self._warmup_task
            except asyncio.CancelledError:
                pass
        self._warmup_task = None
        self._listeners.clear()

    def add_listener(self, listener: StateListener) -> None:
        """Register a callback that receives every new state snapshot."""
        self._listeners.append(listener)

    def dispatch(self, event: Event) -> ViewState:
        """Apply an event and notify listeners if the state changed.

        Args:
            event: Event to apply

        Returns:
            The state after the event
        """
        new_state = reduce(self._state, event)
        if new_state is self._state:
            log_with_context(
                logger,
                "debug",
                "Event ignored",
                event=type(event).__name__,
                request_id=self._state.request_id,
                event_type="state_event_ignored",
            )
            return new_state

        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return new_state

    def set_city(self, text: str) -> ViewState:
        """Update the city text. No validation is applied."""
        return self.dispatch(CityChanged(city=text))

    async def warm_up(self) -> ViewState:
        """Wait out the initial loading interval, then clear the flag."""
        if self._state.initial_loading:
            await asyncio.sleep(self._settings.initial_loading_seconds)
        return self.dispatch(WarmupFinished())

    async def fetch_weather(self, client: httpx.AsyncClient) -> ViewState:
        """Fetch weather for the current city.

        An empty city only sets the error message. Otherwise the request is
        issued and its outcome replaces the previous result or error, unless
        a newer fetch was started in the meantime.

        Args:
            client: HTTP client used for the request

        Returns:
            The state after the fetch resolved
        """
        city = self._state.city
        if not city:
            log_with_context(
                logger,
                "info",
                "Fetch rejected: empty city",
                event_type="weather_fetch_rejected",
            )
            return self.dispatch(FetchRejected(message=EMPTY_INPUT_MESSAGE))

        request_id = self.dispatch(FetchStarted()).request_id
        log_with_context(
            logger,
            "info",
            "Fetching weather",
            city=city,
            request_id=request_id,
            event_type="weather_fetch_started",
        )

        try:
            result = await weather_service.get_weather(client, city, self._settings)
        except WeatherFetchException as e:
            log_with_context(
                logger,
                "warning",
                "Weather fetch failed",
                city=city,
                request_id=request_id,
                error=e.message,
                error_code=e.code.value,
                event_type="weather_fetch_failed",
            )
            return self.dispatch(FetchFailed(request_id=request_id, message=e.message, code=e.code))

        log_with_context(
            logger,
            "info",
            "Weather fetched",
            city=city,
            request_id=request_id,
            temperature_celsius=result.temperature_celsius,
            description=result.description,
            event_type="weather_fetch_succeeded",
        )
        return self.dispatch(FetchSucceeded(request_id=request_id, result=result))
