"""Immutable view state and the reducer that advances it.

Every change to what the page shows goes through ``reduce``: the controller
turns user actions and network outcomes into events, and the reducer returns
a new ``ViewState`` snapshot. Snapshots are frozen so listeners can hold on to
them safely.
"""

from pydantic import BaseModel, ConfigDict

from weather_scene.exceptions import ErrorCode
from weather_scene.models.weather import WeatherResult


class ViewState(BaseModel):
    """Snapshot of everything the weather page renders."""

    model_config = ConfigDict(frozen=True)

    city: str = ""
    is_loading: bool = False
    initial_loading: bool = True
    result: WeatherResult | None = None
    error: str | None = None
    error_code: ErrorCode | None = None
    # Generation of the most recently started fetch
    request_id: int = 0


class Event(BaseModel):
    """Base class for reducer events."""

    model_config = ConfigDict(frozen=True)


class CityChanged(Event):
    city: str


class FetchRejected(Event):
    """Fetch refused before any network call (empty city)."""

    message: str
    code: ErrorCode = ErrorCode.EMPTY_INPUT


class FetchStarted(Event):
    pass


class FetchSucceeded(Event):
    request_id: int
    result: WeatherResult


class FetchFailed(Event):
    request_id: int
    message: str
    code: ErrorCode


class WarmupFinished(Event):
    pass


def reduce(state: ViewState, event: Event) -> ViewState:
    """Apply an event to a state snapshot.

    Completions carrying a ``request_id`` other than the latest one are
    dropped, so an overlapping older request can never overwrite a newer one.

    Args:
        state: Current snapshot
        event: Event to apply

    Returns:
        New snapshot (or ``state`` itself when the event changes nothing)

    Raises:
        TypeError: If the event type is unknown
    """
    if isinstance(event, CityChanged):
        if event.city == state.city:
            return state
        return state.model_copy(update={"city": event.city})

    if isinstance(event, FetchRejected):
        return state.model_copy(update={"error": event.message, "error_code": event.code})

    if isinstance(event, FetchStarted):
        return state.model_copy(
            update={
                "is_loading": True,
                "error": None,
                "error_code": None,
                "request_id": state.request_id + 1,
            }
        )

    if isinstance(event, FetchSucceeded):
        if event.request_id != state.request_id:
            return state
        return state.model_copy(
            update={"result": event.result, "error": None, "error_code": None, "is_loading": False}
        )

    if isinstance(event, FetchFailed):
        if event.request_id != state.request_id:
            return state
        return state.model_copy(
            update={"result": None, "error": event.message, "error_code": event.code, "is_loading": False}
        )

    if isinstance(event, WarmupFinished):
        if not state.initial_loading:
            return state
        return state.model_copy(update={"initial_loading": False})

    raise TypeError(f"Unknown event: {type(event).__name__}")
