"""Unit tests for the view state reducer."""

import pytest

from weather_scene.exceptions import ErrorCode
from weather_scene.models.weather import WeatherResult
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


@pytest.fixture
def result():
    return WeatherResult(
        city="Oslo",
        temperature_celsius=3,
        description="overcast clouds",
        humidity=70,
        timestamp_millis=1700000000000,
    )


def test_initial_state():
    state = ViewState()

    assert state.city == ""
    assert state.is_loading is False
    assert state.initial_loading is True
    assert state.result is None
    assert state.error is None
    assert state.request_id == 0


def test_city_changed_updates_city_only():
    state = reduce(ViewState(), CityChanged(city="  anything at all  "))

    assert state.city == "  anything at all  "
    assert state.is_loading is False
    assert state.error is None


def test_city_changed_to_same_value_keeps_snapshot():
    state = ViewState(city="Oslo")

    assert reduce(state, CityChanged(city="Oslo")) is state


def test_fetch_rejected_sets_error_and_keeps_result(result):
    state = ViewState(result=result)

    state = reduce(state, FetchRejected(message="Please enter a city name"))

    assert state.error == "Please enter a city name"
    assert state.error_code == ErrorCode.EMPTY_INPUT
    assert state.result is result
    assert state.is_loading is False
    assert state.request_id == 0


def test_fetch_started_sets_loading_and_clears_error():
    state = ViewState(error="City not found", error_code=ErrorCode.NOT_FOUND)

    state = reduce(state, FetchStarted())

    assert state.is_loading is True
    assert state.error is None
    assert state.error_code is None
    assert state.request_id == 1


def test_fetch_succeeded_stores_result(result):
    state = reduce(ViewState(), FetchStarted())

    state = reduce(state, FetchSucceeded(request_id=1, result=result))

    assert state.result == result
    assert state.error is None
    assert state.is_loading is False


def test_fetch_failed_clears_result(result):
    state = reduce(ViewState(result=result), FetchStarted())

    state = reduce(state, FetchFailed(request_id=1, message="City not found", code=ErrorCode.NOT_FOUND))

    assert state.result is None
    assert state.error == "City not found"
    assert state.error_code == ErrorCode.NOT_FOUND
    assert state.is_loading is False


def test_stale_completion_is_dropped(result):
    """Test an older request cannot overwrite a newer one."""
    state = reduce(ViewState(), FetchStarted())
    state = reduce(state, FetchStarted())
    assert state.request_id == 2

    after_stale = reduce(state, FetchSucceeded(request_id=1, result=result))
    assert after_stale is state
    assert after_stale.is_loading is True

    after_stale = reduce(state, FetchFailed(request_id=1, message="City not found", code=ErrorCode.NOT_FOUND))
    assert after_stale is state


def test_warmup_finished_is_one_shot():
    state = reduce(ViewState(), WarmupFinished())
    assert state.initial_loading is False

    assert reduce(state, WarmupFinished()) is state


def test_reduce_does_not_mutate_input():
    state = ViewState()

    reduce(state, FetchStarted())

    assert state.is_loading is False
    assert state.request_id == 0


def test_unknown_event_raises():
    class Unknown(Event):
        pass

    with pytest.raises(TypeError):
        reduce(ViewState(), Unknown())
