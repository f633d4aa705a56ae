"""Main Streamlit application.

Run with ``streamlit run weather_scene/ui/app.py``.
"""

import asyncio
import os
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

from weather_scene.background.selector import BackgroundSelector
from weather_scene.background.vanta import VantaLibrary
from weather_scene.config import BASE_DIR, Settings, get_settings
from weather_scene.core.http_client import create_http_client
from weather_scene.core.lifespan import connect
from weather_scene.exceptions import ConfigurationException
from weather_scene.logging_config import setup_logging
from weather_scene.state import ViewState
from weather_scene.state_managers import WeatherController
from weather_scene.ui.panels import render_view
from weather_scene.ui.surface import StreamlitSurface

# Load environment variables from .env file
load_dotenv(BASE_DIR / ".env")

st.set_page_config(
    page_title="Weather App",
    page_icon="🌦️",
    layout="centered",
)


FETCH_PENDING_KEY = "fetch_pending"


@st.cache_resource
def configure_logging(log_level: str, log_dir: Path) -> None:
    """Install log handlers once per server process, not once per rerun."""
    setup_logging(log_level, log_dir)


def get_page_state(settings: Settings) -> tuple[WeatherController, BackgroundSelector]:
    """Get the controller and selector for this browser session.

    Both live in ``st.session_state`` so they survive reruns.
    """
    if "controller" not in st.session_state:
        controller = WeatherController(settings)
        selector = BackgroundSelector(VantaLibrary(settings))
        connect(controller, selector)
        st.session_state.controller = controller
        st.session_state.selector = selector
    return st.session_state.controller, st.session_state.selector


def request_fetch() -> None:
    """Button callback: mark a fetch as pending for the coming rerun."""
    st.session_state[FETCH_PENDING_KEY] = True


def submit_disabled(state: ViewState, fetch_pending: bool) -> bool:
    """The submit button is disabled while a fetch is pending or in flight."""
    return fetch_pending or state.is_loading


async def submit(controller: WeatherController, settings: Settings) -> None:
    """Fetch weather with a client scoped to this rerun's event loop."""
    async with create_http_client(settings) as client:
        await controller.fetch_weather(client)


def main():
    """Weather page layout."""
    try:
        settings = get_settings()
    except ConfigurationException as e:
        st.error(e.message)
        st.stop()

    configure_logging(os.getenv("LOG_LEVEL", "INFO"), settings.log_dir)

    controller, selector = get_page_state(settings)

    st.title("Weather App")

    # Fresh placeholder every rerun; the live effect is re-mounted onto it
    selector.bind_surface(StreamlitSurface(st.empty()))

    if controller.state.initial_loading:
        with st.spinner("Loading..."):
            asyncio.run(controller.warm_up())

    city = st.text_input("City", key="city_input", placeholder="Enter city name")
    controller.set_city(city)

    # The click only sets the flag; the fetch runs in the rerun it triggers,
    # after the button has been drawn disabled.
    fetch_pending = st.session_state.pop(FETCH_PENDING_KEY, False)
    st.button(
        "Get Weather",
        disabled=submit_disabled(controller.state, fetch_pending),
        on_click=request_fetch,
        use_container_width=True,
    )

    if fetch_pending:
        with st.spinner("Fetching weather..."):
            asyncio.run(submit(controller, settings))
        st.rerun()

    render_view(controller.state)


if __name__ == "__main__":
    main()
