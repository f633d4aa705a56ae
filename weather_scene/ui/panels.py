"""Result and error panels for the weather page."""

import streamlit as st

from weather_scene.models.weather import WeatherResult
from weather_scene.state import ViewState


def get_weather_emoji(description: str) -> str:
    """Get emoji for weather description.

    Args:
        description: Weather description string from the result.

    Returns:
        Emoji representing the weather description.
    """
    description_lower = description.lower()

    if "thunder" in description_lower or "storm" in description_lower:
        return "⛈️"
    elif "rain" in description_lower or "drizzle" in description_lower:
        return "🌧️"
    elif "snow" in description_lower:
        return "❄️"
    elif "cloud" in description_lower:
        return "☁️"
    elif "clear" in description_lower or "sun" in description_lower:
        return "☀️"
    elif "mist" in description_lower or "fog" in description_lower:
        return "🌫️"
    else:
        return "🌤️"


def result_lines(result: WeatherResult) -> list[str]:
    """Lines shown in the result panel, below the city heading."""
    return [
        f"**Temperature:** {result.temperature_celsius}°C",
        f"**Description:** {get_weather_emoji(result.description)} {result.description}",
        f"**Humidity:** {result.humidity_label}",
        f"**Last Updated:** {result.last_updated}",
    ]


def render_result_panel(result: WeatherResult) -> None:
    """Render the weather result panel."""
    with st.container(border=True):
        st.subheader(result.city)
        for line in result_lines(result):
            st.markdown(line)


def render_error_panel(message: str) -> None:
    """Render the error panel."""
    st.error(message)


def render_view(state: ViewState) -> None:
    """Render whichever panel the state calls for.

    The error panel and the result panel are never shown together.
    """
    if state.error:
        render_error_panel(state.error)
    elif state.result is not None:
        render_result_panel(state.result)
