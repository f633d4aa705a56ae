"""Streamlit rendering surface for background effects."""

import streamlit.components.v1 as components
from streamlit.delta_generator import DeltaGenerator


class StreamlitSurface:
    """Render surface backed by an ``st.empty()`` placeholder."""

    def __init__(self, placeholder: DeltaGenerator):
        self._placeholder = placeholder

    def mount(self, markup: str, height: int) -> None:
        with self._placeholder.container():
            components.html(markup, height=height)

    def clear(self) -> None:
        self._placeholder.empty()
