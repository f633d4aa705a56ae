"""Protocol definitions for the background effect collaborators."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from weather_scene.background.scenes import SceneConfig


class RenderSurface(Protocol):
    """A mountable drawing region supplied by the hosting page."""

    def mount(self, markup: str, height: int) -> None:
        """Replace the surface content with ``markup``."""
        ...

    def clear(self) -> None:
        """Remove whatever is mounted on the surface."""
        ...


class EffectInstance(Protocol):
    """A live animated background bound to a surface.

    Instances own an animation loop and must be destroyed explicitly.
    """

    def attach(self, surface: RenderSurface) -> None:
        """Move the running effect onto another surface."""
        ...

    def destroy(self) -> None:
        """Stop the effect and release its surface."""
        ...


class EffectLibrary(Protocol):
    """Factory for effect instances (the 3D rendering capability)."""

    def create(self, config: "SceneConfig", surface: RenderSurface) -> EffectInstance:
        """Instantiate the effect described by ``config`` on ``surface``.

        Args:
            config: Fixed visual parameter set for a scene
            surface: Surface the effect renders onto

        Returns:
            The live effect instance
        """
        ...
