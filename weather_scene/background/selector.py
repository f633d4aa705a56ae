"""Background selector: keeps exactly one effect alive for the current result."""

from weather_scene.background.scenes import scene_config_for
from weather_scene.logging_config import get_logger, log_with_context
from weather_scene.models.weather import WeatherResult
from weather_scene.protocols import EffectInstance, EffectLibrary, RenderSurface
from weather_scene.state_managers import StateManager

logger = get_logger(__name__)


class BackgroundSelector(StateManager):
    """Drives the ambient effect lifecycle from weather results.

    The selector owns at most one effect instance. Whenever the result
    changes the previous instance is destroyed before the next one is
    created, and ``unmount`` (also run by ``cleanup`` and on ``with`` exit)
    destroys whatever is still alive.

    Usable as a context manager::

        with BackgroundSelector(VantaLibrary(), surface) as selector:
            selector.sync(state.result)
    """

    def __init__(self, library: EffectLibrary, surface: RenderSurface | None = None):
        self._library = library
        self._surface = surface
        self._result: WeatherResult | None = None
        self._effect: EffectInstance | None = None

    @property
    def effect(self) -> EffectInstance | None:
        """The live effect instance, if any."""
        return self._effect

    async def initialize(self) -> None:
        """Initialize the selector."""
        # Effects are created lazily on the first result
        pass

    async def cleanup(self) -> None:
        """Destroy the live effect."""
        self.unmount()

    def __enter__(self) -> "BackgroundSelector":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unmount()

    def bind_surface(self, surface: RenderSurface) -> None:
        """Bind (or re-bind) the rendering surface.

        A live effect is moved to the new surface as-is; otherwise an effect
        is created if a result is already present.
        """
        if surface is self._surface:
            return
        self._surface = surface
        if self._effect is not None:
            self._effect.attach(surface)
        else:
            self._replace_effect()

    def sync(self, result: WeatherResult | None) -> None:
        """Follow the current weather result.

        Only a different result object triggers a transition; passing the
        same snapshot again is a no-op.
        """
        if result is self._result:
            return
        self._result = result
        self._replace_effect()

    def unmount(self) -> None:
        """Destroy the live effect, if any."""
        self._release()

    def _release(self) -> None:
        if self._effect is None:
            return
        effect, self._effect = self._effect, None
        effect.destroy()
        log_with_context(
            logger,
            "debug",
            "Background effect released",
            event_type="background_released",
        )

    def _replace_effect(self) -> None:
        self._release()
        if self._result is None or self._surface is None:
            return

        config = scene_config_for(self._result.description)
        self._effect = self._library.create(config, self._surface)
        log_with_context(
            logger,
            "info",
            "Background scene selected",
            scene=config.kind.value,
            description=self._result.description,
            event_type="background_selected",
        )
