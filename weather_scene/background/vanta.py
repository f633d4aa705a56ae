"""Vanta.js background effects rendered through Jinja2 templates."""

import uuid
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from weather_scene.background.scenes import SceneConfig
from weather_scene.config import Settings, get_settings
from weather_scene.exceptions import EffectException
from weather_scene.logging_config import get_logger, log_with_context
from weather_scene.protocols import RenderSurface

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
templates = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
)


class VantaEffect:
    """A Vanta.js effect mounted on a render surface.

    The animation loop lives in the mounted document; destroying the effect
    clears the surface, which unloads the document and stops the loop.
    """

    def __init__(self, config: SceneConfig, surface: RenderSurface, settings: Settings):
        self.config = config
        self.element_id = f"vanta-{uuid.uuid4().hex[:12]}"
        self._settings = settings
        self._surface: RenderSurface | None = None
        self._destroyed = False
        self.attach(surface)

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def render(self) -> str:
        """Render the standalone HTML document for this effect."""
        template = templates.get_template("vanta_effect.html")
        return template.render(
            element_id=self.element_id,
            scene=self.config.kind.value,
            effect=self.config.effect,
            options=self.config.options,
            height=self._settings.effect_height,
            three_js_url=self._settings.three_js_url,
            effect_script_url=f"{self._settings.vanta_cdn_url}/vanta.{self.config.effect.lower()}.min.js",
        )

    def attach(self, surface: RenderSurface) -> None:
        """Mount the effect on ``surface``.

        Raises:
            EffectException: If the effect was already destroyed
        """
        if self._destroyed:
            raise EffectException(
                "Cannot attach a destroyed effect",
                details={"element_id": self.element_id},
            )
        if self._surface is not None and self._surface is not surface:
            self._surface.clear()
        surface.mount(self.render(), self._settings.effect_height)
        self._surface = surface

    def destroy(self) -> None:
        """Stop the effect and clear its surface. Safe to call twice."""
        if self._destroyed:
            return
        self._destroyed = True
        if self._surface is not None:
            self._surface.clear()
            self._surface = None
        log_with_context(
            logger,
            "debug",
            "Vanta effect destroyed",
            element_id=self.element_id,
            scene=self.config.kind.value,
            event_type="effect_destroyed",
        )


class VantaLibrary:
    """Effect library backed by Vanta.js and three.js."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings or get_settings()

    def create(self, config: SceneConfig, surface: RenderSurface) -> VantaEffect:
        effect = VantaEffect(config, surface, self._settings)
        log_with_context(
            logger,
            "debug",
            "Vanta effect created",
            element_id=effect.element_id,
            scene=config.kind.value,
            effect=config.effect,
            event_type="effect_created",
        )
        return effect
