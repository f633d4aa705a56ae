"""Scene classification from weather descriptions."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class SceneKind(str, Enum):
    """Category of ambient background."""

    RAIN = "rain"
    CLOUD = "cloud"
    CLEAR_OR_SUNNY = "clear_or_sunny"
    DEFAULT = "default"


# Checked in order; the first matching rule wins
_SCENE_RULES: tuple[tuple[SceneKind, tuple[str, ...]], ...] = (
    (SceneKind.RAIN, ("rain", "drizzle")),
    (SceneKind.CLOUD, ("cloud",)),
    (SceneKind.CLEAR_OR_SUNNY, ("clear", "sun")),
)


def classify_scene(description: str) -> SceneKind:
    """Classify a weather description into a scene.

    Matching is case-insensitive and substring based, so
    "Light rain with broken clouds" is RAIN, not CLOUD.

    Args:
        description: Weather description text from the result

    Returns:
        The first matching SceneKind, or DEFAULT
    """
    text = description.lower()
    for kind, keywords in _SCENE_RULES:
        if any(keyword in text for keyword in keywords):
            return kind
    return SceneKind.DEFAULT


class SceneConfig(BaseModel):
    """Fixed visual parameter set for one scene.

    ``options`` are passed to the effect constructor as-is; colours are
    24-bit RGB integers.
    """

    model_config = ConfigDict(frozen=True)

    kind: SceneKind
    effect: str
    options: dict[str, float | int | bool]


_COMMON_OPTIONS: dict[str, float | int | bool] = {
    "mouseControls": True,
    "touchControls": True,
    "gyroControls": False,
    "minHeight": 200.0,
    "minWidth": 200.0,
}

SCENE_CONFIGS: dict[SceneKind, SceneConfig] = {
    SceneKind.RAIN: SceneConfig(
        kind=SceneKind.RAIN,
        effect="CLOUDS",
        options={
            **_COMMON_OPTIONS,
            "skyColor": 0x4A5A6A,
            "cloudColor": 0x6B7B8C,
            "cloudShadowColor": 0x1B2838,
            "sunColor": 0x3A3A3A,
            "sunGlareColor": 0x2A2A2A,
            "sunlightColor": 0x3A3A3A,
            "speed": 1.8,
        },
    ),
    SceneKind.CLOUD: SceneConfig(
        kind=SceneKind.CLOUD,
        effect="CLOUDS",
        options={
            **_COMMON_OPTIONS,
            "skyColor": 0x8FA9C4,
            "cloudColor": 0xADC1DE,
            "cloudShadowColor": 0x4B5F78,
            "sunColor": 0xCCCCCC,
            "sunGlareColor": 0xAAAAAA,
            "sunlightColor": 0xBBBBBB,
            "speed": 0.9,
        },
    ),
    SceneKind.CLEAR_OR_SUNNY: SceneConfig(
        kind=SceneKind.CLEAR_OR_SUNNY,
        effect="CLOUDS",
        options={
            **_COMMON_OPTIONS,
            "skyColor": 0x68B8D7,
            "cloudColor": 0xFFFFFF,
            "cloudShadowColor": 0x183550,
            "sunColor": 0xFF9919,
            "sunGlareColor": 0xFF6633,
            "sunlightColor": 0xFF9933,
            "speed": 1.0,
        },
    ),
    SceneKind.DEFAULT: SceneConfig(
        kind=SceneKind.DEFAULT,
        effect="FOG",
        options={
            **_COMMON_OPTIONS,
            "highlightColor": 0xC7D2E0,
            "midtoneColor": 0x8E9AAF,
            "lowlightColor": 0x5C6B82,
            "baseColor": 0xE6ECF2,
            "blurFactor": 0.6,
            "speed": 1.2,
            "zoom": 1.0,
        },
    ),
}


def scene_config_for(description: str) -> SceneConfig:
    """Get the scene configuration for a weather description."""
    return SCENE_CONFIGS[classify_scene(description)]
