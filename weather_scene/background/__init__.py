"""Ambient background selection and effect lifecycle."""

from weather_scene.background.scenes import SCENE_CONFIGS, SceneConfig, SceneKind, classify_scene
from weather_scene.background.selector import BackgroundSelector
from weather_scene.background.vanta import VantaEffect, VantaLibrary

__all__ = [
    "SCENE_CONFIGS",
    "BackgroundSelector",
    "SceneConfig",
    "SceneKind",
    "VantaEffect",
    "VantaLibrary",
    "classify_scene",
]
