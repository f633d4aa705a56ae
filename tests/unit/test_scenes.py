"""Unit tests for scene classification."""

import pytest

from weather_scene.background.scenes import SCENE_CONFIGS, SceneKind, classify_scene, scene_config_for


@pytest.mark.parametrize(
    ("description", "kind"),
    [
        ("light rain", SceneKind.RAIN),
        ("Light Drizzle", SceneKind.RAIN),
        ("thunderstorm with heavy RAIN", SceneKind.RAIN),
        ("broken clouds", SceneKind.CLOUD),
        ("Overcast Clouds", SceneKind.CLOUD),
        ("clear sky", SceneKind.CLEAR_OR_SUNNY),
        ("Sunny", SceneKind.CLEAR_OR_SUNNY),
        ("mist", SceneKind.DEFAULT),
        ("snow", SceneKind.DEFAULT),
        ("", SceneKind.DEFAULT),
    ],
)
def test_classify_scene(description, kind):
    assert classify_scene(description) == kind


def test_rain_wins_over_cloud():
    """Test the first matching rule wins when several keywords appear."""
    assert classify_scene("light rain, broken clouds") == SceneKind.RAIN
    assert classify_scene("clouds clearing to sun") == SceneKind.CLOUD


def test_substring_match():
    assert classify_scene("freezing drizzle") == SceneKind.RAIN
    assert classify_scene("rainy spells") == SceneKind.RAIN
    assert classify_scene("drizzly") == SceneKind.DEFAULT
    assert classify_scene("partly cloudy") == SceneKind.CLOUD
    assert classify_scene("sunshine") == SceneKind.CLEAR_OR_SUNNY


def test_every_scene_has_config():
    assert set(SCENE_CONFIGS) == set(SceneKind)
    for kind, config in SCENE_CONFIGS.items():
        assert config.kind == kind
        assert config.effect
        assert config.options["minHeight"] == 200.0
        assert "speed" in config.options


def test_scene_config_for():
    assert scene_config_for("moderate rain") is SCENE_CONFIGS[SceneKind.RAIN]
    assert scene_config_for("haze") is SCENE_CONFIGS[SceneKind.DEFAULT]
