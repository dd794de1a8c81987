"""
Editor configuration loading and validation.
"""

import json
import logging
import pytest

from core.config import DEFAULT_TILE_TYPES, EditorConfig
from core.types import InvalidArgument


def test_defaults_are_valid():
    config = EditorConfig().validate()
    assert config.radius == 4
    assert config.tile_types == DEFAULT_TILE_TYPES
    assert config.marker_spacing != config.tile_spacing


@pytest.mark.parametrize("overrides", [
    {"radius": -1},
    {"radius": 2.5},
    {"tile_spacing": 0},
    {"marker_spacing": -1.0},
    {"pixel_scale": 0},
    {"tile_types": []},
    {"tile_types": ["forest", ""]},
    {"default_type": "lava"},
    {"tile_spacing": "1.0"},
    {"marker_spacing": None},
    {"pixel_scale": True},
    {"ground_offset": "0"},
    {"tile_types": "forest"},
    {"tile_types": 5},
    {"asset_dir": 3},
])
def test_invalid_values_rejected(overrides):
    with pytest.raises(InvalidArgument):
        EditorConfig.from_dict(overrides)


def test_from_dict_ignores_unknown_keys(caplog):
    with caplog.at_level(logging.WARNING, logger="core.config"):
        config = EditorConfig.from_dict({"radius": 3, "camera_fov": 50})
    assert config.radius == 3
    assert "camera_fov" in caplog.text


def test_from_json(tmp_path):
    path = tmp_path / "editor.json"
    path.write_text(json.dumps({
        "radius": 6,
        "tile_types": ["grass", "stone"],
        "default_type": "stone",
        "marker_spacing": 1.2,
    }))

    config = EditorConfig.from_json(str(path))
    assert config.radius == 6
    assert config.tile_types == ("grass", "stone")
    assert config.default_type == "stone"
    assert config.marker_spacing == 1.2
    assert config.tile_spacing == 1.0


def test_from_json_requires_object(tmp_path):
    path = tmp_path / "editor.json"
    path.write_text("[1, 2, 3]")
    with pytest.raises(InvalidArgument):
        EditorConfig.from_json(str(path))


def test_to_dict_round_trips():
    config = EditorConfig(radius=2, tile_types=("a", "b"), default_type="b")
    assert EditorConfig.from_dict(config.to_dict()) == config


def test_ground_offset_may_be_negative_or_zero():
    assert EditorConfig.from_dict({"ground_offset": -0.5}).ground_offset == -0.5
    assert EditorConfig.from_dict({"ground_offset": 0}).ground_offset == 0
