import json

import pytest

from maodie.core import Vec2
from maodie.sprites import Rect, SpriteManager, SpritePart

ATLAS = {
    "frames": {
        "ui_circle": {"x": 0, "y": 96, "w": 94, "h": 55},
        "head": {"x": 1, "y": 2, "w": 3, "h": 4},
    },
    "composites": {
        "player_idle_0": [
            {"frame": "head", "offset": {"x": 0, "y": -4}},
            {"frame": "ui_circle", "offset": {"x": 2, "y": 3}},
        ]
    },
    "animations": {"player_idle": ["player_idle_0", "head"]},
}


@pytest.fixture
def manager():
    sprites = SpriteManager()
    sprites.load_from_dict(ATLAS)
    return sprites


def test_frame_rectangles(manager):
    assert manager.sprite_rect("ui_circle") == Rect(0, 96, 94, 55)
    assert manager.sprite_rect("ui_circle").size == (94, 55)


def test_unknown_frame_is_null(manager):
    rect = manager.sprite_rect("missing")
    assert rect.is_null()
    assert not manager.sprite_rect("head").is_null()


def test_composite_parts(manager):
    assert manager.composite_parts("player_idle_0") == [
        SpritePart("head", Vec2(0, -4)),
        SpritePart("ui_circle", Vec2(2, 3)),
    ]
    assert manager.composite_parts("nope") == []


def test_animation_sequence(manager):
    assert manager.animation_sequence("player_idle") == ["player_idle_0", "head"]
    assert manager.animation_sequence("nope") == []


def test_composite_parts_returns_copy(manager):
    manager.composite_parts("player_idle_0").clear()
    assert len(manager.composite_parts("player_idle_0")) == 2


def test_reload_replaces_previous_data(manager):
    manager.load_from_dict({"frames": {"other": {"x": 1, "y": 1, "w": 1, "h": 1}}})
    assert manager.sprite_rect("ui_circle").is_null()
    assert manager.composite_parts("player_idle_0") == []
    assert manager.animation_sequence("player_idle") == []


def test_non_integer_fields_default_to_zero():
    sprites = SpriteManager()
    sprites.load_from_dict({"frames": {"f": {"x": "a", "y": 2.5, "w": 8.0, "h": True}}})
    assert sprites.sprite_rect("f") == Rect(0, 0, 8, 0)


def test_non_object_root_gives_empty_atlas():
    sprites = SpriteManager()
    sprites.load_from_dict([1, 2, 3])
    assert sprites.sprite_rect("ui_circle").is_null()


def test_load_from_file(tmp_path):
    path = tmp_path / "sprite.json"
    path.write_text(json.dumps(ATLAS), encoding="utf-8")
    sprites = SpriteManager()
    sprites.load_from_file(path)
    assert sprites.sprite_rect("head") == Rect(1, 2, 3, 4)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        SpriteManager().load_from_file(tmp_path / "absent.json")