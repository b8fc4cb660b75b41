import pytest

from cursus.fdf_app import (
    Key,
    handle_key_offset,
    handle_key_rotation,
    handle_mouse_move,
    handle_scroll,
    main,
)
from cursus.fdf_map import MOVE_SPEED, HeightMap, Point, ViewSettings


def _settings(**kwargs):
    return ViewSettings(offset_x=100, offset_y=200, **kwargs)


def _heightmap():
    return HeightMap([[Point(z=10), Point(z=-10)]], z_min=-10, z_max=10)


@pytest.mark.parametrize(
    "key, shift",
    [
        (Key.UP, (0, -MOVE_SPEED)),
        (Key.DOWN, (0, MOVE_SPEED)),
        (Key.LEFT, (-MOVE_SPEED, 0)),
        (Key.RIGHT, (MOVE_SPEED, 0)),
    ],
)
def test_key_offset(key, shift):
    settings = _settings()
    handle_key_offset(settings, key)
    assert (settings.offset_x - 100, settings.offset_y - 200) == shift


def test_key_offset_ignores_other_keys():
    settings = _settings()
    handle_key_offset(settings, Key.TAB)
    assert (settings.offset_x, settings.offset_y) == (100, 200)


@pytest.mark.parametrize(
    "key, angles",
    [
        (Key.UP, (0.05, 0.0)),
        (Key.DOWN, (-0.05, 0.0)),
        (Key.LEFT, (0.0, 0.05)),
        (Key.RIGHT, (0.0, -0.05)),
    ],
)
def test_key_rotation(key, angles):
    settings = _settings()
    handle_key_rotation(settings, key)
    assert (settings.rotation_angle_x, settings.rotation_angle_y) == pytest.approx(angles)


def test_mouse_move_without_press_does_nothing():
    settings = _settings()
    assert handle_mouse_move(settings, 40, 50) is False
    assert (settings.offset_x, settings.offset_y) == (100, 200)


def test_mouse_drag_pans():
    settings = _settings(mouse_pressed=True, prev_mouse_x=10, prev_mouse_y=10)
    assert handle_mouse_move(settings, 15, 30) is True
    assert (settings.offset_x, settings.offset_y) == (105, 220)
    assert (settings.prev_mouse_x, settings.prev_mouse_y) == (15, 30)


def test_mouse_drag_rotates_in_control_mode():
    settings = _settings(mouse_pressed=True, control=True, prev_mouse_x=10, prev_mouse_y=10)
    assert handle_mouse_move(settings, 20, 20) is True
    assert settings.rotation_angle_x < 0 < settings.rotation_angle_y
    assert (settings.offset_x, settings.offset_y) == (100, 200)


def test_scroll_in_enlarges():
    settings = _settings()
    heightmap = _heightmap()
    handle_scroll(settings, heightmap, 1, 0, 0)
    assert settings.scale > ViewSettings().scale
    assert heightmap.points[0][0].z > 10
    assert heightmap.z_max > 10


def test_scroll_around_view_centre_keeps_offset():
    settings = _settings()
    handle_scroll(settings, _heightmap(), 1, 100, 200)
    assert (settings.offset_x, settings.offset_y) == (100, 200)


def test_scroll_in_at_max_scale_changes_nothing():
    settings = _settings(scale=100)
    heightmap = _heightmap()
    handle_scroll(settings, heightmap, 1, 0, 0)
    assert settings.scale == 100
    assert [point.z for point in heightmap.points[0]] == [10, -10]


def test_scroll_out_at_min_scale_changes_nothing():
    settings = _settings(scale=1)
    handle_scroll(settings, _heightmap(), -1, 0, 0)
    assert settings.scale == 1


def test_scroll_in_scale_mode_stretches_heights_only():
    settings = _settings(scale_mode=True)
    heightmap = _heightmap()
    handle_scroll(settings, heightmap, 1, 0, 0)
    assert settings.scale == ViewSettings().scale
    assert heightmap.points[0][1].z < -10


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_missing_map(tmp_path):
    assert main([str(tmp_path / "absent.fdf")]) == 1