import pytest

from cursus.fdf_map import DEFAULT_COLOR, HeightMap, MapError, Point, ViewSettings, parse_map


def _write(tmp_path, text):
    path = tmp_path / "map.fdf"
    path.write_text(text)
    return path


def _heights(heightmap):
    return [[point.z for point in row] for row in heightmap.points]


def test_dimensions(tmp_path):
    heightmap = parse_map(_write(tmp_path, "0 0 0\n0 5 0\n"), ViewSettings())
    assert (heightmap.width, heightmap.height) == (3, 2)


def test_heights_read_row_by_row(tmp_path):
    heightmap = parse_map(_write(tmp_path, "1 2 3\n-4 5 6\n"), ViewSettings(z_scale=1))
    assert _heights(heightmap) == [[1, 2, 3], [-4, 5, 6]]


def test_heights_multiplied_by_z_scale(tmp_path):
    settings = ViewSettings()
    heightmap = parse_map(_write(tmp_path, "1\n"), settings)
    assert heightmap.points[0][0].z == settings.z_scale


def test_colours(tmp_path):
    heightmap = parse_map(_write(tmp_path, "0,0xFF0000 0\n"), ViewSettings())
    assert [point.color for point in heightmap.points[0]] == [0xFF0000, DEFAULT_COLOR]


def test_colour_without_prefix(tmp_path):
    heightmap = parse_map(_write(tmp_path, "0,ff00\n"), ViewSettings())
    assert heightmap.points[0][0].color == 0xFF00


def test_range_tracks_extremes(tmp_path):
    heightmap = parse_map(_write(tmp_path, "-3 7 2\n"), ViewSettings(z_scale=1))
    assert (heightmap.z_min, heightmap.z_max) == (-3, 7)


def test_range_includes_zero(tmp_path):
    heightmap = parse_map(_write(tmp_path, "4 9\n"), ViewSettings(z_scale=1))
    assert heightmap.z_min == 0
    assert heightmap.z_max == 9


def test_ragged_rows_rejected(tmp_path):
    with pytest.raises(MapError):
        parse_map(_write(tmp_path, "0 0 0\n0 0\n"), ViewSettings())


def test_missing_file_rejected(tmp_path):
    with pytest.raises(MapError):
        parse_map(tmp_path / "absent.fdf", ViewSettings())


def test_empty_file_rejected(tmp_path):
    with pytest.raises(MapError):
        parse_map(_write(tmp_path, ""), ViewSettings())


def test_initial_positions_evenly_spaced(tmp_path):
    settings = ViewSettings()
    heightmap = parse_map(_write(tmp_path, "0 0 0 0\n"), settings)
    xs = [point.x for point in heightmap.points[0]]
    assert {b - a for a, b in zip(xs, xs[1:])} == {settings.scale}


def test_scale_heights_doubles():
    heightmap = HeightMap([[Point(z=1), Point(z=-2)]], z_min=-2, z_max=1)
    heightmap.scale_heights(2)
    assert _heights(heightmap) == [[2, -4]]
    assert heightmap.z_min == min(_heights(heightmap)[0])


def test_scale_heights_truncates_toward_zero():
    heightmap = HeightMap([[Point(z=3), Point(z=-3)]], z_min=-3, z_max=3)
    heightmap.scale_heights(0.5)
    assert _heights(heightmap) == [[1, -1]]
    assert heightmap.z_min == -heightmap.z_max