import pytest

from hexmapper.hexmap import HexMap, HexTile, hex_distance
from hexmapper.vector import Vec3


def test_same_row_distance_is_column_difference():
    assert hex_distance(2, 4, 7, 4) == 5
    assert hex_distance(7, 3, 2, 3) == 5


def test_distance_to_self_is_zero():
    for x, y in [(0, 0), (3, 5), (10, 1)]:
        assert hex_distance(x, y, x, y) == 0


@pytest.mark.parametrize("a,b", [((1, 1), (4, 5)), ((0, 0), (3, 7)), ((5, 2), (1, 9)), ((6, 6), (2, 1))])
def test_distance_is_symmetric(a, b):
    assert hex_distance(*a, *b) == hex_distance(*b, *a)


def test_distance_at_least_row_difference():
    assert hex_distance(0, 0, 0, 6) >= 6
    assert hex_distance(4, 1, 9, 8) >= 7


def test_new_map_is_white_resource_zero():
    grid = HexMap(dimensions=5)
    tile = grid.tile(2, 3)
    assert tile == HexTile(0, Vec3(1.0, 1.0, 1.0))


def test_invalid_dimensions_rejected():
    with pytest.raises(ValueError):
        HexMap(dimensions=0)


def test_tile_costs_follow_resource():
    grid = HexMap(dimensions=4)
    grid.set_tile(0, 0, 1)
    grid.set_tile(1, 0, 2)
    grid.set_tile(2, 0, 11)
    grid.set_tile(3, 0, 5)
    assert grid.tile_cost(0, 0) == 1
    assert grid.tile_cost(1, 0) == 1
    assert grid.tile_cost(2, 0) == 10
    assert grid.tile_cost(3, 0) is None
    assert grid.tile_cost(0, 1) is None


def test_tile_cost_outside_is_none():
    grid = HexMap(dimensions=4)
    grid.clear(1)
    assert grid.tile_cost(-1, 0) is None
    assert grid.tile_cost(0, 4) is None


def test_set_tile_outside_raises():
    grid = HexMap(dimensions=4)
    with pytest.raises(IndexError):
        grid.set_tile(4, 0, 1)
    with pytest.raises(IndexError):
        grid.tile(0, -1)


def test_set_color_outside_is_ignored():
    grid = HexMap(dimensions=3)
    grid.set_color(5, 5, Vec3(0.0, 1.0, 0.0))
    assert all(grid.tile(x, y).color == Vec3(1.0, 1.0, 1.0) for x in range(3) for y in range(3))


def test_clear_resets_resource_and_color():
    grid = HexMap(dimensions=3)
    grid.set_color(1, 1, Vec3(0.0, 1.0, 0.0))
    grid.set_tile(2, 2, 7)
    grid.clear(2)
    assert all(grid.tile(x, y) == HexTile(2, Vec3(1.0, 1.0, 1.0)) for x in range(3) for y in range(3))


def test_world_position_of_first_tile():
    grid = HexMap()
    assert grid.world_position(0, 0) == Vec3(12.0, 9.25, 0.0)


def test_odd_rows_shift_half_a_tile():
    grid = HexMap(dimensions=6)
    even = grid.world_position(2, 0)
    odd = grid.world_position(2, 1)
    assert even.x - odd.x == pytest.approx(0.5)
    assert even.y - odd.y == pytest.approx(0.75)


@pytest.mark.parametrize("coord", [(0, 0), (3, 4), (7, 7), (5, 2)])
def test_closest_hex_of_world_position_round_trips(coord):
    grid = HexMap(dimensions=8)
    position = grid.world_position(*coord)
    assert grid.closest_hex(position.x, position.y) == coord


def test_closest_hex_far_away_is_none():
    grid = HexMap(dimensions=3)
    assert grid.closest_hex(1.0e6, 1.0e6) is None


def test_mouse_moved_highlights_and_brightens():
    grid = HexMap(dimensions=6)
    position = grid.world_position(2, 3)
    grid.mouse_moved(position.x, position.y)
    assert grid.highlight == (2, 3)
    assert grid.tile_tint(2, 3) == Vec3(1.25, 1.25, 1.25)
    assert grid.tile_tint(1, 3) == Vec3(1.0, 1.0, 1.0)


def test_clear_focus_removes_highlight():
    grid = HexMap(dimensions=6)
    position = grid.world_position(1, 1)
    grid.mouse_moved(position.x, position.y)
    grid.clear_focus()
    assert grid.highlight is None
    assert grid.set_active_tile(4) is False


def test_set_active_tile_changes_highlighted_tile():
    grid = HexMap(dimensions=6)
    position = grid.world_position(4, 2)
    grid.mouse_moved(position.x, position.y)
    assert grid.set_active_tile(9) is True
    assert grid.tile(4, 2).resource_id == 9


def test_mouse_clicked_reports_hex():
    clicks = []
    grid = HexMap(dimensions=6, on_click=lambda x, y: clicks.append((x, y)))
    position = grid.world_position(3, 5)
    result = grid.mouse_clicked(position.x, position.y)
    assert result == (3, 5)
    assert clicks == [(3, 5)]