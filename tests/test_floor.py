import pytest

from rustysword.coord import Coord
from rustysword.floor import Floor


def test_dimensions():
    floor = Floor(4, 6)
    assert floor.rows == 4
    assert floor.cols == 6
    assert len(floor.tiles) == 4
    assert all(len(row) == 6 for row in floor.tiles)


def test_corners():
    floor = Floor(4, 6)
    assert floor.get_symbol(Coord(0, 0)) == "┌"
    assert floor.get_symbol(Coord(0, 5)) == "┐"
    assert floor.get_symbol(Coord(3, 0)) == "└"
    assert floor.get_symbol(Coord(3, 5)) == "┘"


def test_edges_and_interior():
    floor = Floor(5, 7)
    for col in range(1, 6):
        assert floor.get_symbol(Coord(0, col)) == "─"
        assert floor.get_symbol(Coord(4, col)) == "─"
    for row in range(1, 4):
        assert floor.get_symbol(Coord(row, 0)) == "│"
        assert floor.get_symbol(Coord(row, 6)) == "│"
        for col in range(1, 6):
            assert floor.get_symbol(Coord(row, col)) == " "


def test_is_wall_matches_border():
    floor = Floor(5, 7)
    for row in range(floor.rows):
        for col in range(floor.cols):
            on_border = row in (0, floor.rows - 1) or col in (0, floor.cols - 1)
            assert floor.is_wall(Coord(row, col)) is on_border


def test_minimal_floor_is_all_wall():
    floor = Floor(2, 2)
    assert all(floor.is_wall(Coord(r, c)) for r in range(2) for c in range(2))


def test_get_symbol_outside_raises():
    floor = Floor(3, 3)
    with pytest.raises(IndexError):
        floor.get_symbol(Coord(3, 0))


@pytest.mark.parametrize("rows, cols", [(1, 5), (5, 1), (0, 0)])
def test_too_small_rejected(rows, cols):
    with pytest.raises(ValueError):
        Floor(rows, cols)