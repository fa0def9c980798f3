from rustysword.coord import Coord, Direction
from rustysword.floor import Floor
from rustysword.player import Player


def test_new_player():
    player = Player(Coord(5, 5))
    assert player.coord == Coord(5, 5)
    assert player.facing is Direction.RIGHT
    assert player.sword_coord == Coord(5, 5).to_the(Direction.RIGHT)
    assert player.symbol == "☥"
    assert player.dirty is True
    assert player.score == 0
    assert player.sword_symbol() == "↣"


def test_sword_symbols_follow_facing():
    floor = Floor(10, 10)
    player = Player(Coord(5, 5))
    expected = {
        Direction.UP: "⤉",
        Direction.DOWN: "⤈",
        Direction.LEFT: "↢",
        Direction.RIGHT: "↣",
    }
    for direction, symbol in expected.items():
        if player.facing != direction:
            player.travel(direction, floor, [])
        assert player.sword_symbol() == symbol


def test_turning_does_not_move():
    floor = Floor(10, 10)
    player = Player(Coord(5, 5))
    old_sword = player.sword_coord
    player.dirty = False
    dirty = []
    moved = player.travel(Direction.UP, floor, dirty)
    assert moved is False
    assert player.coord == Coord(5, 5)
    assert player.facing is Direction.UP
    assert player.sword_coord == Coord(5, 5).to_the(Direction.UP)
    assert dirty == [old_sword]
    assert player.dirty is True


def test_moving_forward():
    floor = Floor(10, 10)
    start = Coord(5, 5)
    player = Player(start)
    old_sword = player.sword_coord
    player.dirty = False
    dirty = []
    moved = player.travel(Direction.RIGHT, floor, dirty)
    assert moved is True
    assert player.coord == start.to_the(Direction.RIGHT)
    assert player.sword_coord == player.coord.to_the(Direction.RIGHT)
    assert dirty == [start, old_sword]
    assert player.dirty is True


def test_wall_blocks_movement():
    floor = Floor(10, 10)
    player = Player(Coord(1, 1))
    player.travel(Direction.UP, floor, [])
    player.dirty = False
    dirty = []
    moved = player.travel(Direction.UP, floor, dirty)
    assert moved is False
    assert player.coord == Coord(1, 1)
    assert dirty == []
    assert player.dirty is False
    assert player.sword_coord == Coord(1, 1).to_the(Direction.UP)


def test_walking_stops_at_wall():
    floor = Floor(6, 6)
    player = Player(Coord(2, 2))
    for _ in range(10):
        player.travel(Direction.RIGHT, floor, [])
    assert not floor.is_wall(player.coord)
    assert floor.is_wall(player.coord.to_the(Direction.RIGHT))