import random

from rustysword.coord import Coord, Direction
from rustysword.monster import Monster
from rustysword.world import World


def test_new_world():
    world = World(30, 60)
    assert world.floor.rows == 30
    assert world.floor.cols == 60
    assert world.player.coord == Coord(30 // 2, 60 // 2)
    assert world.dirty_coords == []
    assert world.monsters == []


def test_player_starts_on_open_floor():
    world = World(7, 9)
    assert not world.floor.is_wall(world.player.coord)
    assert not world.floor.is_wall(world.player.sword_coord)


def test_worlds_do_not_share_state():
    first = World(10, 10)
    second = World(10, 10)
    first.monsters.append(Monster(Coord(2, 2), random.Random(0)))
    first.player.travel(Direction.UP, first.floor, first.dirty_coords)
    assert second.monsters == []
    assert second.dirty_coords == []
    assert len(first.dirty_coords) == 1