"""Everything that makes up one game in progress."""

from __future__ import annotations

from .coord import Coord
from .floor import Floor
from .monster import Monster
from .player import Player


class World:
    """The floor, the player, the monsters and the tiles needing a redraw."""

    def __init__(self, rows: int, cols: int) -> None:
        self.floor = Floor(rows, cols)
        self.player = Player(Coord(rows // 2, cols // 2))
        self.dirty_coords: list[Coord] = []
        self.monsters: list[Monster] = []