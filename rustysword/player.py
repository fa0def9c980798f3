"""The player and the sword they carry."""

from __future__ import annotations

from .coord import Coord, Direction
from .floor import Floor

PLAYER_SYMBOL = "☥"

SWORD_SYMBOLS = {
    Direction.UP: "⤉",
    Direction.DOWN: "⤈",
    Direction.LEFT: "↢",
    Direction.RIGHT: "↣",
}


class Player:
    """The player, always holding a sword on the side they face."""

    def __init__(self, coord: Coord) -> None:
        self.coord = coord
        self.facing = Direction.RIGHT
        self.sword_coord = coord.to_the(Direction.RIGHT)
        self.symbol = PLAYER_SYMBOL
        self.dirty = True
        self.score = 0

    def sword_symbol(self) -> str:
        """Return the glyph of the sword for the current facing."""
        return SWORD_SYMBOLS[self.facing]

    def travel(self, direction: Direction, floor: Floor, dirty_coords: list[Coord]) -> bool:
        """Turn towards ``direction`` or, if already facing it, step forward.

        Returns True if the player actually moved.
        """
        moved = False
        if self.facing != direction:
            self.dirty = True
            dirty_coords.append(self.sword_coord)
            self.facing = direction
        else:
            to_coord = self.coord.to_the(self.facing)
            if not floor.is_wall(to_coord):
                self.dirty = True
                moved = True
                dirty_coords.append(self.coord)
                dirty_coords.append(self.sword_coord)
                self.coord = to_coord
        self.sword_coord = self.coord.to_the(self.facing)
        return moved