"""Monsters that chase the player."""

from __future__ import annotations

import random

from .coord import Coord
from .timer import Timer

MONSTER_SYMBOLS = ("·", "☨", "♄", "⟟", "⟠", "⧚", "⫳")

MIN_MOVE_MILLIS = 200
MAX_MOVE_MILLIS = 1200


class Monster:
    """A monster with a random look and a random pace."""

    def __init__(self, coord: Coord, rng: random.Random) -> None:
        self.coord = coord
        self.symbol = rng.choice(MONSTER_SYMBOLS)
        self.move_timer = Timer.from_millis(rng.randrange(MIN_MOVE_MILLIS, MAX_MOVE_MILLIS))

    def try_travel(self, target: Coord, dirty_coords: list[Coord]) -> None:
        """Step towards ``target`` if the move timer has run out."""
        if not self.move_timer.ready:
            return
        self.move_timer.reset()
        dirty_coords.append(self.coord)
        self.coord = self.coord.to(target)