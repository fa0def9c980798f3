"""Drawing the world onto a terminal."""

from __future__ import annotations

import queue
import sys
from typing import TextIO

from .coord import Coord
from .world import World

TITLE = "Rusty Sword - Game of Infamy!"


class Renderer:
    """Writes the floor once, then only what changed on each frame."""

    def __init__(self, term, out: TextIO | None = None) -> None:
        self.term = term
        self.out = out if out is not None else sys.stdout

    def _put(self, coord: Coord, text: str) -> None:
        self.out.write(self.term.move_yx(coord.row, coord.col) + text)

    def draw_floor(self, world: World) -> None:
        """Draw every floor tile, starting at the top-left corner."""
        self.out.write(self.term.move_yx(0, 0))
        for row in world.floor.tiles:
            self.out.write("".join(row) + "\r\n")
        self.out.flush()

    def draw_frame(self, world: World) -> None:
        """Redraw dirty tiles, the player, the score, the monsters and the title."""
        floor = world.floor
        for coord in world.dirty_coords:
            self._put(coord, floor.get_symbol(coord))
        world.dirty_coords.clear()

        player = world.player
        if player.dirty:
            player.dirty = False
            self._put(player.sword_coord, self.term.red(player.sword_symbol()))
            self._put(player.coord, self.term.blue(player.symbol))

        score = f"Score: {player.score}"
        self._put(Coord(floor.rows, floor.cols - len(score)), self.term.blue(score))

        for monster in world.monsters:
            self._put(monster.coord, self.term.green(monster.symbol))

        self._put(Coord(floor.rows, 0), self.term.white(TITLE))
        self.out.flush()


def render_loop(world_rx: queue.Queue, main_tx: queue.Queue, term, out: TextIO | None = None) -> None:
    """Receive worlds, draw them and hand them back until ``None`` arrives."""
    renderer = Renderer(term, out)
    renderer.out.write(term.hide_cursor)
    try:
        world = world_rx.get()
        if world is None:
            return
        renderer.draw_floor(world)
        main_tx.put(world)
        while (world := world_rx.get()) is not None:
            renderer.draw_frame(world)
            main_tx.put(world)
    finally:
        renderer.out.write(term.normal_cursor)
        renderer.out.flush()