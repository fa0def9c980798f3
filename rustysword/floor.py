"""The walled floor the game is played on."""

from __future__ import annotations

from .coord import Coord

HORIZONTAL = "─"
VERTICAL = "│"
TOP_LEFT = "┌"
TOP_RIGHT = "┐"
BOTTOM_LEFT = "└"
BOTTOM_RIGHT = "┘"
BLANK = " "


class Floor:
    """A rectangle of tiles, wall around the edge and blank inside."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 2 or cols < 2:
            raise ValueError(f"floor must be at least 2x2, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        inner = cols - 2
        top = [TOP_LEFT, *[HORIZONTAL] * inner, TOP_RIGHT]
        middle = ([VERTICAL, *[BLANK] * inner, VERTICAL] for _ in range(rows - 2))
        bottom = [BOTTOM_LEFT, *[HORIZONTAL] * inner, BOTTOM_RIGHT]
        self.tiles: list[list[str]] = [top, *middle, bottom]

    def get_symbol(self, coord: Coord) -> str:
        """Return the tile drawn at ``coord``."""
        return self.tiles[coord.row][coord.col]

    def is_wall(self, coord: Coord) -> bool:
        """Return True if ``coord`` cannot be walked on."""
        return self.get_symbol(coord) != BLANK