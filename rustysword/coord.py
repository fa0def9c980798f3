"""Grid coordinates, directions and key bindings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """One of the four directions a thing can move or face."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_KEY_NAMES = {
    "KEY_UP": Direction.UP,
    "KEY_DOWN": Direction.DOWN,
    "KEY_LEFT": Direction.LEFT,
    "KEY_RIGHT": Direction.RIGHT,
}

# WASD plus the matching Dvorak keys.
_KEY_CHARS = {
    "w": Direction.UP,
    ",": Direction.UP,
    "s": Direction.DOWN,
    "o": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
    "e": Direction.RIGHT,
}


def key_to_direction(key) -> Direction | None:
    """Map a key press to a direction, or None if the key is not bound.

    ``key`` may be a single character, a key name such as ``"KEY_UP"``,
    or a keystroke object carrying a ``name`` attribute.
    """
    name = getattr(key, "name", None)
    if name in _KEY_NAMES:
        return _KEY_NAMES[name]
    text = str(key)
    if text in _KEY_NAMES:
        return _KEY_NAMES[text]
    return _KEY_CHARS.get(text)


@dataclass(frozen=True)
class Coord:
    """A non-negative (row, col) position on the grid."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if self.row < 0 or self.col < 0:
            raise ValueError(f"coordinates must be non-negative: ({self.row}, {self.col})")

    def to_the(self, direction: Direction) -> Coord:
        """Return the neighbouring coordinate in ``direction``."""
        if direction is Direction.UP:
            return Coord(self.row - 1, self.col)
        if direction is Direction.DOWN:
            return Coord(self.row + 1, self.col)
        if direction is Direction.LEFT:
            return Coord(self.row, self.col - 1)
        return Coord(self.row, self.col + 1)

    def to(self, target: Coord) -> Coord:
        """Return the next step towards ``target``, along the axis furthest away."""
        if self == target:
            return self
        col_diff = self.col - target.col
        row_diff = self.row - target.row
        if abs(col_diff) > abs(row_diff):
            return self.to_the(Direction.RIGHT if col_diff < 0 else Direction.LEFT)
        return self.to_the(Direction.DOWN if row_diff < 0 else Direction.UP)