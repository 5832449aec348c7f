"""Geometry helpers for working with grid cells, sides, and rule rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Side(Enum):
    """The four sides of a cell, valued by their slot in an open-sides array."""

    UP = 0
    DOWN = 1
    RIGHT = 2
    LEFT = 3

    @property
    def dx(self) -> int:
        return _SIDE_VECTORS[self][0]

    @property
    def dy(self) -> int:
        return _SIDE_VECTORS[self][1]

    def opposite(self) -> Side:
        return _OPPOSITE_SIDES[self]


# y grows downward, so UP moves to the previous row.
_SIDE_VECTORS = {
    Side.UP: (0, -1),
    Side.DOWN: (0, 1),
    Side.RIGHT: (1, 0),
    Side.LEFT: (-1, 0),
}

_OPPOSITE_SIDES = {
    Side.UP: Side.DOWN,
    Side.DOWN: Side.UP,
    Side.RIGHT: Side.LEFT,
    Side.LEFT: Side.RIGHT,
}

ALL_SIDES = tuple(Side)


@dataclass(frozen=True, order=True)
class GridPos:
    """Integer cell coordinate."""

    x: int
    y: int

    def __iter__(self):
        yield self.x
        yield self.y

    def to_tuple(self) -> Tuple[int, int]:
        return self.x, self.y

    def distance_to(self, other: GridPos) -> float:
        """Euclidean distance between two cell coordinates."""
        return math.hypot(self.x - other.x, self.y - other.y)

    @classmethod
    def from_tuple(cls, value: Tuple[int, int]) -> GridPos:
        return cls(int(value[0]), int(value[1]))


@dataclass(frozen=True)
class GridRect:
    """Axis-aligned cell rectangle whose min and max corners are both inclusive.

    A rect whose max corner lies before its min corner on either axis is
    empty: it contains no cell.
    """

    min_pos: GridPos
    max_pos: GridPos

    @property
    def width(self) -> int:
        return max(0, self.max_pos.x - self.min_pos.x + 1)

    @property
    def height(self) -> int:
        return max(0, self.max_pos.y - self.min_pos.y + 1)

    def contains(self, x: int, y: int) -> bool:
        """Return True if the cell ``(x, y)`` lies inside this rect."""
        return (
            self.min_pos.x <= x <= self.max_pos.x
            and self.min_pos.y <= y <= self.max_pos.y
        )


def linear_index(x: int, y: int, width: int) -> int:
    """Map a cell coordinate onto the canonical linear index ``x + y*width``."""
    return x + y * width


def position_of(index: int, width: int) -> GridPos:
    """Inverse of :func:`linear_index`."""
    return GridPos(index % width, index // width)


def side_between(current: int, neighbor: int, width: int) -> Side:
    """Return the side of ``current`` that faces the adjacent cell ``neighbor``.

    Vertical offsets are checked first so that single-column grids, where the
    cell below is also ``current + 1``, get up/down doors.
    """
    offset = neighbor - current
    if offset == width:
        return Side.DOWN
    if offset == -width:
        return Side.UP
    if offset == 1:
        return Side.RIGHT
    if offset == -1:
        return Side.LEFT
    raise ValueError(f"Cell {neighbor} is not adjacent to cell {current} on a grid {width} wide")
