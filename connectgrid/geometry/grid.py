"""
Integer grid primitives: points and the 8 compass directions.

All coordinates are grid cells.  X grows east, Y grows north.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Point(NamedTuple):
    """A grid cell.  Compared and hashed by value."""

    x: int
    y: int

    def translate(self, delta: tuple[int, int]) -> Point:
        return point_add(self, delta)


Size = tuple[int, int]


def point_add(p: tuple[int, int], delta: tuple[int, int]) -> Point:
    """Offset *p* by *delta*."""
    return Point(p[0] + delta[0], p[1] + delta[1])


def chebyshev(a: tuple[int, int], b: tuple[int, int]) -> int:
    """Number of 8-connected steps between two cells on an empty grid."""
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def manhattan(a: tuple[int, int], b: tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class Direction(Enum):
    """The 8 compass directions, counter-clockwise from east."""

    E = 0
    NE = 1
    N = 2
    NW = 3
    W = 4
    SW = 5
    S = 6
    SE = 7

    @property
    def vector(self) -> Point:
        """Unit (or diagonal) delta for one step in this direction."""
        return _VECTORS[self]

    @property
    def diagonal(self) -> bool:
        return self.value % 2 == 1


_VECTORS = {
    Direction.E: Point(1, 0),
    Direction.NE: Point(1, 1),
    Direction.N: Point(0, 1),
    Direction.NW: Point(-1, 1),
    Direction.W: Point(-1, 0),
    Direction.SW: Point(-1, -1),
    Direction.S: Point(0, -1),
    Direction.SE: Point(1, -1),
}

# All directions in enum order.
DIRECTIONS: tuple[Direction, ...] = tuple(Direction)
