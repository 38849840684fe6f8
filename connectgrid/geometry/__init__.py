from .grid import (
    Point,
    Size,
    Direction,
    DIRECTIONS,
    point_add,
    chebyshev,
    manhattan,
)
