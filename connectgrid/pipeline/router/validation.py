"""Post-routing validation — shared cells and crossing wires.

The board already prevents both problems while walking.  These checks
work on finished geometry alone, so they also apply to routes loaded
from JSON or produced by another router.
"""

from __future__ import annotations

import logging
from typing import Sequence

from shapely import STRtree
from shapely.geometry import LineString

from connectgrid.geometry import Point


log = logging.getLogger(__name__)


def find_shared_cells(
    routes: Sequence[Sequence[tuple[int, int]]],
) -> dict[Point, list[int]]:
    """Cells that appear in more than one route, mapped to those routes."""
    owners: dict[Point, list[int]] = {}
    for idx, route in enumerate(routes):
        for cell in set(route):
            owners.setdefault(Point(*cell), []).append(idx)
    return {cell: ids for cell, ids in owners.items() if len(ids) > 1}


def find_crossings(
    routes: Sequence[Sequence[tuple[int, int]]],
) -> list[tuple[int, int]]:
    """Pairs of routes ``(i, j)``, ``i < j``, whose segments cross.

    Two segments cross when their interiors meet in a single point, as
    two diagonals of the same unit square do.  Touching at a shared end
    cell is not a crossing; that case is reported by
    ``find_shared_cells``.
    """
    segments: list[LineString] = []
    owner: list[int] = []
    for idx, route in enumerate(routes):
        for a, b in zip(route, route[1:]):
            segments.append(LineString([a, b]))
            owner.append(idx)

    if not segments:
        return []

    tree = STRtree(segments)
    pairs: set[tuple[int, int]] = set()
    for i, seg in enumerate(segments):
        for j in tree.query(seg, predicate="crosses"):
            a, b = owner[i], owner[int(j)]
            if a != b:
                pairs.add((min(a, b), max(a, b)))
    return sorted(pairs)


def validate_routes(routes: Sequence[Sequence[tuple[int, int]]]) -> bool:
    """Log every shared cell and crossing.  Returns True when there are none."""
    shared = find_shared_cells(routes)
    for cell, ids in sorted(shared.items()):
        log.warning("  SHARED: cell (%d,%d)  routes: %s", cell.x, cell.y, ids)

    crossings = find_crossings(routes)
    for a, b in crossings:
        log.warning("  CROSSING: routes %d vs %d", a, b)

    if shared or crossings:
        log.warning("Route validation: %d shared cells, %d crossing pairs",
                    len(shared), len(crossings))
        return False
    return True
