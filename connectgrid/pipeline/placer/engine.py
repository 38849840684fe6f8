"""Placement engine — fixed component origins and terminal resolution."""

from __future__ import annotations

import logging
from typing import Sequence

from connectgrid.geometry import Point, point_add
from connectgrid.pipeline.design.models import Circuit, TerminalRef

from .models import Layout, PlacementError, FIXED_PLACEMENTS


log = logging.getLogger(__name__)


def place_components(
    circuit: Circuit,
    slots: Sequence[Point] = FIXED_PLACEMENTS,
) -> list[Point]:
    """Return one absolute origin per component.

    Components take the *slots* in index order.  Raises PlacementError
    for the first component left without a slot.
    """
    n = len(circuit.components)
    if n > len(slots):
        raise PlacementError(
            len(slots),
            f"only {len(slots)} fixed placement slots for {n} components",
        )
    placements = [Point(*p) for p in slots[:n]]
    log.info("Placer: %d components placed at %s", n, placements)
    return placements


def resolve_terminal(
    circuit: Circuit,
    placements: Sequence[tuple[int, int]],
    ref: TerminalRef,
) -> Point:
    """Absolute grid cell of a terminal: local offset + component origin."""
    comp, term = ref
    return point_add(circuit.components[comp].terminals[term], placements[comp])


def layout(circuit: Circuit) -> Layout:
    """Place all components and join each connection with a straight route.

    The routes are bare ``[source, dest]`` pairs, the unrouted view of
    the circuit that the router later replaces with walked paths.
    """
    placements = place_components(circuit)
    routes = [
        [
            resolve_terminal(circuit, placements, conn.source),
            resolve_terminal(circuit, placements, conn.dest),
        ]
        for conn in circuit.connections
    ]
    return Layout(placements=placements, routes=routes)
