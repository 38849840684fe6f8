"""Placer output dataclasses and configuration constants."""

from __future__ import annotations

from dataclasses import dataclass

from connectgrid.geometry import Point


# ── Output dataclasses ─────────────────────────────────────────────


@dataclass
class Layout:
    """Component placements plus one route per connection."""

    placements: list[Point]
    routes: list[list[Point]]


class PlacementError(Exception):
    """Raised when a component cannot be given a position."""

    def __init__(self, component_index: int, reason: str) -> None:
        self.component_index = component_index
        self.reason = reason
        super().__init__(f"Cannot place component {component_index}: {reason}")


# ── Configuration ──────────────────────────────────────────────────

# Fixed origins, assigned to components in index order.  Placement is
# not computed; circuits with more components than slots are rejected.
FIXED_PLACEMENTS: tuple[Point, ...] = (
    Point(5, 5),
    Point(12, 11),
    Point(22, 21),
    Point(22, 8),
)
