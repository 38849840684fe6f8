"""Placement serialization — JSON conversion."""

from __future__ import annotations

from connectgrid.geometry import Point

from .models import Layout


def placement_to_dict(layout: Layout) -> dict:
    """Serialize a Layout to a JSON-safe dict."""
    return {
        "placements": [list(p) for p in layout.placements],
        "routes": [[list(p) for p in route] for route in layout.routes],
    }


def parse_placement(data: dict) -> Layout:
    """Parse a placement.json dict back into a Layout."""
    placements = [Point(int(x), int(y)) for x, y in data["placements"]]
    routes = [
        [Point(int(x), int(y)) for x, y in route]
        for route in data.get("routes", [])
    ]
    return Layout(placements=placements, routes=routes)
