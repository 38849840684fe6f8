"""Routing serialization — JSON conversion."""

from __future__ import annotations

from connectgrid.geometry import Point

from .game import Status
from .models import RoutingResult


def routing_to_dict(result: RoutingResult) -> dict:
    """Serialize a RoutingResult to a JSON-safe dict."""
    return {
        "status": result.status.value,
        "steps": result.steps,
        "step_calls": result.step_calls,
        "placements": [list(p) for p in result.placements],
        "routes": [
            {
                "finished": i < result.finished_count,
                "path": [list(p) for p in route],
            }
            for i, route in enumerate(result.routes)
        ],
        "stuck_walkers": list(result.stuck_walkers),
    }


def parse_routing(data: dict) -> RoutingResult:
    """Parse a routing.json dict back into a RoutingResult."""
    routes = [
        [Point(int(x), int(y)) for x, y in r["path"]]
        for r in data.get("routes", [])
    ]
    finished_count = sum(1 for r in data.get("routes", []) if r.get("finished"))

    return RoutingResult(
        placements=[Point(int(x), int(y)) for x, y in data.get("placements", [])],
        routes=routes,
        finished_count=finished_count,
        status=Status(data["status"]),
        steps=int(data.get("steps", 0)),
        step_calls=int(data.get("step_calls", 0)),
        stuck_walkers=[int(i) for i in data.get("stuck_walkers", [])],
    )
