"""Circuit serialization — JSON conversion."""

from __future__ import annotations

from .models import Circuit


def circuit_to_dict(circuit: Circuit) -> dict:
    """Serialize a Circuit to a JSON-safe dict."""
    return {
        "components": [
            {
                "terminals": [list(t) for t in c.terminals],
                "size": list(c.size),
            }
            for c in circuit.components
        ],
        "connections": [
            [list(conn.source), list(conn.dest)]
            for conn in circuit.connections
        ],
        "size": list(circuit.size),
    }
