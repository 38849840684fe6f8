"""Circuit parsing — convert raw dicts/JSON into a Circuit."""

from __future__ import annotations

from connectgrid.geometry import Point

from .models import Component, TerminalRef, Connection, Circuit, CircuitError
from .validation import validate_circuit


def parse_circuit(data: dict) -> Circuit:
    """Parse a raw dict (from JSON) into a Circuit.

    Format::

        {
          "components": [{"terminals": [[0, 0], [2, 0]], "size": [3, 1]}],
          "connections": [[[0, 0], [1, 1]]],
          "size": [32, 32]
        }

    Raises CircuitError when required keys are missing, values have
    the wrong shape, or ``validate_circuit`` reports problems (unknown
    component or terminal references, reused sources, negative size).
    """
    try:
        components = [
            Component(
                terminals=[_parse_point(t) for t in c["terminals"]],
                size=_parse_size(c.get("size", (1, 1))),
            )
            for c in data["components"]
        ]

        connections = [
            Connection(
                source=_parse_ref(src),
                dest=_parse_ref(dst),
            )
            for src, dst in data["connections"]
        ]

        size = _parse_size(data.get("size", (0, 0)))
    except (KeyError, TypeError, ValueError) as exc:
        raise CircuitError("Malformed circuit description", [repr(exc)]) from exc

    circuit = Circuit(components=components, connections=connections, size=size)
    errors = validate_circuit(circuit)
    if errors:
        raise CircuitError("Invalid circuit", errors)
    return circuit


def _parse_point(raw) -> Point:
    x, y = raw
    return Point(int(x), int(y))


def _parse_size(raw) -> tuple[int, int]:
    w, h = raw
    return (int(w), int(h))


def _parse_ref(raw) -> TerminalRef:
    comp, term = raw
    return TerminalRef(int(comp), int(term))
