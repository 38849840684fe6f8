"""Circuit description dataclasses — the router's input structure."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from connectgrid.geometry import Point, Size


class TerminalRef(NamedTuple):
    """Index pair naming one terminal of one component."""

    component: int
    terminal: int


class Connection(NamedTuple):
    """A wire to route from *source* to *dest*."""

    source: TerminalRef
    dest: TerminalRef


@dataclass
class Component:
    """A component footprint: terminal offsets relative to its origin."""

    terminals: list[Point]
    size: Size = (1, 1)


@dataclass
class Circuit:
    components: list[Component]
    connections: list[Connection]
    size: Size = (0, 0)     # nominal board size; not enforced while routing

    @property
    def terminal_count(self) -> int:
        return sum(len(c.terminals) for c in self.components)


class CircuitError(ValueError):
    """Raised when a circuit description cannot be parsed."""

    def __init__(self, reason: str, errors: list[str] | None = None) -> None:
        self.reason = reason
        self.errors = list(errors or [])
        detail = "; ".join(self.errors)
        super().__init__(f"{reason}: {detail}" if detail else reason)
