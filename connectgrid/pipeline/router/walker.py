"""A single walker: the growing path of one connection."""

from __future__ import annotations

from connectgrid.geometry import Point


class Walker:
    """Walks from a fixed start toward a fixed destination.

    The history is append-only; the current position is always its
    last element.
    """

    __slots__ = ("_destination", "_history")

    def __init__(self, start: tuple[int, int], destination: tuple[int, int]) -> None:
        self._destination = Point(*destination)
        self._history: list[Point] = [Point(*start)]

    @property
    def destination(self) -> Point:
        return self._destination

    @property
    def start(self) -> Point:
        return self._history[0]

    @property
    def position(self) -> Point:
        return self._history[-1]

    @property
    def finished(self) -> bool:
        return self.position == self.destination

    @property
    def history(self) -> tuple[Point, ...]:
        return tuple(self._history)

    def advance(self, point: tuple[int, int]) -> None:
        """Append the next cell of the path."""
        self._history.append(Point(*point))

    def route(self) -> list[Point]:
        """The full path walked so far, start first."""
        return list(self._history)

    def __len__(self) -> int:
        return len(self._history)

    def __repr__(self) -> str:
        return (f"Walker(start={tuple(self.start)}, position={tuple(self.position)}, "
                f"destination={tuple(self.destination)}, steps={len(self._history) - 1})")
