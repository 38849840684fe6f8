"""Ready-made direction evaluators.

An evaluator ranks all 8 directions for one walker at one step.  It may
inspect the board but must not change it.  The game itself never
decides where a walker goes; these are the strategies shipped for the
command line and tests.
"""

from __future__ import annotations

from connectgrid.geometry import (
    Point, Direction, DIRECTIONS, point_add, chebyshev, manhattan,
)

from .board import BoardView
from .game import Evaluator


def toward_destination(
    current: Point, destination: Point, board: BoardView,
) -> list[Direction]:
    """Prefer the step that leaves the fewest 8-connected moves to go.

    Ties are broken by straight-line distance, then enum order.
    """
    def key(d: Direction) -> tuple[int, int, int]:
        nxt = point_add(current, d.vector)
        dx, dy = destination[0] - nxt[0], destination[1] - nxt[1]
        return (chebyshev(nxt, destination), dx * dx + dy * dy, d.value)

    return sorted(DIRECTIONS, key=key)


def orthogonal_first(
    current: Point, destination: Point, board: BoardView,
) -> list[Direction]:
    """Prefer the step with the smallest Manhattan distance to go.

    Orthogonal steps win ties against diagonal ones, which keeps wires
    on straight runs and uses diagonals only when they make progress
    on both axes.
    """
    def key(d: Direction) -> tuple[int, bool, int]:
        nxt = point_add(current, d.vector)
        return (manhattan(nxt, destination), d.diagonal, d.value)

    return sorted(DIRECTIONS, key=key)


def free_first(evaluator: Evaluator) -> Evaluator:
    """Wrap *evaluator* so directions the board would accept come first.

    Relative order inside each group is kept.  The wrapped ranking is
    only a preference; the board still has the final word when the
    game claims.
    """
    def wrapped(current: Point, destination: Point, board: BoardView) -> list[Direction]:
        prefs = list(evaluator(current, destination, board))
        free = [d for d in prefs if board.can_claim(current, d)]
        blocked = [d for d in prefs if not board.can_claim(current, d)]
        return free + blocked

    wrapped.__name__ = f"free_first({getattr(evaluator, '__name__', 'evaluator')})"
    return wrapped


EVALUATORS: dict[str, Evaluator] = {
    "toward_destination": toward_destination,
    "orthogonal_first": orthogonal_first,
}


def get_evaluator(name: str) -> Evaluator:
    """Look up a built-in evaluator by name."""
    try:
        return EVALUATORS[name]
    except KeyError:
        raise KeyError(
            f"Unknown evaluator '{name}', expected one of {sorted(EVALUATORS)}"
        ) from None
