"""Synchronized stepping of all walkers against one shared board.

A Game owns the board and one walker per connection.  Each call to
``step`` gives every active walker one chance to move one cell, in a
fixed order.  The direction is chosen by a caller-supplied evaluator;
the game only enforces the stepping protocol around it:

  1. ask the evaluator for a full ranking of the 8 directions,
  2. claim the first direction the board accepts,
  3. if none is accepted, stop the step and report the walker as stuck,
  4. after a complete pass, retire every walker that has arrived.

Nothing a walker claims is ever given back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

from connectgrid.geometry import Point, Direction, point_add
from connectgrid.pipeline.design.models import Circuit
from connectgrid.pipeline.placer.engine import resolve_terminal

from .board import Board, BoardView
from .walker import Walker


log = logging.getLogger(__name__)


Evaluator = Callable[[Point, Point, BoardView], Sequence[Direction]]
"""(current, destination, board) -> all 8 directions, most preferred first."""


class Status(Enum):
    RUNNING = "running"
    STUCK = "stuck"
    FINISHED = "finished"


@dataclass(frozen=True)
class StepResult:
    """Outcome of one ``Game.step`` call."""

    status: Status
    walker_index: int | None = None     # set only for STUCK

    @classmethod
    def running(cls) -> StepResult:
        return cls(Status.RUNNING)

    @classmethod
    def stuck(cls, index: int) -> StepResult:
        return cls(Status.STUCK, index)

    @classmethod
    def finished(cls) -> StepResult:
        return cls(Status.FINISHED)

    def __str__(self) -> str:
        if self.status is Status.STUCK:
            return f"stuck({self.walker_index})"
        return self.status.value


class InvalidPreferencesError(ValueError):
    """Raised when an evaluator does not return each direction exactly once."""

    def __init__(self, walker_index: int, prefs: Sequence[Direction]) -> None:
        self.walker_index = walker_index
        self.prefs = list(prefs)
        super().__init__(
            f"Evaluator must rank all 8 directions exactly once for walker "
            f"{walker_index}, got {self.prefs}"
        )


class Game:
    """All walkers of one circuit plus the board they share."""

    def __init__(self, circuit: Circuit, placements: Sequence[tuple[int, int]]) -> None:
        self._board = Board()
        self._walkers: list[Walker] = []
        self._routes: list[list[Point]] = []
        self.steps_taken = 0

        for conn in circuit.connections:
            src = resolve_terminal(circuit, placements, conn.source)
            dst = resolve_terminal(circuit, placements, conn.dest)
            if not self._board.seed(src):
                log.warning("Walker %d starts on already claimed cell %s",
                            len(self._walkers), tuple(src))
            self._walkers.append(Walker(src, dst))

        log.debug("Game: %d walkers seeded", len(self._walkers))

    # ── Accessors ──────────────────────────────────────────────────

    @property
    def board(self) -> BoardView:
        return self._board.view()

    @property
    def active_walkers(self) -> tuple[Walker, ...]:
        return tuple(self._walkers)

    @property
    def routes(self) -> list[list[Point]]:
        """Routes of retired walkers, in retirement order."""
        return [list(r) for r in self._routes]

    @property
    def finished(self) -> bool:
        return not self._walkers

    def unfinished_routes(self) -> list[list[Point]]:
        """Retired routes followed by every active walker's path so far."""
        routes = self.routes
        routes.extend(w.route() for w in self._walkers)
        return routes

    # ── Stepping ───────────────────────────────────────────────────

    def step(self, evaluator: Evaluator) -> StepResult:
        """Advance every active walker by one cell.

        Returns STUCK with the walker's index as soon as one walker has
        no claimable direction.  Walkers after it are not moved; walkers
        before it keep the step they already took.

        Each ranking is checked just before that walker claims, since it
        may depend on earlier claims in the same pass.  An invalid ranking
        raises InvalidPreferencesError with the same partial effect as a
        stuck walker: earlier walkers keep their move and ``steps_taken``
        is unchanged.
        """
        if not self._walkers:
            return StepResult.finished()

        view = self._board.view()

        for idx, walker in enumerate(self._walkers):
            # Only a walker whose start is its destination can be here.
            if walker.finished:
                continue

            position = walker.position
            prefs = list(evaluator(position, walker.destination, view))
            if len(prefs) != len(Direction) or set(prefs) != set(Direction):
                raise InvalidPreferencesError(idx, prefs)

            for direction in prefs:
                if self._board.claim(position, direction):
                    walker.advance(point_add(position, direction.vector))
                    break
            else:
                log.debug("Step %d: walker %d stuck at %s",
                          self.steps_taken, idx, tuple(position))
                return StepResult.stuck(idx)

        self.steps_taken += 1
        self._retire_finished()

        if not self._walkers:
            return StepResult.finished()
        return StepResult.running()

    def _retire_finished(self) -> None:
        """Move arrived walkers to the route list, keeping the rest in order."""
        keep: list[Walker] = []
        for walker in self._walkers:
            if walker.finished:
                self._routes.append(walker.route())
                log.debug("Step %d: walker retired after %d cells",
                          self.steps_taken, len(walker))
            else:
                keep.append(walker)
        self._walkers = keep
