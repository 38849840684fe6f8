"""Main routing engine — drives a Game until it finishes or gives up.

Algorithm overview:
  1. Place components (fixed placement) unless placements are given.
  2. Build a Game: seed every connection's source terminal, one walker
     per connection.
  3. Step all walkers together until every walker has arrived, a
     walker gets stuck (when ``stop_on_stuck``), or the step budget
     runs out.

There is no rip-up and no backtracking: a claimed cell stays claimed.
"""

from __future__ import annotations

import logging
from typing import Sequence

from connectgrid.geometry import Point
from connectgrid.pipeline.design.models import Circuit
from connectgrid.pipeline.placer.engine import place_components

from .evaluators import get_evaluator
from .game import Evaluator, Game, Status
from .models import RoutingResult, RouterConfig


log = logging.getLogger(__name__)


def route_circuit(
    circuit: Circuit,
    placements: Sequence[tuple[int, int]] | None = None,
    *,
    evaluator: Evaluator | None = None,
    config: RouterConfig | None = None,
) -> RoutingResult:
    """Route every connection of *circuit*.

    Parameters
    ----------
    circuit : Circuit
        Components, connections and nominal board size.
    placements : sequence of points | None
        One origin per component.  Uses the fixed placement when *None*.
    evaluator : Evaluator | None
        Direction ranking function.  Defaults to the evaluator named in
        *config*.
    config : RouterConfig | None
        Tuneable parameters.  Uses defaults when *None*.

    Returns
    -------
    RoutingResult
        All routes (finished ones first), the final status, and the
        indices of walkers reported stuck.
    """
    if config is None:
        config = RouterConfig()
    if placements is None:
        placements = place_components(circuit)
    if evaluator is None:
        evaluator = get_evaluator(config.evaluator)

    log.info("Router: starting — %d components, %d connections, board %dx%d",
             len(circuit.components), len(circuit.connections), *circuit.size)
    log.info("Router config: evaluator=%s, max_steps=%d, stop_on_stuck=%s",
             getattr(evaluator, "__name__", repr(evaluator)),
             config.max_steps, config.stop_on_stuck)

    game = Game(circuit, placements)
    stuck: list[int] = []
    status = Status.FINISHED if game.finished else Status.RUNNING

    calls = 0
    while not game.finished and calls < config.max_steps:
        calls += 1
        result = game.step(evaluator)
        status = result.status

        if status is Status.STUCK:
            log.warning("Router: step %d — walker %d stuck at %s",
                        calls, result.walker_index,
                        tuple(game.active_walkers[result.walker_index].position))
            if result.walker_index not in stuck:
                stuck.append(result.walker_index)
            if config.stop_on_stuck:
                break
        elif status is Status.FINISHED:
            break

    if not game.finished and status is Status.RUNNING:
        log.warning("Router: step budget of %d exhausted with %d walkers active",
                    config.max_steps, len(game.active_walkers))

    finished_count = len(game.routes)
    log.info("Router: %s after %d steps (%d calls) — %d/%d connections finished",
             status.value, game.steps_taken, calls, finished_count, len(circuit.connections))

    return RoutingResult(
        placements=[Point(*p) for p in placements],
        routes=game.unfinished_routes(),
        finished_count=finished_count,
        status=status,
        steps=game.steps_taken,
        step_calls=calls,
        stuck_walkers=stuck,
    )
