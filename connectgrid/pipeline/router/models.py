"""Router output dataclasses and configuration constants."""

from __future__ import annotations

from dataclasses import dataclass, field

from connectgrid.geometry import Point
from connectgrid.pipeline.config import WALK_RULES

from .game import Status


# ── Output dataclasses ─────────────────────────────────────────────


@dataclass
class RoutingResult:
    """Complete routing result, ready for rendering."""

    placements: list[Point]
    routes: list[list[Point]]           # retired routes first, then unfinished paths
    finished_count: int                 # how many of ``routes`` reached their destination
    status: Status
    steps: int                          # completed synchronized steps
    stuck_walkers: list[int] = field(default_factory=list)
    step_calls: int = 0                 # Game.step calls, stuck calls included

    @property
    def ok(self) -> bool:
        return self.status is Status.FINISHED


# ── Router configuration ──────────────────────────────────────────
#
# Defaults come from the shared pipeline rules
# (connectgrid.pipeline.config.WALK_RULES).


@dataclass
class RouterConfig:
    """All tuneable router parameters in one place."""

    max_steps: int = WALK_RULES.max_steps
    stop_on_stuck: bool = WALK_RULES.stop_on_stuck
    evaluator: str = WALK_RULES.default_evaluator


# Module-level defaults (used when no RouterConfig is passed)
_DEFAULT_CFG = RouterConfig()

MAX_STEPS = _DEFAULT_CFG.max_steps
STOP_ON_STUCK = _DEFAULT_CFG.stop_on_stuck
DEFAULT_EVALUATOR = _DEFAULT_CFG.evaluator
