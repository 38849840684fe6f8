"""Shared walking rules for the routing pipeline.

Both the **router** engine and the command-line entry point read their
defaults from this single source of truth, so changing a value here
changes the behaviour everywhere.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WalkRules:
    """Limits and defaults for a routing run."""

    max_steps: int = 10_000
    """Upper bound on ``Game.step`` calls before a run gives up.

    Calls that report a stuck walker count against the budget even
    though they are not completed synchronized steps.

    Walkers are not bounded by the board size, so a walker that can
    never reach its destination would otherwise step forever."""

    stop_on_stuck: bool = True
    """Stop the run on the first step that reports a stuck walker."""

    default_evaluator: str = "toward_destination"
    """Name of the evaluator used when the caller does not pick one."""


# Module-level singleton — importable everywhere.
WALK_RULES = WalkRules()
