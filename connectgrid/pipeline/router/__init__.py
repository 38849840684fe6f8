"""Router — greedy multi-walker routing on a shared grid board.

Submodules:
  board         Shared occupancy ledger (cells and crossing diagonals).
  walker        Per-connection path state.
  game          Synchronized stepping protocol over all walkers.
  evaluators    Built-in direction rankings.
  models        Output dataclasses and configuration constants.
  engine        Run a game to completion (route_circuit).
  validation    Post-routing shared-cell and crossing checks.
  serialization JSON conversion (routing_to_dict, parse_routing).
"""

from .board import Board, BoardView
from .walker import Walker
from .game import Game, Status, StepResult, Evaluator, InvalidPreferencesError
from .evaluators import (
    toward_destination, orthogonal_first, free_first,
    EVALUATORS, get_evaluator,
)
from .models import RoutingResult, RouterConfig
from .engine import route_circuit
from .validation import find_shared_cells, find_crossings, validate_routes
from .serialization import routing_to_dict, parse_routing

__all__ = [
    # Core
    "Board", "BoardView", "Walker",
    "Game", "Status", "StepResult", "Evaluator", "InvalidPreferencesError",
    # Evaluators
    "toward_destination", "orthogonal_first", "free_first",
    "EVALUATORS", "get_evaluator",
    # Models / Engine
    "RoutingResult", "RouterConfig", "route_circuit",
    # Validation / Serialization
    "find_shared_cells", "find_crossings", "validate_routes",
    "routing_to_dict", "parse_routing",
]
