"""Placer — assigns an absolute grid offset to every component.

Submodules:
  models        Output dataclasses and the fixed placement table.
  engine        Placement assignment and terminal resolution.
  serialization JSON conversion (placement_to_dict, parse_placement).
"""

from .models import Layout, PlacementError, FIXED_PLACEMENTS
from .engine import place_components, resolve_terminal, layout
from .serialization import placement_to_dict, parse_placement

__all__ = [
    # Models
    "Layout", "PlacementError", "FIXED_PLACEMENTS",
    # Engine
    "place_components", "resolve_terminal", "layout",
    # Serialization
    "placement_to_dict", "parse_placement",
]
