"""Circuit description — dataclasses, parsing, validation, and serialization."""

from .models import Component, TerminalRef, Connection, Circuit, CircuitError
from .parsing import parse_circuit
from .validation import validate_circuit
from .serialization import circuit_to_dict

__all__ = [
    # Models
    "Component", "TerminalRef", "Connection", "Circuit", "CircuitError",
    # Parsing / Validation / Serialization
    "parse_circuit", "validate_circuit", "circuit_to_dict",
]
