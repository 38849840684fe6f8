"""Circuit validation — check terminal references before routing."""

from __future__ import annotations

from .models import Circuit


def validate_circuit(circuit: Circuit) -> list[str]:
    """Validate a Circuit. Returns error messages (empty = valid)."""
    errors: list[str] = []

    # ── Every connection must reference an existing terminal ──
    for i, conn in enumerate(circuit.connections):
        for end, ref in (("source", conn.source), ("dest", conn.dest)):
            if not 0 <= ref.component < len(circuit.components):
                errors.append(
                    f"Connection {i}: {end} references unknown component {ref.component}"
                )
                continue
            terminals = circuit.components[ref.component].terminals
            if not 0 <= ref.terminal < len(terminals):
                errors.append(
                    f"Connection {i}: {end} references unknown terminal "
                    f"{ref.terminal} of component {ref.component}"
                )

    # ── Two connections cannot start from the same terminal ──
    seen_sources: dict[tuple[int, int], int] = {}
    for i, conn in enumerate(circuit.connections):
        prev = seen_sources.get(conn.source)
        if prev is not None:
            errors.append(
                f"Connection {i}: source terminal {tuple(conn.source)} "
                f"already used by connection {prev}"
            )
        else:
            seen_sources[conn.source] = i

    # ── Board size ──
    w, h = circuit.size
    if w < 0 or h < 0:
        errors.append(f"Board size must not be negative, got {circuit.size}")

    return errors
