"""
connectgrid — entry point.

Usage:
    python -m connectgrid route CIRCUIT.json             # walk all connections
    python -m connectgrid route CIRCUIT.json --steps 200 --evaluator orthogonal_first
    python -m connectgrid route CIRCUIT.json --keep-going --out routing.json
    python -m connectgrid layout CIRCUIT.json            # fixed placement + straight routes

Options:
    --steps N          maximum synchronized steps
    --evaluator NAME   direction evaluator (toward_destination, orthogonal_first)
    --keep-going       keep stepping after a walker gets stuck
    --out FILE         write JSON to FILE instead of stdout
    --verbose          debug logging
"""

import json
import logging
import sys
from pathlib import Path

USAGE = ("Usage: python -m connectgrid route CIRCUIT.json [--steps N] "
         "[--evaluator NAME] [--keep-going] [--out FILE] [--verbose]\n"
         "       python -m connectgrid layout CIRCUIT.json [--out FILE]")


def _load_circuit(path: str):
    from connectgrid.pipeline.design import parse_circuit

    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return parse_circuit(data)


def _write(payload: dict, out: str | None) -> None:
    text = json.dumps(payload, indent=2)
    if out:
        Path(out).write_text(text + "\n", encoding="utf-8")
    else:
        print(text)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    cmd = args[0] if args else ""
    if cmd not in ("route", "layout") or len(args) < 2 or args[1].startswith("--"):
        print(USAGE)
        return 1

    circuit_path = args[1]
    steps = None
    evaluator = None
    keep_going = False
    out = None
    verbose = False
    for i, a in enumerate(args):
        if a == "--steps" and i + 1 < len(args):
            steps = int(args[i + 1])
        elif a == "--evaluator" and i + 1 < len(args):
            evaluator = args[i + 1]
        elif a == "--out" and i + 1 < len(args):
            out = args[i + 1]
        elif a == "--keep-going":
            keep_going = True
        elif a == "--verbose":
            verbose = True

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    from connectgrid.pipeline.design import CircuitError
    from connectgrid.pipeline.placer import PlacementError, layout, placement_to_dict
    from connectgrid.pipeline.router import (
        RouterConfig, route_circuit, routing_to_dict, validate_routes,
    )

    try:
        circuit = _load_circuit(circuit_path)

        if cmd == "layout":
            _write(placement_to_dict(layout(circuit)), out)
            return 0

        config = RouterConfig()
        if steps is not None:
            config.max_steps = steps
        if evaluator is not None:
            config.evaluator = evaluator
        if keep_going:
            config.stop_on_stuck = False

        result = route_circuit(circuit, config=config)
    except (OSError, json.JSONDecodeError, CircuitError, PlacementError, KeyError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    validate_routes(result.routes)
    _write(routing_to_dict(result), out)
    return 0 if result.ok else 2


if __name__ == "__main__":
    sys.exit(main())
