"""Tests for the command-line entry point."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from connectgrid.__main__ import main
from connectgrid.pipeline.design import circuit_to_dict
from tests.grid_fixture import make_demo_circuit


class TestCLI(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.circuit_path = self.tmp / "circuit.json"
        self.circuit_path.write_text(json.dumps(circuit_to_dict(make_demo_circuit())))

    def tearDown(self):
        self._tmp.cleanup()

    def test_route(self):
        out = self.tmp / "routing.json"
        code = main(["route", str(self.circuit_path), "--out", str(out)])
        self.assertEqual(code, 0)
        data = json.loads(out.read_text())
        self.assertEqual(data["status"], "finished")
        self.assertEqual(len(data["routes"]), 3)
        self.assertTrue(all(r["finished"] for r in data["routes"]))

    def test_route_step_budget(self):
        out = self.tmp / "routing.json"
        code = main(["route", str(self.circuit_path), "--steps", "2",
                     "--evaluator", "orthogonal_first", "--out", str(out)])
        self.assertEqual(code, 2)
        data = json.loads(out.read_text())
        self.assertEqual(data["status"], "running")
        self.assertEqual(data["steps"], 2)

    def test_layout(self):
        out = self.tmp / "layout.json"
        code = main(["layout", str(self.circuit_path), "--out", str(out)])
        self.assertEqual(code, 0)
        data = json.loads(out.read_text())
        self.assertEqual(data["routes"][0], [[5, 5], [12, 11]])

    def test_usage(self):
        self.assertEqual(main([]), 1)
        self.assertEqual(main(["serve"]), 1)
        self.assertEqual(main(["route"]), 1)

    def test_missing_file(self):
        self.assertEqual(main(["route", str(self.tmp / "nope.json")]), 1)

    def test_invalid_circuit(self):
        bad = self.tmp / "bad.json"
        bad.write_text(json.dumps({
            "components": [{"terminals": [[0, 0]]}],
            "connections": [[[0, 0], [2, 0]]],
        }))
        self.assertEqual(main(["route", str(bad)]), 1)

    def test_unknown_evaluator(self):
        self.assertEqual(
            main(["route", str(self.circuit_path), "--evaluator", "astar"]), 1,
        )


if __name__ == "__main__":
    unittest.main()
