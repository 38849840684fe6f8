"""Tests for the grid primitives and the shared occupancy board.

Validates:
  - Direction vectors and diagonal classification
  - Cell claims succeed once and never twice
  - Diagonal steps block the crossing diagonal of the same unit square
  - Seeding reports whether the cell was new
  - The read-only view exposes queries only
"""

from __future__ import annotations

import unittest

from connectgrid.geometry import Point, Direction, DIRECTIONS, point_add
from connectgrid.pipeline.router.board import Board, BoardView


class TestGeometry(unittest.TestCase):
    """Unit tests for Point and Direction."""

    def test_direction_order(self):
        self.assertEqual(
            [d.name for d in DIRECTIONS],
            ["E", "NE", "N", "NW", "W", "SW", "S", "SE"],
        )

    def test_direction_vectors(self):
        self.assertEqual(Direction.E.vector, (1, 0))
        self.assertEqual(Direction.NE.vector, (1, 1))
        self.assertEqual(Direction.N.vector, (0, 1))
        self.assertEqual(Direction.NW.vector, (-1, 1))
        self.assertEqual(Direction.W.vector, (-1, 0))
        self.assertEqual(Direction.SW.vector, (-1, -1))
        self.assertEqual(Direction.S.vector, (0, -1))
        self.assertEqual(Direction.SE.vector, (1, -1))

    def test_diagonal_flags(self):
        diagonals = {d for d in Direction if d.diagonal}
        self.assertEqual(diagonals, {Direction.NE, Direction.NW, Direction.SW, Direction.SE})

    def test_point_add(self):
        self.assertEqual(point_add((3, -2), (-1, 1)), Point(2, -1))
        self.assertEqual(Point(0, 0).translate(Direction.SW.vector), Point(-1, -1))

    def test_point_value_semantics(self):
        self.assertEqual(Point(1, 2), (1, 2))
        self.assertEqual(len({Point(1, 2), Point(1, 2)}), 1)


class TestBoard(unittest.TestCase):
    """Unit tests for Board.claim and Board.seed."""

    def setUp(self):
        self.board = Board()

    def test_orthogonal_claim(self):
        """A first claim succeeds and marks the target cell."""
        self.assertTrue(self.board.claim(Point(0, 0), Direction.E))
        self.assertTrue(self.board.is_claimed((1, 0)))

    def test_claim_twice_fails(self):
        """The same target cannot be claimed by another walker."""
        self.assertTrue(self.board.claim(Point(0, 0), Direction.E))
        self.assertFalse(self.board.claim(Point(0, 0), Direction.E))
        self.assertFalse(self.board.claim(Point(2, 0), Direction.W))
        self.assertEqual(self.board.claimed_cells, {Point(1, 0)})

    def test_orthogonal_claim_leaves_diagonals(self):
        self.board.claim(Point(0, 0), Direction.N)
        self.assertEqual(self.board.claimed_diagonals, frozenset())

    def test_diagonal_claim_blocks_crossing(self):
        """(0,0)->(1,1) blocks (1,0)->(0,1) even though (0,1) is free."""
        self.assertTrue(self.board.claim(Point(0, 0), Direction.NE))
        self.assertFalse(self.board.is_claimed((0, 1)))
        self.assertFalse(self.board.claim(Point(1, 0), Direction.NW))
        self.assertFalse(self.board.claim(Point(0, 1), Direction.SE))
        self.assertFalse(self.board.is_claimed((0, 1)))
        self.assertFalse(self.board.is_claimed((1, 0)))

    def test_diagonal_pair_is_symmetric(self):
        self.board.claim(Point(0, 0), Direction.NE)
        self.assertEqual(
            self.board.claimed_diagonals,
            {(Point(0, 1), Point(1, 0)), (Point(1, 0), Point(0, 1))},
        )
        self.assertTrue(self.board.is_diagonal_blocked((0, 1), (1, 0)))
        self.assertTrue(self.board.is_diagonal_blocked((1, 0), (0, 1)))

    def test_parallel_diagonal_allowed(self):
        """A parallel diagonal in the neighbouring square does not cross."""
        self.assertTrue(self.board.claim(Point(0, 0), Direction.NE))
        self.assertTrue(self.board.claim(Point(1, 0), Direction.NE))

    def test_orthogonal_move_past_diagonal_allowed(self):
        """The blocked pair only stops diagonal moves."""
        self.assertTrue(self.board.claim(Point(0, 0), Direction.NE))
        self.assertTrue(self.board.claim(Point(1, 0), Direction.W))

    def test_failed_claim_does_not_mutate(self):
        self.board.seed(Point(1, 1))
        before_cells = self.board.claimed_cells
        before_diagonals = self.board.claimed_diagonals
        self.assertFalse(self.board.claim(Point(0, 0), Direction.NE))
        self.assertEqual(self.board.claimed_cells, before_cells)
        self.assertEqual(self.board.claimed_diagonals, before_diagonals)

    def test_can_claim_matches_claim(self):
        self.board.claim(Point(0, 0), Direction.NE)
        self.assertFalse(self.board.can_claim(Point(1, 0), Direction.NW))
        self.assertFalse(self.board.can_claim(Point(0, 0), Direction.NE))
        self.assertTrue(self.board.can_claim(Point(0, 0), Direction.S))
        self.assertEqual(len(self.board), 1)

    def test_seed(self):
        """Seeding reports whether the cell was previously unclaimed."""
        self.assertTrue(self.board.seed(Point(4, 4)))
        self.assertFalse(self.board.seed(Point(4, 4)))
        self.assertIn(Point(4, 4), self.board)
        self.assertFalse(self.board.claim(Point(3, 4), Direction.E))

    def test_no_bounds(self):
        """The board is unbounded; negative coordinates are ordinary cells."""
        self.assertTrue(self.board.claim(Point(-100, -100), Direction.SW))
        self.assertTrue(self.board.is_claimed((-101, -101)))


class TestBoardView(unittest.TestCase):
    """The evaluator's read-only view."""

    def test_view_reflects_board(self):
        board = Board()
        view = board.view()
        self.assertIsInstance(view, BoardView)
        board.claim(Point(0, 0), Direction.NE)
        self.assertTrue(view.is_claimed((1, 1)))
        self.assertIn(Point(1, 1), view)
        self.assertEqual(len(view), 1)
        self.assertTrue(view.is_diagonal_blocked((0, 1), (1, 0)))
        self.assertFalse(view.can_claim(Point(1, 0), Direction.NW))

    def test_view_has_no_mutators(self):
        view = Board().view()
        self.assertFalse(hasattr(view, "claim"))
        self.assertFalse(hasattr(view, "seed"))
        with self.assertRaises(AttributeError):
            view.claimed_cells.add(Point(0, 0))


if __name__ == "__main__":
    unittest.main()
