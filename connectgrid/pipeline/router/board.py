"""Shared occupancy board — claimed cells and claimed diagonals.

Every walker's path is recorded here.  A cell can be claimed once.  A
diagonal step additionally claims the *other* diagonal of the unit
square it passes through, so no later diagonal step can cross it
without either walker occupying a common cell.

The board is append-only: nothing is ever released for the life of a
game.
"""

from __future__ import annotations

from connectgrid.geometry import Point, Direction, point_add


class Board:
    """Occupancy ledger over an unbounded integer grid."""

    def __init__(self) -> None:
        self._cells: set[Point] = set()
        # Symmetric: (a, b) is present iff (b, a) is present.
        self._diagonals: set[tuple[Point, Point]] = set()

    # ── Queries ────────────────────────────────────────────────────

    def is_claimed(self, point: tuple[int, int]) -> bool:
        return Point(*point) in self._cells

    def is_diagonal_blocked(self, a: tuple[int, int], b: tuple[int, int]) -> bool:
        """True if a diagonal step between *a* and *b* would cross a claimed one."""
        return (Point(*a), Point(*b)) in self._diagonals

    def can_claim(self, source: tuple[int, int], direction: Direction) -> bool:
        """Would ``claim(source, direction)`` succeed?  Never mutates."""
        dest = point_add(source, direction.vector)
        if dest in self._cells:
            return False
        if direction.diagonal and (Point(*source), dest) in self._diagonals:
            return False
        return True

    @property
    def claimed_cells(self) -> frozenset[Point]:
        return frozenset(self._cells)

    @property
    def claimed_diagonals(self) -> frozenset[tuple[Point, Point]]:
        return frozenset(self._diagonals)

    def __contains__(self, point: object) -> bool:
        return point in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    # ── Mutation ───────────────────────────────────────────────────

    def claim(self, source: tuple[int, int], direction: Direction) -> bool:
        """Try to extend a path from *source* one step in *direction*.

        Returns False without touching the board if the target cell is
        taken, or if a diagonal step would cross a claimed diagonal.
        On success the target cell is claimed and, for a diagonal step,
        the perpendicular diagonal through the same unit square is
        blocked in both orientations.
        """
        if not self.can_claim(source, direction):
            return False

        dest = point_add(source, direction.vector)
        if direction.diagonal:
            first = Point(source[0], dest.y)
            second = Point(dest.x, source[1])
            self._diagonals.add((first, second))
            self._diagonals.add((second, first))
        self._cells.add(dest)
        return True

    def seed(self, point: tuple[int, int]) -> bool:
        """Claim a walker's starting cell unconditionally.

        Returns whether the cell was previously unclaimed.
        """
        point = Point(*point)
        fresh = point not in self._cells
        self._cells.add(point)
        return fresh

    def view(self) -> BoardView:
        return BoardView(self)


class BoardView:
    """Read-only window onto a Board, handed to direction evaluators."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def is_claimed(self, point: tuple[int, int]) -> bool:
        return self._board.is_claimed(point)

    def is_diagonal_blocked(self, a: tuple[int, int], b: tuple[int, int]) -> bool:
        return self._board.is_diagonal_blocked(a, b)

    def can_claim(self, source: tuple[int, int], direction: Direction) -> bool:
        return self._board.can_claim(source, direction)

    @property
    def claimed_cells(self) -> frozenset[Point]:
        return self._board.claimed_cells

    @property
    def claimed_diagonals(self) -> frozenset[tuple[Point, Point]]:
        return self._board.claimed_diagonals

    def __contains__(self, point: object) -> bool:
        return point in self._board

    def __len__(self) -> int:
        return len(self._board)
