"""
Tic-Tac-Boom - Detonation Engine

Exactly three same-player pieces in a row explode. Any opponent piece sitting
directly beyond either open end of the triple is destroyed with them.

Rules:
- Runs are walked along the 13 unordered 3D directions
- A run of 1-2 does nothing; a run of 4+ does nothing (it may be a win)
- A run that spans the whole board is a completed line, never a detonation
  (on a 3×3×3 board every triple is a win)
- Empty neighbours are never affected

All methods are stateless class methods; boards are only read.
"""

from dataclasses import dataclass
from typing import ClassVar

from tictacboom.engine.base import DIRECTIONS, Coordinate, Player
from tictacboom.engine.board import BoardView, iter_coordinates


@dataclass(frozen=True)
class Run:
    """
    A maximal same-player run through an anchor along one direction.

    Attributes:
        cells: The run's coordinates, anchor first
        brackets: Opponent pieces directly beyond either end (0-2)
    """
    cells: tuple[Coordinate, ...]
    brackets: tuple[Coordinate, ...]

    def __len__(self) -> int:
        return len(self.cells)


class DetonationEngine:
    """Stateless engine for finding exploding cells."""

    TRIGGER_LENGTH: ClassVar[int] = 3

    @classmethod
    def walk(
        cls,
        board: BoardView,
        anchor: Coordinate,
        player: Player,
        direction: tuple[int, int, int],
    ) -> Run:
        """
        Walk forward then backward from anchor over player's pieces.

        Args:
            board: Board to read
            anchor: Starting cell (assumed to hold player's piece)
            player: Owner of the run
            direction: Unit step (dx, dy, dz)

        Returns:
            The maximal run and its bracketing opponent pieces
        """
        size = board.size
        cells = [anchor]
        brackets = []
        dx, dy, dz = direction

        for sign in (1, -1):
            step = (dx * sign, dy * sign, dz * sign)
            current = anchor.offset(*step)
            while current.in_bounds(size) and board[current] is player:
                cells.append(current)
                current = current.offset(*step)
            if current.in_bounds(size) and board[current] is not None:
                brackets.append(current)

        return Run(cells=tuple(cells), brackets=tuple(brackets))

    @classmethod
    def triggers(cls, run: Run, size: int) -> bool:
        """Check whether a run detonates on a board of the given size."""
        return len(run) == cls.TRIGGER_LENGTH and len(run) < size

    @classmethod
    def explosions_from(cls, board: BoardView, last_move: Coordinate) -> frozenset[Coordinate]:
        """
        Cells cleared by the piece just placed at last_move.

        Only lines through last_move are examined.

        Args:
            board: Board with the new piece already placed
            last_move: Where the piece was placed

        Returns:
            Exploding coordinates (empty if last_move is empty)
        """
        player = board[last_move]
        if player is None:
            return frozenset()

        exploded: set[Coordinate] = set()
        for direction in DIRECTIONS:
            run = cls.walk(board, last_move, player, direction)
            if cls.triggers(run, board.size):
                exploded.update(run.cells)
                exploded.update(run.brackets)
        return frozenset(exploded)

    @classmethod
    def all_explosions_on_board(cls, board: BoardView) -> frozenset[Coordinate]:
        """
        Every exploding cell on the board, with no single anchor.

        Equivalent to the union of explosions_from over every occupied cell.
        A run walked from one member is not walked again from the others in
        the same direction, since it would yield the same run and brackets.
        """
        exploded: set[Coordinate] = set()
        walked: set[tuple[Coordinate, int]] = set()

        for coord in iter_coordinates(board.size):
            player = board[coord]
            if player is None:
                continue
            for index, direction in enumerate(DIRECTIONS):
                if (coord, index) in walked:
                    continue
                run = cls.walk(board, coord, player, direction)
                walked.update((c, index) for c in run.cells)
                if cls.triggers(run, board.size):
                    exploded.update(run.cells)
                    exploded.update(run.brackets)

        return frozenset(exploded)
