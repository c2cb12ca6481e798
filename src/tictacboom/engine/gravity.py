"""
Tic-Tac-Boom - Gravity Resolver

Gravity mode only. After a detonation the surviving pieces fall down their
(x, y) column, which can line up new triples; those explode in turn until the
board settles.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from tictacboom.engine.base import Coordinate
from tictacboom.engine.board import Board, BoardView, MutableBoard
from tictacboom.engine.detonation import DetonationEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CascadeResult:
    """
    Outcome of a gravity cascade.

    Attributes:
        board: Settled board after every reflow and detonation
        exploded: Every coordinate cleared during the cascade
        waves: Cells cleared at each step, initial explosion first
    """
    board: Board
    exploded: frozenset[Coordinate]
    waves: tuple[frozenset[Coordinate], ...]

    @property
    def chain_length(self) -> int:
        """Number of detonations after the initial one."""
        return max(len(self.waves) - 1, 0)


class GravityResolver:
    """Stateless engine for gravity reflow and chain reactions."""

    @classmethod
    def _settle(cls, working: MutableBoard) -> None:
        size = working.size
        for y in range(size):
            for x in range(size):
                pieces = [v for v in working.column(x, y) if v is not None]
                working.set_column(x, y, pieces + [None] * (size - len(pieces)))

    @classmethod
    def apply_gravity(cls, board: BoardView) -> Board:
        """
        Drop every piece to the lowest free cell of its column.

        Relative vertical order within a column is preserved and columns do
        not affect each other.
        """
        working = MutableBoard.from_board(board)
        cls._settle(working)
        return working.freeze()

    @classmethod
    def is_settled(cls, board: BoardView) -> bool:
        """Check that no empty cell has a piece above it."""
        size = board.size
        for y in range(size):
            for x in range(size):
                seen_gap = False
                for z in range(size):
                    occupied = board[Coordinate(x, y, z)] is not None
                    if occupied and seen_gap:
                        return False
                    seen_gap = seen_gap or not occupied
        return True

    @classmethod
    def resolve_cascade(
        cls,
        board: BoardView,
        initial_explosions: Iterable[Coordinate],
    ) -> CascadeResult:
        """
        Clear the initial explosions, then reflow and detonate until stable.

        Args:
            board: Board before anything is cleared
            initial_explosions: Cells exploded by the triggering move

        Returns:
            CascadeResult with the settled board and all exploded cells
        """
        initial = frozenset(initial_explosions)
        working = MutableBoard.from_board(board)
        for coord in initial:
            working[coord] = None

        exploded: set[Coordinate] = set(initial)
        waves = [initial] if initial else []

        # Each pass clears at least one piece, so this ends.
        while True:
            cls._settle(working)
            found = DetonationEngine.all_explosions_on_board(working)
            if not found:
                break
            for coord in found:
                working[coord] = None
            exploded.update(found)
            waves.append(found)
            logger.debug("Chain reaction %d cleared %d cells", len(waves) - 1, len(found))

        return CascadeResult(
            board=working.freeze(),
            exploded=frozenset(exploded),
            waves=tuple(waves),
        )
