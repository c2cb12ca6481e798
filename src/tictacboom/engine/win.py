"""
Tic-Tac-Boom - Win Detector

A line wins when its first cell is occupied and every other cell matches it.
Lines are scanned in generator order and the first uniform one decides.
"""

from tictacboom.engine.base import Coordinate, Player
from tictacboom.engine.board import BoardView
from tictacboom.engine.lines import LineCache


class WinDetector:
    """Finds completed lines using the winning lines of a LineCache."""

    def __init__(self, cache: LineCache | None = None) -> None:
        self.cache = cache if cache is not None else LineCache()

    def winning_line(self, board: BoardView) -> tuple[Coordinate, ...] | None:
        """
        Return the first uniform, occupied line on the board.

        Args:
            board: Board or working board to inspect

        Returns:
            The line's coordinates, or None if nobody has won
        """
        for line in self.cache.lines_for(board.size):
            first = board[line[0]]
            if first is None:
                continue
            if all(board[c] is first for c in line[1:]):
                return line
        return None

    def winner(self, board: BoardView) -> Player | None:
        """The player owning the first completed line, or None."""
        line = self.winning_line(board)
        return None if line is None else board[line[0]]
