"""
Tic-Tac-Boom - Move Legality

Which empty cells a player may take. In Gravity mode a piece must rest on the
floor or on another piece. Out-of-range coordinates are simply illegal; these
checks never raise.
"""

from tictacboom.engine.base import Coordinate, GameMode
from tictacboom.engine.board import BoardView, empty_cells


def is_legal(board: BoardView, coord: Coordinate, mode: GameMode) -> bool:
    """
    Check whether a piece may be placed at coord.

    Args:
        board: Current board
        coord: Target cell
        mode: Game mode (Gravity adds the support rule)

    Returns:
        True if the cell is in bounds, empty and (in Gravity mode) supported
    """
    if not coord.in_bounds(board.size):
        return False
    if board[coord] is not None:
        return False

    if mode is GameMode.GRAVITY:
        return coord.z == 0 or board[coord.offset(0, 0, -1)] is not None

    return True


def legal_moves(board: BoardView, mode: GameMode) -> list[Coordinate]:
    """Empty cells filtered by is_legal, in layer, row, column order."""
    return [c for c in empty_cells(board) if is_legal(board, c, mode)]


def drop_target(board: BoardView, x: int, y: int) -> Coordinate | None:
    """
    The cell a piece dropped into column (x, y) comes to rest in.

    Returns:
        Lowest empty cell of the column, or None if the column is full or
        (x, y) is off the board
    """
    size = board.size
    if not (0 <= x < size and 0 <= y < size):
        return None
    for z in range(size):
        coord = Coordinate(x, y, z)
        if board[coord] is None:
            return coord
    return None
