"""
Tests for the win detector.
"""

import pytest

from tictacboom.engine.base import Coordinate, Player
from tictacboom.engine.board import create_empty_board
from tictacboom.engine.lines import LineCache
from tictacboom.engine.win import WinDetector


class TestWinner:
    """Tests for WinDetector.winner."""

    @pytest.mark.parametrize("size", [3, 4, 5])
    def test_empty_board(self, detector, size):
        assert detector.winner(create_empty_board(size)) is None

    def test_no_uniform_line(self, detector, make_board):
        """Test a mixed line does not win."""
        board = make_board({(0, 0, 0): "X", (1, 0, 0): "X", (2, 0, 0): "X", (3, 0, 0): "O"})
        assert detector.winner(board) is None

    def test_incomplete_line(self, detector, make_board):
        """Test a line with its first cell empty does not win."""
        board = make_board({(1, 0, 0): "X", (2, 0, 0): "X", (3, 0, 0): "X"})
        assert detector.winner(board) is None

    def test_row_win(self, detector, make_board):
        board = make_board({(x, 2, 1): "X" for x in range(4)})
        assert detector.winner(board) is Player.X

    def test_pillar_win(self, detector, make_board):
        board = make_board({(1, 3, z): "O" for z in range(4)})
        assert detector.winner(board) is Player.O

    def test_face_diagonal_win(self, detector, make_board):
        """Test an anti-diagonal in an xz plane wins."""
        board = make_board({(i, 0, 4 - i): "X" for i in range(5)}, size=5)
        assert detector.winner(board) is Player.X

    def test_space_diagonal_win(self, detector, make_board):
        board = make_board({(i, 3 - i, i): "O" for i in range(4)})
        assert detector.winner(board) is Player.O

    def test_idempotent(self, detector, make_board):
        board = make_board({(0, y, 0): "X" for y in range(4)})
        assert detector.winner(board) is detector.winner(board) is Player.X

    def test_does_not_modify_board(self, detector, make_board):
        board = make_board({(0, y, 0): "X" for y in range(4)})
        snapshot = board.to_dict()
        detector.winner(board)
        assert board.to_dict() == snapshot

    def test_default_cache_created(self):
        assert isinstance(WinDetector().cache, LineCache)


class TestWinningLine:
    """Tests for WinDetector.winning_line."""

    def test_returns_coordinates(self, detector, make_board):
        board = make_board({(i, i, i): "X" for i in range(3)}, size=3)
        line = detector.winning_line(board)
        assert set(line) == {Coordinate(i, i, i) for i in range(3)}

    def test_none_without_win(self, detector, make_board):
        board = make_board({(0, 0, 0): "X", (1, 1, 1): "O"}, size=3)
        assert detector.winning_line(board) is None
