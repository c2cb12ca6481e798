"""
Tic-Tac-Boom - Search Engine

Computer opponent: immediate win, immediate block, otherwise depth-limited
minimax with alpha-beta pruning. X maximises and O minimises.

Each call copies the caller's board into its own MutableBoard and searches it
with place / detonate / recurse / undo cycles. Detonations inside the search
use Standard semantics; gravity cascades are not simulated.
"""

import logging
import math
from dataclasses import dataclass
from typing import ClassVar

from tictacboom.engine.base import Coordinate, GameMode, Player
from tictacboom.engine.board import BoardView, MutableBoard, is_full, iter_coordinates
from tictacboom.engine.detonation import DetonationEngine
from tictacboom.engine.legality import legal_moves
from tictacboom.engine.lines import LineCache
from tictacboom.engine.validators import validate_search_depth
from tictacboom.engine.win import WinDetector

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """
    Counters for one best_move call.

    Attributes:
        nodes_visited: Positions scored by the search
    """
    nodes_visited: int = 0


class SearchEngine:
    """
    Minimax opponent with move ordering by position weight.

    Holds no per-call state, so concurrent best_move calls on one instance
    only share the line cache.

    Attributes:
        cache: Per-size lines and position weights
    """

    WIN_SCORE: ClassVar[int] = 100_000
    THREAT_BONUS: ClassVar[int] = 1_000
    POTENTIAL_BONUS: ClassVar[int] = 10
    FORK_BONUS: ClassVar[int] = 50_000

    MAXIMIZING: ClassVar[Player] = Player.X

    def __init__(self, cache: LineCache | None = None) -> None:
        self.cache = cache if cache is not None else LineCache()
        self.detector = WinDetector(self.cache)

    def order_moves(self, moves: list[Coordinate], size: int) -> list[Coordinate]:
        """Sort moves by descending position weight, keeping ties in order."""
        weights = self.cache.weights_for(size)
        return sorted(moves, key=lambda c: -weights[c.z][c.y][c.x])

    def evaluate(self, board: BoardView) -> int:
        """
        Heuristic score of a position: positive favours X, negative favours O.

        - Each piece is worth its position weight
        - Each line held by only one side scores by how full it is
        - Two or more lines one move from completion (a fork) add a bonus
        """
        size = board.size
        weights = self.cache.weights_for(size)
        score = 0

        for c in iter_coordinates(size):
            value = board[c]
            if value is Player.X:
                score += weights[c.z][c.y][c.x]
            elif value is Player.O:
                score -= weights[c.z][c.y][c.x]

        threats = {Player.X: 0, Player.O: 0}
        for line in self.cache.lines_for(size):
            x_count = 0
            o_count = 0
            for c in line:
                value = board[c]
                if value is Player.X:
                    x_count += 1
                elif value is Player.O:
                    o_count += 1

            if x_count and not o_count:
                owner, count, sign = Player.X, x_count, 1
            elif o_count and not x_count:
                owner, count, sign = Player.O, o_count, -1
            else:
                continue

            if count == size:
                score += sign * self.WIN_SCORE
            elif count == size - 1:
                score += sign * self.THREAT_BONUS
                threats[owner] += 1
            else:
                score += sign * self.POTENTIAL_BONUS

        if threats[Player.X] >= 2:
            score += self.FORK_BONUS
        if threats[Player.O] >= 2:
            score -= self.FORK_BONUS

        return score

    def _find_completing_move(
        self,
        working: MutableBoard,
        moves: list[Coordinate],
        player: Player,
    ) -> Coordinate | None:
        for move in moves:
            working[move] = player
            won = self.detector.winner(working) is player
            working[move] = None
            if won:
                return move
        return None

    def _play(
        self,
        working: MutableBoard,
        move: Coordinate,
        player: Player,
    ) -> dict[Coordinate, Player | None]:
        """Place and detonate; returns the cleared cells' previous values."""
        working[move] = player
        if self.detector.winner(working) is not None:
            return {}
        cleared = {c: working[c] for c in DetonationEngine.explosions_from(working, move)}
        for c in cleared:
            working[c] = None
        return cleared

    def _undo(
        self,
        working: MutableBoard,
        move: Coordinate,
        cleared: dict[Coordinate, Player | None],
    ) -> None:
        # The placed cell is part of any run it exploded, so it is restored
        # first and then emptied.
        for c, value in cleared.items():
            working[c] = value
        working[move] = None

    def _minimax(
        self,
        working: MutableBoard,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        mode: GameMode,
        stats: SearchStats,
    ) -> float:
        stats.nodes_visited += 1

        winner = self.detector.winner(working)
        if winner is self.MAXIMIZING:
            return self.WIN_SCORE + depth
        if winner is not None:
            return -self.WIN_SCORE - depth
        if is_full(working):
            return 0
        if depth == 0:
            return self.evaluate(working)

        mover = self.MAXIMIZING if maximizing else self.MAXIMIZING.opponent
        moves = self.order_moves(legal_moves(working, mode), working.size)

        best = -math.inf if maximizing else math.inf
        for move in moves:
            cleared = self._play(working, move, mover)
            score = self._minimax(working, depth - 1, alpha, beta, not maximizing, mode, stats)
            self._undo(working, move, cleared)

            if maximizing:
                best = max(best, score)
                alpha = max(alpha, score)
            else:
                best = min(best, score)
                beta = min(beta, score)
            if beta <= alpha:
                break

        return best

    def best_move(
        self,
        board: BoardView,
        player: Player,
        mode: GameMode,
        depth: int = 2,
        stats: SearchStats | None = None,
    ) -> Coordinate | None:
        """
        Recommend a move for player.

        Args:
            board: Current position (not modified)
            player: Side to move
            mode: Game mode, used for move legality
            depth: Search depth in plies
            stats: Filled in with this call's counters, if given

        Returns:
            The chosen coordinate, or None if there is no legal move

        Raises:
            ValueError: If depth is less than 1
        """
        validate_search_depth(depth)
        stats = stats if stats is not None else SearchStats()

        working = MutableBoard.from_board(board)
        moves = legal_moves(working, mode)
        if not moves:
            return None

        win = self._find_completing_move(working, moves, player)
        if win is not None:
            logger.debug("%s takes immediate win at %s", player.value, win)
            return win

        block = self._find_completing_move(working, moves, player.opponent)
        if block is not None:
            logger.debug("%s blocks %s at %s", player.value, player.opponent.value, block)
            return block

        ordered = self.order_moves(moves, working.size)
        maximizing = player is self.MAXIMIZING
        best_score = -math.inf if maximizing else math.inf
        best: Coordinate | None = None
        alpha = -math.inf
        beta = math.inf

        for move in ordered:
            cleared = self._play(working, move, player)
            score = self._minimax(working, depth - 1, alpha, beta, not maximizing, mode, stats)
            self._undo(working, move, cleared)

            if maximizing:
                if score > best_score:
                    best_score, best = score, move
                alpha = max(alpha, score)
            else:
                if score < best_score:
                    best_score, best = score, move
                beta = min(beta, score)
            if beta <= alpha:
                break

        if best is None:
            best = ordered[0]

        logger.debug(
            "%s chose %s (score=%s, depth=%d, nodes=%d)",
            player.value, best, best_score, depth, stats.nodes_visited,
        )
        return best
