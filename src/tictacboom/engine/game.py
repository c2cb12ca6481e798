"""
Tic-Tac-Boom - Game Engine

Turn flow on top of the rules: validate a move, place it, check for a win,
detonate, and hand the turn over.

Turn order:
1. The move must be legal for the mode (ValueError otherwise)
2. A completed line ends the game; nothing detonates
3. Standard mode: triples through the new piece explode once (no chaining)
4. Gravity mode: triples through the new piece explode, survivors fall and
   chain reactions resolve; the settled board is checked for a win again
5. A full board with no winner is a draw

Game states are immutable. Timing of explosions and "thinking" delays belong
to the caller; every result here is immediately consistent.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from tictacboom.engine.base import (
    DEFAULT_SEARCH_DEPTH,
    DEFAULT_SIZE,
    Coordinate,
    GameMode,
    Player,
)
from tictacboom.engine.board import Board, is_full
from tictacboom.engine.detonation import DetonationEngine
from tictacboom.engine.gravity import GravityResolver
from tictacboom.engine.legality import drop_target, is_legal, legal_moves
from tictacboom.engine.lines import LineCache
from tictacboom.engine.search import SearchEngine
from tictacboom.engine.validators import (
    validate_board_size,
    validate_coordinate,
    validate_game_mode,
    validate_search_depth,
)
from tictacboom.engine.win import WinDetector

if TYPE_CHECKING:
    from tictacboom.config.settings import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session.

    Attributes:
        size: Board edge length (3, 4 or 5)
        mode: Standard or Gravity
        search_depth: Plies searched by the computer opponent
    """
    size: int = DEFAULT_SIZE
    mode: GameMode = GameMode.STANDARD
    search_depth: int = DEFAULT_SEARCH_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration."""
        validate_board_size(self.size)
        validate_search_depth(self.search_depth)
        # Accept "gravity" etc. and store the enum
        object.__setattr__(self, "mode", validate_game_mode(self.mode))

    @classmethod
    def from_settings(cls, settings: "Settings") -> "GameConfig":
        """Build a validated config from application settings."""
        return cls(
            size=settings.board_size,
            mode=settings.game_mode,
            search_depth=settings.search_depth,
        )


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of a game between turns.

    Attributes:
        board: Authoritative board
        config: Session configuration
        current_player: Side to move next
        winner: Winning player, if any
        winning_line: Coordinates of the completed line, if any
        is_draw: Board filled with no winner
        move_count: Moves applied so far
    """
    board: Board
    config: GameConfig
    current_player: Player = Player.X
    winner: Player | None = None
    winning_line: tuple[Coordinate, ...] | None = None
    is_draw: bool = False
    move_count: int = 0

    def __post_init__(self) -> None:
        """Validate the board against the configuration."""
        if self.board.size != self.config.size:
            raise ValueError(
                f"Board size {self.board.size} does not match config size {self.config.size}"
            )
        if self.move_count < 0:
            raise ValueError(f"Move count must be non-negative, got {self.move_count}")

    @property
    def is_over(self) -> bool:
        return self.winner is not None or self.is_draw

    @property
    def mode(self) -> GameMode:
        return self.config.mode


@dataclass(frozen=True)
class MoveResult:
    """
    Result of applying one move.

    Attributes:
        state: Game state after the move
        move: Where the piece was placed
        player: Who placed it
        exploded: Every cell cleared by the move (empty on a win)
        waves: Cells cleared per detonation step, for staged reveals
    """
    state: GameState
    move: Coordinate
    player: Player
    exploded: frozenset[Coordinate] = field(default_factory=frozenset)
    waves: tuple[frozenset[Coordinate], ...] = field(default_factory=tuple)

    @property
    def is_chain_reaction(self) -> bool:
        return len(self.waves) > 1


class GameEngine:
    """
    Entry point for a presentation layer.

    Owns one LineCache shared by its win detector and search engine, so
    independent GameEngine instances never interfere.
    """

    def __init__(self, cache: LineCache | None = None) -> None:
        self.cache = cache if cache is not None else LineCache()
        self.detector = WinDetector(self.cache)
        self.search = SearchEngine(self.cache)

    def new_game(self, config: GameConfig | None = None) -> GameState:
        """Start a game on an empty board; X moves first."""
        config = config or GameConfig()
        return GameState(board=Board.empty(config.size), config=config)

    def is_legal(self, state: GameState, coord: Coordinate) -> bool:
        return not state.is_over and is_legal(state.board, coord, state.mode)

    def legal_moves(self, state: GameState) -> list[Coordinate]:
        if state.is_over:
            return []
        return legal_moves(state.board, state.mode)

    def apply_move(self, state: GameState, coord: Coordinate | tuple[int, int, int]) -> MoveResult:
        """
        Place the current player's piece and resolve the consequences.

        Args:
            state: Game state before the move
            coord: Target cell, as a Coordinate or (x, y, z)

        Returns:
            MoveResult with the next state and the exploded cells

        Raises:
            ValueError: If the game is over or the move is illegal
        """
        if state.is_over:
            raise ValueError("Game is already over")

        coord = validate_coordinate(coord, state.board.size)
        if not is_legal(state.board, coord, state.mode):
            if state.board[coord] is not None:
                raise ValueError(f"Cell {coord} is occupied")
            raise ValueError(f"Cell {coord} is not supported in gravity mode")

        player = state.current_player
        board = state.board.place(coord, player)
        exploded: frozenset[Coordinate] = frozenset()
        waves: tuple[frozenset[Coordinate], ...] = ()

        line = self.detector.winning_line(board)
        if line is None:
            initial = DetonationEngine.explosions_from(board, coord)
            if initial and state.mode is GameMode.GRAVITY:
                cascade = GravityResolver.resolve_cascade(board, initial)
                board, exploded, waves = cascade.board, cascade.exploded, cascade.waves
                line = self.detector.winning_line(board)
            elif initial:
                board = board.clear(initial)
                exploded, waves = initial, (initial,)

        winner = board[line[0]] if line is not None else None
        next_state = replace(
            state,
            board=board,
            current_player=player.opponent,
            winner=winner,
            winning_line=line,
            is_draw=winner is None and is_full(board),
            move_count=state.move_count + 1,
        )

        logger.debug(
            "Move %d: %s at %s exploded %d cells%s",
            next_state.move_count, player.value, coord, len(exploded),
            f", {winner.value} wins" if winner else "",
        )
        return MoveResult(state=next_state, move=coord, player=player, exploded=exploded, waves=waves)

    def drop(self, state: GameState, x: int, y: int) -> MoveResult:
        """
        Drop the current player's piece into column (x, y).

        Raises:
            ValueError: If the column is full or off the board
        """
        target = drop_target(state.board, x, y)
        if target is None:
            raise ValueError(f"Column ({x}, {y}) is full or out of range")
        return self.apply_move(state, target)

    def best_move(self, state: GameState, depth: int | None = None) -> Coordinate | None:
        """
        Ask the search for the current player's move.

        Args:
            state: Position to search
            depth: Overrides the configured search depth

        Returns:
            Coordinate, or None if the game is over or no move is legal
        """
        if state.is_over:
            return None
        return self.search.best_move(
            state.board,
            state.current_player,
            state.mode,
            depth if depth is not None else state.config.search_depth,
        )
