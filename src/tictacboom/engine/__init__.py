"""
Tic-Tac-Boom Game Engine.

Pure Python game logic with zero UI dependencies.
Handles winning lines, detonations, gravity cascades, move legality and the
minimax computer opponent.
"""

from tictacboom.engine.base import DIRECTIONS, Coordinate, GameMode, Player
from tictacboom.engine.board import Board, MutableBoard, create_empty_board, empty_cells, is_full
from tictacboom.engine.detonation import DetonationEngine
from tictacboom.engine.game import GameConfig, GameEngine, GameState, MoveResult
from tictacboom.engine.gravity import CascadeResult, GravityResolver
from tictacboom.engine.legality import drop_target, is_legal, legal_moves
from tictacboom.engine.lines import LineCache, generate_lines
from tictacboom.engine.search import SearchEngine, SearchStats
from tictacboom.engine.win import WinDetector

__all__ = [
    # Data Classes
    "Board",
    "MutableBoard",
    "Coordinate",
    "CascadeResult",
    "GameConfig",
    "GameState",
    "MoveResult",
    "SearchStats",
    # Enums
    "GameMode",
    "Player",
    # Engines
    "DetonationEngine",
    "GameEngine",
    "GravityResolver",
    "LineCache",
    "SearchEngine",
    "WinDetector",
    # Functions
    "DIRECTIONS",
    "create_empty_board",
    "drop_target",
    "empty_cells",
    "generate_lines",
    "is_full",
    "is_legal",
    "legal_moves",
]
