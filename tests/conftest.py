"""
Tic-Tac-Boom - Test Configuration and Fixtures

Common fixtures and board builders for all test modules.
"""

import random
from typing import Callable

import pytest

from tictacboom.engine.base import Coordinate, Player
from tictacboom.engine.board import Board, iter_coordinates
from tictacboom.engine.game import GameEngine
from tictacboom.engine.lines import LineCache
from tictacboom.engine.search import SearchEngine
from tictacboom.engine.win import WinDetector

Placements = dict[tuple[int, int, int], str]
BoardFactory = Callable[..., Board]


# =============================================================================
# BOARD BUILDERS
# =============================================================================

def build_board(placements: Placements, size: int = 4) -> Board:
    """Board with "X"/"O" at the given (x, y, z) positions."""
    changes = {Coordinate(*pos): Player(token) for pos, token in placements.items()}
    return Board.empty(size).with_cells(changes)


def random_board(seed: int, size: int = 4, fill: float = 0.5) -> Board:
    """Reproducible board with roughly `fill` of the cells occupied."""
    rng = random.Random(seed)
    changes = {}
    for coord in iter_coordinates(size):
        if rng.random() < fill:
            changes[coord] = rng.choice((Player.X, Player.O))
    return Board.empty(size).with_cells(changes)


@pytest.fixture
def make_board() -> BoardFactory:
    """Factory fixture: make_board({(x, y, z): "X", ...}, size=4)."""
    return build_board


@pytest.fixture
def make_random_board() -> BoardFactory:
    return random_board


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def cache() -> LineCache:
    """Fresh per-test line cache."""
    return LineCache()


@pytest.fixture
def detector(cache: LineCache) -> WinDetector:
    return WinDetector(cache)


@pytest.fixture
def search(cache: LineCache) -> SearchEngine:
    return SearchEngine(cache)


@pytest.fixture
def engine(cache: LineCache) -> GameEngine:
    return GameEngine(cache)
