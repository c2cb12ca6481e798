"""
Tic-Tac-Boom - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Value types are immutable (frozen dataclasses) so boards and
coordinates can be shared freely between the rules, the search and the caller.
"""

from dataclasses import dataclass
from enum import Enum


class Player(Enum):
    """The two sides. A cell holds a Player or None (empty)."""
    X = "X"
    O = "O"

    @property
    def opponent(self) -> "Player":
        """The other side."""
        return Player.O if self is Player.X else Player.X


class GameMode(Enum):
    """Available game modes."""
    STANDARD = "standard"
    GRAVITY = "gravity"  # pieces rest on the floor or on another piece


SUPPORTED_SIZES = frozenset({3, 4, 5})
DEFAULT_SIZE = 4
DEFAULT_SEARCH_DEPTH = 2


@dataclass(frozen=True, order=True)
class Coordinate:
    """
    A cell position on the lattice.

    Attributes:
        x: Column index
        y: Row index
        z: Layer index (0 is the floor)
    """
    x: int
    y: int
    z: int

    def offset(self, dx: int, dy: int, dz: int) -> "Coordinate":
        """Return the coordinate shifted by the given step."""
        return Coordinate(self.x + dx, self.y + dy, self.z + dz)

    def in_bounds(self, size: int) -> bool:
        """Check whether every component lies in [0, size)."""
        return 0 <= self.x < size and 0 <= self.y < size and 0 <= self.z < size

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


# The 13 unordered unit steps: half of the 26 neighbour offsets, one per
# direction/reverse pair.
DIRECTIONS: tuple[tuple[int, int, int], ...] = (
    (1, 0, 0), (0, 1, 0), (0, 0, 1),
    (1, 1, 0), (1, -1, 0),
    (1, 0, 1), (1, 0, -1),
    (0, 1, 1), (0, 1, -1),
    (1, 1, 1), (1, 1, -1), (1, -1, 1), (1, -1, -1),
)


def cell_token(value: Player | None) -> str | None:
    """Serialize a cell value for snapshots ("X", "O" or None)."""
    return None if value is None else value.value


def parse_cell_token(token: str | Player | None) -> Player | None:
    """Inverse of cell_token; also accepts Player members unchanged."""
    if token is None or isinstance(token, Player):
        return token
    try:
        return Player(token)
    except ValueError:
        raise ValueError(f"Invalid cell value {token!r}. Must be 'X', 'O' or None.") from None
