"""
Tic-Tac-Boom - Board Model

The N×N×N grid of cell states, indexed [layer][row][column], and the pure
queries over it. `Board` is the immutable, value-like snapshot handed to and
from callers; `MutableBoard` is a private working buffer for code that needs
place/undo cycles (the search, the gravity resolver) and is never shared.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Protocol

from tictacboom.engine.base import Coordinate, Player, cell_token, parse_cell_token

CellValue = Player | None
Layers = tuple[tuple[tuple[CellValue, ...], ...], ...]


class BoardView(Protocol):
    """Read access shared by Board and MutableBoard."""

    @property
    def size(self) -> int: ...

    def __getitem__(self, coord: Coordinate) -> CellValue: ...


def iter_coordinates(size: int) -> Iterator[Coordinate]:
    """Every coordinate in generation order: layer, row, column ascending."""
    for z in range(size):
        for y in range(size):
            for x in range(size):
                yield Coordinate(x, y, z)


@dataclass(frozen=True)
class Board:
    """
    Immutable cubic board.

    Attributes:
        cells: Nested tuples indexed cells[z][y][x], each Player or None.
               Example for size 3, an X on the floor corner:
               cells[0][0][0] is Player.X
    """
    cells: Layers

    def __post_init__(self) -> None:
        """Validate the grid is cubic and holds only player values."""
        size = len(self.cells)
        if size == 0:
            raise ValueError("Board must have at least one layer")

        for z, layer in enumerate(self.cells):
            if len(layer) != size:
                raise ValueError(f"Layer {z} has {len(layer)} rows (expected {size})")
            for y, row in enumerate(layer):
                if len(row) != size:
                    raise ValueError(f"Row {y} of layer {z} has {len(row)} cells (expected {size})")
                for value in row:
                    if value is not None and not isinstance(value, Player):
                        raise ValueError(f"Invalid cell value {value!r} at layer {z}, row {y}")

    @classmethod
    def empty(cls, size: int) -> "Board":
        """Create an all-empty board."""
        row = (None,) * size
        layer = (row,) * size
        return cls(cells=(layer,) * size)

    @classmethod
    def from_layers(cls, layers: Iterable[Iterable[Iterable[str | Player | None]]]) -> "Board":
        """Create a Board from nested sequences of "X"/"O"/None (or Player) values."""
        return cls(cells=tuple(
            tuple(tuple(parse_cell_token(v) for v in row) for row in layer)
            for layer in layers
        ))

    @classmethod
    def from_dict(cls, data: dict) -> "Board":
        """Create a Board from its snapshot dictionary format."""
        if "cells" in data:
            return cls.from_layers(data["cells"])
        return cls.empty(data.get("size", 4))

    def to_dict(self) -> dict:
        """Convert to a plain snapshot the presentation layer can render."""
        return {
            "size": self.size,
            "cells": [[[cell_token(v) for v in row] for row in layer] for layer in self.cells],
        }

    @property
    def size(self) -> int:
        return len(self.cells)

    def __getitem__(self, coord: Coordinate) -> CellValue:
        return self.cells[coord.z][coord.y][coord.x]

    def with_cells(self, changes: dict[Coordinate, CellValue]) -> "Board":
        """Return a new board with the given cells overwritten."""
        if not changes:
            return self
        layers = [[list(row) for row in layer] for layer in self.cells]
        for coord, value in changes.items():
            layers[coord.z][coord.y][coord.x] = value
        return Board(cells=tuple(tuple(tuple(row) for row in layer) for layer in layers))

    def place(self, coord: Coordinate, player: Player) -> "Board":
        """Return a new board with player's piece at coord."""
        return self.with_cells({coord: player})

    def clear(self, coords: Iterable[Coordinate]) -> "Board":
        """Return a new board with the given cells emptied."""
        return self.with_cells({c: None for c in coords})

    def is_full(self) -> bool:
        return is_full(self)

    def empty_cells(self) -> list[Coordinate]:
        return empty_cells(self)

    def count(self, player: Player) -> int:
        """Number of pieces player has on the board."""
        return sum(1 for layer in self.cells for row in layer for v in row if v is player)

    def __str__(self) -> str:
        blocks = []
        for z, layer in enumerate(self.cells):
            rows = [" ".join(cell_token(v) or "." for v in row) for row in layer]
            blocks.append(f"z={z}\n" + "\n".join(rows))
        return "\n\n".join(blocks)


class MutableBoard:
    """
    Exclusively-owned working copy of a board for in-place place/undo cycles.

    Built by copying a Board; never aliases the source, and `freeze()` hands
    back a fresh immutable Board.
    """

    def __init__(self, size: int) -> None:
        self._size = size
        self._cells: list[list[list[CellValue]]] = [
            [[None] * size for _ in range(size)] for _ in range(size)
        ]

    @classmethod
    def from_board(cls, board: BoardView) -> "MutableBoard":
        working = cls(board.size)
        for coord in iter_coordinates(board.size):
            working[coord] = board[coord]
        return working

    @property
    def size(self) -> int:
        return self._size

    def __getitem__(self, coord: Coordinate) -> CellValue:
        return self._cells[coord.z][coord.y][coord.x]

    def __setitem__(self, coord: Coordinate, value: CellValue) -> None:
        self._cells[coord.z][coord.y][coord.x] = value

    def column(self, x: int, y: int) -> list[CellValue]:
        """Values of column (x, y), floor first."""
        return [self._cells[z][y][x] for z in range(self._size)]

    def set_column(self, x: int, y: int, values: list[CellValue]) -> None:
        for z in range(self._size):
            self._cells[z][y][x] = values[z]

    def freeze(self) -> Board:
        return Board(cells=tuple(tuple(tuple(row) for row in layer) for layer in self._cells))


def create_empty_board(size: int) -> Board:
    """Fresh board, all cells empty."""
    return Board.empty(size)


def empty_cells(board: BoardView) -> list[Coordinate]:
    """All empty coordinates, in layer, row, column ascending order."""
    return [c for c in iter_coordinates(board.size) if board[c] is None]


def is_full(board: BoardView) -> bool:
    """Check if every cell is occupied."""
    return all(board[c] is not None for c in iter_coordinates(board.size))
