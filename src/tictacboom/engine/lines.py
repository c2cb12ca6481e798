"""
Tic-Tac-Boom - Winning Line Generator

Enumerates every maximal straight line of cells that wins the game on an
N×N×N board:

    - Rows (x varies), columns (y varies), pillars (z varies): 3·N² lines
    - Two diagonals per slice in each of the xy, xz and yz planes: 6·N lines
    - The four space diagonals: 4 lines

Lines and the derived position weights depend only on N, so they are cached
per size in a LineCache owned by whichever engine needs them.
"""

import logging

from tictacboom.engine.base import Coordinate

logger = logging.getLogger(__name__)

Line = tuple[Coordinate, ...]
Weights = tuple[tuple[tuple[int, ...], ...], ...]


def expected_line_count(size: int) -> int:
    """Number of winning lines on a board of the given size."""
    return 3 * size * size + 6 * size + 4


def generate_lines(size: int) -> tuple[Line, ...]:
    """
    Build every winning line for a board size, in a stable order.

    Args:
        size: Board edge length

    Returns:
        Tuple of lines, each a tuple of `size` coordinates
    """
    lines: list[Line] = []
    span = range(size)
    last = size - 1

    # Rows, columns, pillars
    for z in span:
        for y in span:
            lines.append(tuple(Coordinate(x, y, z) for x in span))
    for z in span:
        for x in span:
            lines.append(tuple(Coordinate(x, y, z) for y in span))
    for y in span:
        for x in span:
            lines.append(tuple(Coordinate(x, y, z) for z in span))

    # Face diagonals: xy planes, xz planes, yz planes
    for z in span:
        lines.append(tuple(Coordinate(i, i, z) for i in span))
        lines.append(tuple(Coordinate(i, last - i, z) for i in span))
    for y in span:
        lines.append(tuple(Coordinate(i, y, i) for i in span))
        lines.append(tuple(Coordinate(i, y, last - i) for i in span))
    for x in span:
        lines.append(tuple(Coordinate(x, i, i) for i in span))
        lines.append(tuple(Coordinate(x, i, last - i) for i in span))

    # Space diagonals
    lines.append(tuple(Coordinate(i, i, i) for i in span))
    lines.append(tuple(Coordinate(i, i, last - i) for i in span))
    lines.append(tuple(Coordinate(i, last - i, i) for i in span))
    lines.append(tuple(Coordinate(i, last - i, last - i) for i in span))

    return tuple(lines)


def position_weights(size: int, lines: tuple[Line, ...]) -> Weights:
    """
    Count the winning lines through each cell.

    Returns:
        Weights indexed [z][y][x]
    """
    counts = [[[0] * size for _ in range(size)] for _ in range(size)]
    for line in lines:
        for c in line:
            counts[c.z][c.y][c.x] += 1
    return tuple(tuple(tuple(row) for row in layer) for layer in counts)


class LineCache:
    """
    Per-size store of winning lines and position weights.

    Each size is computed on first use and read-only afterwards. Recomputing a
    size yields an equal value, so a racing double-write is harmless.
    """

    def __init__(self) -> None:
        self._lines: dict[int, tuple[Line, ...]] = {}
        self._weights: dict[int, Weights] = {}

    def lines_for(self, size: int) -> tuple[Line, ...]:
        lines = self._lines.get(size)
        if lines is None:
            lines = generate_lines(size)
            self._lines[size] = lines
            logger.debug("Generated %d winning lines for size %d", len(lines), size)
        return lines

    def weights_for(self, size: int) -> Weights:
        weights = self._weights.get(size)
        if weights is None:
            weights = position_weights(size, self.lines_for(size))
            self._weights[size] = weights
        return weights

    def weight_of(self, coord: Coordinate, size: int) -> int:
        return self.weights_for(size)[coord.z][coord.y][coord.x]

    def cached_sizes(self) -> frozenset[int]:
        return frozenset(self._lines)

    def clear(self) -> None:
        """Drop every cached size."""
        self._lines.clear()
        self._weights.clear()
