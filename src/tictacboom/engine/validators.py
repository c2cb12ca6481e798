"""
Tic-Tac-Boom - Input Validation Utilities

Provides validation functions for the game engine's outer surface. All
validators either return validated data or raise descriptive ValueError
exceptions. The hot-path rule queries never call these; they answer False or
None for bad input instead.
"""

from tictacboom.engine.base import SUPPORTED_SIZES, Coordinate, GameMode


def validate_board_size(size: int) -> int:
    """
    Validate a board edge length.

    Args:
        size: Edge length of the cubic board

    Returns:
        Validated size

    Raises:
        ValueError: If size is not one of the supported sizes
    """
    if not isinstance(size, int) or isinstance(size, bool):
        raise ValueError(f"Board size must be an integer, got {type(size).__name__}.")

    if size not in SUPPORTED_SIZES:
        raise ValueError(f"Board size must be one of {sorted(SUPPORTED_SIZES)}, got {size}.")

    return size


def validate_search_depth(depth: int) -> int:
    """
    Validate a search depth in plies.

    Raises:
        ValueError: If depth is not a positive integer
    """
    if not isinstance(depth, int) or isinstance(depth, bool):
        raise ValueError(f"Search depth must be an integer, got {type(depth).__name__}.")

    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}.")

    return depth


def validate_game_mode(mode: GameMode | str) -> GameMode:
    """
    Validate a game mode, accepting either the enum or its string value.

    Raises:
        ValueError: If mode is not a known game mode
    """
    if isinstance(mode, GameMode):
        return mode

    try:
        return GameMode(str(mode).lower())
    except ValueError:
        valid = [m.value for m in GameMode]
        raise ValueError(f"Game mode must be one of {valid}, got {mode!r}.") from None


def validate_coordinate(coord: Coordinate | tuple[int, int, int], size: int) -> Coordinate:
    """
    Validate a coordinate against a board size.

    Args:
        coord: Coordinate or (x, y, z) tuple
        size: Board edge length

    Returns:
        The coordinate as a Coordinate

    Raises:
        ValueError: If the coordinate is malformed or out of bounds
    """
    if not isinstance(coord, Coordinate):
        try:
            x, y, z = coord
        except (TypeError, ValueError):
            raise ValueError(f"Coordinate must be an (x, y, z) triple, got {coord!r}.") from None
        for name, value in (("x", x), ("y", y), ("z", z)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"Coordinate {name} must be an integer, got {type(value).__name__}.")
        coord = Coordinate(x, y, z)

    if not coord.in_bounds(size):
        raise ValueError(
            f"Coordinate {coord} is out of range. Each component must be between 0 and {size - 1}."
        )

    return coord
