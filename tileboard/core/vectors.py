"""
Direction codes and unit vectors used to move tiles across the grid.
"""

from enum import IntEnum
from typing import NamedTuple


class Direction(IntEnum):
    """Direction codes understood by the game manager."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


class Vector(NamedTuple):
    """Unit step applied repeatedly to find how far a tile can travel."""

    x: int
    y: int


# ##>: The y axis decreases upward, so UP walks towards row 0.
VECTORS: dict[int, Vector] = {
    Direction.UP: Vector(0, -1),
    Direction.RIGHT: Vector(1, 0),
    Direction.DOWN: Vector(0, 1),
    Direction.LEFT: Vector(-1, 0),
}


def get_vector(direction: int) -> Vector:
    """
    Get the vector representing the chosen direction.

    Parameters
    ----------
    direction : int
        Direction code (0: up, 1: right, 2: down, 3: left).

    Returns
    -------
    Vector
        The unit step for this direction.

    Raises
    ------
    ValueError
        If the direction code is unknown.
    """
    try:
        return VECTORS[direction]
    except KeyError:
        raise ValueError(f'direction must be one of {sorted(VECTORS)}, got {direction!r}') from None
