"""
Value-bearing tile placed on the grid.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import NamedTuple

# ##>: Tile ids only need to be unique, not dense.
_TILE_IDS = count(1)


class Cell(NamedTuple):
    """Coordinate of a grid cell."""

    x: int
    y: int


@dataclass(eq=False)
class Tile:
    """
    A single tile of the board.

    Two tiles holding the same value are still distinct entities, so equality falls back to
    identity and each tile gets its own ``id``.

    Attributes
    ----------
    x : int
        Column of the tile.
    y : int
        Row of the tile.
    value : int
        Power of two carried by the tile.
    previous_position : Cell | None
        Position saved at the start of the last move, for renderers that animate movement.
    merged_from : tuple[int, int] | None
        Ids of the two tiles merged into this one during the current move.
    """

    x: int
    y: int
    value: int = 2
    previous_position: Cell | None = None
    merged_from: tuple[int, int] | None = None
    id: int = field(default_factory=lambda: next(_TILE_IDS))

    def __post_init__(self):
        if self.value < 2 or self.value & (self.value - 1):
            raise ValueError(f'tile value must be a power of two >= 2, got {self.value}')

    @property
    def position(self) -> Cell:
        return Cell(self.x, self.y)

    def save_position(self) -> None:
        """Remember the current position as the previous one."""
        self.previous_position = Cell(self.x, self.y)

    def move_to(self, cell: tuple[int, int]) -> None:
        """
        Update the tile coordinates.

        The grid storage is left untouched; use ``Grid.relocate_tile`` to move a tile that sits
        on a grid.
        """
        self.x, self.y = cell
