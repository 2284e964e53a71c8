"""
Fixed-size cell store of the game board.

The grid keeps tile occupancy, bounds-checks coordinates and enumerates cells in a
deterministic row-major order (``x`` outer, ``y`` inner).
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import NamedTuple

from numpy import int64, ndarray, zeros
from numpy.random import Generator

from .tile import Cell, Tile


class TileView(NamedTuple):
    """Read-only view of an occupied cell handed to renderers."""

    x: int
    y: int
    value: int


class Grid:
    """
    Square grid of cells, each holding at most one tile.

    Parameters
    ----------
    size : int
        Number of cells along each side. Must be an integer >= 2.

    Notes
    -----
    Every query taking a coordinate goes through ``within_bounds``: out of bounds cells read as
    empty, so callers can look past the edges freely.
    """

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, int) or size < 2:
            raise ValueError(f'grid size must be an integer >= 2, got {size!r}')
        self.size = size
        self.cells: list[list[Tile | None]] = [[None] * size for _ in range(size)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Grid:
        """
        Build a grid from displayed rows.

        Parameters
        ----------
        rows : Sequence[Sequence[int]]
            Square nested sequence indexed ``[y][x]``; zero marks an empty cell.

        Returns
        -------
        Grid
            A new grid holding one fresh tile per non-zero value.
        """
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError('rows must describe a square board')

        grid = cls(size)
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                if value:
                    grid.insert_tile(Tile(x=x, y=y, value=int(value)))
        return grid

    def each_cell(self) -> Iterator[tuple[int, int, Tile | None]]:
        """Yield ``(x, y, tile)`` for every cell in row-major order."""
        for x in range(self.size):
            for y in range(self.size):
                yield x, y, self.cells[x][y]

    def for_each_cell(self, visit: Callable[[int, int, Tile | None], None]) -> None:
        """Call ``visit(x, y, tile)`` for every cell in row-major order."""
        for x, y, tile in self.each_cell():
            visit(x, y, tile)

    def tiles(self) -> list[Tile]:
        """Tiles currently on the grid, in row-major order."""
        return [tile for _, _, tile in self.each_cell() if tile is not None]

    def available_cells(self) -> list[Cell]:
        """Empty cells, in row-major order."""
        return [Cell(x, y) for x, y, tile in self.each_cell() if tile is None]

    def cells_available(self) -> bool:
        """Check if there are any cells available."""
        return any(tile is None for _, _, tile in self.each_cell())

    def random_available_cell(self, rng: Generator) -> Cell | None:
        """
        Pick an empty cell uniformly at random.

        Parameters
        ----------
        rng : Generator
            Random generator to draw from.

        Returns
        -------
        Cell | None
            The chosen cell, or None if the grid is full.
        """
        cells = self.available_cells()
        if not cells:
            return None
        return cells[int(rng.integers(len(cells)))]

    def within_bounds(self, cell: tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self.size and 0 <= y < self.size

    def cell_content(self, cell: tuple[int, int]) -> Tile | None:
        """Tile at ``cell``, or None if the cell is empty or out of bounds."""
        if not self.within_bounds(cell):
            return None
        x, y = cell
        return self.cells[x][y]

    def cell_occupied(self, cell: tuple[int, int]) -> bool:
        return self.cell_content(cell) is not None

    def cell_available(self, cell: tuple[int, int]) -> bool:
        """Check if the specified cell is not taken."""
        return not self.cell_occupied(cell)

    def insert_tile(self, tile: Tile) -> None:
        """Place a tile at its own position, replacing any previous occupant."""
        self.cells[tile.x][tile.y] = tile

    def remove_tile(self, tile: Tile) -> None:
        """Clear the cell at the tile's position."""
        self.cells[tile.x][tile.y] = None

    def relocate_tile(self, tile: Tile, cell: tuple[int, int]) -> None:
        """
        Move a tile to another cell, keeping grid storage and tile coordinates in sync.

        Parameters
        ----------
        tile : Tile
            A tile currently stored at its own position.
        cell : tuple[int, int]
            Destination cell, which must be within bounds.
        """
        if not self.within_bounds(cell):
            raise ValueError(f'cannot move a tile out of the grid: {tuple(cell)}')
        self.cells[tile.x][tile.y] = None
        tile.move_to(cell)
        self.cells[tile.x][tile.y] = tile

    def snapshot(self) -> tuple[TileView, ...]:
        """Row-major enumeration of occupied cells."""
        return tuple(TileView(x, y, tile.value) for x, y, tile in self.each_cell() if tile is not None)

    def to_array(self) -> ndarray:
        """
        Convert the grid to a NumPy array.

        Returns
        -------
        ndarray
            Array of shape ``(size, size)`` indexed ``[y, x]``, with zero for empty cells.
        """
        board = zeros((self.size, self.size), dtype=int64)
        for x, y, value in self.snapshot():
            board[y, x] = value
        return board
