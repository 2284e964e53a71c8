"""
Grid and tile primitives of the tile merge puzzle.

It includes the `Grid` cell store, the `Tile` entity, cell coordinates and the direction
vectors used to slide tiles.
"""

from .grid import Grid, TileView
from .tile import Cell, Tile
from .vectors import VECTORS, Direction, Vector, get_vector

__all__ = [
    'Grid',
    'TileView',
    'Cell',
    'Tile',
    'Direction',
    'Vector',
    'VECTORS',
    'get_vector',
]
