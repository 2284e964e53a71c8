"""
Rule engine of a sliding tile merge puzzle (2048-style).

This package provides the `Grid` and `Tile` primitives, the `GameManager` computing moves,
scores and terminal states, render sinks and input adapters for interactive play.
"""

from .core import Cell, Direction, Grid, Tile
from .game import GameConfig, GameManager, TileBoard
from .render import Actuator, GameMetadata

__all__ = [
    'Actuator',
    'Cell',
    'Direction',
    'GameConfig',
    'GameManager',
    'GameMetadata',
    'Grid',
    'Tile',
    'TileBoard',
]
