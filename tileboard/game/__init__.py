"""
Game rules and play session.

This module provides the `GameManager` rule engine, its `GameConfig` and the `TileBoard`
session that renders the board once per tick.
"""

from .config import GameConfig
from .manager import GameManager, Traversals
from .session import TileBoard

__all__ = ['GameConfig', 'GameManager', 'Traversals', 'TileBoard']
