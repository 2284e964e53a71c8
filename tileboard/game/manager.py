"""
Game manager orchestrating moves on the grid.

A move walks the grid from the cells farthest along the chosen direction, slides every tile as
far as it can go, merges it into an equal neighbour that has not merged yet this move, then
spawns a new tile and checks whether any move is left.
"""

import logging
from dataclasses import replace
from typing import NamedTuple

from numpy import ndarray
from numpy.random import PCG64DXSM, default_rng

from tileboard.core import VECTORS, Cell, Grid, Tile, Vector, get_vector
from tileboard.render.actuator import Actuator, GameMetadata

from .config import GameConfig

logger = logging.getLogger(__name__)

# ##>: Module-level generator for performance (avoids repeated initialization).
_GENERATOR = default_rng(PCG64DXSM())


class Traversals(NamedTuple):
    """Order in which columns (``x``) and rows (``y``) are visited during a move."""

    x: list[int]
    y: list[int]


class GameManager:
    """
    Rule engine of the tile merge puzzle.

    Parameters
    ----------
    size : int
        Number of cells along each side of the grid (>= 2).
    actuator : Actuator
        Render sink receiving the grid and metadata after setup and on ``actuate``.
    config : GameConfig, optional
        Game rules; its ``size`` is overridden by ``size``.
    seed : int, optional
        Seed of the random generator, overrides the seed of ``config`` when given.

    Raises
    ------
    ValueError
        If the size or the configuration is invalid.
    """

    def __init__(self, size: int, actuator: Actuator, config: GameConfig | None = None, seed: int | None = None):
        config = config or GameConfig()
        self.config = replace(config, size=size, seed=seed if seed is not None else config.seed)
        self.size = self.config.size
        self.start_tiles = self.config.start_tiles
        self.actuator = actuator
        self._rng = default_rng(self.config.seed) if self.config.seed is not None else _GENERATOR

        self.grid = Grid(self.size)
        self.score = 0
        self.over = False
        self.won = False
        self.setup()

    @property
    def terminated(self) -> bool:
        """Whether the game reached a terminal state (lost or won)."""
        return self.metadata.terminated

    @property
    def metadata(self) -> GameMetadata:
        return GameMetadata(score=self.score, over=self.over, won=self.won)

    @property
    def board(self) -> ndarray:
        """Tile values as an array indexed ``[y, x]``."""
        return self.grid.to_array()

    def restart(self) -> None:
        """Reset the actuator and start a new game."""
        self.actuator.restart()
        self.setup()

    def setup(self) -> None:
        """Start a game on a fresh grid and render it."""
        self.grid = Grid(self.size)
        self.score = 0
        self.over = False
        self.won = False

        # ##: Add the initial tiles.
        self.add_start_tiles()

        # ##: Update the actuator.
        self.actuate()

    def add_start_tiles(self) -> None:
        for _ in range(self.start_tiles):
            self.add_random_tile()

    def add_random_tile(self) -> Tile | None:
        """
        Add a tile in a random empty cell.

        Returns
        -------
        Tile | None
            The new tile, or None if the grid is full.
        """
        cell = self.grid.random_available_cell(self._rng)
        if cell is None:
            return None

        value = int(self._rng.choice(self.config.spawn_values, p=self.config.spawn_probabilities))
        tile = Tile(x=cell.x, y=cell.y, value=value)
        self.grid.insert_tile(tile)
        return tile

    def actuate(self) -> None:
        """Send the current grid and metadata to the actuator."""
        self.actuator.actuate(self.grid, self.metadata)

    def prepare_tiles(self) -> None:
        """Save all tile positions and remove merger information."""
        for tile in self.grid.tiles():
            tile.merged_from = None
            tile.save_position()

    def move_tile(self, tile: Tile, cell: Cell) -> None:
        self.grid.relocate_tile(tile, cell)

    def move(self, direction: int) -> bool:
        """
        Move every tile in the given direction.

        Parameters
        ----------
        direction : int
            Direction code (0: up, 1: right, 2: down, 3: left).

        Returns
        -------
        bool
            True if at least one tile changed cell, False otherwise (including when the game is
            already over or won).

        Notes
        -----
        - A tile merges at most once per move: a tile created by a merge keeps ``merged_from``
          set until the next move and cannot absorb another tile.
        - When something moved, one random tile is added and the game is over if no move is
          left afterwards.
        """
        if self.terminated:
            logger.debug('Ignoring move %s, the game is over.', direction)
            return False

        vector = self.get_vector(direction)
        traversals = self.build_traversals(vector)
        moved = False

        # ##: Save the current tile positions and remove merger information.
        self.prepare_tiles()

        # ##: Traverse the grid in the right direction and move tiles.
        for x in traversals.x:
            for y in traversals.y:
                cell = Cell(x, y)
                tile = self.grid.cell_content(cell)
                if tile is None:
                    continue

                farthest, following = self.find_farthest_position(cell, vector)
                target = self.grid.cell_content(following)

                if target is not None and target.value == tile.value and target.merged_from is None:
                    merged = Tile(
                        x=following.x, y=following.y, value=tile.value * 2, merged_from=(tile.id, target.id)
                    )
                    self.grid.insert_tile(merged)
                    self.grid.remove_tile(tile)

                    # ##>: The absorbed tile converges on the merge cell; the grid holds the merged one.
                    tile.move_to(following)

                    self.score += merged.value
                    if merged.value == self.config.winning_value:
                        logger.debug('Reached the %s tile, the game is won.', merged.value)
                        self.won = True
                else:
                    self.move_tile(tile, farthest)

                if not self.positions_equal(cell, tile.position):
                    moved = True

        if moved:
            self.add_random_tile()

        # ##>: A board loaded without moves left is caught even if nothing slid.
        if not self.moves_available():
            logger.debug('No move left, the game is over with a score of %s.', self.score)
            self.over = True

        return moved

    def get_vector(self, direction: int) -> Vector:
        return get_vector(direction)

    def build_traversals(self, vector: Vector) -> Traversals:
        """
        Build a list of positions to traverse in the right order.

        Parameters
        ----------
        vector : Vector
            Direction of the move.

        Returns
        -------
        Traversals
            Column and row indices, starting from the farthest cell in the chosen direction.
        """
        traversals = Traversals(x=list(range(self.size)), y=list(range(self.size)))

        # ##: Always traverse from the farthest cell in the chosen direction.
        if vector.x == 1:
            traversals.x.reverse()
        if vector.y == 1:
            traversals.y.reverse()
        return traversals

    def find_farthest_position(self, cell: Cell, vector: Vector) -> tuple[Cell, Cell]:
        """
        Progress towards the vector direction until an obstacle is found.

        Parameters
        ----------
        cell : Cell
            Starting cell.
        vector : Vector
            Direction of the move.

        Returns
        -------
        farthest : Cell
            Last free cell reached (the starting cell if the tile cannot slide).
        next : Cell
            First blocking cell, either occupied or out of bounds; used to check for a merge.
        """
        previous = cell
        cell = Cell(previous.x + vector.x, previous.y + vector.y)
        while self.grid.within_bounds(cell) and self.grid.cell_available(cell):
            previous = cell
            cell = Cell(previous.x + vector.x, previous.y + vector.y)
        return previous, cell

    def moves_available(self) -> bool:
        return self.grid.cells_available() or self.tile_matches_available()

    def tile_matches_available(self) -> bool:
        """Check for available matches between tiles (more expensive check)."""
        for x, y, tile in self.grid.each_cell():
            if tile is None:
                continue
            for vector in VECTORS.values():
                other = self.grid.cell_content(Cell(x + vector.x, y + vector.y))
                if other is not None and other.value == tile.value:
                    return True
        return False

    def can_move(self, direction: int) -> bool:
        """
        Check if a move in the given direction would change the board.

        A move is possible when some tile has a free cell or an equal tile right next to it in
        that direction. The game state is left untouched.
        """
        vector = self.get_vector(direction)
        for tile in self.grid.tiles():
            neighbour = Cell(tile.x + vector.x, tile.y + vector.y)
            if not self.grid.within_bounds(neighbour):
                continue
            other = self.grid.cell_content(neighbour)
            if other is None or other.value == tile.value:
                return True
        return False

    def legal_directions(self) -> list[int]:
        """Direction codes that would change the board, empty once the game is terminated."""
        if self.terminated:
            return []
        return [direction for direction in VECTORS if self.can_move(direction)]

    @staticmethod
    def positions_equal(first: tuple[int, int], second: tuple[int, int]) -> bool:
        return first[0] == second[0] and first[1] == second[1]
