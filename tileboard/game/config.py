"""
Configuration of a game session.
"""

from dataclasses import dataclass, field
from math import isclose


def _is_power_of_two(value: int) -> bool:
    return value > 0 and not value & (value - 1)


@dataclass(frozen=True)
class GameConfig:
    """
    Rules of a game session.

    Attributes
    ----------
    size : int
        Number of cells along each side of the grid. Default is 4.
    start_tiles : int
        Number of random tiles placed by ``setup``. Default is 2.
    winning_value : int
        Merged tile value that wins the game. Default is 2048.
    spawn_values : tuple[int, ...]
        Values a spawned tile can take. Default is (2, 4).
    spawn_probabilities : tuple[float, ...]
        Probability of each spawn value. Default is (0.9, 0.1).
    seed : int | None
        Seed of the random generator, None for a non-reproducible session.
    """

    size: int = field(default=4, metadata={'min': 2})
    start_tiles: int = field(default=2, metadata={'min': 0})
    winning_value: int = field(default=2048, metadata={'min': 4})
    spawn_values: tuple[int, ...] = (2, 4)
    spawn_probabilities: tuple[float, ...] = (0.9, 0.1)
    seed: int | None = None

    def __post_init__(self):
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size < 2:
            raise ValueError(f'`size` must be an integer >= 2, got {self.size!r}.')
        if not 0 <= self.start_tiles <= self.size**2:
            raise ValueError(f'`start_tiles` must be between 0 and {self.size**2}, got {self.start_tiles}.')
        if self.winning_value < 4 or not _is_power_of_two(self.winning_value):
            raise ValueError(f'`winning_value` must be a power of two >= 4, got {self.winning_value}.')
        if len(self.spawn_values) != len(self.spawn_probabilities) or not self.spawn_values:
            raise ValueError('`spawn_values` and `spawn_probabilities` must have the same non-zero length.')
        if any(value < 2 or not _is_power_of_two(value) for value in self.spawn_values):
            raise ValueError(f'`spawn_values` must be powers of two >= 2, got {self.spawn_values}.')
        if any(prob < 0 for prob in self.spawn_probabilities) or not isclose(sum(self.spawn_probabilities), 1.0):
            raise ValueError(f'`spawn_probabilities` must be non-negative and sum to 1, got {self.spawn_probabilities}.')
