"""
Boundary between the game engine and whatever presents it.

The game manager hands every settled state to an ``Actuator``; drawing tiles, score and
end-of-game messages is entirely up to the actuator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from tileboard.core import Grid, TileView

WIN_MESSAGE = 'You win!'
LOSE_MESSAGE = 'Game over!'
UNKNOWN_MOVE_MESSAGE = "Didn't get your move"


@dataclass(frozen=True)
class GameMetadata:
    """Score and terminal flags sent along with the grid."""

    score: int = 0
    over: bool = False
    won: bool = False

    @property
    def terminated(self) -> bool:
        return self.over or self.won


def message_for(metadata: GameMetadata) -> str | None:
    """
    Text to display for a terminal state.

    Parameters
    ----------
    metadata : GameMetadata
        State of the game.

    Returns
    -------
    str | None
        The win or lose message, None while the game is running.
    """
    if metadata.won:
        return WIN_MESSAGE
    if metadata.over:
        return LOSE_MESSAGE
    return None


class Actuator(ABC):
    """Render sink fed by the game manager."""

    @abstractmethod
    def actuate(self, grid: Grid, metadata: GameMetadata) -> None:
        """Present the grid and its metadata."""

    @abstractmethod
    def clear_score(self) -> None:
        """Reset the displayed score."""

    @abstractmethod
    def show_text(self, text: str) -> None:
        """Display a transient notice, such as an unrecognised gesture."""

    def restart(self) -> None:
        """Called by the game manager before a new game is set up."""
        self.clear_score()


@dataclass
class Frame:
    """One rendered state recorded by ``RecordingActuator``."""

    tiles: tuple[TileView, ...]
    metadata: GameMetadata


@dataclass
class RecordingActuator(Actuator):
    """
    Headless actuator keeping every rendered frame.

    Attributes
    ----------
    frames : list[Frame]
        Rendered frames, oldest first.
    clears : int
        Number of times the score was cleared.
    texts : list[str]
        Notices shown, oldest first.
    """

    frames: list[Frame] = field(default_factory=list)
    clears: int = 0
    texts: list[str] = field(default_factory=list)

    @property
    def last(self) -> Frame | None:
        return self.frames[-1] if self.frames else None

    def actuate(self, grid: Grid, metadata: GameMetadata) -> None:
        self.frames.append(Frame(tiles=grid.snapshot(), metadata=metadata))

    def clear_score(self) -> None:
        self.clears += 1

    def show_text(self, text: str) -> None:
        self.texts.append(text)


class NullActuator(Actuator):
    """Actuator that discards everything, for headless play."""

    def actuate(self, grid: Grid, metadata: GameMetadata) -> None:
        pass

    def clear_score(self) -> None:
        pass

    def show_text(self, text: str) -> None:
        pass
